from registrar.handlers.actions import Outcome, RecordActions

__all__ = ["Outcome", "RecordActions"]
