from tracker.models.user import User
from tracker.models.circuit import Circuit
from tracker.models.import_report import ImportReport

__all__ = [
    "User",
    "Circuit",
    "ImportReport",
]
