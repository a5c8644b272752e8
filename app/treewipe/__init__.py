"""treewipe - delete files and whole directory trees safely."""

from treewipe.eraser import EraseOperator, delete_entry, erase_tree, safe_delete, try_delete
from treewipe.errors import DeletionError, NotEmptyError, NotFoundError, PermissionDeniedError
from treewipe.models.result import DeletionResult, DeletionStatus, EraseReport, ErrorKind

__version__ = "0.1.0"

__all__ = [
    "DeletionError",
    "DeletionResult",
    "DeletionStatus",
    "EraseOperator",
    "EraseReport",
    "ErrorKind",
    "NotEmptyError",
    "NotFoundError",
    "PermissionDeniedError",
    "__version__",
    "delete_entry",
    "erase_tree",
    "safe_delete",
    "try_delete",
]
