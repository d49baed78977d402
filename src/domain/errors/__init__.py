"""Domain errors for court personnel management.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from CourtPersonnelError.
"""

from src.domain.errors.personnel import (
    AlreadyDepartedError,
    AssignmentSlotNotFoundError,
    ChambersOccupiedError,
    ConcurrentModificationError,
    ConflictError,
    DisplayNameMismatchError,
    DuplicateJudgeNameError,
    DuplicateSlotOccupancyError,
    IntegrityError,
    InvalidChambersSwapError,
    InvalidMoveError,
    InvalidReassignmentError,
    InvalidStatusChangeError,
    InvalidSwapError,
    JudgeNotFoundError,
    NotFoundError,
    ReassignmentTargetMissingError,
    StaleSourceSlotError,
    ValidationError,
)
from src.domain.errors.storage import StorageFailureError

__all__: list[str] = [
    "AlreadyDepartedError",
    "AssignmentSlotNotFoundError",
    "ChambersOccupiedError",
    "ConcurrentModificationError",
    "ConflictError",
    "DisplayNameMismatchError",
    "DuplicateJudgeNameError",
    "DuplicateSlotOccupancyError",
    "IntegrityError",
    "InvalidChambersSwapError",
    "InvalidMoveError",
    "InvalidReassignmentError",
    "InvalidStatusChangeError",
    "InvalidSwapError",
    "JudgeNotFoundError",
    "NotFoundError",
    "ReassignmentTargetMissingError",
    "StaleSourceSlotError",
    "StorageFailureError",
    "ValidationError",
]
