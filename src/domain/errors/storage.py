"""Storage failure errors.

Raised when the backing store cannot complete a transaction: connectivity
loss, a constraint violated at commit, or any other driver-level failure.
The transaction is rolled back before this error reaches the caller.
"""

from __future__ import annotations

from src.domain.exceptions import CourtPersonnelError


class StorageFailureError(CourtPersonnelError):
    """Raised when a transactional write against the store fails.

    Attributes:
        operation: The store operation that failed.
        reason: Driver or constraint message.
    """

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize the error.

        Args:
            operation: The store operation that failed.
            reason: Driver or constraint message.
        """
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage failure during {operation}: {reason}")
