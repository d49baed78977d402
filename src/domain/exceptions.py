"""Base exception classes for the court personnel domain layer."""


class CourtPersonnelError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application,
    from the engines up to the HTTP error mapping.

    Subclass families:
    - NotFoundError
    - ValidationError
    - InvalidSwapError
    - AlreadyDepartedError
    - IntegrityError
    - ConflictError
    - StorageFailureError
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
