"""RFC 7807 problem details for court personnel domain errors.

Maps the domain error taxonomy onto HTTP status codes:
- NotFoundError -> 404
- InvalidSwapError -> 400
- ValidationError -> 422
- AlreadyDepartedError, IntegrityError, ConflictError -> 409
- StorageFailureError -> 503
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from src.domain.errors import (
    AlreadyDepartedError,
    ConflictError,
    IntegrityError,
    InvalidSwapError,
    NotFoundError,
    StorageFailureError,
    ValidationError,
)
from src.domain.exceptions import CourtPersonnelError

# Checked in order; the first matching base wins.
_PROBLEM_TYPES: tuple[tuple[type[CourtPersonnelError], int, str, str], ...] = (
    (NotFoundError, 404, "not-found", "Not Found"),
    (InvalidSwapError, 400, "invalid-swap", "Invalid Swap"),
    (ValidationError, 422, "validation", "Validation Failed"),
    (AlreadyDepartedError, 409, "already-departed", "Judge Already Departed"),
    (IntegrityError, 409, "integrity", "Data Integrity Violation"),
    (ConflictError, 409, "conflict", "Concurrent Modification"),
    (StorageFailureError, 503, "storage-unavailable", "Storage Unavailable"),
)


def problem_status(error: CourtPersonnelError) -> int:
    """HTTP status for a domain error (500 for unmapped errors)."""
    for error_type, status, _, _ in _PROBLEM_TYPES:
        if isinstance(error, error_type):
            return status
    return 500


def to_http_exception(error: CourtPersonnelError, request: Request) -> HTTPException:
    """Build an HTTPException carrying an RFC 7807 detail object."""
    slug, title = "internal", "Internal Error"
    for error_type, _, error_slug, error_title in _PROBLEM_TYPES:
        if isinstance(error, error_type):
            slug, title = error_slug, error_title
            break
    status = problem_status(error)
    headers = {"Retry-After": "5"} if status == 503 else None
    return HTTPException(
        status_code=status,
        detail={
            "type": f"urn:court-personnel:{slug}",
            "title": title,
            "status": status,
            "detail": str(error),
            "instance": str(request.url),
            "error": type(error).__name__,
        },
        headers=headers,
    )
