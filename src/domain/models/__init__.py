"""Domain models for court personnel management.

Contains value objects and domain models that represent
core business concepts. These models are immutable and
contain no infrastructure dependencies.
"""

from src.domain.models.assignment_slot import AssignmentSlot, CourtroomPlacement
from src.domain.models.judge import (
    JUDGE_TITLES,
    Judge,
    JudgeStatus,
    format_display_name,
    normalize_optional_text,
)
from src.domain.models.reassignment import (
    ChambersSwapResult,
    DepartureInfo,
    DepartureRequest,
    DepartureResult,
    HandoffAction,
    MoveKind,
    MoveResult,
)

__all__: list[str] = [
    "AssignmentSlot",
    "ChambersSwapResult",
    "CourtroomPlacement",
    "DepartureInfo",
    "DepartureRequest",
    "DepartureResult",
    "HandoffAction",
    "JUDGE_TITLES",
    "Judge",
    "JudgeStatus",
    "MoveKind",
    "MoveResult",
    "format_display_name",
    "normalize_optional_text",
]
