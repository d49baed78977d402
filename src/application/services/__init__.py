"""Application services - Use case orchestration.

This module contains application services that orchestrate domain
operations and coordinate with infrastructure adapters.

Available services:
- SlotDirectoryService: Read-only courtroom assignment slot directory
- PersonnelRegistryService: Judge records, status and attribute edits
- JudgeMoveService: Move a judge to an empty slot or swap two judges
- ChambersSwapService: Exchange chambers between two judges
- JudgeDepartureService: Atomic departure with courtroom and chambers handoff
"""

from src.application.services.chambers_swap_service import ChambersSwapService
from src.application.services.judge_departure_service import JudgeDepartureService
from src.application.services.judge_move_service import JudgeMoveService
from src.application.services.personnel_registry_service import (
    UNSET,
    PersonnelRegistryService,
)
from src.application.services.slot_directory_service import SlotDirectoryService

__all__: list[str] = [
    "ChambersSwapService",
    "JudgeDepartureService",
    "JudgeMoveService",
    "PersonnelRegistryService",
    "SlotDirectoryService",
    "UNSET",
]
