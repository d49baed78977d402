"""Court personnel API dependencies.

Singleton services over the store chosen at bootstrap. Tests swap the
store with src.bootstrap.personnel.set_personnel_store() and then call
reset_personnel_dependencies(), or override these callables on the app.
"""

from src.application.services.chambers_swap_service import ChambersSwapService
from src.application.services.judge_departure_service import JudgeDepartureService
from src.application.services.judge_move_service import JudgeMoveService
from src.application.services.personnel_registry_service import PersonnelRegistryService
from src.application.services.slot_directory_service import SlotDirectoryService
from src.bootstrap import personnel as personnel_bootstrap

_slot_directory_service: SlotDirectoryService | None = None
_personnel_registry_service: PersonnelRegistryService | None = None
_judge_move_service: JudgeMoveService | None = None
_chambers_swap_service: ChambersSwapService | None = None
_judge_departure_service: JudgeDepartureService | None = None


def get_slot_directory_service() -> SlotDirectoryService:
    """Get slot directory service instance."""
    global _slot_directory_service
    if _slot_directory_service is None:
        _slot_directory_service = personnel_bootstrap.get_slot_directory_service()
    return _slot_directory_service


def get_personnel_registry_service() -> PersonnelRegistryService:
    """Get personnel registry service instance."""
    global _personnel_registry_service
    if _personnel_registry_service is None:
        _personnel_registry_service = personnel_bootstrap.get_personnel_registry_service()
    return _personnel_registry_service


def get_judge_move_service() -> JudgeMoveService:
    """Get judge move service instance."""
    global _judge_move_service
    if _judge_move_service is None:
        _judge_move_service = personnel_bootstrap.get_judge_move_service()
    return _judge_move_service


def get_chambers_swap_service() -> ChambersSwapService:
    """Get chambers swap service instance."""
    global _chambers_swap_service
    if _chambers_swap_service is None:
        _chambers_swap_service = personnel_bootstrap.get_chambers_swap_service()
    return _chambers_swap_service


def get_judge_departure_service() -> JudgeDepartureService:
    """Get judge departure service instance."""
    global _judge_departure_service
    if _judge_departure_service is None:
        _judge_departure_service = personnel_bootstrap.get_judge_departure_service()
    return _judge_departure_service


def reset_personnel_dependencies() -> None:
    """Reset all singletons (for testing)."""
    global _slot_directory_service, _personnel_registry_service
    global _judge_move_service, _chambers_swap_service, _judge_departure_service
    _slot_directory_service = None
    _personnel_registry_service = None
    _judge_move_service = None
    _chambers_swap_service = None
    _judge_departure_service = None
