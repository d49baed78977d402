"""Configuration module for court personnel.

Contains configuration dataclasses loaded from the environment.
"""

from src.config.personnel_config import (
    STORE_BACKENDS,
    TEST_PERSONNEL_CONFIG,
    PersonnelConfig,
)

__all__ = [
    "PersonnelConfig",
    "STORE_BACKENDS",
    "TEST_PERSONNEL_CONFIG",
]
