"""Shared test helpers.

Usage:
    from tests.helpers import Roster
"""

from tests.helpers.roster import Roster

__all__ = ["Roster"]
