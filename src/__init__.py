"""
Court Personnel - Judge reassignment engine for facility operations.

Keeps courtroom assignment slots, chambers rooms and judge personnel status
mutually consistent when a judge moves, swaps places with another judge,
or departs.

Operating Truths:
- A departed judge holds no courtroom and no chambers
- No judge sits in two courtrooms at once
- A multi-row change is committed whole or not at all
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
