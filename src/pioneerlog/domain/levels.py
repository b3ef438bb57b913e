from __future__ import annotations

"""
Severity Level Registry.

Defines the closed, ordered set of log severities and the pure lookups
between canonical names and numeric ranks. All dual name/rank inputs are
normalized once through resolve_level().
"""

from enum import IntEnum
from typing import Dict, Union

from pioneerlog.domain.errors import UnknownLevelName, UnknownLevelRank


class Severity(IntEnum):
    """
    Ordered log severities. The member name is the canonical level name.
    """
    NOTSET = 0
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    CRITICAL = 50


# Either representation accepted at the API boundary
LevelLike = Union[Severity, str, int]

# Input-only spellings mapped onto canonical members
_NAME_ALIASES: Dict[str, Severity] = {
    "WARNING": Severity.WARN,
}

_BY_RANK: Dict[int, Severity] = {int(s): s for s in Severity}


# -----------------------------------------------------------------------------
# LOOKUP API
# -----------------------------------------------------------------------------

def rank_of(name: str) -> Severity:
    """
    Resolve a severity name to its level, ignoring case.

    Args:
        name: Level name such as "info" or "CRITICAL".

    Returns:
        Severity: The matching level.

    Raises:
        UnknownLevelName: If the name matches no level.
    """
    if not isinstance(name, str):
        raise UnknownLevelName(name)

    key = name.strip().upper()
    if key in Severity.__members__:
        return Severity[key]
    if key in _NAME_ALIASES:
        return _NAME_ALIASES[key]
    raise UnknownLevelName(name)


def name_of(rank: int) -> str:
    """
    Resolve a numeric rank to its canonical level name.

    Args:
        rank: One of 0, 10, 20, 30, 40, 50.

    Returns:
        str: Canonical upper-case name.

    Raises:
        UnknownLevelRank: If the rank is not canonical.
    """
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise UnknownLevelRank(rank)
    try:
        return _BY_RANK[rank].name
    except KeyError:
        raise UnknownLevelRank(rank) from None


def resolve_level(value: LevelLike) -> Severity:
    """
    Normalize a level given by name, rank or member into a Severity.

    Args:
        value: Severity member, level name or numeric rank.

    Returns:
        Severity: The canonical level.
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, str):
        return rank_of(value)
    return Severity[name_of(value)]
