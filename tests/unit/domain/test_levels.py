from __future__ import annotations

"""
Unit tests for the Severity Level Registry.

Verifies:
1. Canonical ordering of ranks.
2. Case-insensitive name lookup and the WARNING alias.
3. Rejection of unknown names and non-canonical ranks.
4. Single-point normalization of the dual name/rank representation.
"""

import pytest

from pioneerlog.domain.errors import UnknownLevelName, UnknownLevelRank
from pioneerlog.domain.levels import Severity, name_of, rank_of, resolve_level

CANONICAL = ["NOTSET", "DEBUG", "INFO", "WARN", "ERROR", "CRITICAL"]


def test_ranks_strictly_increase_in_declared_order() -> None:
    ranks = [int(Severity[name]) for name in CANONICAL]
    assert ranks == [0, 10, 20, 30, 40, 50]
    assert ranks == sorted(set(ranks))


@pytest.mark.parametrize("name", CANONICAL)
def test_name_round_trip_ignores_case(name: str) -> None:
    """nameOf(rankOf(name)) returns the canonical spelling for any casing."""
    assert name_of(rank_of(name.lower())) == name
    assert name_of(rank_of(name.title())) == name
    assert name_of(rank_of(f"  {name}  ")) == name


def test_warning_is_accepted_as_input_alias() -> None:
    assert rank_of("warning") is Severity.WARN
    assert name_of(rank_of("Warning")) == "WARN"


@pytest.mark.parametrize("bad", ["VERBOSE", "", "INFOO", None, 20])
def test_unknown_name_raises(bad) -> None:
    with pytest.raises(UnknownLevelName):
        rank_of(bad)


@pytest.mark.parametrize("bad", [5, 15, -10, 60, True, "20", 20.0])
def test_non_canonical_rank_raises(bad) -> None:
    with pytest.raises(UnknownLevelRank):
        name_of(bad)


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        rank_of("nope")
    with pytest.raises(ValueError):
        name_of(11)


def test_resolve_level_accepts_every_representation() -> None:
    assert resolve_level(Severity.ERROR) is Severity.ERROR
    assert resolve_level("error") is Severity.ERROR
    assert resolve_level(40) is Severity.ERROR


def test_resolve_level_rejects_non_canonical_rank() -> None:
    with pytest.raises(UnknownLevelRank) as excinfo:
        resolve_level(25)
    assert excinfo.value.rank == 25
