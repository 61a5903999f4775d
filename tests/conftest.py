from __future__ import annotations

import pytest

from treelayout.config import LayoutConfig
from treelayout.models import Person, Relationship

from builders import parent, person, spouse


@pytest.fixture()
def config() -> LayoutConfig:
    # Explicit defaults so expected coordinates in tests stay readable.
    return LayoutConfig(
        node_width=220,
        horizontal_spacing=60,
        spouse_spacing=260,
        vertical_spacing=220,
    )


@pytest.fixture()
def extended_family() -> tuple[list[Person], list[Relationship]]:
    """A three-generation family around F.

    GP1 + GP2 -> P1, U
    P1 + P2   -> F, SIB       (P1 was also married to X)
    F + S     -> C            (S also has SC from an earlier partner)
    C + CS, SC + SCS
    """

    persons = [
        person("GP1", 1920),
        person("GP2", 1922),
        person("P1", 1950),
        person("P2", 1952),
        person("X", 1951),
        person("U", 1955),
        person("F", 1980),
        person("SIB", 1983),
        person("S", 1981),
        person("C", 2005),
        person("CS", 2004),
        person("SC", 2001),
        person("SCS", 2000),
    ]
    relationships = [
        spouse("GP1", "GP2"),
        parent("P1", "GP1"),
        parent("P1", "GP2"),
        parent("U", "GP1"),
        parent("U", "GP2"),
        spouse("P1", "P2"),
        spouse("P1", "X", divorced=1975),
        parent("F", "P1"),
        parent("F", "P2"),
        parent("SIB", "P1"),
        parent("SIB", "P2"),
        spouse("F", "S"),
        parent("C", "F"),
        parent("C", "S"),
        parent("SC", "S"),
        spouse("C", "CS"),
        spouse("SC", "SCS"),
    ]
    return persons, relationships
