from __future__ import annotations

from datetime import date

from treelayout.integrity import validate_tree
from treelayout.models import Person

from builders import parent, person, spouse


def test_clean_tree_has_no_warnings(extended_family) -> None:
    persons, rels = extended_family

    assert validate_tree(persons, rels) == []


def test_parent_child_cycle_is_reported() -> None:
    persons = [person("A"), person("B"), person("C")]
    rels = [parent("B", "A"), parent("C", "B"), parent("A", "C")]

    warnings = validate_tree(persons, rels)

    assert any(w.startswith("Cycle detected") for w in warnings)


def test_self_reference_and_unknown_people_are_reported() -> None:
    persons = [person("A", 1950)]
    rels = [spouse("A", "A", rid="self"), parent("A", "GHOST", rid="dangling")]

    warnings = validate_tree(persons, rels)

    assert any("Self-referential SPOUSE relationship self" in w for w in warnings)
    assert any("dangling" in w and "GHOST" in w for w in warnings)


def test_child_born_before_parent() -> None:
    persons = [person("P", 1990, first="Pat"), person("K", 1970, first="Kim")]

    warnings = validate_tree(persons, [parent("K", "P")])

    assert warnings == ["Impossible: Kim Doe (K) born before parent Pat Doe (P)"]


def test_death_before_birth() -> None:
    p = Person(id="Z", first_name="Zed", birth_date=date(1900, 5, 1), death_date=date(1899, 1, 1))

    warnings = validate_tree([p], [])

    assert warnings == ["Impossible: Zed (Z) died before being born"]
