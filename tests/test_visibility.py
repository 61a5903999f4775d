from __future__ import annotations

from treelayout.index import build_relationship_index
from treelayout.visibility import select_visible

from builders import parent


def _ids(persons) -> set[str]:
    return {p.id for p in persons}


def test_focused_view_shows_direct_family_and_step_relatives(extended_family) -> None:
    persons, rels = extended_family
    idx = build_relationship_index(rels)

    visible = select_visible(idx, _ids(persons), "F", "focused", [])

    # Spouse, parents (+the parent's other spouse X), children (+spouse),
    # step-child SC (+spouse).
    assert visible == {"F", "S", "P1", "P2", "X", "C", "CS", "SC", "SCS"}
    assert "SIB" not in visible
    assert "GP1" not in visible


def test_expansion_reveals_one_ring(extended_family) -> None:
    persons, rels = extended_family
    idx = build_relationship_index(rels)

    visible = select_visible(idx, _ids(persons), "F", "focused", ["P1"])

    # P1's parents and sibling appear, and so does F's sibling (P1's child).
    assert {"GP1", "GP2", "U", "SIB"} <= visible


def test_expanding_unknown_id_is_ignored(extended_family) -> None:
    persons, rels = extended_family
    idx = build_relationship_index(rels)

    base = select_visible(idx, _ids(persons), "F", "focused", [])
    with_unknown = select_visible(idx, _ids(persons), "F", "focused", ["nobody"])

    assert with_unknown == base


def test_full_view_returns_everyone(extended_family) -> None:
    persons, rels = extended_family
    idx = build_relationship_index(rels)

    assert select_visible(idx, _ids(persons), "F", "full", []) == _ids(persons)


def test_missing_relatives_are_skipped() -> None:
    idx = build_relationship_index([parent("F", "GHOST"), parent("K", "F")])

    visible = select_visible(idx, {"F", "K"}, "F", "focused", ["F"])

    assert visible == {"F", "K"}


def test_selection_is_idempotent(extended_family) -> None:
    persons, rels = extended_family
    idx = build_relationship_index(rels)

    a = select_visible(idx, _ids(persons), "F", "focused", ["P1", "C"])
    b = select_visible(idx, _ids(persons), "F", "focused", ["C", "P1"])

    assert a == b
    assert "F" in a
