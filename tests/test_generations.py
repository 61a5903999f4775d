from __future__ import annotations

from treelayout.generations import assign_generations, assign_row_generations
from treelayout.index import build_relationship_index

from builders import parent, spouse


def test_ancestors_negative_descendants_positive() -> None:
    idx = build_relationship_index(
        [parent("P", "GP"), parent("F", "P"), parent("C", "F"), parent("SIB", "P")]
    )

    gens = assign_generations(idx, "F")

    assert gens == {"F": 0, "P": -1, "GP": -2, "C": 1, "SIB": 0}


def test_spouses_are_not_walked() -> None:
    idx = build_relationship_index([spouse("F", "S"), parent("S", "SP")])

    gens = assign_generations(idx, "F")

    assert gens == {"F": 0}


def test_parent_child_cycle_terminates() -> None:
    # A is B's parent and B is A's parent.
    idx = build_relationship_index([parent("B", "A"), parent("A", "B")])

    gens = assign_generations(idx, "A")

    # B is queued as parent (-1) before child (+1); first discovery wins.
    assert gens == {"A": 0, "B": -1}


def test_shortest_path_wins() -> None:
    # D is recorded as a child of both F and F's child K.
    idx = build_relationship_index([parent("K", "F"), parent("D", "K"), parent("D", "F")])

    gens = assign_generations(idx, "F")

    assert gens["K"] == 1
    assert gens["D"] == 1


def test_row_generations_align_married_in_spouse_and_in_laws() -> None:
    idx = build_relationship_index(
        [
            parent("F", "P"),
            spouse("F", "S"),
            parent("S", "SP"),
        ]
    )
    visible = {"P", "F", "S", "SP"}

    rows = assign_row_generations(idx, "F", visible, sorted(visible))

    assert rows == {"P": -1, "F": 0, "S": 0, "SP": -1}


def test_row_generations_disconnected_family_starts_at_zero() -> None:
    idx = build_relationship_index([parent("F", "P"), parent("Z2", "Z")])
    visible = {"F", "P", "Z", "Z2"}

    rows = assign_row_generations(idx, "F", visible, ["F", "P", "Z", "Z2"])

    assert rows["F"] == 0
    assert rows["P"] == -1
    assert rows["Z"] == 0
    assert rows["Z2"] == 1


def test_row_generations_only_cover_visible_ids() -> None:
    idx = build_relationship_index([parent("F", "P"), parent("P", "GP")])

    rows = assign_row_generations(idx, "F", {"F", "P"}, ["F", "P"])

    assert rows == {"F": 0, "P": -1}


def test_row_generations_pull_blood_related_spouse_onto_focal_row() -> None:
    # F marries KK, the child of F's first cousin K1.
    idx = build_relationship_index(
        [
            parent("A", "GP"),
            parent("B", "GP"),
            parent("F", "A"),
            parent("K1", "B"),
            parent("KK", "K1"),
            spouse("F", "KK"),
        ]
    )
    visible = {"GP", "A", "B", "F", "K1", "KK"}

    assert assign_generations(idx, "F")["KK"] == 1

    rows = assign_row_generations(idx, "F", visible, sorted(visible))

    assert rows["F"] == rows["KK"] == 0
    assert rows["K1"] == 0
    assert rows["GP"] == -2
