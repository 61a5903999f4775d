from __future__ import annotations

from typing import Iterable

from .index import RelationshipIndex
from .models import ViewMode


def select_visible(
    index: RelationshipIndex,
    person_ids: Iterable[str],
    focal_id: str,
    mode: ViewMode,
    expanded_ids: Iterable[str] = (),
) -> set[str]:
    """Return the ids that must appear in the diagram.

    - mode=full: every known person.
    - mode=focused: the focal person, spouses, parents (+their spouses),
      children and step-children (+their spouses), plus one ring of relatives
      around each expanded id.

    Ids that are not in ``person_ids`` are never added, so relationships that
    point at missing people are skipped.
    """

    known = set(person_ids)

    if mode == "full":
        return known | {focal_id}

    visible: set[str] = set()

    def _add(pid: str) -> None:
        if pid in known:
            visible.add(pid)

    def _add_with_spouses(pid: str) -> None:
        if pid not in known:
            return
        visible.add(pid)
        for sp in index.spouses(pid):
            _add(sp)

    visible.add(focal_id)

    # Focal spouses.
    for sp in index.spouses(focal_id):
        _add(sp)

    # Parents (and step-parents through the parents' spouses).
    for parent_id in index.parents(focal_id):
        _add_with_spouses(parent_id)

    # Children with their partners.
    for child_id in index.children(focal_id):
        _add_with_spouses(child_id)

    # Step-children: children of any of the focal person's spouses.
    for sp in index.spouses(focal_id):
        for child_id in index.children(sp):
            _add_with_spouses(child_id)

    # One extra ring around each expanded node.
    for node_id in expanded_ids:
        if node_id not in known:
            continue
        visible.add(node_id)
        for pid in index.parents(node_id):
            _add_with_spouses(pid)
        for pid in index.children(node_id):
            _add_with_spouses(pid)
        for pid in index.siblings(node_id):
            _add_with_spouses(pid)
        for pid in index.spouses(node_id):
            _add_with_spouses(pid)

    return visible
