from __future__ import annotations

from .index import RelationshipIndex
from .models import HiddenRelatives


def _any_hidden(related: set[str] | None, visible_ids: set[str]) -> bool:
    if not related:
        return False
    return not related <= visible_ids


def detect_hidden_relatives(
    index: RelationshipIndex,
    person_id: str,
    visible_ids: set[str],
) -> HiddenRelatives:
    """Flag relative categories that exist in the index but are not on screen.

    These drive the "expand" affordances of the consuming UI.
    """

    return HiddenRelatives(
        has_hidden_parents=_any_hidden(index.child_to_parents.get(person_id), visible_ids),
        has_hidden_children=_any_hidden(index.parent_to_children.get(person_id), visible_ids),
        has_hidden_spouses=_any_hidden(index.spouse_of.get(person_id), visible_ids),
        has_hidden_siblings=_any_hidden(index.siblings_of.get(person_id), visible_ids),
    )
