from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .models import Relationship, RelationshipKind

log = logging.getLogger(__name__)


@dataclass
class RelationshipIndex:
    """Adjacency maps derived from one relationship snapshot.

    The maps hold sets; the accessor methods return sorted lists so callers
    iterate in a stable order regardless of string hash seeding.
    """

    child_to_parents: dict[str, set[str]] = field(default_factory=dict)
    parent_to_children: dict[str, set[str]] = field(default_factory=dict)
    spouse_of: dict[str, set[str]] = field(default_factory=dict)
    siblings_of: dict[str, set[str]] = field(default_factory=dict)

    def parents(self, person_id: str) -> list[str]:
        return sorted(self.child_to_parents.get(person_id, ()))

    def children(self, person_id: str) -> list[str]:
        return sorted(self.parent_to_children.get(person_id, ()))

    def spouses(self, person_id: str) -> list[str]:
        return sorted(self.spouse_of.get(person_id, ()))

    def siblings(self, person_id: str) -> list[str]:
        return sorted(self.siblings_of.get(person_id, ()))


def build_relationship_index(relationships: Iterable[Relationship]) -> RelationshipIndex:
    """Build parent/child, spouse and sibling maps.

    - PARENT rows are child -> parent; the parent -> child view is derived here.
    - SPOUSE rows are stored symmetrically.
    - Any other kind (including legacy CHILD/SIBLING mirror rows) is ignored.
    - Self-referential rows are ignored.
    - Siblings share at least one parent, so half-siblings count.
    """

    idx = RelationshipIndex()

    for rel in relationships:
        a = rel.person_id
        b = rel.related_person_id
        if not a or not b:
            continue
        if a == b:
            log.debug("ignoring self-referential relationship %s (%s)", rel.id, rel.kind)
            continue

        if rel.kind == RelationshipKind.PARENT.value:
            idx.child_to_parents.setdefault(a, set()).add(b)
            idx.parent_to_children.setdefault(b, set()).add(a)
        elif rel.kind == RelationshipKind.SPOUSE.value:
            idx.spouse_of.setdefault(a, set()).add(b)
            idx.spouse_of.setdefault(b, set()).add(a)

    # Second pass: siblings need parent_to_children to be complete.
    for child_id, parent_ids in idx.child_to_parents.items():
        for parent_id in parent_ids:
            for sibling_id in idx.parent_to_children.get(parent_id, ()):
                if sibling_id == child_id:
                    continue
                idx.siblings_of.setdefault(child_id, set()).add(sibling_id)

    return idx
