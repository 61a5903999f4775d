from __future__ import annotations

from typing import Iterable

from .models import EdgeKind, Position, Relationship, RelationshipKind, TreeEdge


def build_edges(
    relationships: Iterable[Relationship],
    visible_ids: set[str],
    positions: dict[str, Position],
) -> list[TreeEdge]:
    """Return parent-child and spouse edges between visible people.

    Parent-child edges point parent -> child and are keyed by that pair.
    Spouse edges are keyed by the sorted pair and drawn left to right by x.
    Redundant rows for the same pair produce a single edge (first row wins).
    """

    rels = list(relationships)
    edges: list[TreeEdge] = []
    seen: set[str] = set()

    for rel in rels:
        if rel.kind != RelationshipKind.PARENT.value:
            continue
        child_id = rel.person_id
        parent_id = rel.related_person_id
        if child_id == parent_id:
            continue
        if child_id not in visible_ids or parent_id not in visible_ids:
            continue
        key = f"parent-{parent_id}-{child_id}"
        if key in seen:
            continue
        seen.add(key)
        edges.append(
            TreeEdge(id=key, source=parent_id, target=child_id, kind=EdgeKind.PARENT_CHILD)
        )

    for rel in rels:
        if rel.kind != RelationshipKind.SPOUSE.value:
            continue
        a = rel.person_id
        b = rel.related_person_id
        if a == b:
            continue
        if a not in visible_ids or b not in visible_ids:
            continue
        first, second = sorted((a, b))
        key = f"spouse-{first}-{second}"
        if key in seen:
            continue
        seen.add(key)

        # Left partner is the source; equal x falls back to id order.
        pos_first = positions.get(first)
        pos_second = positions.get(second)
        x_first = pos_first.x if pos_first is not None else 0.0
        x_second = pos_second.x if pos_second is not None else 0.0
        if x_second < x_first:
            left, right = second, first
        else:
            left, right = first, second

        edges.append(
            TreeEdge(
                id=key,
                source=left,
                target=right,
                kind=EdgeKind.SPOUSE,
                is_divorced=rel.is_divorced,
            )
        )

    return edges
