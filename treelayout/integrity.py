"""Data-integrity checks for a tree snapshot.

The layout engine tolerates inconsistent data (it never hangs on cycles and
skips missing people). This module reports such problems so they can be
fixed at the source; nothing here changes a layout.
"""

from __future__ import annotations

from typing import Iterable

import networkx as nx

from .models import Person, Relationship, RelationshipKind


def _label(p: Person | None, pid: str) -> str:
    if p is None:
        return pid
    name = f"{p.first_name} {p.last_name}".strip()
    return f"{name} ({pid})" if name else pid


def validate_tree(persons: Iterable[Person], relationships: Iterable[Relationship]) -> list[str]:
    """Return human-readable warnings for:

    - relationships pointing at the same person on both ends
    - relationships referencing unknown people
    - cycles in parent/child links
    - a child born before one of its parents
    - a death date before the birth date
    """

    warnings: list[str] = []
    person_by_id: dict[str, Person] = {}
    for p in persons:
        person_by_id.setdefault(p.id, p)

    parent_graph = nx.DiGraph()

    for rel in relationships:
        kind = str(getattr(rel.kind, "value", rel.kind))
        a = rel.person_id
        b = rel.related_person_id

        if a == b:
            warnings.append(f"Self-referential {kind} relationship {rel.id} on {a}")
            continue

        missing = [pid for pid in (a, b) if pid not in person_by_id]
        if missing:
            warnings.append(
                f"Relationship {rel.id} ({kind}) references unknown people: {', '.join(missing)}"
            )
            continue

        if kind == RelationshipKind.PARENT.value:
            # Edges point parent -> child.
            parent_graph.add_edge(b, a)

    try:
        cycle = nx.find_cycle(parent_graph, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for parent_id, child_id in sorted(parent_graph.edges()):
        parent = person_by_id[parent_id]
        child = person_by_id[child_id]
        if parent.birth_date and child.birth_date and child.birth_date < parent.birth_date:
            warnings.append(
                f"Impossible: {_label(child, child_id)} born before parent {_label(parent, parent_id)}"
            )

    for pid in sorted(person_by_id):
        p = person_by_id[pid]
        if p.birth_date and p.death_date and p.death_date < p.birth_date:
            warnings.append(f"Impossible: {_label(p, pid)} died before being born")

    return warnings
