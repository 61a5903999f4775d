"""Family tree layout: relationship snapshot in, positioned nodes and edges out.

The engine is pure. It never queries storage; callers pass a snapshot of
people and relationships (see ``queries._fetch_tree_snapshot``) and get a
value back. Identical inputs give identical output, so results can be cached
by (focal id, mode, expanded ids, snapshot version).
"""

from __future__ import annotations

import logging
from typing import Iterable

from .config import LayoutConfig
from .edges import build_edges
from .errors import PersonNotFoundError
from .hidden import detect_hidden_relatives
from .index import build_relationship_index
from .models import (
    LayoutOptions,
    Person,
    Position,
    Relationship,
    TreeLayoutResult,
    TreeNode,
    Viewport,
)
from .positioner import position_nodes
from .visibility import select_visible

log = logging.getLogger(__name__)


def compute_tree_layout(
    persons: Iterable[Person],
    relationships: Iterable[Relationship],
    options: LayoutOptions,
    config: LayoutConfig | None = None,
) -> TreeLayoutResult:
    cfg = config or LayoutConfig()

    # First record wins for duplicated ids.
    person_list: list[Person] = []
    seen_ids: set[str] = set()
    for p in persons:
        if p.id in seen_ids:
            log.debug("ignoring duplicate person record %s", p.id)
            continue
        seen_ids.add(p.id)
        person_list.append(p)

    focal_id = options.focal_id
    if focal_id not in seen_ids:
        raise PersonNotFoundError(focal_id)

    rel_list = list(relationships)
    index = build_relationship_index(rel_list)

    visible = select_visible(
        index,
        seen_ids,
        focal_id,
        options.mode,
        options.expanded_ids,
    )
    positions = position_nodes(
        person_list,
        index,
        visible,
        focal_id,
        full_view=options.mode == "full",
        config=cfg,
    )

    nodes: list[TreeNode] = []
    for person in person_list:
        if person.id not in visible:
            continue
        pos = positions.get(person.id, Position(0.0, 0.0))
        hidden = detect_hidden_relatives(index, person.id, visible)
        nodes.append(
            TreeNode(
                id=person.id,
                person=person,
                x=pos.x,
                y=pos.y,
                has_hidden_parents=hidden.has_hidden_parents,
                has_hidden_children=hidden.has_hidden_children,
                has_hidden_spouses=hidden.has_hidden_spouses,
                has_hidden_siblings=hidden.has_hidden_siblings,
                is_focal=person.id == focal_id,
            )
        )

    edges = build_edges(rel_list, visible, positions)

    focal_pos = positions.get(focal_id, Position(0.0, 0.0))
    viewport = Viewport(center_x=focal_pos.x, center_y=focal_pos.y, zoom=cfg.default_zoom)

    log.info(
        "tree layout focal=%s mode=%s expanded=%d nodes=%d edges=%d",
        focal_id,
        options.mode,
        len(options.expanded_ids),
        len(nodes),
        len(edges),
    )
    return TreeLayoutResult(nodes=nodes, edges=edges, viewport=viewport)
