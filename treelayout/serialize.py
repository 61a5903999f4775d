from __future__ import annotations

from typing import Any

from .models import LayoutOptions, Person, TreeEdge, TreeLayoutResult, TreeNode
from .util import _iso_date


def _known(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


def _person_to_public(p: Person) -> dict[str, Any]:
    optional = {
        "first_name": p.first_name,
        "last_name": p.last_name,
        "gender": p.gender,
        "date_of_birth": _iso_date(p.birth_date),
        "date_of_passing": _iso_date(p.death_date),
        "photo_url": p.photo_url,
    }
    out: dict[str, Any] = {"id": p.id, "is_living": bool(p.is_living)}
    # Unknown names, dates and photos are left out rather than sent as null.
    out.update((k, v) for k, v in optional.items() if _known(v))
    return out


def _tree_node_to_public(n: TreeNode) -> dict[str, Any]:
    return {
        "id": n.id,
        "person": _person_to_public(n.person),
        "x": n.x,
        "y": n.y,
        "has_hidden_parents": n.has_hidden_parents,
        "has_hidden_children": n.has_hidden_children,
        "has_hidden_spouses": n.has_hidden_spouses,
        "has_hidden_siblings": n.has_hidden_siblings,
        "is_focal": n.is_focal,
    }


def _tree_edge_to_public(e: TreeEdge) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": e.id,
        "source": e.source,
        "target": e.target,
        "type": e.kind.value,
    }
    if e.is_divorced is not None:
        out["is_divorced"] = e.is_divorced
    return out


def _layout_to_public(result: TreeLayoutResult, options: LayoutOptions) -> dict[str, Any]:
    return {
        "focal": options.focal_id,
        "mode": options.mode,
        "expanded": list(options.expanded_ids),
        "generation_depth": options.generation_depth,
        "nodes": [_tree_node_to_public(n) for n in result.nodes],
        "edges": [_tree_edge_to_public(e) for e in result.edges],
        "viewport": {
            "center_x": result.viewport.center_x,
            "center_y": result.viewport.center_y,
            "zoom": result.viewport.zoom,
        },
    }
