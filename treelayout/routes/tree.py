from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import APIRouter, HTTPException, Query

from ..config import LayoutConfig
from ..db import db_conn
from ..engine import compute_tree_layout
from ..errors import PersonNotFoundError
from ..integrity import validate_tree
from ..models import LayoutOptions
from ..queries import _fetch_tree_snapshot
from ..serialize import _layout_to_public

log = logging.getLogger(__name__)

router = APIRouter()


def _split_expanded(raw: list[str] | None) -> tuple[str, ...]:
    # Accept both ?expanded=a&expanded=b and ?expanded=a,b; keep first occurrence order.
    out: list[str] = []
    for item in raw or []:
        for part in str(item).split(","):
            s = part.strip()
            if s and s not in out:
                out.append(s)
    return tuple(out)


@router.get("/tree/layout")
def tree_layout(
    id: str = Query(min_length=1, max_length=64),
    view: Literal["focused", "full"] = Query(default="focused"),
    expanded: list[str] = Query(default=[]),
    generation_depth: int = Query(default=3, ge=0, le=100),
) -> dict[str, Any]:
    """Return positioned nodes and edges for the family tree diagram.

    - view=focused: the person, spouse(s), parents and children, plus one
      ring of relatives around every ``expanded`` id
    - view=full: every person in the tree, one row per generation
    """

    options = LayoutOptions(
        focal_id=id,
        mode=view,
        expanded_ids=_split_expanded(expanded),
        generation_depth=generation_depth,
    )

    with db_conn() as conn:
        persons, relationships = _fetch_tree_snapshot(conn)

    try:
        result = compute_tree_layout(persons, relationships, options, LayoutConfig.from_env())
    except PersonNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"person not found: {e.person_id}") from e

    return _layout_to_public(result, options)


@router.get("/tree/integrity")
def tree_integrity() -> dict[str, Any]:
    """Report inconsistent genealogy data (cycles, impossible dates, dangling ids).

    The layout endpoint tolerates all of these; this is for cleaning up data.
    """

    with db_conn() as conn:
        persons, relationships = _fetch_tree_snapshot(conn)

    warnings = validate_tree(persons, relationships)
    if warnings:
        log.warning("tree integrity check found %d problem(s)", len(warnings))
    return {"warnings": warnings, "total": len(warnings)}
