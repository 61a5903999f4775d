from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from .config import LayoutConfig
from .generations import assign_row_generations
from .index import RelationshipIndex
from .models import Person, Position

Couple = tuple[str, Optional[str]]


@dataclass
class _Ctx:
    index: RelationshipIndex
    visible: set[str]
    person_by_id: dict[str, Person]
    cfg: LayoutConfig

    def sort_by_birth(self, ids: Iterable[str]) -> list[str]:
        # Oldest first; unknown birth dates last; id breaks ties.
        def _key(pid: str) -> tuple[bool, date, str]:
            p = self.person_by_id.get(pid)
            bd = p.birth_date if p is not None else None
            return (bd is None, bd or date.min, pid)

        return sorted(ids, key=_key)

    def visible_spouse(self, pid: str) -> str | None:
        # A person is drawn next to at most one partner: the first visible one.
        for sp in self.index.spouses(pid):
            if sp in self.visible and sp != pid:
                return sp
        return None

    def pair_couples(self, ids: list[str]) -> list[Couple]:
        """Pair each id with its visible spouse when that spouse is in ``ids`` too."""

        row = set(ids)
        processed: set[str] = set()
        couples: list[Couple] = []
        for pid in ids:
            if pid in processed:
                continue
            processed.add(pid)
            sp = self.visible_spouse(pid)
            if sp is not None and sp in row and sp not in processed:
                processed.add(sp)
                couples.append((pid, sp))
            else:
                couples.append((pid, None))
        return couples

    def couple_width(self, couple: Couple) -> float:
        if couple[1] is not None:
            return self.cfg.node_width + self.cfg.spouse_spacing
        return self.cfg.node_width

    def place_centered(
        self,
        couples: list[Couple],
        *,
        center_x: float,
        y: float,
        out: dict[str, Position],
    ) -> None:
        """Lay couples left to right so the whole row is centered on ``center_x``."""

        cfg = self.cfg
        widths = [self.couple_width(c) for c in couples]
        total = sum(widths) + (len(couples) - 1) * cfg.horizontal_spacing
        x = center_x - total / 2
        for (pid, sp), width in zip(couples, widths):
            if sp is not None:
                out[pid] = Position(x + cfg.node_width / 2, y)
                out[sp] = Position(x + cfg.node_width / 2 + cfg.spouse_spacing, y)
            else:
                out[pid] = Position(x + width / 2, y)
            x += width + cfg.horizontal_spacing


def _group_by_row(ids: list[str], rows: dict[str, int]) -> dict[int, list[str]]:
    by_gen: dict[int, list[str]] = {}
    for pid in ids:
        by_gen.setdefault(rows.get(pid, 0), []).append(pid)
    return by_gen


def _position_full(ctx: _Ctx, rows: dict[str, int]) -> dict[str, Position]:
    positions: dict[str, Position] = {}
    by_gen = _group_by_row(ctx.sort_by_birth(ctx.visible), rows)
    for gen in sorted(by_gen):
        couples = ctx.pair_couples(by_gen[gen])
        ctx.place_centered(couples, center_x=0.0, y=gen * ctx.cfg.vertical_spacing, out=positions)
    return positions


def _position_focused(ctx: _Ctx, focal_id: str, rows: dict[str, int]) -> dict[str, Position]:
    cfg = ctx.cfg
    index = ctx.index
    positions: dict[str, Position] = {}

    # Focal couple straddles the origin.
    focal_spouse = ctx.visible_spouse(focal_id)
    if focal_spouse is not None:
        positions[focal_id] = Position(-cfg.spouse_spacing / 2, 0.0)
        positions[focal_spouse] = Position(cfg.spouse_spacing / 2, 0.0)
        center_x = (positions[focal_id].x + positions[focal_spouse].x) / 2
    else:
        positions[focal_id] = Position(0.0, 0.0)
        center_x = 0.0

    # Parents one row up.
    parents = ctx.sort_by_birth(
        p for p in index.parents(focal_id) if p in ctx.visible and p not in positions
    )
    if parents:
        y = -cfg.vertical_spacing
        first = parents[0]
        first_spouse = ctx.visible_spouse(first)
        if first_spouse is not None and first_spouse in parents:
            positions[first] = Position(center_x - cfg.spouse_spacing / 2, y)
            positions[first_spouse] = Position(center_x + cfg.spouse_spacing / 2, y)
        else:
            x = center_x - (len(parents) - 1) * cfg.spouse_spacing / 2
            for pid in parents:
                positions[pid] = Position(x, y)
                x += cfg.spouse_spacing

    # Children of the focal couple one row down, oldest on the left.
    child_ids: set[str] = set(index.children(focal_id))
    if focal_spouse is not None:
        child_ids.update(index.children(focal_spouse))
    children = ctx.sort_by_birth(c for c in child_ids if c in ctx.visible and c not in positions)
    if children:
        claimed = set(children)
        couples: list[Couple] = []
        for cid in children:
            sp = ctx.visible_spouse(cid)
            if sp is None or sp in positions or sp in claimed:
                couples.append((cid, None))
                continue
            claimed.add(sp)
            couples.append((cid, sp))
        ctx.place_centered(couples, center_x=center_x, y=cfg.vertical_spacing, out=positions)

    # Everyone else (revealed by expansion) goes to the right end of their row.
    remaining = [pid for pid in ctx.sort_by_birth(ctx.visible) if pid not in positions]
    by_gen = _group_by_row(remaining, rows)
    for gen in sorted(by_gen):
        y = gen * cfg.vertical_spacing
        xs = [p.x for p in positions.values() if abs(p.y - y) < cfg.row_tolerance]
        x = max(xs) + cfg.spouse_spacing + cfg.horizontal_spacing if xs else 0.0

        for pid, sp in ctx.pair_couples(by_gen[gen]):
            positions[pid] = Position(x, y)
            if sp is not None:
                positions[sp] = Position(x + cfg.spouse_spacing, y)
                x += cfg.spouse_spacing + cfg.node_width + cfg.horizontal_spacing
            else:
                x += cfg.node_width + cfg.horizontal_spacing

    return positions


def position_nodes(
    persons: Iterable[Person],
    index: RelationshipIndex,
    visible_ids: set[str],
    focal_id: str,
    *,
    full_view: bool,
    config: LayoutConfig | None = None,
) -> dict[str, Position]:
    """Return person -> (x, y) for every visible id.

    Full view lays every generation row out centered on x=0. Focused view
    anchors the focal couple at the origin, places parents above and
    children below, then appends any expansion-revealed relatives to the
    right of their row. Output depends only on the inputs.
    """

    person_by_id: dict[str, Person] = {}
    for p in persons:
        person_by_id.setdefault(p.id, p)

    ctx = _Ctx(
        index=index,
        visible=set(visible_ids),
        person_by_id=person_by_id,
        cfg=config or LayoutConfig(),
    )
    rows = assign_row_generations(index, focal_id, ctx.visible, ctx.sort_by_birth(ctx.visible))

    if full_view:
        return _position_full(ctx, rows)
    return _position_focused(ctx, focal_id, rows)
