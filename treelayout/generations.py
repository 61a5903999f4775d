from __future__ import annotations

from typing import Iterable

from .index import RelationshipIndex


def _bfs_generations(
    index: RelationshipIndex,
    start: str,
    *,
    generation: int,
    out: dict[str, int],
) -> None:
    """Breadth-first walk over parent/child links, writing into ``out``.

    Ids already present in ``out`` count as visited and keep their value,
    so the first (shortest) path to a person wins. The visited guard is what
    keeps cyclic parent data from looping forever.
    """

    q: list[tuple[str, int]] = [(start, generation)]
    qi = 0
    while qi < len(q):
        pid, g = q[qi]
        qi += 1
        if pid in out:
            continue
        out[pid] = g

        # Parents one row up, children one row down. Spouses are not walked.
        for parent_id in index.parents(pid):
            if parent_id not in out:
                q.append((parent_id, g - 1))
        for child_id in index.children(pid):
            if child_id not in out:
                q.append((child_id, g + 1))


def assign_generations(index: RelationshipIndex, focal_id: str) -> dict[str, int]:
    """Return person -> generation offset relative to the focal person.

    Ancestors are negative, descendants positive, the focal person is 0.
    People not connected to the focal person through parent/child links are
    absent from the result.
    """

    generations: dict[str, int] = {}
    _bfs_generations(index, focal_id, generation=0, out=generations)
    return generations


def assign_row_generations(
    index: RelationshipIndex,
    focal_id: str,
    visible_ids: set[str],
    order: Iterable[str],
) -> dict[str, int]:
    """Return a row generation for every visible id.

    Starts from :func:`assign_generations`. A visible person the focal walk
    did not reach takes the row of a visible spouse that has one, and their
    own blood relatives are walked from there. Anyone still left (a
    disconnected family) seeds a fresh walk at row 0. ``order`` fixes which
    unassigned person is tried first.

    Finally each visible person is pulled onto the row of their first visible
    spouse. This only changes anything when the two are also blood relatives
    on different generations (say, F married to a first cousin's child). The
    partner further from the focal person moves, the focal person never does,
    and a person already aligned with one partner stays put. Only the moved
    person changes row, so their parent/child links can then span zero or two
    rows.
    """

    order = list(order)
    generations = assign_generations(index, focal_id)
    remaining = [pid for pid in order if pid in visible_ids and pid not in generations]

    while remaining:
        seed = remaining[0]
        seed_generation = 0
        for pid in remaining:
            spouse_gen = next(
                (
                    generations[sp]
                    for sp in index.spouses(pid)
                    if sp in visible_ids and sp in generations
                ),
                None,
            )
            if spouse_gen is not None:
                seed = pid
                seed_generation = spouse_gen
                break

        _bfs_generations(index, seed, generation=seed_generation, out=generations)
        remaining = [pid for pid in remaining if pid not in generations]

    rows = {pid: g for pid, g in generations.items() if pid in visible_ids}
    _align_spouse_rows(index, focal_id, rows, order)
    return rows


def _align_spouse_rows(
    index: RelationshipIndex,
    focal_id: str,
    rows: dict[str, int],
    order: Iterable[str],
) -> None:
    settled: set[str] = {focal_id}
    for pid in order:
        if pid not in rows:
            continue
        sp = next((s for s in index.spouses(pid) if s in rows and s != pid), None)
        if sp is None:
            continue
        if rows[pid] != rows[sp]:
            if pid in settled and sp in settled:
                continue
            if pid in settled:
                mover, anchor = sp, pid
            elif sp in settled:
                mover, anchor = pid, sp
            elif (abs(rows[sp]), sp) > (abs(rows[pid]), pid):
                mover, anchor = sp, pid
            else:
                mover, anchor = pid, sp
            rows[mover] = rows[anchor]
        settled.add(pid)
        settled.add(sp)
