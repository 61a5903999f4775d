from __future__ import annotations

import logging
from typing import Any

import psycopg

from .models import Person, Relationship
from .util import _parse_iso_date

log = logging.getLogger(__name__)


def _person_row_to_person(r: tuple[Any, ...]) -> Person:
    # r = (
    #   id, first_name, last_name, gender,
    #   date_of_birth, date_of_passing, is_living, photo_url
    # )
    (
        pid,
        first_name,
        last_name,
        gender,
        date_of_birth,
        date_of_passing,
        is_living,
        photo_url,
    ) = r

    return Person(
        id=str(pid),
        first_name=first_name or "",
        last_name=last_name or "",
        gender=gender or None,
        birth_date=_parse_iso_date(date_of_birth),
        death_date=_parse_iso_date(date_of_passing),
        is_living=True if is_living is None else bool(is_living),
        photo_url=photo_url or None,
    )


def _relationship_row_to_relationship(r: tuple[Any, ...]) -> Relationship:
    # r = (id, person_id, related_person_id, type, marriage_date, divorce_date, is_active)
    rid, person_id, related_person_id, rel_type, marriage_date, divorce_date, is_active = r

    return Relationship(
        id=str(rid),
        person_id=str(person_id),
        related_person_id=str(related_person_id),
        kind=str(rel_type or "").upper(),
        marriage_date=_parse_iso_date(marriage_date),
        divorce_date=_parse_iso_date(divorce_date),
        is_active=True if is_active is None else bool(is_active),
    )


def _fetch_tree_snapshot(conn: psycopg.Connection) -> tuple[list[Person], list[Relationship]]:
    """Load every person and relationship as one snapshot for the layout engine.

    Rows are ordered by id so identical data always yields identical input
    order (and therefore identical node order in the layout).
    """

    person_rows = conn.execute(
        """
        SELECT id, first_name, last_name, gender,
               date_of_birth, date_of_passing, is_living, photo_url
        FROM person
        ORDER BY id
        """.strip()
    ).fetchall()

    rel_rows = conn.execute(
        """
        SELECT id, person_id, related_person_id, type,
               marriage_date, divorce_date, is_active
        FROM relationship
        ORDER BY id
        """.strip()
    ).fetchall()

    persons = [_person_row_to_person(tuple(r)) for r in person_rows]
    relationships = [_relationship_row_to_relationship(tuple(r)) for r in rel_rows]

    log.debug("loaded tree snapshot: %d people, %d relationships", len(persons), len(relationships))
    return persons, relationships
