from __future__ import annotations


class LayoutError(Exception):
    """Base class for failures of a single layout computation."""


class PersonNotFoundError(LayoutError):
    """The requested focal person is not part of the supplied snapshot."""

    def __init__(self, person_id: str) -> None:
        super().__init__(f"person not found: {person_id}")
        self.person_id = person_id
