"""Value types shared by the layout engine.

Everything here is immutable and referenced by person id only; there are no
object links between people. Adjacency lives in ``index.RelationshipIndex``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Literal, Optional

ViewMode = Literal["focused", "full"]
VIEW_MODES: tuple[str, ...] = ("focused", "full")


class RelationshipKind(str, Enum):
    PARENT = "PARENT"
    SPOUSE = "SPOUSE"


class EdgeKind(str, Enum):
    PARENT_CHILD = "parent-child"
    SPOUSE = "spouse"


@dataclass(frozen=True)
class Person:
    id: str
    first_name: str = ""
    last_name: str = ""
    gender: Optional[str] = None
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    is_living: bool = True
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class Relationship:
    """A stored relationship fact.

    PARENT rows point from child to parent: ``person_id`` is the child and
    ``related_person_id`` the parent. SPOUSE rows are symmetric in meaning.
    ``kind`` is kept as a plain string so that unknown kinds coming from
    storage can be carried through and ignored by the index.
    """

    id: str
    person_id: str
    related_person_id: str
    kind: str
    marriage_date: Optional[date] = None
    divorce_date: Optional[date] = None
    is_active: bool = True

    @property
    def is_divorced(self) -> bool:
        return self.divorce_date is not None


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True)
class HiddenRelatives:
    has_hidden_parents: bool = False
    has_hidden_children: bool = False
    has_hidden_spouses: bool = False
    has_hidden_siblings: bool = False


@dataclass(frozen=True)
class TreeNode:
    id: str
    person: Person
    x: float
    y: float
    has_hidden_parents: bool
    has_hidden_children: bool
    has_hidden_spouses: bool
    has_hidden_siblings: bool
    is_focal: bool


@dataclass(frozen=True)
class TreeEdge:
    id: str
    source: str
    target: str
    kind: EdgeKind
    # Only meaningful for spouse edges.
    is_divorced: Optional[bool] = None


@dataclass(frozen=True)
class Viewport:
    center_x: float
    center_y: float
    zoom: float


@dataclass(frozen=True)
class LayoutOptions:
    """One layout request.

    ``generation_depth`` is validated and echoed back but does not truncate
    the visible set.
    """

    focal_id: str
    mode: ViewMode = "focused"
    expanded_ids: tuple[str, ...] = field(default_factory=tuple)
    generation_depth: int = 3

    def __post_init__(self) -> None:
        if not self.focal_id:
            raise ValueError("focal_id is required")
        if self.mode not in VIEW_MODES:
            raise ValueError(f"mode must be one of {VIEW_MODES}, got {self.mode!r}")
        if self.generation_depth < 0:
            raise ValueError("generation_depth must be >= 0")
        # Accept any iterable of ids; keep a hashable, ordered copy.
        object.__setattr__(self, "expanded_ids", tuple(self.expanded_ids))


@dataclass(frozen=True)
class TreeLayoutResult:
    nodes: list[TreeNode]
    edges: list[TreeEdge]
    viewport: Viewport
