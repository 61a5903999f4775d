from __future__ import annotations

import math
import os
from dataclasses import dataclass, fields

_ENV_PREFIX = "TREE_LAYOUT_"


@dataclass(frozen=True)
class LayoutConfig:
    """Spacing constants for the node positioner, in layout units.

    - node_width: horizontal footprint of one person card
    - node_height: vertical footprint of one person card; vertical_spacing
      may not be smaller
    - horizontal_spacing: gap between neighbouring couples/singles in a row
    - spouse_spacing: distance between the centers of two spouses
    - vertical_spacing: distance between generation rows
    - row_tolerance: two y values closer than this belong to the same row
    - default_zoom: zoom reported in the viewport
    """

    node_width: float = 220.0
    node_height: float = 140.0
    horizontal_spacing: float = 60.0
    spouse_spacing: float = 260.0
    vertical_spacing: float = 220.0
    row_tolerance: float = 10.0
    default_zoom: float = 0.9

    def __post_init__(self) -> None:
        for f in fields(self):
            v = getattr(self, f.name)
            if not math.isfinite(v):
                raise ValueError(f"{f.name} must be a finite number, got {v}")
            if v < 0:
                raise ValueError(f"{f.name} must be >= 0, got {v}")
        if self.default_zoom <= 0:
            raise ValueError("default_zoom must be > 0")
        if self.row_tolerance <= 0:
            raise ValueError("row_tolerance must be > 0")
        if self.vertical_spacing <= self.row_tolerance:
            raise ValueError("vertical_spacing must be greater than row_tolerance")
        if self.vertical_spacing < self.node_height:
            raise ValueError("vertical_spacing must be >= node_height")
        if self.spouse_spacing < self.node_width:
            raise ValueError("spouse_spacing must be >= node_width")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "LayoutConfig":
        """Build a config from ``TREE_LAYOUT_*`` environment variables.

        ``TREE_LAYOUT_SPOUSE_SPACING=300`` overrides ``spouse_spacing``, etc.
        Unset or empty variables keep the default.
        """

        env = os.environ if environ is None else environ
        overrides: dict[str, float] = {}
        for f in fields(cls):
            raw = (env.get(_ENV_PREFIX + f.name.upper()) or "").strip()
            if not raw:
                continue
            try:
                overrides[f.name] = float(raw)
            except ValueError:
                raise ValueError(f"{_ENV_PREFIX}{f.name.upper()} must be a number, got {raw!r}") from None
        return cls(**overrides)
