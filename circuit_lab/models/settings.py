"""
settings.py - Editor configuration constants with JSON user overrides.

Stores default values and reads user overrides from a JSON config file.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from .element import ELEMENT_KINDS
from .geometry import snap_to_grid

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".circuit-lab"
_CONFIG_FILE = _CONFIG_DIR / "settings.json"


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class EditorSettings:
    """Grid, hit-test and placement settings shared by the editor and renderer.

    ``terminal_offset`` defaults to one grid step and must stay a whole
    multiple of ``grid_size`` so terminals of grid-snapped elements land on
    the points grid-snapped wires end at.
    """

    grid_size: float = 40  # Spacing between snap points
    hit_radius: float = 50  # Element selection radius around its centre
    wire_tolerance: float = 15  # Perpendicular distance for wire selection
    terminal_offset: Optional[float] = None  # Centre-to-terminal distance; None follows grid_size
    spawn_base: float = 200  # Position of the first added element (both axes)
    spawn_slots: int = 5  # Diagonal slots cycled through by new elements

    def __post_init__(self):
        if self.terminal_offset is None:
            self.terminal_offset = self.grid_size
        self.validate()

    def validate(self) -> None:
        """Raise ValueError for non-numeric, non-positive or off-grid values."""
        for name in ("grid_size", "hit_radius", "wire_tolerance", "terminal_offset"):
            value = getattr(self, name)
            if not _is_number(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {value!r}")
        if not _is_number(self.spawn_base):
            raise ValueError(f"spawn_base must be a number, got {self.spawn_base!r}")
        if not isinstance(self.spawn_slots, int) or isinstance(self.spawn_slots, bool) or self.spawn_slots <= 0:
            raise ValueError(f"spawn_slots must be a positive integer, got {self.spawn_slots!r}")
        if self.terminal_offset % self.grid_size != 0:
            raise ValueError(
                f"terminal_offset {self.terminal_offset!r} is not a multiple of grid_size {self.grid_size!r}"
            )

    def terminal_offsets(self) -> dict[str, float]:
        """Per-kind terminal offsets derived from ``terminal_offset``."""
        return {kind: self.terminal_offset for kind in ELEMENT_KINDS}

    def spawn_position(self, element_count: int) -> tuple[float, float]:
        """Default grid position for a new element, staggered to avoid overlap."""
        step = (element_count % self.spawn_slots) * self.grid_size
        return snap_to_grid((self.spawn_base + step, self.spawn_base + step), self.grid_size)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "EditorSettings":
        """Load user overrides from the JSON config file.

        A missing file yields the defaults. Unreadable files and invalid
        values are logged and ignored.
        """
        path = Path(config_path) if config_path else _CONFIG_FILE
        if not path.exists():
            return cls()
        try:
            with open(path) as f:
                overrides = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to load editor settings: %s", e)
            return cls()
        if not isinstance(overrides, dict):
            logger.warning("Ignoring editor settings in %s: expected a JSON object", path)
            return cls()

        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in overrides.items():
            if key in known:
                values[key] = value
            else:
                logger.warning("Ignoring unknown editor setting %r", key)
        try:
            return cls(**values)
        except ValueError as e:
            logger.warning("Invalid editor settings in %s: %s", path, e)
            return cls()

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save non-default values to the JSON config file."""
        path = Path(config_path) if config_path else _CONFIG_FILE
        defaults = asdict(EditorSettings())
        defaults["terminal_offset"] = self.grid_size
        overrides = {k: v for k, v in asdict(self).items() if v != defaults[k]}
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                json.dump(overrides, f, indent=2)
        except OSError as e:
            logger.error("Failed to save editor settings: %s", e)
