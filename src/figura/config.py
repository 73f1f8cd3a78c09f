"""Configuration for the gradient demo."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .color import RGB


@dataclass(frozen=True)
class GradientConfig:
    """Settings for rendering a vertical gradient to a PNG file."""

    width: int = 800
    height: int = 640
    top: str = "#00ff00"
    bottom: str = "#ff0000"
    gamma: bool = False
    output: str = "main.png"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Gradient size must be positive, got {self.width}x{self.height}")
        # Fail early on unreadable colors.
        self.top_color()
        self.bottom_color()

    def top_color(self) -> RGB:
        return RGB.from_hex(self.top)

    def bottom_color(self) -> RGB:
        return RGB.from_hex(self.bottom)

    @property
    def output_path(self) -> Path:
        return Path(self.output)

    def with_overrides(self, **overrides: Any) -> "GradientConfig":
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GradientConfig":
        """Construct a :class:`GradientConfig` from a dictionary."""

        size_data = data.get("size", {})
        colors_data = data.get("colors", {})
        if not isinstance(size_data, dict):
            raise ValueError("'size' must be a mapping with width and height")
        if not isinstance(colors_data, dict):
            raise ValueError("'colors' must be a mapping with top and bottom")

        try:
            width = int(size_data.get("width", 800))
            height = int(size_data.get("height", 640))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid gradient size: {exc}") from exc

        return cls(
            width=width,
            height=height,
            top=str(colors_data.get("top", "#00ff00")),
            bottom=str(colors_data.get("bottom", "#ff0000")),
            gamma=bool(data.get("gamma", False)),
            output=str(data.get("output", "main.png")),
        )

    @classmethod
    def load(cls, path: Path | str, base_path: Optional[Path] = None) -> "GradientConfig":
        """Load configuration from a YAML file.

        A relative ``output`` is resolved against ``base_path`` when given.
        """

        text = Path(path).read_text(encoding="utf8")
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Could not parse {path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a mapping")
        config = cls.from_dict(data)
        if base_path is not None and not config.output_path.is_absolute():
            config = config.with_overrides(output=str(base_path / config.output_path))
        return config


__all__ = ["GradientConfig"]
