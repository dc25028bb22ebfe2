"""High level orchestration for the string art server and CLI."""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Dict

from .config import StringArtConfig
from .geometry import Pattern, generate_pattern
from .rendering import PatternRenderer, RenderOptions
from .svg_export import pattern_to_svg


@dataclass
class StringArtController:
    """Keep the current configuration and its generated pattern together."""

    config: StringArtConfig = field(default_factory=StringArtConfig)
    renderer_options: RenderOptions = field(default_factory=RenderOptions)

    def __post_init__(self) -> None:
        self.pattern = generate_pattern(self.config)
        self.renderer = PatternRenderer(options=self.renderer_options)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Pattern management
    # ------------------------------------------------------------------
    def set_config(self, config: StringArtConfig) -> Pattern:
        pattern = generate_pattern(config)
        with self._lock:
            self.config = config
            self.pattern = pattern
        return pattern

    def load_config_dict(self, data: Dict[str, Any]) -> Pattern:
        config = StringArtConfig.from_dict(data)
        return self.set_config(config)

    def reset(self) -> Pattern:
        return self.set_config(StringArtConfig())

    def pattern_summary(self) -> Dict[str, Any]:
        with self._lock:
            pat = self.pattern
        bbox = pat.bounding_box()
        bbox_list = None
        if bbox is not None:
            (x0, y0), (x1, y1) = bbox
            bbox_list = [[x0, y0], [x1, y1]]
        return {
            "config": pat.config.to_dict(),
            "count": len(pat),
            "total_length": pat.total_length(),
            "bounding_box": bbox_list,
        }

    def pattern_strokes(self) -> Dict[str, Any]:
        with self._lock:
            pat = self.pattern
        return self.renderer.preview_strokes(pat)

    def pattern_svg(self) -> str:
        with self._lock:
            pat = self.pattern
        return pattern_to_svg(pat)


__all__ = ["StringArtController"]
