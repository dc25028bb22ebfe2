"""Rendering helpers for drawing a :class:`stringart.geometry.Pattern`.

Geometry is computed up front by :func:`stringart.geometry.generate_pattern`;
this module only walks the resulting segment list and draws it onto a
matplotlib axes, optionally pausing between strings so the pattern builds up
progressively on screen.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from threading import Event
from typing import Any, Callable, Dict, List, Optional

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.colors import to_hex
from matplotlib.lines import Line2D

from .geometry import Pattern

ProgressCallback = Callable[[int, Dict[str, Any]], None]
StatusCallback = Callable[[str], None]


@dataclass
class RenderOptions:
    delay_s: float = 0.05
    line_width: float = 0.8
    background: str = "white"
    hide_axes: bool = True
    figsize: tuple = (8.0, 8.0)
    maximize: bool = False


class PatternRenderer:
    """Draw a :class:`Pattern` string by string on a matplotlib axes."""

    def __init__(self, ax: Optional[Axes] = None, *, options: Optional[RenderOptions] = None) -> None:
        self.options = options or RenderOptions()
        self.ax = ax

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def preview_strokes(self, pattern: Pattern, *, width: Optional[float] = None) -> Dict[str, Any]:
        width = self.options.line_width if width is None else width
        strokes = []
        for seg in pattern:
            strokes.append(
                {
                    "pts": [list(seg.p1), list(seg.p2)],
                    "color": to_hex(seg.color),
                    "width": width,
                }
            )
        return {"strokes": strokes}

    def setup_axes(self) -> Axes:
        """Return the target axes, creating a figure on first use."""
        if self.ax is None:
            _, self.ax = plt.subplots(figsize=self.options.figsize)
            if self.options.maximize:
                self._maximize(self.ax.figure)
        ax = self.ax
        opts = self.options
        ax.set_aspect("equal")
        ax.figure.patch.set_facecolor(opts.background)
        ax.set_facecolor(opts.background)
        if opts.hide_axes:
            ax.axis("off")
        return ax

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def run(
        self,
        pattern: Pattern,
        *,
        stop_event: Optional[Event] = None,
        progress_cb: Optional[ProgressCallback] = None,
        status_cb: Optional[StatusCallback] = None,
    ) -> List[Line2D]:
        """Draw every segment in order and return the created line handles."""

        opts = self.options
        ax = self.setup_axes()
        self._fit_limits(ax, pattern)

        total = len(pattern)
        handles: List[Line2D] = []
        for done, seg in enumerate(pattern, start=1):
            if stop_event and stop_event.is_set():
                raise RuntimeError("Render cancelled")
            (line,) = ax.plot(
                [seg.p1[0], seg.p2[0]],
                [seg.p1[1], seg.p2[1]],
                color=seg.color,
                linewidth=opts.line_width,
            )
            handles.append(line)
            if opts.delay_s > 0:
                plt.pause(opts.delay_s)
            if progress_cb:
                progress_cb(done, {"total": total})

        cfg = pattern.config
        msg = (
            f"Drew {len(handles)} strings: {cfg.sides} sides, density {cfg.density}, "
            f"{'crossed' if cfg.crossed else 'edge'} mode, length {pattern.total_length():.2f}."
        )
        if status_cb:
            status_cb(msg)
        else:
            print(msg)
        return handles

    def save(self, path: str, *, dpi: int = 150) -> None:
        if self.ax is None:
            raise RuntimeError("Nothing has been drawn yet")
        self.ax.figure.savefig(path, dpi=dpi, bbox_inches="tight", facecolor=self.options.background)

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------
    def _fit_limits(self, ax: Axes, pattern: Pattern) -> None:
        bbox = pattern.bounding_box()
        if bbox is None:
            return
        (x0, y0), (x1, y1) = bbox
        margin = max(x1 - x0, y1 - y0) * 0.05
        ax.set_xlim(x0 - margin, x1 + margin)
        ax.set_ylim(y0 - margin, y1 + margin)

    def _maximize(self, fig) -> None:
        manager = fig.canvas.manager
        if manager is None:
            return
        window = getattr(manager, "window", None)
        if hasattr(window, "showMaximized"):  # Qt
            window.showMaximized()
        elif hasattr(window, "wm_state") and hasattr(window, "attributes"):  # Tk
            if sys.platform.startswith(("win", "darwin")):
                window.wm_state("zoomed")
            else:
                window.attributes("-zoomed", True)
        else:
            manager.full_screen_toggle()


__all__ = ["PatternRenderer", "RenderOptions"]
