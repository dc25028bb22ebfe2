"""Serialise string art patterns as SVG documents."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from matplotlib.colors import to_hex
from svgpathtools import Line as SVGLine, Path as SVGPathObject

from .geometry import Pattern, Segment


def segment_path(seg: Segment) -> SVGPathObject:
    """Build an svgpathtools path for ``seg`` with the y axis flipped."""

    start = complex(seg.p1[0], -seg.p1[1])
    end = complex(seg.p2[0], -seg.p2[1])
    return SVGPathObject(SVGLine(start, end))


def pattern_to_svg(pattern: Pattern, *, size: float = 800.0, stroke_width: float = 0.002) -> str:
    """Return an SVG document with one path per string.

    Pattern coordinates are unit based, so ``stroke_width`` is expressed in
    pattern units and ``size`` sets the rendered width in pixels.
    """

    bbox = pattern.bounding_box()
    if bbox is None:
        xmin, ymin, width, height = 0.0, 0.0, 1.0, 1.0
    else:
        (x0, y0), (x1, y1) = bbox
        # strokes on the hull extend half their width past it
        pad = stroke_width / 2.0
        xmin, ymin = x0 - pad, -y1 - pad
        width = ((x1 - x0) or 1.0) + 2 * pad
        height = ((y1 - y0) or 1.0) + 2 * pad
    viewbox = f"{xmin} {ymin} {width} {height}"
    body: List[str] = []
    for seg in pattern:
        body.append(
            f'<path d="{segment_path(seg).d()}" stroke="{to_hex(seg.color)}" '
            f'stroke-width="{stroke_width}" fill="none" />'
        )
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{viewbox}" '
        f'width="{size}" height="{size * height / width}">' + "".join(body) + "</svg>"
    )
    return svg


def write_svg(pattern: Pattern, path: Union[str, Path], **kwargs) -> Path:
    out = Path(path)
    out.write_text(pattern_to_svg(pattern, **kwargs), encoding="utf-8")
    return out


__all__ = ["segment_path", "pattern_to_svg", "write_svg"]
