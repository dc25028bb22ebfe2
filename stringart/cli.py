"""Command line front end: generate, animate and export a pattern."""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt

from .config import ConfigurationError, StringArtConfig
from .geometry import generate_pattern
from .rendering import PatternRenderer, RenderOptions
from .svg_export import write_svg


def _parse_color(value: str) -> Tuple[float, float, float]:
    raw = value.strip().replace(" ", "")
    try:
        parts = tuple(float(v) for v in raw.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Color must be in R,G,B format, e.g. 0,0.5,1") from exc
    if len(parts) != 3:
        raise argparse.ArgumentTypeError("Color must have exactly three components.")
    return parts  # type: ignore[return-value]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw string art on a regular polygon.")
    parser.add_argument("--sides", type=int, default=3, help="Number of polygon sides (>= 3).")
    parser.add_argument(
        "--crossed",
        action="store_true",
        help="Place pins on the vertex bisectors instead of the sides.",
    )
    parser.add_argument("--density", type=int, default=40, help="Pins per side (>= 10).")
    parser.add_argument(
        "--color",
        type=_parse_color,
        default=(0.0, 0.0, 0.0),
        metavar="R,G,B",
        help="String colour, components in [0, 1].",
    )
    parser.add_argument("--delay", type=float, default=0.05, help="Pause between strings in seconds.")
    parser.add_argument(
        "--line-width",
        type=float,
        default=0.8,
        dest="line_width",
        help="String width in points.",
    )
    parser.add_argument("--maximize", action="store_true", help="Maximise the figure window.")
    parser.add_argument("--save", metavar="FILE", help="Save the drawn figure (png, pdf, svg, ...).")
    parser.add_argument("--svg", metavar="FILE", help="Export the strings as SVG paths.")
    parser.add_argument("--no-show", action="store_true", help="Do not display the plot window.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = StringArtConfig(
            sides=args.sides,
            crossed=args.crossed,
            density=args.density,
            color=args.color,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    pattern = generate_pattern(config)

    if args.svg:
        out = write_svg(pattern, args.svg)
        print(f"Saved: {out}")

    # animating into a window that is never shown is pointless
    delay = 0.0 if args.no_show else args.delay
    options = RenderOptions(delay_s=delay, line_width=args.line_width, maximize=args.maximize)
    renderer = PatternRenderer(options=options)
    renderer.run(pattern)

    if args.save:
        renderer.save(args.save)
        print(f"Saved: {args.save}")

    if not args.no_show:
        plt.show()
    plt.close(renderer.ax.figure)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
