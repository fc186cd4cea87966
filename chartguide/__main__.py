import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from chartguide import (
    CrosshairBinding,
    CrosshairGuide,
    Graffiti,
    LinePath,
    generate_tikz_document,
)
from chartguide.demo import BOUNDS, build_demo_state
from chartguide.graffiti.mpl_canvas import save_png

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {value!r}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Render a crosshair over a demo chart")
    parser.add_argument(
        "--coord",
        choices=["rect", "polar"],
        default="rect",
        help="Coordinate system of the demo chart (default: rect)",
    )
    parser.add_argument(
        "--transposed",
        action="store_true",
        help="Transpose the coordinate system",
    )
    parser.add_argument(
        "--follow-pointer",
        nargs=2,
        type=_parse_bool,
        default=[False, False],
        metavar=("DIM0", "DIM1"),
        help="Whether each dimension follows the pointer (default: false false)",
    )
    parser.add_argument(
        "--pointer",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        help="Canvas position of the pointer (default: on the first selected point)",
    )
    parser.add_argument(
        "--select",
        nargs="*",
        type=int,
        default=[3],
        help="Selected data indexes (default: 3); pass none to leave the chart idle",
    )
    parser.add_argument(
        "--selection",
        default="hover",
        help="Name of the active selection (default: hover)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the composed scenes to the given path",
    )
    parser.add_argument(
        "--png-output-path",
        help="Rasterize the composed scenes into a PNG at the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    state = build_demo_state(
        args.coord,
        transposed=args.transposed,
        select=args.select,
        pointer=tuple(args.pointer) if args.pointer else None,
        selection=args.selection,
    )
    logger.info("Built demo chart with %s coordinate", args.coord)

    guide = CrosshairGuide(follow_pointer=tuple(args.follow_pointer))
    binding = CrosshairBinding(guide)
    scene = binding.recompute(state)

    graffiti = Graffiti([binding])

    print(f"Scene: layer={scene.layer.name} z_index={scene.z_index}")
    print(f"Clip region: {scene.clip_region}")
    if scene.is_idle:
        print("Figures: (none)")
    else:
        print("Figures:")
        for figure in scene.figures:
            path = figure.path
            if isinstance(path, LinePath):
                print(
                    f"  line ({path.start[0]:.2f}, {path.start[1]:.2f}) -> "
                    f"({path.end[0]:.2f}, {path.end[1]:.2f})"
                )
            else:
                print(
                    f"  arc center=({path.center[0]:.2f}, {path.center[1]:.2f}) "
                    f"radius={path.radius:.2f}"
                )

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        document = generate_tikz_document(graffiti, title=f"Crosshair on {args.coord} chart")
        output_path.write_text(document, encoding="utf-8")
        print(f"TikZ document written to {output_path}")

    if args.png_output_path:
        output_path = Path(args.png_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing PNG to %s", output_path)
        save_png(graffiti, BOUNDS, output_path)
        print(f"PNG written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
