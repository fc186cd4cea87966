"""Example: crosshair on a polar chart rendered to PNG."""

import sys

from chartguide import CrosshairBinding, CrosshairGuide, Graffiti
from chartguide.demo import BOUNDS, build_demo_state
from chartguide.graffiti.mpl_canvas import save_png


def main(output: str = "crosshair_polar.png") -> None:
    state = build_demo_state("polar", select=(1, 2))
    binding = CrosshairBinding(CrosshairGuide())
    scene = binding.recompute(state)

    print(f"Figures: {len(scene.figures or ())}")
    save_png(Graffiti([binding]), BOUNDS, output)
    print(f"Written {output}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
