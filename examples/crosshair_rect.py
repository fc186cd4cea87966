"""Example: crosshair on a cartesian chart, following the pointer horizontally."""

from chartguide import CrosshairBinding, CrosshairGuide, Graffiti, StrokeStyle, generate_tikz_document
from chartguide.demo import build_demo_state


def main() -> None:
    state = build_demo_state("rect", select=(4,), pointer=(120.0, 200.0))
    guide = CrosshairGuide(
        styles=(StrokeStyle("tab:gray", 1.0, dash=(4, 2)), StrokeStyle("tab:gray")),
        follow_pointer=(True, False),
    )
    binding = CrosshairBinding(guide)
    scene = binding.recompute(state)

    for figure in scene.figures or ():
        print(figure.path)
    print(generate_tikz_document(Graffiti([binding]), title="Cartesian crosshair"))


if __name__ == "__main__":
    main()
