from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import pytest
from matplotlib.figure import Figure as MplFigure

from chartguide import CrosshairBinding, CrosshairGuide, Graffiti, StrokeStyle
from chartguide.demo import BOUNDS, REGION, build_demo_state
from chartguide.graffiti.mpl_canvas import MatplotlibCanvas, save_png


@dataclass
class SceneCase:
    case_id: str
    kind: str
    transposed: bool = False
    follow_pointer: Sequence[bool] = (False, False)
    expected_patches: int = 2


CASES = [
    SceneCase("rect", "rect"),
    SceneCase("rect-transposed", "rect", transposed=True),
    SceneCase("rect-follow", "rect", follow_pointer=(True, True)),
    SceneCase("polar", "polar"),
    SceneCase("polar-transposed", "polar", transposed=True, follow_pointer=(False, True)),
]


def _compose(case: SceneCase) -> Graffiti:
    state = build_demo_state(case.kind, transposed=case.transposed, select=(2, 6))
    binding = CrosshairBinding(
        CrosshairGuide(
            styles=(StrokeStyle("tab:blue", 1.5), StrokeStyle("tab:orange", 1.5, dash=(4, 2))),
            follow_pointer=tuple(case.follow_pointer),
        )
    )
    binding.recompute(state)
    return Graffiti([binding])


@pytest.mark.parametrize("case", CASES, ids=lambda case: case.case_id)
def test_scene_patches_are_clipped_to_region(case: SceneCase) -> None:
    fig = MplFigure(figsize=(4, 3))
    ax = fig.add_subplot()
    canvas = MatplotlibCanvas(ax)

    painted = _compose(case).paint(canvas)

    assert painted == 1
    assert len(canvas.patches) == case.expected_patches
    for patch in canvas.patches:
        clip = ax.transData.inverted().transform_bbox(patch.get_clip_box())
        assert (clip.xmin, clip.ymin, clip.xmax, clip.ymax) == pytest.approx(
            (REGION.left, REGION.top, REGION.right, REGION.bottom)
        )
        assert not patch.get_fill()


@pytest.mark.parametrize("case", CASES, ids=lambda case: case.case_id)
def test_scene_rasterizes_to_png(case: SceneCase, tmp_path) -> None:
    path = tmp_path / f"{case.case_id}.png"

    painted = save_png(_compose(case), BOUNDS, path)

    assert painted == 1
    assert path.read_bytes().startswith(b"\x89PNG")
