from __future__ import annotations

import math
from types import SimpleNamespace
from typing import List, Tuple

import numpy as np
import pytest
from matplotlib.path import Path

from chartguide import (
    ArcPath,
    Graffiti,
    GuideContractError,
    Layer,
    LinePath,
    PaintingStyle,
    PathFigure,
    Rect,
    Scene,
    StrokeStyle,
)


class FakeCanvas:
    def __init__(self) -> None:
        self.operations: List[Tuple[str, object]] = []

    def save(self) -> None:
        self.operations.append(("save", None))

    def restore(self) -> None:
        self.operations.append(("restore", None))

    def clip_rect(self, rect) -> None:
        self.operations.append(("clip", rect))

    def draw_path(self, path, paint) -> None:
        self.operations.append(("draw", (path, paint)))


def _figure(x: float) -> PathFigure:
    return PathFigure(LinePath((x, 0.0), (x, 10.0)), StrokeStyle().to_paint())


def test_stroke_style_resolves_paint():
    style = StrokeStyle("#bfbfbf", width=2, dash=[3, 2])

    paint = style.to_paint()

    assert paint.color == pytest.approx((191 / 255, 191 / 255, 191 / 255, 1.0))
    assert paint.stroke_width == 2.0
    assert paint.dash == (3.0, 2.0)
    assert paint.style is PaintingStyle.STROKE
    assert style.to_paint(PaintingStyle.FILL).style is PaintingStyle.FILL


@pytest.mark.parametrize(
    "kwargs",
    [{"color": "not-a-color"}, {"width": -1.0}, {"dash": (3.0,)}, {"dash": (3.0, 0.0)}],
)
def test_stroke_style_rejects_bad_values(kwargs):
    with pytest.raises(GuideContractError):
        StrokeStyle(**kwargs)


def test_stroke_style_list_color_is_hashable():
    style = StrokeStyle([1.0, 0.0, 0.0])

    assert style.color == (1.0, 0.0, 0.0)
    assert hash(style) == hash(StrokeStyle((1.0, 0.0, 0.0)))


def test_line_path_to_matplotlib_path():
    path = LinePath((1, 2), (3, 4)).to_path()

    assert np.allclose(path.vertices, [[1.0, 2.0], [3.0, 4.0]])
    assert list(path.codes) == [Path.MOVETO, Path.LINETO]


def test_arc_path_endpoints():
    arc = ArcPath((100.0, 100.0), 50.0, -math.pi / 2, math.pi / 2)

    assert arc.start_point == pytest.approx((100.0, 50.0))
    assert arc.end_point == pytest.approx((150.0, 100.0))

    path = arc.to_path()
    assert tuple(path.vertices[0]) == pytest.approx((100.0, 50.0))
    assert tuple(path.vertices[-1]) == pytest.approx((150.0, 100.0))


def test_arc_path_with_negative_sweep_covers_same_span():
    arc = ArcPath((0.0, 0.0), 1.0, 0.0, -math.pi / 2)

    path = arc.to_path()

    assert tuple(path.vertices[0]) == pytest.approx(arc.end_point, abs=1e-9)
    assert tuple(path.vertices[-1]) == pytest.approx(arc.start_point, abs=1e-9)


def test_scene_normalizes_empty_figures():
    assert Scene(Layer.CROSSHAIR, figures=[]).figures is None
    assert Scene(Layer.CROSSHAIR, figures=[]).is_idle

    scene = Scene(Layer.CROSSHAIR, figures=[_figure(1.0)])
    assert isinstance(scene.figures, tuple)
    assert not scene.is_idle


def test_graffiti_orders_by_layer_then_z_index():
    element = Scene(Layer.ELEMENT, 5, [_figure(1.0)])
    top = Scene(Layer.CROSSHAIR, 0, [_figure(2.0)])
    below = Scene(Layer.CROSSHAIR, -1, [_figure(3.0)])
    graffiti = Graffiti([SimpleNamespace(scene=top), SimpleNamespace(scene=below)])
    graffiti.add(SimpleNamespace(scene=element))

    assert graffiti.scenes() == [element, below, top]


def test_graffiti_paints_clip_then_figures_and_skips_idle():
    region = Rect(0, 0, 100, 100)
    figures = [_figure(1.0), _figure(2.0)]
    active = SimpleNamespace(scene=Scene(Layer.CROSSHAIR, 0, figures, region))
    idle = SimpleNamespace(scene=Scene(Layer.CROSSHAIR, 1, None, region))
    canvas = FakeCanvas()

    painted = Graffiti([active, idle]).paint(canvas)

    assert painted == 1
    assert canvas.operations == [
        ("save", None),
        ("clip", region),
        ("draw", (figures[0].path, figures[0].paint)),
        ("draw", (figures[1].path, figures[1].paint)),
        ("restore", None),
    ]


def test_graffiti_reads_replaced_scenes_at_paint_time():
    source = SimpleNamespace(scene=Scene(Layer.CROSSHAIR))
    graffiti = Graffiti([source])
    canvas = FakeCanvas()

    assert graffiti.paint(canvas) == 0

    source.scene = Scene(Layer.CROSSHAIR, figures=[_figure(1.0)])
    assert graffiti.paint(canvas) == 1
    assert [op for op, _ in canvas.operations] == ["save", "draw", "restore"]

    graffiti.remove(source)
    assert graffiti.scenes() == []
