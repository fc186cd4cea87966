import math

import pytest

from chartguide import GuideContractError, PolarCoordConv, Rect, RectCoordConv


def test_rect_convert_flips_y_axis():
    coord = RectCoordConv(Rect(0, 0, 100, 50))

    assert coord.convert((0.0, 0.0)) == pytest.approx((0.0, 50.0))
    assert coord.convert((1.0, 1.0)) == pytest.approx((100.0, 0.0))
    assert coord.convert((0.25, 0.5)) == pytest.approx((25.0, 25.0))


def test_rect_ranges_leave_margins():
    coord = RectCoordConv(Rect(0, 0, 100, 100), horizontal_range=(0.1, 0.9), vertical_range=(0.2, 0.8))

    assert coord.convert((0.0, 0.0)) == pytest.approx((10.0, 80.0))
    assert coord.convert((1.0, 1.0)) == pytest.approx((90.0, 20.0))
    assert coord.invert((50.0, 50.0)) == pytest.approx((0.5, 0.5))


def test_rect_transposed_swaps_dimensions():
    coord = RectCoordConv(Rect(0, 0, 100, 100), transposed=True)

    assert coord.convert((0.2, 0.7)) == pytest.approx((70.0, 80.0))
    assert coord.invert((70.0, 80.0)) == pytest.approx((0.2, 0.7))


@pytest.mark.parametrize("point", [(0.0, 0.0), (0.3, 0.9), (1.0, 0.5), (-0.2, 1.4)])
def test_rect_invert_undoes_convert(point):
    coord = RectCoordConv(Rect(10, 20, 310, 220), horizontal_range=(0.05, 0.95))

    assert coord.invert(coord.convert(point)) == pytest.approx(point)


def test_rect_rejects_degenerate_input():
    with pytest.raises(GuideContractError):
        RectCoordConv(Rect(0, 0, 100, 100), horizontal_range=(0.5, 0.5))
    with pytest.raises(GuideContractError):
        RectCoordConv(Rect(0, 0, 0, 100))
    with pytest.raises(GuideContractError):
        RectCoordConv((0, 0, 100, 100))


def test_polar_geometry_from_region():
    coord = PolarCoordConv(Rect(0, 0, 200, 100), start_radius_factor=0.2)

    assert coord.center == pytest.approx((100.0, 50.0))
    assert coord.start_radius == pytest.approx(10.0)
    assert coord.end_radius == pytest.approx(50.0)


def test_polar_convert_starts_at_twelve_o_clock():
    coord = PolarCoordConv(Rect(0, 0, 200, 200))

    assert coord.convert((0.0, 0.5)) == pytest.approx((100.0, 50.0))
    assert coord.convert((0.25, 0.5)) == pytest.approx((150.0, 100.0))
    assert coord.convert((0.5, 1.0)) == pytest.approx((100.0, 200.0))


@pytest.mark.parametrize(
    "canvas, expected",
    [
        ((150.0, 100.0), (0.25, 0.5)),
        ((50.0, 100.0), (0.75, 0.5)),
        ((50.0, 50.0), (0.875, math.sqrt(0.5))),
        ((100.0, 0.0), (0.0, 1.0)),
    ],
)
def test_polar_invert_wraps_angles_into_sweep(canvas, expected):
    coord = PolarCoordConv(Rect(0, 0, 200, 200))

    assert coord.invert(canvas) == pytest.approx(expected)


def test_polar_transposed_uses_dim_one_as_angle():
    coord = PolarCoordConv(Rect(0, 0, 200, 200), transposed=True)

    assert coord.convert((0.5, 0.25)) == pytest.approx((150.0, 100.0))
    assert coord.invert((150.0, 100.0)) == pytest.approx((0.5, 0.25))


def test_polar_angle_and_radius_helpers_are_inverse():
    coord = PolarCoordConv(
        Rect(0, 0, 200, 200),
        start_angle=0.0,
        end_angle=math.pi,
        angle_range=(0.1, 0.9),
        radius_range=(0.0, 0.5),
    )

    assert coord.invert_angle(coord.convert_angle(0.3)) == pytest.approx(0.3)
    assert coord.invert_radius(coord.convert_radius(0.7)) == pytest.approx(0.7)
    assert coord.convert_radius(1.0) == pytest.approx(50.0)


def test_polar_rejects_empty_sweep():
    with pytest.raises(GuideContractError):
        PolarCoordConv(Rect(0, 0, 100, 100), start_angle=1.0, end_angle=1.0)
    with pytest.raises(GuideContractError):
        PolarCoordConv(Rect(0, 0, 100, 100), start_radius_factor=0.5, end_radius_factor=0.5)
