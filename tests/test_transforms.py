"""
test_transforms.py
------------------
Unit tests for geometry/transforms.py
"""

import pytest

from curveplot.geometry import (
    CoordinateMapper, InvalidGeometryError, Rect, Vec2,
    build_device_transform, build_viewport_transform, pixel_size, pixel_thickness,
)


# ---------------------------------------------------------------------------
# 1. Device transform
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("density", [1.0, 2.0, 1.5])
def test_device_transform_flips_y(density):
    """Canvas y up becomes device y down at any density."""
    canvas = Vec2(400, 300)
    m = build_device_transform(canvas, Rect.create(0, 0, 400, 300), density)
    assert m.row(0) == pytest.approx((density, 0, 0))
    assert m.row(1) == pytest.approx((0, -density, 300 * density))
    # canvas bottom-left -> device bottom-left (y down), top-right -> device top-right
    assert m.apply_to_vec2(Vec2(0, 0)).is_close(Vec2(0, 300 * density))
    assert m.apply_to_vec2(Vec2(400, 300)).is_close(Vec2(400 * density, 0))


def test_device_transform_scales_by_viewport_ratio():
    """Scale follows viewport size over canvas size."""
    m = build_device_transform(Vec2(100, 100), Rect.create(0, 0, 50, 200), 2.0)
    assert m.at(0, 0) == pytest.approx(1.0)
    assert m.at(1, 1) == pytest.approx(-4.0)


@pytest.mark.parametrize("canvas, density", [
    (Vec2(0, 100), 1.0),
    (Vec2(100, 0), 1.0),
    (Vec2(float("nan"), 100), 1.0),
    (Vec2(100, 100), 0.0),
    (Vec2(100, 100), -1.0),
])
def test_device_transform_rejects_degenerate_input(canvas, density):
    """Zero canvas axes and non-positive density raise."""
    with pytest.raises(InvalidGeometryError):
        build_device_transform(canvas, Rect.create(0, 0, 100, 100), density)


def test_viewport_transform_degenerate_source():
    """An empty source rect raises."""
    with pytest.raises(InvalidGeometryError):
        build_viewport_transform(Rect.create(0, 0, 0, 0), Rect.create(0, 0, 10, 10))


def test_viewport_transform_subnormal_source():
    """Overflow to an infinite scale raises instead of returning inf."""
    with pytest.raises(InvalidGeometryError):
        build_viewport_transform(Rect.create(0, 0, 1e-320, 1), Rect.create(0, 0, 100, 100))


def test_device_transform_rejects_overflowing_scale():
    """A subnormal canvas size overflows the device scale and is rejected."""
    with pytest.raises(InvalidGeometryError):
        build_device_transform(Vec2(1e-320, 100), Rect.create(0, 0, 100, 100), 1.0)


def test_pixel_size_and_thickness():
    """Pixel size and thickness from the diagonal of the transform."""
    m = build_device_transform(Vec2(100, 100), Rect.create(0, 0, 100, 100), 2.0)
    assert pixel_size(m, 2.0) == Vec2(1, 1)
    assert pixel_thickness(m, 2.0) == pytest.approx(1 / 2 ** 0.5)


# ---------------------------------------------------------------------------
# 2. CoordinateMapper
# ---------------------------------------------------------------------------

@pytest.fixture
def mapper(square_viewport):
    return CoordinateMapper(
        canvas_size_px=Vec2(400, 400),
        viewport=square_viewport,
        canvas_rect=Rect.create(0, 0, 400, 400).inset(5),
        pixel_density=2.0,
    )


def test_canvas_rect_defaults_to_whole_canvas(square_viewport):
    """Without a region the whole canvas is used."""
    m = CoordinateMapper(Vec2(300, 200), square_viewport)
    assert m.canvas_rect == Rect.create(0, 0, 300, 200)
    assert m.view_rect == m.canvas_rect


def test_world_origin_maps_to_region_bottom_left(mapper, square_viewport):
    """Viewport origin lands on the region's bottom-left device pixel."""
    # canvas region (5, 5)-(395, 395); device y down at density 2
    assert mapper.to_device(square_viewport.origin).is_close(Vec2(10, 790))
    assert mapper.to_device(square_viewport.far_corner).is_close(Vec2(790, 10))
    assert mapper.to_device(Vec2(0, 0)).is_close(Vec2(400, 400))


def test_world_device_round_trip(mapper, random_points):
    """to_world inverts to_device."""
    for p in random_points:
        assert mapper.to_world(mapper.to_device(p)).is_close(p, abs_tol=1e-9)


def test_world_to_device_composition(mapper):
    """world_to_device is device times viewport."""
    composed = mapper.device_transform @ mapper.viewport_transform
    assert composed.is_close(mapper.world_to_device)
    assert (mapper.world_to_device @ mapper.device_to_world).is_close(
        composed @ composed.inverse())


def test_normalized_to_world(mapper, square_viewport):
    """Canvas centre maps to the world origin, the region corner to the viewport origin."""
    assert mapper.normalized_to_world(Vec2(0.5, 0.5)).is_close(Vec2(0, 0))
    corner = Vec2(5 / 400, 5 / 400)
    assert mapper.normalized_to_world(corner).is_close(square_viewport.origin)


def test_mapper_pixel_size(mapper):
    # 390 logical px across 4 world units
    assert mapper.pixel_size().is_close(Vec2(97.5, 97.5))
    assert mapper.pixel_thickness() == pytest.approx(1 / (97.5 * 2 ** 0.5))


def test_rebuilds_return_new_mappers(mapper):
    """with_* rebuilds leave the original untouched."""
    zoomed = mapper.with_viewport(Rect.create_ranges((-1, 1), (-1, 1)))
    assert zoomed is not mapper
    assert zoomed.to_device(Vec2(-1, -1)).is_close(Vec2(10, 790))
    assert mapper.to_device(Vec2(-1, -1)).is_close(Vec2(205, 595))

    resized = mapper.with_canvas_size(Vec2(200, 100))
    assert resized.canvas_rect == Rect.create(0, 0, 200, 100)
    assert resized.device_transform.at(1, 2) == pytest.approx(200)

    moved = mapper.with_canvas_rect(Rect.create(0, 0, 200, 200))
    assert moved.to_device(Vec2(2, 2)).is_close(Vec2(400, 400))


def test_degenerate_viewport_fails_on_use(square_viewport):
    """A degenerate viewport raises once a matrix is needed."""
    m = CoordinateMapper(Vec2(100, 100), Rect.create(0, 0, 0, 1))
    with pytest.raises(InvalidGeometryError):
        m.to_device(Vec2(0, 0))
