from __future__ import annotations

import numpy as np
import pytest

from rota.domain.projection import (
    CARD_SIZE_PX,
    project_card,
    project_points,
    rotation_matrix,
)
from rota.domain.transformations import Transformations


def _extent(points):
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs), max(xs), min(ys), max(ys)


def test_identity_card_is_axis_aligned_square_around_center() -> None:
    points = project_card(Transformations(), center=(200.0, 100.0))

    min_x, max_x, min_y, max_y = _extent(points)
    half = CARD_SIZE_PX / 2

    assert (min_x, max_x) == pytest.approx((200.0 - half, 200.0 + half))
    assert (min_y, max_y) == pytest.approx((100.0 - half, 100.0 + half))


def test_scale_shrinks_each_axis_independently() -> None:
    transform = Transformations(x_scale=0.5, y_scale=2.0)

    min_x, max_x, min_y, max_y = _extent(project_card(transform, center=(0.0, 0.0)))

    assert max_x - min_x == pytest.approx(CARD_SIZE_PX * 0.5)
    assert max_y - min_y == pytest.approx(CARD_SIZE_PX * 2.0)


def test_offset_translates_flat_card() -> None:
    transform = Transformations(x_offset=100.0, y_offset=-40.0)

    min_x, max_x, min_y, max_y = _extent(project_card(transform, center=(0.0, 0.0)))

    assert (min_x + max_x) / 2 == pytest.approx(100.0)
    assert (min_y + max_y) / 2 == pytest.approx(-40.0)


def test_z_rotation_turns_points_in_plane() -> None:
    point = np.array([[75.0, 0.0, 0.0]])

    projected = project_points(point, Transformations(z_axis_rotation=90.0))

    np.testing.assert_allclose(projected, [[0.0, 75.0]], atol=1e-9)


def test_y_rotation_foreshortens_width() -> None:
    min_x, max_x, _, _ = _extent(project_card(Transformations(y_axis_rotation=60.0), center=(0.0, 0.0)))

    assert max_x - min_x < CARD_SIZE_PX


def test_rotation_matrix_is_orthonormal() -> None:
    matrix = rotation_matrix(30.0, -45.0, 120.0)

    np.testing.assert_allclose(matrix @ matrix.T, np.eye(3), atol=1e-12)


def test_camera_distance_must_be_positive() -> None:
    with pytest.raises(ValueError):
        project_points(np.zeros((1, 3)), Transformations(), camera_distance=0.0)
