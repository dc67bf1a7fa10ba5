"""Project a transformed card onto the 2D canvas.

Order of operations for every corner point (relative to the card center):

1. content offset,
2. rotation about X, then Y, then Z (degrees),
3. scale around the center,
4. perspective divide with a camera placed ``camera_distance`` in front.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np

from .transformations import Transformations

CARD_SIZE_PX = 150.0
CORNER_RADIUS_PX = 16.0
# Android's default camera distance is 8 "inches" at 72 px each.
DEFAULT_CAMERA_DISTANCE = 8.0 * 72.0

Point = Tuple[float, float]


def rotation_matrix(x_deg: float, y_deg: float, z_deg: float) -> np.ndarray:
    """Return ``Rz @ Ry @ Rx`` for angles in degrees."""
    ax, ay, az = (math.radians(a) for a in (x_deg, y_deg, z_deg))
    cx, sx = math.cos(ax), math.sin(ax)
    cy, sy = math.cos(ay), math.sin(ay)
    cz, sz = math.cos(az), math.sin(az)
    rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return rz @ ry @ rx


def card_outline(size: float = CARD_SIZE_PX, radius: float = CORNER_RADIUS_PX, segments: int = 4) -> np.ndarray:
    """Rounded-square outline centered on the origin, shape ``(n, 3)``."""
    half = size / 2.0
    radius = min(radius, half)
    inner = half - radius
    corners = ((inner, -inner, -90.0), (inner, inner, 0.0), (-inner, inner, 90.0), (-inner, -inner, 180.0))
    points = []
    for cx, cy, start in corners:
        if radius <= 0:
            points.append((cx, cy, 0.0))
            continue
        for step in range(segments + 1):
            angle = math.radians(start + 90.0 * step / segments)
            points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle), 0.0))
    return np.array(points, dtype=float)


def project_points(
    points: np.ndarray,
    transform: Transformations,
    camera_distance: float = DEFAULT_CAMERA_DISTANCE,
) -> np.ndarray:
    """Apply ``transform`` to ``points`` (``(n, 3)``) and return ``(n, 2)``."""
    if camera_distance <= 0:
        raise ValueError("camera_distance must be positive.")
    shifted = points + np.array([transform.x_offset, transform.y_offset, 0.0])
    rotated = shifted @ rotation_matrix(
        transform.x_axis_rotation, transform.y_axis_rotation, transform.z_axis_rotation
    ).T
    scaled = rotated * np.array([transform.x_scale, transform.y_scale, 1.0])
    # points behind the camera are pinned just in front of it
    depth = np.maximum(camera_distance + scaled[:, 2], 1e-3)
    factor = camera_distance / depth
    return scaled[:, :2] * factor[:, None]


def project_card(
    transform: Transformations,
    center: Point,
    size: float = CARD_SIZE_PX,
    camera_distance: float = DEFAULT_CAMERA_DISTANCE,
) -> List[Point]:
    """Return canvas coordinates of the card outline around ``center``."""
    projected = project_points(card_outline(size), transform, camera_distance)
    projected = projected + np.array(center, dtype=float)
    return [(float(x), float(y)) for x, y in projected]


__all__ = [
    "CARD_SIZE_PX",
    "CORNER_RADIUS_PX",
    "DEFAULT_CAMERA_DISTANCE",
    "card_outline",
    "project_card",
    "project_points",
    "rotation_matrix",
]
