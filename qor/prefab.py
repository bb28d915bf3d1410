"""Ready-made vertex, normal and texture-coordinate lists for simple shapes."""

from __future__ import annotations

import enum
from typing import List, Sequence, Tuple, Union

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

_NORMAL = 0.57735


class WrapFlag(enum.IntFlag):
    """Flags that mirror a tile's texture coordinates."""

    NONE = 0
    H_FLIP = 1
    V_FLIP = 2


def _pair(value: Union[float, Sequence[float]]) -> Vec2:
    if isinstance(value, (int, float)):
        return (float(value), float(value))
    x, y = value
    return (float(x), float(y))


def quad(
    minimum: Sequence[float] = (0.0, 0.0),
    maximum: Sequence[float] = (1.0, 1.0),
    depth: float = 0.0,
) -> List[Vec3]:
    """Two triangles covering the rectangle from minimum to maximum."""
    x0, y0 = _pair(minimum)
    x1, y1 = _pair(maximum)
    d = float(depth)
    return [
        (x0, y0, d),
        (x1, y0, d),
        (x0, y1, d),
        (x1, y0, d),
        (x1, y1, d),
        (x0, y1, d),
    ]


def scaled_quad(scale: Union[float, Sequence[float]] = (1.0, 1.0)) -> List[Vec3]:
    """A quad from the origin to the given scale (a number or a pair)."""
    return quad((0.0, 0.0), _pair(scale))


def quad_normals(direction: float = 1.0) -> List[Vec3]:
    """Normals for the six vertices of a quad, all pointing along z."""
    return [(0.0, 0.0, float(direction))] * 6


def quad_wrap(
    minimum: Sequence[float] = (0.0, 0.0),
    maximum: Sequence[float] = (1.0, 1.0),
    scale: Union[float, Sequence[float]] = (1.0, 1.0),
    offset: Union[float, Sequence[float]] = (0.0, 0.0),
) -> List[Vec2]:
    """Texture coordinates matching :func:`quad`, with Y flipped."""
    x0, y0 = _pair(minimum)
    x1, y1 = _pair(maximum)
    sx, sy = _pair(scale)
    ox, oy = _pair(offset)
    corners = [(x0, y1), (x1, y1), (x0, y0), (x1, y1), (x1, y0), (x0, y0)]
    return [(u * sx + ox, v * sy + oy) for u, v in corners]


def tile_wrap(
    tile_size: Sequence[int],
    tileset_size: Sequence[int],
    index: int = 0,
    flags: int = 0,
) -> List[Vec2]:
    """Texture coordinates of one tile in a tileset; empty if out of range."""
    tile_w, tile_h = (int(v) for v in tile_size)
    set_w, set_h = (int(v) for v in tileset_size)
    across, down = set_w // tile_w, set_h // tile_h
    if index >= across * down:
        return []
    unit_x, unit_y = 1.0 / across, 1.0 / down
    fi = unit_x * (index % across)
    fj = unit_y * (index // across)
    if flags & WrapFlag.H_FLIP:
        return quad_wrap((fi + unit_x, fj + unit_y), (fi, fj))
    return quad_wrap((fi, fj + unit_y), (fi + unit_x, fj))


_CUBE_SIGNS = (
    (1, 1, -1), (-1, 1, 1), (1, 1, 1), (-1, -1, 1), (1, -1, -1), (1, -1, 1),
    (1, -1, 1), (1, 1, -1), (1, 1, 1), (1, -1, -1), (-1, 1, -1), (1, 1, -1),
    (-1, 1, -1), (-1, -1, 1), (-1, 1, 1), (1, 1, 1), (-1, -1, 1), (1, -1, 1),
    (1, 1, -1), (-1, 1, -1), (-1, 1, 1), (-1, -1, 1), (-1, -1, -1), (1, -1, -1),
    (1, -1, 1), (1, -1, -1), (1, 1, -1), (1, -1, -1), (-1, -1, -1), (-1, 1, -1),
    (-1, 1, -1), (-1, -1, -1), (-1, -1, 1), (1, 1, 1), (-1, 1, 1), (-1, -1, 1),
)

_CUBE_WRAP = (
    (0.0, 2.0), (-1.0, 1.0), (0.0, 1.0), (-1.0, 0.0), (-0.0, 1.0), (0.0, 0.0),
    (-0.0, -0.5), (-1.0, 0.5), (0.0, 0.5), (-0.0, -0.5), (-1.0, 0.5), (0.0, 0.5),
    (0.0, 0.5), (1.0, -0.5), (1.0, 0.5), (0.0, 1.5), (-1.0, 0.5), (0.0, 0.5),
    (0.0, 2.0), (-1.0, 2.0), (-1.0, 1.0), (-1.0, 0.0), (-1.0, 1.0), (-0.0, 1.0),
    (-0.0, -0.5), (-1.0, -0.5), (-1.0, 0.5), (-0.0, -0.5), (-1.0, -0.5), (-1.0, 0.5),
    (0.0, 0.5), (0.0, -0.5), (1.0, -0.5), (0.0, 1.5), (-1.0, 1.5), (-1.0, 0.5),
)


def cube(scale: float = 1.0) -> List[Vec3]:
    """Triangulated cube vertices spanning -scale..scale on every axis."""
    s = float(scale)
    return [(x * s, y * s, z * s) for x, y, z in _CUBE_SIGNS]


def cube_wrap() -> List[Vec2]:
    """Texture coordinates for :func:`cube`."""
    return list(_CUBE_WRAP)


def cube_normals() -> List[Vec3]:
    """Per-vertex normals for :func:`cube`."""
    normals = [(x * _NORMAL, y * _NORMAL, z * _NORMAL) for x, y, z in _CUBE_SIGNS]
    normals[-1] = (-_NORMAL, -_NORMAL, 0.5773)
    return normals