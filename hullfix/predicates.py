# hullfix/predicates.py
from __future__ import annotations
from typing import TYPE_CHECKING

from .geom import VertexLike, sub, cross, dot, norm, EPS

if TYPE_CHECKING:
    from .face import Face

def orient3d(a: VertexLike, b: VertexLike, c: VertexLike, d: VertexLike) -> float:
    ab = sub(b, a)
    ac = sub(c, a)
    ad = sub(d, a)
    return dot(cross(ab, ac), ad)

def signed_distance_to_plane(a: VertexLike, b: VertexLike, c: VertexLike, p: VertexLike) -> float:
    n = cross(sub(b, a), sub(c, a))
    area2 = norm(n)
    if area2 == 0.0:
        return 0.0
    return orient3d(a, b, c, p) / area2

def is_outward(face: "Face", interior: VertexLike, eps: float = EPS) -> bool:
    """
    Чи дивиться нормаль грані геть від внутрішньої точки interior.
    Фабрика граней цього не перевіряє - це робота драйвера (і validate_faces).
    """
    return dot(face.normal, sub(interior, face.center)) < -eps
