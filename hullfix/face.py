from __future__ import annotations
from dataclasses import dataclass
import logging
from math import sqrt
from typing import Iterator, Optional, Tuple, Type

from .geom import EPS, Pt, VertexLike, centroid, cross, same_vertex, sub

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Face:
    """
    Орієнтована трикутна грань оболонки.
    v1, v2, v3: посилання на вершини драйвера (попарно різні).
    normal: одинична нормаль, напрям задається порядком обходу (v2-v1) x (v3-v2).
    center: центроїд трьох вершин.

    Грань - значення: коректор і сплітер замінюють її в списку цілком.
    Для додаткових даних на грані - підклас з полями за замовчуванням
    і FaceFactory(face_type=...).
    """
    v1: VertexLike
    v2: VertexLike
    v3: VertexLike
    normal: Pt
    center: Pt

    def vertices(self) -> Tuple[VertexLike, VertexLike, VertexLike]:
        return (self.v1, self.v2, self.v3)

    def __iter__(self) -> Iterator[VertexLike]:
        yield self.v1; yield self.v2; yield self.v3


def make_face(v1: VertexLike, v2: VertexLike, v3: VertexLike,
              eps: float = EPS, face_type: Type[Face] = Face) -> Optional[Face]:
    """
    Побудувати грань (v1, v2, v3) або повернути None для виродженого трикутника:
      - дві однакові вершини;
      - ||(v2-v1) x (v3-v2)|| < eps (колінеарні точки).
    Зовнішність нормалі відносно оболонки тут не перевіряється -
    порядок вершин обирає той, хто викликає.
    """
    if same_vertex(v1, v2) or same_vertex(v2, v3) or same_vertex(v3, v1):
        logger.debug("degenerate face: repeated vertex in (%s, %s, %s)", v1, v2, v3)
        return None
    n = cross(sub(v2, v1), sub(v3, v2))
    mag = sqrt(n.x*n.x + n.y*n.y + n.z*n.z)
    if mag < eps:
        logger.debug("degenerate face: |n|=%g < %g for (%s, %s, %s)", mag, eps, v1, v2, v3)
        return None
    normal = Pt(n.x / mag, n.y / mag, n.z / mag)
    return face_type(v1, v2, v3, normal, centroid((v1, v2, v3)))


@dataclass(frozen=True)
class FaceFactory:
    """Стратегія побудови граней: допуск eps і конкретний тип грані."""
    eps: float = EPS
    face_type: Type[Face] = Face

    def __call__(self, v1: VertexLike, v2: VertexLike, v3: VertexLike) -> Optional[Face]:
        return make_face(v1, v2, v3, eps=self.eps, face_type=self.face_type)


DEFAULT_FACTORY = FaceFactory()
