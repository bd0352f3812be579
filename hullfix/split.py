from __future__ import annotations
import logging
from typing import List, Optional

from .face import DEFAULT_FACTORY, Face, FaceFactory
from .geom import VertexLike

logger = logging.getLogger(__name__)


def replace_face(faces: List[Face], index: int, new_vertex: VertexLike,
                 factory: Optional[FaceFactory] = None) -> List[Face]:
    """
    Замінити faces[index] віялом з new_vertex:
      (n, v1, v2), (n, v2, v3), (n, v3, v1) - дописуються в кінець списку.
    Вироджені трикутники (n збігається з вершиною або лежить на ребрі) мовчки
    відкидаються, тож довжина списку змінюється на -1..+2.
    Повертає додані грані.
    """
    make = factory if factory is not None else DEFAULT_FACTORY
    old = faces.pop(index)
    added: List[Face] = []
    for a, b in ((old.v1, old.v2), (old.v2, old.v3), (old.v3, old.v1)):
        f = make(new_vertex, a, b)
        if f is None:
            logger.debug("split of face %d: dropped degenerate fan (%s, %s, %s)", index, new_vertex, a, b)
            continue
        added.append(f)
    faces.extend(added)
    return added
