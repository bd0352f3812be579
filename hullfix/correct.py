"""
Виправлення неопуклих (рефлексних) згинів між сусідніми гранями.

Для пари граней зі спільним ребром (v_from, v_to) беремо c = n_i x n_j.
Якщо c протилежно ребру хоча б по одній осі, пара «згинається всередину»,
і ми перекидаємо діагональ: чотири вершини тетраедра {v_from, v_to, vi, vj}
тріангулюються двома іншими гранями.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from .adjacency import find_non_shared_vertex, shared_edge
from .face import DEFAULT_FACTORY, Face, FaceFactory
from .geom import EPS, VertexLike, cross

logger = logging.getLogger(__name__)


def is_reflex(f1: Face, f2: Face, v_from: VertexLike, v_to: VertexLike, eps: float = EPS) -> bool:
    """
    Проксі-тест опуклості: c[axis] / (v_to - v_from)[axis] < 0 на будь-якій осі.
    Осі з майже нульовою компонентою ребра пропускаємо (ділення дало б inf/NaN).
    """
    c = cross(f1.normal, f2.normal)
    edge = (v_to.x - v_from.x, v_to.y - v_from.y, v_to.z - v_from.z)
    for axis in range(3):
        d = edge[axis]
        if abs(d) <= eps:
            continue
        if c[axis] / d < 0:
            return True
    return False


def _sweep(faces: List[Face], make: FaceFactory) -> int:
    flips = 0
    n = len(faces)
    for i in range(n - 1):
        for j in range(i + 1, n):
            # перечитуємо зі списку: попередні перекидання могли замінити faces[i]
            fi, fj = faces[i], faces[j]
            shares, v_from, v_to = shared_edge(fi, fj)
            if not shares or not is_reflex(fi, fj, v_from, v_to, make.eps):
                continue
            vi = find_non_shared_vertex(fi, v_from, v_to)
            vj = find_non_shared_vertex(fj, v_from, v_to)
            new_i = make(vi, vj, v_to)
            new_j = make(vj, vi, v_from)
            if new_i is None or new_j is None:
                logger.warning("skip flip of faces %d/%d: flipped pair is degenerate", i, j)
                continue
            faces[i] = new_i
            faces[j] = new_j
            flips += 1
            logger.debug("flipped faces %d/%d across edge (%s, %s)", i, j, v_from, v_to)
    return flips


def fix_non_convex_faces(faces: List[Face], factory: Optional[FaceFactory] = None,
                         until_stable: bool = False, max_passes: Optional[int] = None) -> int:
    """
    Перебрати всі пари i < j і перекинути рефлексні. Список змінюється на місці.

    За замовчуванням - один прохід: нові рефлексні пари, що з'явились після
    перекидання, лишаються. until_stable=True повторює прохід, доки він щось змінює,
    але не більше max_passes разів (за замовчуванням 10 * len(faces)).

    Повертає кількість перекидань.
    """
    make = factory if factory is not None else DEFAULT_FACTORY
    if max_passes is None:
        max_passes = 10 * max(len(faces), 1)
    total = 0
    passes = 0
    while True:
        flips = _sweep(faces, make)
        total += flips
        passes += 1
        if not until_stable or flips == 0:
            break
        if passes >= max_passes:
            logger.warning("non-convex correction not stable after %d passes", passes)
            break
    return total
