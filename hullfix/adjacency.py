from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import DuplicateFaceError, TopologyError
from .face import Face
from .geom import VertexIndex, VertexLike, same_vertex

UEdge = Tuple[int, int]   # неорієнтоване ребро: (min, max) номерів вершин


def _contains(face: Face, v: VertexLike) -> bool:
    return any(same_vertex(v, w) for w in face.vertices())


def shared_edge(f1: Face, f2: Face) -> Tuple[bool, Optional[VertexLike], Optional[VertexLike]]:
    """
    Чи мають f1 і f2 рівно одне спільне ребро.
    Повертає (True, v_from, v_to), де (v_from, v_to) йде в циклічному порядку обходу f1:
    (v1,v2), (v2,v3) або (v3,v1). Інакше (False, None, None).
    Три спільні вершини - зіпсований вхід, DuplicateFaceError.
    """
    a, b, c = f1.vertices()
    ha, hb, hc = _contains(f2, a), _contains(f2, b), _contains(f2, c)
    if ha and hb and hc:
        raise DuplicateFaceError(f"faces share all three vertices: {f1!r} / {f2!r}")
    if ha and hb:
        return True, a, b
    if hb and hc:
        return True, b, c
    if hc and ha:
        return True, c, a
    return False, None, None


def find_non_shared_vertex(face: Face, v_from: VertexLike, v_to: VertexLike) -> VertexLike:
    """Вершина грані, що не лежить на спільному ребрі (v_from, v_to)."""
    for v in face.vertices():
        if not same_vertex(v, v_from) and not same_vertex(v, v_to):
            return v
    raise TopologyError(f"no vertex of {face!r} is off the edge ({v_from!r}, {v_to!r})")


def edge_map(faces: Sequence[Face], index: Optional[VertexIndex] = None) -> Dict[UEdge, List[int]]:
    """
    (i, j) -> індекси граней, що містять ребро (як edge2face у інкрементальному hull).
    i < j - номери вершин у index (VertexIndex, правило same_vertex).
    """
    index = index if index is not None else VertexIndex()
    out: Dict[UEdge, List[int]] = {}
    for fid, f in enumerate(faces):
        a, b, c = f.vertices()
        for u, v in ((a, b), (b, c), (c, a)):
            out.setdefault(index.edge_key(u, v), []).append(fid)
    return out
