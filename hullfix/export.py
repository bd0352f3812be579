from __future__ import annotations
from typing import List, Sequence, Tuple

import numpy as np

from .face import Face
from .geom import VertexIndex, VertexLike


def _index_vertices(faces: Sequence[Face]) -> Tuple[List[VertexLike], List[Tuple[int, int, int]]]:
    """Вершини в порядку першої появи + трійки індексів для кожної грані."""
    index = VertexIndex()
    tris = [tuple(index(v) for v in f.vertices()) for f in faces]
    return index.vertices, tris


def faces_to_off(faces: Sequence[Face]) -> str:
    """
    Експорт граней у формат OFF (MeshLab/ParaView).
    """
    verts, tris = _index_vertices(faces)
    lines = ["OFF", f"{len(verts)} {len(tris)} 0"]
    for p in verts:
        lines.append(f"{p.x} {p.y} {p.z}")
    for a, b, c in tris:
        lines.append(f"3 {a} {b} {c}")
    return "\n".join(lines)


def faces_to_arrays(faces: Sequence[Face]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """(vertices[N,3], triangles[M,3], normals[M,3]) для шару рендерингу."""
    verts, tris = _index_vertices(faces)
    vertices = np.array([(p.x, p.y, p.z) for p in verts], dtype=float).reshape(-1, 3)
    triangles = np.array(tris, dtype=np.int64).reshape(-1, 3)
    normals = np.array([tuple(f.normal) for f in faces], dtype=float).reshape(-1, 3)
    return vertices, triangles, normals
