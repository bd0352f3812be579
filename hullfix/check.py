from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from .adjacency import edge_map, shared_edge
from .correct import is_reflex
from .face import Face
from .geom import EPS, Pt, VertexIndex, VertexLike, as_pt, centroid, cross, dot, sub
from .predicates import is_outward


def _indexed(faces: Sequence[Face]) -> VertexIndex:
    index = VertexIndex()
    for f in faces:
        for v in f.vertices():
            index(v)
    return index


def _unique_vertices(faces: Sequence[Face]) -> List[VertexLike]:
    return _indexed(faces).vertices


def validate_faces(faces: Sequence[Face], interior: Optional[VertexLike] = None,
                   eps: float = EPS) -> dict:
    """
    Перевірка замкненої опуклої поверхні:
      - кожне неорієнтоване ребро зустрічається рівно у 2 гранях;
      - нормалі дивляться геть від interior (за замовчуванням - центроїд вершин);
      - жодна пара сусідів не згинається всередину.
    Повертає словник із діагностикою (порожні списки = все ок).
    """
    index = _indexed(faces)
    verts = index.vertices
    O = interior if interior is not None else (centroid(verts) if verts else Pt(0.0, 0.0, 0.0))

    em = edge_map(faces, index)
    bad_edges = [((verts[i], verts[j]), len(fids)) for (i, j), fids in em.items() if len(fids) != 2]

    bad_orient = [fid for fid, f in enumerate(faces) if not is_outward(f, O, eps)]

    reflex_pairs = []
    for fids in em.values():
        if len(fids) != 2:
            continue
        i, j = sorted(fids)
        ok, v_from, v_to = shared_edge(faces[i], faces[j])
        if ok and is_reflex(faces[i], faces[j], v_from, v_to, eps):
            reflex_pairs.append((i, j))

    return {
        "faces": len(faces),
        "unique_vertices": len(verts),
        "bad_edges": bad_edges,
        "bad_orient_faces": bad_orient,
        "reflex_pairs": sorted(reflex_pairs),
    }


def surface_volume(faces: Sequence[Face]) -> float:
    """Об'єм, обмежений гранями (теорема Гаусса; > 0 при нормалях назовні)."""
    if not faces:
        return 0.0
    O = centroid(_unique_vertices(faces))
    vol = 0.0
    for f in faces:
        a, b, c = (sub(v, O) for v in f.vertices())
        vol += dot(a, cross(b, c))
    return vol / 6.0


def compare_with_qhull(faces: Sequence[Face], points: Iterable[VertexLike]) -> dict:
    """
    Звірити грані з оболонкою Qhull (scipy.spatial.ConvexHull) на тих самих точках.
    missing_vertices - вершини Qhull, яких немає в гранях; extra_vertices - навпаки.
    """
    try:
        import numpy as np
        from scipy.spatial import ConvexHull
    except ImportError as e:
        raise RuntimeError(
            "compare_with_qhull потребує SciPy. "
            "Встанови extra: pip install hullfix[qhull]."
        ) from e

    arr = np.array([tuple(as_pt(p)) for p in points], dtype=float)
    qh = ConvexHull(arr)
    hull_pts = {Pt(*map(float, arr[i])) for i in qh.vertices}
    face_pts = {as_pt(v) for f in faces for v in f.vertices()}

    return {
        "missing_vertices": sorted(hull_pts - face_pts, key=tuple),
        "extra_vertices": sorted(face_pts - hull_pts, key=tuple),
        "volume": surface_volume(faces),
        "qhull_volume": float(qh.volume),
    }
