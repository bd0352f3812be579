"""
hullfix - ядро граней 3D опуклої оболонки.
Побудова орієнтованих граней, пошук спільних ребер, виправлення рефлексних згинів,
розщеплення грані новою вершиною, екстремальні вершини для стартового симплекса.
"""

__version__ = "0.1.0"

from hullfix.geom import Pt, EPS, VertexLike, as_pt, centroid, cross, dot, weighted_sum
from hullfix.predicates import orient3d, signed_distance_to_plane, is_outward
from hullfix.errors import (
    HullfixError, PreconditionError, DegenerateInputError, TopologyError, DuplicateFaceError,
)
from hullfix.face import Face, FaceFactory, make_face
from hullfix.extreme import (
    build_extreme_table, cycle_axis, lookup_extreme, seed_simplex, sign, tetra_faces,
)
from hullfix.adjacency import edge_map, find_non_shared_vertex, shared_edge
from hullfix.correct import fix_non_convex_faces, is_reflex
from hullfix.split import replace_face
from hullfix.check import compare_with_qhull, surface_volume, validate_faces
from hullfix.export import faces_to_arrays, faces_to_off

__all__ = [
    "Pt", "EPS", "VertexLike", "as_pt", "centroid", "cross", "dot", "weighted_sum",
    "orient3d", "signed_distance_to_plane", "is_outward",
    "HullfixError", "PreconditionError", "DegenerateInputError", "TopologyError", "DuplicateFaceError",
    "Face", "FaceFactory", "make_face",
    "build_extreme_table", "cycle_axis", "lookup_extreme", "seed_simplex", "sign", "tetra_faces",
    "edge_map", "find_non_shared_vertex", "shared_edge",
    "fix_non_convex_faces", "is_reflex",
    "replace_face",
    "compare_with_qhull", "surface_volume", "validate_faces",
    "faces_to_arrays", "faces_to_off",
    "__version__",
]
