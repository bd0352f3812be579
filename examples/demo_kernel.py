# examples/demo_kernel.py
"""
Мінімальний драйвер навколо ядра hullfix:
  таблиця екстремумів -> стартовий тетраедр -> вставка точок розщепленням грані
  -> виправлення рефлексних згинів -> перевірка та експорт в OFF.
Драйвер навмисно наївний: кожна точка вставляється лише в найбільш «видиму» грань.
"""
from __future__ import annotations

import logging

from hullfix import (
    Pt, build_extreme_table, compare_with_qhull, faces_to_off, fix_non_convex_faces,
    replace_face, seed_simplex, signed_distance_to_plane, tetra_faces, validate_faces,
)


def insert_point(faces, p) -> bool:
    """Розщепити грань, від якої p найдалі назовні. False, якщо p всередині."""
    best, best_d = None, 0.0
    for fid, f in enumerate(faces):
        d = signed_distance_to_plane(f.v1, f.v2, f.v3, p)
        if d > best_d:
            best, best_d = fid, d
    if best is None:
        return False
    replace_face(faces, best, p)
    fix_non_convex_faces(faces, until_stable=True)
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    raw = [
        (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
        (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1),
        (0.5, 0.5, 0.5), (0.2, 0.8, 0.3), (0.8, 0.2, 0.7)
    ]
    pts = [Pt(*map(float, p)) for p in dict.fromkeys(raw)]

    table = build_extreme_table(pts)
    seed = seed_simplex(table)
    faces = tetra_faces(*seed)

    for p in pts:
        if p in seed:
            continue
        if not insert_point(faces, p):
            logging.info("point %s is inside, skipped", p)

    print("VALIDATION:", validate_faces(faces))
    print("QHULL:", compare_with_qhull(faces, pts))

    with open("hull.off", "w", encoding="utf-8") as f:
        f.write(faces_to_off(faces))
    print("Wrote hull.off - можна глянути в MeshLab/ParaView.")
