# examples/view_faces.py
from __future__ import annotations

import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from hullfix import Pt, faces_to_arrays, fix_non_convex_faces, replace_face, tetra_faces


def plot_faces(ax, faces, show_normals: bool = True):
    """Намалювати грані (і нормалі з центроїдів) на 3D-осях matplotlib."""
    vertices, triangles, normals = faces_to_arrays(faces)
    if len(triangles) == 0:
        ax.set_title("Немає граней")
        return
    polys = vertices[triangles]
    ax.add_collection3d(Poly3DCollection(polys, alpha=0.35, edgecolor="k", linewidths=0.6))
    if show_normals:
        centers = polys.mean(axis=1)
        ax.quiver(centers[:, 0], centers[:, 1], centers[:, 2],
                  normals[:, 0], normals[:, 1], normals[:, 2],
                  length=0.2, color="tab:red")

    # однаковий масштаб по осях
    mins, maxs = vertices.min(axis=0), vertices.max(axis=0)
    mid = (mins + maxs) / 2
    r = max((maxs - mins).max(), 1e-9) / 2
    ax.set_xlim(mid[0] - r, mid[0] + r)
    ax.set_ylim(mid[1] - r, mid[1] + r)
    ax.set_zlim(mid[2] - r, mid[2] + r)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")


if __name__ == "__main__":
    A, B, C, D = Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, 1)
    faces = tetra_faces(A, B, C, D)
    # точка над гранню BCD - розщеплюємо саме її
    far = max(range(len(faces)), key=lambda i: faces[i].normal.x + faces[i].normal.y + faces[i].normal.z)
    replace_face(faces, far, Pt(0.6, 0.6, 0.6))
    fix_non_convex_faces(faces)

    fig = plt.figure(figsize=(6, 6))
    ax = fig.add_subplot(111, projection="3d")
    plot_faces(ax, faces)
    ax.set_title(f"Hull faces ({len(faces)})")
    plt.show()
