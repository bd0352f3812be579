"""
Екстремальні вершини 3x3x3 і стартовий симплекс.

table[i][j][k] - вершина, максимальна вздовж напряму (i-1, j-1, k-1).
Напрями задаються трійками з {-1,0,1}; індекси в таблиці - зі зсувом +1.
"""
from __future__ import annotations
from itertools import product
from math import fmod
from operator import index
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import DegenerateInputError, PreconditionError
from .face import DEFAULT_FACTORY, Face, FaceFactory
from .geom import EPS, VertexLike, centroid, cross, norm, same_vertex, sub, weighted_sum
from .predicates import orient3d

ExtremeTable = List[List[List[VertexLike]]]
Direction = Tuple[int, int, int]


def sign(v: float) -> int:
    """-1 для від'ємних, +1 для решти (нуль теж +1: лише дві половини таблиці)."""
    return -1 if v < 0 else 1


def cycle_axis(axis: int, exclude: Optional[int] = None) -> int:
    """
    Наступна вісь по модулю 3. Якщо axis потрапляє на exclude (або -exclude,
    знакова вісь), зсуваємось ще на одну.
    """
    r = int(fmod(axis, 3))
    if exclude is not None and (r == exclude or r == -exclude):
        axis += 1
    return abs(int(fmod(axis, 3)))


def lookup_extreme(table: ExtremeTable, direction: Sequence[int]) -> VertexLike:
    try:
        # лише цілі (int, numpy-int); float і bool відкидаємо
        offsets = [index(d) + 1 for d in direction if not isinstance(d, bool)]
    except TypeError:
        offsets = []
    if len(offsets) != 3 or len(direction) != 3 or any(o not in (0, 1, 2) for o in offsets):
        raise PreconditionError(f"direction must be in {{-1,0,1}}^3, got {tuple(direction)!r}")
    i, j, k = offsets
    return table[i][j][k]


def build_extreme_table(points: Iterable[VertexLike]) -> ExtremeTable:
    """
    Заповнити таблицю: для кожної клітинки - точка з найбільшою weighted_sum.
    При рівності лишається перша. Клітинка (1,1,1) має нульову вагу => перша точка.
    """
    pts = list(points)
    if not pts:
        raise ValueError("empty set")
    table: ExtremeTable = [[[pts[0]] * 3 for _ in range(3)] for _ in range(3)]
    for i, j, k in product(range(3), repeat=3):
        best = pts[0]
        best_w = weighted_sum(i, j, k, best)
        for p in pts[1:]:
            w = weighted_sum(i, j, k, p)
            if w > best_w:
                best, best_w = p, w
        table[i][j][k] = best
    return table


def _axis_dir(axis: int, s: int) -> Direction:
    d = [0, 0, 0]
    d[axis] = s
    return tuple(d)


def _candidates(table: ExtremeTable, preferred: Iterable[Direction]) -> Iterator[VertexLike]:
    """Спершу бажані напрями, потім решта клітинок таблиці."""
    for d in preferred:
        yield lookup_extreme(table, d)
    for d in product((-1, 0, 1), repeat=3):
        yield lookup_extreme(table, d)


def seed_simplex(table: ExtremeTable, axis: int = 0,
                 eps: float = EPS) -> Tuple[VertexLike, VertexLike, VertexLike, VertexLike]:
    """
    Чотири некомпланарні вершини з таблиці екстремумів:
      a, b - екстремуми вздовж ±axis (або наступної осі, якщо вони збіглися);
      c    - найперша вершина поза прямою ab (спершу ±супутні осі);
      d    - найперша вершина поза площиною abc (спершу кут таблиці в октанті нормалі).
    """
    a = b = None
    for step in range(3):
        ax = cycle_axis(axis + step)
        a, b = lookup_extreme(table, _axis_dir(ax, 1)), lookup_extreme(table, _axis_dir(ax, -1))
        if not same_vertex(a, b):
            axis = ax
            break
    else:
        raise DegenerateInputError("all extreme vertices coincide: cannot seed a simplex")

    c1 = cycle_axis(axis, axis)
    c2 = cycle_axis(c1 + 1, axis)
    ab = sub(b, a)
    c = None
    for v in _candidates(table, [_axis_dir(c1, 1), _axis_dir(c1, -1), _axis_dir(c2, 1), _axis_dir(c2, -1)]):
        if norm(cross(ab, sub(v, a))) > eps:
            c = v
            break
    if c is None:
        raise DegenerateInputError("all points collinear: cannot form a base triangle")

    n = cross(ab, sub(c, a))
    corner = (sign(n.x), sign(n.y), sign(n.z))
    opposite = (-corner[0], -corner[1], -corner[2])
    for v in _candidates(table, [corner, opposite]):
        if abs(orient3d(a, b, c, v)) > eps:
            return a, b, c, v
    raise DegenerateInputError("all points coplanar: 3D hull is impossible")


def tetra_faces(a: VertexLike, b: VertexLike, c: VertexLike, d: VertexLike,
                factory: Optional[FaceFactory] = None) -> List[Face]:
    """Чотири грані тетраедра з нормалями назовні (центроїд тетра - всередині)."""
    make = factory if factory is not None else DEFAULT_FACTORY
    if abs(orient3d(a, b, c, d)) <= make.eps:
        raise DegenerateInputError("tetrahedron vertices are coplanar")
    O = centroid((a, b, c, d))
    faces: List[Face] = []
    for p, q, r in ((a, b, c), (a, c, d), (a, d, b), (b, d, c)):
        # хочемо orient3d(p,q,r,O) < 0 (O всередині, нормаль назовні)
        if orient3d(p, q, r, O) > 0:
            q, r = r, q
        f = make(p, q, r)
        if f is None:
            raise DegenerateInputError(f"degenerate tetrahedron face ({p!r}, {q!r}, {r!r})")
        faces.append(f)
    return faces
