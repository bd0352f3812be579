from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Dict, Iterable, List, Protocol, Sequence, Tuple, Union

EPS = 1e-7  # поріг виродженості грані (||n|| < EPS => колінеарні вершини)


class VertexLike(Protocol):
    """Будь-що з координатами x, y, z (вершини належать драйверу, ядро їх лише читає)."""
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]


def as_pt(v: Union[VertexLike, Sequence[float]]) -> Pt:
    """Привести вершину (об'єкт з x,y,z або трійку чисел) до Pt."""
    if isinstance(v, Pt):
        return v
    if hasattr(v, "x"):
        return Pt(float(v.x), float(v.y), float(v.z))
    x, y, z = v
    return Pt(float(x), float(y), float(z))

def sub(a: VertexLike, b: VertexLike) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def dot(a: VertexLike, b: VertexLike) -> float:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: VertexLike, b: VertexLike) -> Pt:
    return Pt(a.y*b.z - a.z*b.y,
              a.z*b.x - a.x*b.z,
              a.x*b.y - a.y*b.x)

def norm(a: VertexLike) -> float:
    return sqrt(dot(a, a))

def weighted_sum(i: int, j: int, k: int, p: VertexLike) -> float:
    """
    Проєкція вершини на напрям (i-1, j-1, k-1).
    i, j, k ∈ {0,1,2} - зсунуті на +1 компоненти напряму з {-1,0,1}.
    """
    return (i - 1)*p.x + (j - 1)*p.y + (k - 1)*p.z

def centroid(points: Iterable[VertexLike]) -> Pt:
    xs = ys = zs = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; zs += p.z; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv, zs*inv)

def same_vertex(a: object, b: object) -> bool:
    """Правило рівності вершин для всього ядра: тотожність або рівність значень."""
    return a is b or a == b


class VertexIndex:
    """
    Нумерація вершин за правилом same_vertex (0, 1, 2, ... у порядку першої появи).
    Хешовані вершини шукаються через dict, нехешовані (напр. @dataclass з eq) - лінійно.
    """
    def __init__(self) -> None:
        self.vertices: List[VertexLike] = []
        self._hashed: Dict[VertexLike, int] = {}
        self._unhashed: List[int] = []

    def __call__(self, v: VertexLike) -> int:
        try:
            i = self._hashed.get(v)
        except TypeError:
            for i in self._unhashed:
                if same_vertex(self.vertices[i], v):
                    return i
            self._unhashed.append(len(self.vertices))
            self.vertices.append(v)
            return len(self.vertices) - 1
        if i is None:
            i = len(self.vertices)
            self._hashed[v] = i
            self.vertices.append(v)
        return i

    def __len__(self) -> int:
        return len(self.vertices)

    def edge_key(self, u: VertexLike, v: VertexLike) -> Tuple[int, int]:
        """Неорієнтоване ребро як упорядкована пара індексів."""
        i, j = self(u), self(v)
        return (i, j) if i < j else (j, i)
