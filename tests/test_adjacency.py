import unittest
from dataclasses import dataclass

from hullfix.adjacency import edge_map, find_non_shared_vertex, shared_edge
from hullfix.errors import DuplicateFaceError, TopologyError
from hullfix.extreme import tetra_faces
from hullfix.face import Face, make_face
from hullfix.geom import Pt, VertexIndex

"""
Тести для `hullfix.adjacency`: спільні ребра, неспільна вершина, карта ребер.
"""

A, B, C, D = Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, 1)
E, F, G = Pt(5, 5, 5), Pt(6, 5, 5), Pt(5, 6, 5)


class Vertex:
    def __init__(self, x, y, z):
        self.x, self.y, self.z = x, y, z


@dataclass
class VVertex:
    """Рівність за значенням, але без __hash__."""
    x: float
    y: float
    z: float


class TestSharedEdge(unittest.TestCase):

    def test_faces_sharing_an_edge(self):
        ok, v_from, v_to = shared_edge(make_face(A, B, C), make_face(A, B, D))
        self.assertTrue(ok)
        self.assertEqual((v_from, v_to), (A, B))

    def test_detection_is_symmetric(self):
        f1, f2 = make_face(A, B, C), make_face(B, A, D)
        ok12, *edge12 = shared_edge(f1, f2)
        ok21, *edge21 = shared_edge(f2, f1)
        self.assertTrue(ok12)
        self.assertTrue(ok21)
        self.assertEqual(set(edge12), set(edge21))
        self.assertEqual(edge12, [A, B])
        self.assertEqual(edge21, [B, A])

    def test_edge_follows_winding_of_first_face(self):
        # спільні v2,v3 першої грані
        self.assertEqual(shared_edge(make_face(D, B, C), make_face(A, B, C))[1:], (B, C))
        # спільні v1,v3 першої грані -> ребро (v3, v1)
        self.assertEqual(shared_edge(make_face(A, D, C), make_face(A, B, C))[1:], (C, A))

    def test_no_common_vertices(self):
        self.assertEqual(shared_edge(make_face(A, B, C), make_face(E, F, G)), (False, None, None))

    def test_single_common_vertex_is_not_an_edge(self):
        ok, v_from, v_to = shared_edge(make_face(A, B, C), make_face(A, E, F))
        self.assertFalse(ok)
        self.assertIsNone(v_from)
        self.assertIsNone(v_to)

    def test_all_three_shared_is_an_error(self):
        with self.assertRaises(DuplicateFaceError):
            shared_edge(make_face(A, B, C), make_face(C, B, A))
        with self.assertRaises(TopologyError):
            shared_edge(make_face(A, B, C), make_face(A, B, C))

    def test_value_equality_of_vertices(self):
        f1 = make_face(A, B, C)
        f2 = make_face(Pt(1.0, 0.0, 0.0), Pt(0.0, 0.0, 0.0), D)
        ok, v_from, v_to = shared_edge(f1, f2)
        self.assertTrue(ok)
        self.assertEqual((v_from, v_to), (A, B))

    def test_identity_vertices(self):
        a, b, c, d = Vertex(0, 0, 0), Vertex(1, 0, 0), Vertex(0, 1, 0), Vertex(0, 0, 1)
        self.assertTrue(shared_edge(make_face(a, b, c), make_face(b, a, d))[0])
        # ті самі координати, але інший об'єкт - інша вершина
        twin = Vertex(0, 0, 0)
        self.assertFalse(shared_edge(make_face(a, b, c), make_face(b, twin, d))[0])


class TestFindNonSharedVertex(unittest.TestCase):

    def test_each_position(self):
        self.assertIs(find_non_shared_vertex(make_face(C, A, B), A, B), C)
        self.assertIs(find_non_shared_vertex(make_face(A, C, B), A, B), C)
        self.assertIs(find_non_shared_vertex(make_face(A, B, C), B, A), C)

    def test_corrupted_face_raises(self):
        # грань з повтореною вершиною оминає фабрику
        bad = Face(A, B, A, Pt(0, 0, 1), Pt(0, 0, 0))
        with self.assertRaises(TopologyError):
            find_non_shared_vertex(bad, A, B)


class TestEdgeMap(unittest.TestCase):

    def test_closed_tetrahedron(self):
        em = edge_map(tetra_faces(A, B, C, D))
        self.assertEqual(len(em), 6)
        for fids in em.values():
            self.assertEqual(len(fids), 2)

    def test_open_pair(self):
        index = VertexIndex()
        em = edge_map([make_face(A, B, C), make_face(B, A, D)], index)
        self.assertEqual(em[index.edge_key(A, B)], [0, 1])
        self.assertEqual(em[index.edge_key(B, A)], [0, 1])
        self.assertEqual(len(em), 5)
        self.assertEqual(index.vertices, [A, B, C, D])

    def test_unhashable_value_vertices(self):
        a, b, c, d = VVertex(0, 0, 0), VVertex(1, 0, 0), VVertex(0, 1, 0), VVertex(0, 0, 1)
        index = VertexIndex()
        em = edge_map(tetra_faces(a, b, c, d), index)
        self.assertEqual(len(em), 6)
        # рівна за значенням копія - та сама вершина
        self.assertEqual(index(VVertex(1, 0, 0)), index(b))
        self.assertEqual(len(index), 4)


class TestVertexIndex(unittest.TestCase):

    def test_numbers_in_order_of_first_use(self):
        index = VertexIndex()
        self.assertEqual([index(v) for v in (C, A, C, Pt(0.0, 1.0, 0.0), B)], [0, 1, 0, 0, 2])
        self.assertEqual(index.vertices, [C, A, B])

    def test_identity_vertices_stay_distinct(self):
        index = VertexIndex()
        v, twin = Vertex(0, 0, 0), Vertex(0, 0, 0)
        self.assertNotEqual(index(v), index(twin))
        self.assertEqual(index(v), 0)

    def test_unhashable_vertices_use_value_equality(self):
        index = VertexIndex()
        self.assertEqual(index(VVertex(1, 2, 3)), 0)
        self.assertEqual(index(VVertex(4, 5, 6)), 1)
        self.assertEqual(index(VVertex(1, 2, 3)), 0)
        self.assertEqual(index.edge_key(VVertex(4, 5, 6), VVertex(1, 2, 3)), (0, 1))


if __name__ == "__main__":
    unittest.main()
