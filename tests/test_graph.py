"""
Tests for Graph mutation and query operations
"""

import pytest

from floorgraph import Edge, Graph, VertexAlreadyExists, VertexDoesNotExist


class TestVertices:
    """Tests for vertex insertion and lookup"""

    def test_insertion_order_preserved(self, empty_graph):
        payloads = [5, 3, 9, 1]
        for data in payloads:
            empty_graph.add_vertex(data)

        for data in payloads:
            assert empty_graph.vertex_exist(data)
        assert empty_graph.get_vertices() == payloads
        assert list(empty_graph) == payloads
        assert len(empty_graph) == 4

    def test_duplicate_vertex_rejected(self, path_graph):
        before = path_graph.get_vertices()
        with pytest.raises(VertexAlreadyExists) as excinfo:
            path_graph.add_vertex(2)
        assert excinfo.value.vertex == 2
        assert path_graph.get_vertices() == before

    def test_vertex_exist_on_missing(self, empty_graph):
        assert not empty_graph.vertex_exist(1)
        assert 1 not in empty_graph
        assert not empty_graph.vertex_exist([1, 2])

    def test_get_vertices_is_a_snapshot(self, path_graph):
        vertices = path_graph.get_vertices()
        vertices.append(42)
        vertices.remove(1)
        assert path_graph.get_vertices() == [1, 2, 3]

    def test_new_vertex_has_no_edges(self, empty_graph):
        empty_graph.add_vertex("a")
        assert empty_graph.get_edges_of_vertex("a") == []
        assert empty_graph.degree("a") == 0

    def test_tuple_payloads(self, empty_graph):
        empty_graph.add_vertex((0, 0))
        empty_graph.add_vertex((0, 1))
        empty_graph.add_edge((0, 0), (0, 1))
        assert empty_graph.neighbors((0, 0)) == [(0, 1)]


class TestEdges:
    """Tests for edge insertion and adjacency queries"""

    def test_edge_stored_on_both_endpoints(self, empty_graph):
        empty_graph.add_vertex("a")
        empty_graph.add_vertex("b")
        empty_graph.add_edge("a", "b")

        assert Edge("a", "b") in empty_graph.get_edges_of_vertex("a")
        assert Edge("a", "b") in empty_graph.get_edges_of_vertex("b")
        assert Edge("b", "a") in empty_graph.get_edges_of_vertex("b")

    def test_add_edge_idempotent(self, path_graph):
        path_graph.add_edge(1, 2)
        path_graph.add_edge(2, 1)

        assert path_graph.get_edges_of_vertex(1) == [Edge(1, 2)]
        assert path_graph.get_edges_of_vertex(2) == [Edge(1, 2), Edge(2, 3)]
        assert path_graph.edge_count() == 2

    @pytest.mark.parametrize("d1, d2", [(1, 99), (99, 1), (98, 99)])
    def test_add_edge_missing_vertex(self, path_graph, d1, d2):
        before = {data: path_graph.get_edges_of_vertex(data) for data in path_graph}

        with pytest.raises(VertexDoesNotExist):
            path_graph.add_edge(d1, d2)

        after = {data: path_graph.get_edges_of_vertex(data) for data in path_graph}
        assert after == before
        assert path_graph.edge_count() == 2

    def test_self_loop_stored_once(self, empty_graph):
        empty_graph.add_vertex(1)
        empty_graph.add_edge(1, 1)
        empty_graph.add_edge(1, 1)

        assert empty_graph.get_edges_of_vertex(1) == [Edge(1, 1)]
        assert empty_graph.degree(1) == 1
        assert empty_graph.neighbors(1) == [1]
        assert empty_graph.edge_count() == 1

    def test_edges_in_insertion_order(self):
        graph = Graph()
        for data in (1, 2, 3):
            graph.add_vertex(data)
        graph.add_edge(1, 2)
        graph.add_edge(1, 3)

        assert graph.get_edges_of_vertex(1) == [Edge(1, 2), Edge(1, 3)]
        assert graph.get_edges_of_vertex(3) == [Edge(1, 3)]
        assert graph.neighbors(1) == [2, 3]

    def test_edge_factory(self):
        graph = Graph()
        for data in (1, 2, 3):
            graph.add_vertex(data)
        graph.add_edge(1, 2)
        graph.add_edge(1, 3)

        pairs = graph.get_edges_of_vertex(1, edge_factory=lambda a, b: (a, b))
        assert pairs == [(1, 2), (1, 3)]

    def test_get_edges_of_vertex_is_a_snapshot(self, path_graph):
        edges = path_graph.get_edges_of_vertex(2)
        edges.clear()
        assert len(path_graph.get_edges_of_vertex(2)) == 2

    def test_get_edges_of_missing_vertex(self, empty_graph, path_graph):
        with pytest.raises(VertexDoesNotExist):
            empty_graph.get_edges_of_vertex(1)
        with pytest.raises(VertexDoesNotExist):
            path_graph.get_edges_of_vertex(4)

    def test_has_edge(self, path_graph):
        assert path_graph.has_edge(1, 2)
        assert path_graph.has_edge(2, 1)
        assert not path_graph.has_edge(1, 3)
        assert not path_graph.has_edge(1, 99)

    def test_degree_and_neighbors_of_missing_vertex(self, empty_graph):
        with pytest.raises(VertexDoesNotExist):
            empty_graph.degree(1)
        with pytest.raises(VertexDoesNotExist):
            empty_graph.neighbors(1)


class TestAllEdges:
    """Tests for get_all_edges"""

    def test_each_edge_reported_once(self, path_graph):
        path_graph.add_edge(2, 2)
        assert path_graph.get_all_edges() == [Edge(1, 2), Edge(2, 3), Edge(2, 2)]
        assert path_graph.edge_count() == 3

    def test_empty_graph(self, empty_graph):
        assert empty_graph.get_all_edges() == []
        assert empty_graph.edge_count() == 0

    def test_edge_factory(self, path_graph):
        pairs = path_graph.get_all_edges(edge_factory=lambda a, b: frozenset((a, b)))
        assert pairs == [frozenset((1, 2)), frozenset((2, 3))]

    def test_repr(self, path_graph):
        assert repr(path_graph) == "Graph(vertices=3, edges=2)"
