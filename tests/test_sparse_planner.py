import pytest

from skelgraph.graph import SkeletonEdge, SkeletonVertex, SparseSkeletonGraph
from skelgraph.sparse_planner import SparseGraphPlanner


def _line_graph(n=4):
    graph = SparseSkeletonGraph()
    ids = [graph.add_vertex(SkeletonVertex(point=(float(i), 0.0, 0.0))) for i in range(n)]
    for a, b in zip(ids, ids[1:]):
        graph.add_edge(SkeletonEdge(start_vertex=a, end_vertex=b))
    return graph, ids


def _planner(graph):
    planner = SparseGraphPlanner(graph)
    planner.setup()
    return planner


def test_closest_vertices_ordered_by_distance():
    graph, ids = _line_graph()
    planner = _planner(graph)
    result = planner.closest_vertices((2.9, 0.0, 0.0), 2)
    assert result == [ids[3], ids[2]]


def test_closest_vertices_limited_by_graph_size():
    graph, ids = _line_graph(3)
    planner = _planner(graph)
    assert sorted(planner.closest_vertices((0.0, 0.0, 0.0), 10)) == sorted(ids)


def test_closest_vertices_requires_setup():
    graph, _ = _line_graph()
    with pytest.raises(RuntimeError):
        SparseGraphPlanner(graph).closest_vertices((0.0, 0.0, 0.0), 1)


def test_setup_requires_graph():
    with pytest.raises(ValueError):
        SparseGraphPlanner().setup()


def test_path_between_vertices_on_line():
    graph, ids = _line_graph()
    planner = _planner(graph)
    assert planner.path_between_vertices(ids[0], ids[3]) == ids


def test_path_to_same_vertex():
    graph, ids = _line_graph()
    planner = _planner(graph)
    assert planner.path_between_vertices(ids[1], ids[1]) == [ids[1]]


def test_path_follows_edges():
    graph = SparseSkeletonGraph()
    a = graph.add_vertex(SkeletonVertex(point=(0.0, 0.0, 0.0)))
    b = graph.add_vertex(SkeletonVertex(point=(1.0, 1.0, 0.0)))
    c = graph.add_vertex(SkeletonVertex(point=(2.0, 0.0, 0.0)))
    d = graph.add_vertex(SkeletonVertex(point=(1.0, -1.0, 0.0)))
    for s, e in ((a, b), (b, c), (a, d), (d, c)):
        graph.add_edge(SkeletonEdge(start_vertex=s, end_vertex=e))
    planner = _planner(graph)
    path = planner.path_between_vertices(a, c)
    assert path[0] == a and path[-1] == c
    for s, e in zip(path, path[1:]):
        assert graph.are_vertices_directly_connected(s, e)


def test_disconnected_vertices_give_none():
    graph, ids = _line_graph(2)
    lone = graph.add_vertex(SkeletonVertex(point=(10.0, 0.0, 0.0)))
    planner = _planner(graph)
    assert planner.path_between_vertices(ids[0], lone) is None


def test_path_returns_vertex_coordinates():
    graph, ids = _line_graph()
    planner = _planner(graph)
    coords = planner.path((0.1, 0.2, 0.0), (3.2, -0.1, 0.0))
    assert coords == [graph.vertex(i).point for i in ids]


def test_path_on_empty_graph_raises():
    planner = _planner(SparseSkeletonGraph())
    with pytest.raises(ValueError):
        planner.path((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))