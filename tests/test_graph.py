import io

import pytest

from graphalgo.graph import Graph


def _graph(size, *edges):
    graph = Graph(size)
    for edge in edges:
        graph.add_edge(*edge)
    return graph


def test_graph_basic_functionality():
    g = Graph(3)
    assert g.num_vertices() == 3
    assert all(len(g.get(i)) == 0 for i in range(3))

    g.add_edge(0, 1)
    g.add_edge(1, 2, 7)
    assert all(g.get(a).is_neighbor(b) for a, b in [(0, 1), (1, 2), (2, 1)])
    assert (g.get(0).weight_of(1), g.get(2).weight_of(1)) == (1, 7)

    g.remove_edge(1, 2)
    assert not g.get(1).is_neighbor(2)
    assert not g.get(2).is_neighbor(1)


@pytest.mark.parametrize(
    "call, error",
    [
        (lambda g: g.add_edge(0, 4), IndexError),
        (lambda g: g.add_edge(-1, 3), IndexError),
        (lambda g: g.remove_edge(2, -5), IndexError),
        (lambda g: g.remove_edge(2, 0), ValueError),
        (lambda g: g.get(4), IndexError),
        (lambda g: g.get(-1), IndexError),
    ],
)
def test_graph_exceptions(call, error):
    with pytest.raises(error):
        call(Graph(4))


def test_format_and_print():
    g = _graph(3, (0, 1), (1, 2, 7))
    expected = (
        "print graph with 3 vertices:\n"
        "vertex number: v-neighbor number, w-weight of edge; etc.\n"
        "0: v-1,w-1\n"
        "1: v-0,w-1;v-2,w-7\n"
        "2: v-1,w-7\n"
    )
    assert g.format() == expected
    buf = io.StringIO()
    g.print_graph(buf)
    assert buf.getvalue() == expected


def test_format_skips_isolated_vertices():
    lines = _graph(4, (0, 3, 2)).format().splitlines()
    assert lines[2:] == ["0: v-3,w-2", "3: v-0,w-2"]


def test_copy_is_independent():
    g = _graph(3, (0, 1, 4))
    h = g.copy()
    h.add_edge(1, 2)
    h.get(0).set_weight(1, 9)
    assert not g.get(1).is_neighbor(2)
    assert (g.get(0).weight_of(1), h.get(0).weight_of(1)) == (4, 9)
    assert len(h) == 3


def test_readding_edge_updates_weight():
    g = _graph(2, (0, 1, 5), (0, 1))
    assert g.get(0).weight_of(1) == 1
    assert len(g.get(0)) == 1


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)