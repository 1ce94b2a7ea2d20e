import pytest

from graphalgo.vertex import EdgeTo, Vertex


def _vertex(*neighbors):
    """Build a vertex; each neighbor is a number or a (number, weight) pair."""
    v = Vertex()
    for neighbor in neighbors:
        if isinstance(neighbor, tuple):
            v.add_neighbor(*neighbor)
        else:
            v.add_neighbor(neighbor)
    return v


def test_add_neighbors():
    v = _vertex(1, 2)
    assert len(v) == 2
    assert v.neighbors()[1].vertex == 2
    with pytest.raises(ValueError):
        v.add_neighbor(-1)
    assert any(edge.vertex == 2 for edge in v)
    for n in range(3, 8):
        v.add_neighbor(n)
    assert len(v) == 7
    assert v.neighbors()[6].vertex == 7


def test_weights():
    v = _vertex((1, 3))
    assert v.is_neighbor(1)
    v.add_neighbor(2)
    assert (v.weight_of(1), v.weight_of(2)) == (3, 1)
    v.set_weight(2, 3)
    assert v.weight_of(2) == 3


def test_readd_without_weight_keeps_weight():
    v = _vertex((1, 9), 1)
    assert v.weight_of(1) == 9
    v.add_neighbor(1, 4)
    assert v.weight_of(1) == 4
    assert len(v) == 1


@pytest.mark.parametrize("neighbors, removed", [((1,), 1), ((2, 2), 2)])
def test_deleting(neighbors, removed):
    v = _vertex(*neighbors)
    v.del_neighbor(removed)
    assert not v.is_neighbor(removed)
    assert len(v) == 0


def test_delete_moves_last_into_place():
    v = _vertex(1, 2, 3, 4)
    v.del_neighbor(2)
    assert [e.vertex for e in v] == [1, 4, 3]


def test_to_string():
    v = _vertex(1, 1, 2)
    v.del_neighbor(2)
    v.add_neighbor(3, 4)
    assert str(v) == "v-1,w-1;v-3,w-4"


def test_neighbors_are_edges():
    assert _vertex((5, 2)).neighbors() == (EdgeTo(5, 2),)


@pytest.mark.parametrize(
    "call",
    [lambda v: v.del_neighbor(1), lambda v: v.weight_of(1), lambda v: v.set_weight(1, 2)],
)
def test_exceptions(call):
    with pytest.raises(ValueError):
        call(Vertex())