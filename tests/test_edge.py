import pytest

from vertex_graph import Edge, InvalidArgumentError, Vertex


@pytest.fixture
def vertices():
    return Vertex("A"), Vertex("B")


def test_accessors(vertices):
    a, b = vertices
    edge = Edge(a, b, "knows", {"since": 2020})

    assert edge.source is a
    assert edge.target is b
    assert edge.edge_type == "knows"
    assert edge.data == {"since": 2020}


def test_type_and_data_default_to_none(vertices):
    edge = Edge(*vertices)
    assert edge.edge_type is None
    assert edge.data is None


@pytest.mark.parametrize("bad", [None, "A", 1, {"id": "A"}])
def test_non_vertex_endpoints_are_rejected(vertices, bad):
    a, _ = vertices
    with pytest.raises(InvalidArgumentError):
        Edge(bad, a)
    with pytest.raises(InvalidArgumentError):
        Edge(a, bad)


def test_non_string_type_is_rejected(vertices):
    with pytest.raises(InvalidArgumentError):
        Edge(*vertices, 123)


def test_data_can_be_replaced(vertices):
    edge = Edge(*vertices, data=1)
    edge.data = 2
    assert edge.data == 2


def test_endpoints_and_type_are_read_only(vertices):
    a, b = vertices
    edge = Edge(a, b, "knows")
    with pytest.raises(AttributeError):
        edge.source = b
    with pytest.raises(AttributeError):
        edge.target = a
    with pytest.raises(AttributeError):
        edge.edge_type = "likes"


def test_reversed_is_a_new_edge(vertices):
    a, b = vertices
    payload = {"w": 1}
    edge = Edge(a, b, "knows", payload)

    reverse = edge.reversed()

    assert reverse is not edge
    assert reverse.source is b
    assert reverse.target is a
    assert reverse.edge_type == "knows"
    assert reverse.data is payload


def test_repr(vertices):
    assert repr(Edge(*vertices, "knows")) == "Edge(source='A', target='B', edge_type='knows')"
