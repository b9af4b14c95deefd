from urllib.parse import unquote

from dsalgo.graph import (
    INF,
    SPARSE_TEST_GRAPH,
    TEST_GRAPH,
    Hop,
    graph_to_dot,
    graph_to_sparse,
    percent_encode,
    print_graph,
)


def test_dense_test_graph_converts_to_sparse_test_graph():
    assert graph_to_sparse(TEST_GRAPH) == SPARSE_TEST_GRAPH


def test_graph_to_sparse_skips_infinite_weights():
    assert graph_to_sparse([[INF, 2], [INF, INF]]) == [[Hop(2, 1)], []]


def test_hop_orders_by_weight_only():
    hops = [Hop(7, 0), Hop(1, 9), Hop(4, 3)]
    assert [hop.weight for hop in sorted(hops)] == [1, 4, 7]
    assert Hop(1, 5) < Hop(2, 0)
    assert not Hop(2, 0) < Hop(2, 1)


def test_hop_text():
    assert str(Hop(4.0, 1)) == "(4,1)"


def test_dot_structure():
    dot = graph_to_dot(SPARSE_TEST_GRAPH)
    lines = dot.splitlines()
    assert lines[0] == "digraph G {"
    assert lines[-1] == "}"
    assert dot.endswith("}\n")
    assert "    0 -> 1 [label= 4];" in lines
    assert "    6 -> 8 [label= 6];" in lines
    assert len(lines) == sum(len(row) for row in SPARSE_TEST_GRAPH) + 2


def test_dot_same_for_dense_and_sparse():
    assert graph_to_dot(TEST_GRAPH) == graph_to_dot(SPARSE_TEST_GRAPH)


def test_percent_encode():
    assert percent_encode("A") == "%41"
    text = graph_to_dot(SPARSE_TEST_GRAPH)
    encoded = percent_encode(text)
    assert len(encoded) == 3 * len(text)
    assert unquote(encoded) == text


def test_print_graph_plain(capsys):
    print_graph(TEST_GRAPH)
    assert capsys.readouterr().out == graph_to_dot(TEST_GRAPH) + "\n"


def test_print_graph_as_url(capsys):
    print_graph(SPARSE_TEST_GRAPH, as_url=True)
    out = capsys.readouterr().out
    assert out == "#" + percent_encode(graph_to_dot(SPARSE_TEST_GRAPH)) + "\n"