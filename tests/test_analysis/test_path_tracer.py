# tests/test_analysis/test_path_tracer.py
import pytest

from cgp_core.analysis import PathTracer, PathTraceError, build_dependency_graph
from tests.conftest import CHAIN_CGP, GRID_CGP, make_parsed


def test_dependency_graph_shape(parser):
    graph = build_dependency_graph(parser.parse(GRID_CGP))
    kinds = {node: data["kind"] for node, data in graph.nodes(data=True)}
    assert kinds == {
        0: "input", 1: "input", 2: "input",
        3: "node", 4: "node", 5: "node", 6: "node",
        "output-0": "output", "output-1": "output",
    }
    assert set(graph.edges()) == {
        (0, 3), (1, 3), (1, 4), (2, 4), (3, 5), (4, 5), (0, 6), (2, 6),
        (5, "output-0"), (2, "output-1"),
    }


def test_dependency_graph_skips_dangling_references():
    parsed = make_parsed((2, 1, 1, 3, 2, 2, 4), {4: (0, (3, 0))}, [4])
    graph = build_dependency_graph(parsed)
    assert 3 not in graph
    assert set(graph.predecessors(4)) == {0}


def test_trace_from_output(parser):
    highlight = PathTracer(parser.parse(CHAIN_CGP)).trace("output-1")
    assert highlight.nodes == {"output-1", "3", "2", "1", "0"}
    assert highlight.edges == {"0->2", "1->2", "2->3", "1->3", "3->output-1"}


def test_trace_from_node_accepts_string_index(parser):
    tracer = PathTracer(parser.parse(GRID_CGP))
    highlight = tracer.trace("5")
    assert highlight == tracer.trace(5)
    assert highlight.nodes == {"5", "3", "4", "0", "1", "2"}
    assert "5->output-0" not in highlight.edges


def test_trace_from_primary_input_is_only_the_input(parser):
    highlight = PathTracer(parser.parse(GRID_CGP)).trace(1)
    assert highlight.nodes == {"1"}
    assert highlight.edges == frozenset()


@pytest.mark.parametrize("key", [99, "output-7", "nonsense"])
def test_unknown_element(parser, key):
    with pytest.raises(PathTraceError) as excinfo:
        PathTracer(parser.parse(GRID_CGP)).trace(key)
    assert excinfo.value.node_key == str(key)
    assert "does not exist" in str(excinfo.value)


def test_dependency_graph_records_dangling_references():
    parsed = make_parsed((2, 1, 1, 3, 2, 2, 4), {2: (0, (0, 1)), 4: (0, (3, 3))}, [4])
    graph = build_dependency_graph(parsed)
    assert graph.nodes[4]["dangling"] == (3,)
    assert graph.nodes[2]["dangling"] == ()
