import numpy as np
import pytest

from policygraph.errors import (
    DimensionMismatchError,
    NegativeProbabilityError,
    ProbabilityRangeError,
    RootTransitionShapeError,
)
from policygraph.graph.graph_builder import (
    LinearGraph,
    MarkovianGraph,
    linear_graph,
    markovian_graph,
)
from policygraph.graph.graph_store import validate_graph


@pytest.mark.parametrize("stages", [0, 1, 5])
def test_linear_graph_is_a_chain(stages):
    graph = linear_graph(stages)

    assert graph.root == 0
    assert len(graph.nodes) == stages + 1
    for t in range(stages):
        assert graph.nodes[t] == [(t + 1, 1.0)]
    assert graph.nodes[stages] == []
    validate_graph(graph)


def test_linear_graph_rejects_negative_stages():
    with pytest.raises(ValueError):
        linear_graph(-1)


def test_aliases():
    assert LinearGraph is linear_graph
    assert MarkovianGraph is markovian_graph


def test_markovian_keyword_form_scenario():
    graph = markovian_graph(
        stages=2,
        transition_matrix=[[0.5, 0.5]],
        root_node_transition=[1.0],
    )

    assert graph.root == (0, 1)
    assert set(graph.nodes) == {(0, 1), (1, 1), (2, 1), (2, 2)}
    assert graph.nodes[(0, 1)] == [((1, 1), 1.0)]
    assert graph.nodes[(1, 1)] == [((2, 1), 0.5), ((2, 2), 0.5)]
    assert graph.nodes[(2, 1)] == []


def test_markovian_zero_entries_are_sparsified():
    matrices = [
        np.array([[0.4, 0.6]]),
        np.array([[1.0, 0.0], [0.25, 0.75]]),
    ]

    graph = markovian_graph(matrices)

    edges = {
        (parent, child): probability
        for parent, children in graph.nodes.items()
        for child, probability in children
    }
    expected = {
        ((0, 1), (1, 1)): 0.4,
        ((0, 1), (1, 2)): 0.6,
        ((1, 1), (2, 1)): 1.0,
        ((1, 2), (2, 1)): 0.25,
        ((1, 2), (2, 2)): 0.75,
    }
    assert edges == expected
    assert graph.edge_count() == len(expected)


def test_markovian_edge_iff_positive_entry():
    rng = np.random.default_rng(7)
    raw = rng.random((3, 3))
    raw[raw < 0.4] = 0.0
    matrix = 0.9 * raw / np.maximum(raw.sum(axis=1, keepdims=True), 1.0)
    root_row = np.array([[0.2, 0.3, 0.5]])

    graph = markovian_graph([root_row, matrix, matrix])

    for stage in (2, 3):
        for row in range(3):
            children = dict(graph.nodes[(stage - 1, row + 1)])
            for column in range(3):
                assert ((stage, column + 1) in children) == (matrix[row, column] > 0)


def test_markovian_homogeneous_chain_has_one_node_per_state():
    graph = markovian_graph(
        stages=3,
        transition_matrix=[[0.8, 0.2], [0.3, 0.7]],
        root_node_transition=[0.5, 0.5],
    )

    assert len(graph.nodes) == 1 + 3 * 2
    assert graph.nodes[(2, 2)] == [((3, 1), 0.3), ((3, 2), 0.7)]
    validate_graph(graph)


def test_markovian_default_is_single_stage():
    graph = markovian_graph()

    assert graph.nodes == {(0, 1): [((1, 1), 1.0)], (1, 1): []}


def test_markovian_first_matrix_must_have_one_row():
    with pytest.raises(RootTransitionShapeError) as excinfo:
        markovian_graph([[[0.5, 0.5], [0.5, 0.5]]])
    assert excinfo.value.shape == (2, 2)

    with pytest.raises(RootTransitionShapeError):
        markovian_graph([])


def test_markovian_negative_entries():
    with pytest.raises(NegativeProbabilityError) as excinfo:
        markovian_graph([[[1.0]], [[1.5, -0.5]]])
    assert excinfo.value.stage == 2
    assert excinfo.value.column == 2


def test_markovian_row_sums():
    with pytest.raises(ProbabilityRangeError) as excinfo:
        markovian_graph([[[0.7, 0.6]]])
    assert excinfo.value.node == (0, 1)
    assert excinfo.value.total == pytest.approx(1.3)


def test_markovian_dimension_mismatch():
    with pytest.raises(DimensionMismatchError) as excinfo:
        markovian_graph([[[0.5, 0.5]], [[1.0]]])
    assert excinfo.value.stage == 2
    assert excinfo.value.expected == 2


def test_markovian_rows_may_leak_probability():
    graph = markovian_graph([[[0.5]], [[0.9]]])

    assert graph.nodes[(0, 1)] == [((1, 1), 0.5)]
    assert graph.nodes[(1, 1)] == [((2, 1), 0.9)]


def test_markovian_later_matrix_must_be_two_dimensional():
    with pytest.raises(DimensionMismatchError) as excinfo:
        markovian_graph([[[0.5, 0.5]], [0.5, 0.5]])
    assert excinfo.value.stage == 2
    assert excinfo.value.expected is None
    assert excinfo.value.actual == (2,)


def test_markovian_rejects_mixed_forms():
    with pytest.raises(ValueError):
        markovian_graph([[[1.0]]], stages=3)
    with pytest.raises(ValueError):
        markovian_graph([[[1.0]]], root_node_transition=[1.0])
