import pytest

from crust.aig import AIG, AndNode, Signal

ZERO = Signal(0, False)
ONE = Signal(0, True)


def test_invert_flips_only_polarity():
    s = Signal(7, False)
    assert s.invert() == Signal(7, True)
    assert s.invert().invert() == s


def test_signals_are_hashable_and_equal_by_value():
    assert {Signal(3, True), Signal(3, True)} == {Signal(3, True)}


@pytest.mark.parametrize("other", [Signal(1), Signal(2, True)])
def test_constant_zero_and_anything_is_zero(other):
    aig = AIG()
    assert aig.create_and(ZERO, other, 5) == ZERO
    assert aig.create_and(other, ZERO, 5) == ZERO
    assert aig.node_map == {}


@pytest.mark.parametrize("other", [Signal(1), Signal(2, True)])
def test_constant_one_and_b_is_b(other):
    aig = AIG()
    assert aig.create_and(ONE, other, 5) == other
    assert aig.create_and(other, ONE, 5) == other
    assert aig.node_map == {}


def test_contradiction_is_zero():
    aig = AIG()
    assert aig.create_and(Signal(1), Signal(1, True), 4) == ZERO
    assert aig.node_map == {}


def test_idempotence():
    aig = AIG()
    assert aig.create_and(Signal(2, True), Signal(2, True), 4) == Signal(2, True)
    assert aig.node_map == {}


def test_new_node_has_ordered_fanins():
    aig = AIG()
    result = aig.create_and(Signal(2, True), Signal(1), 3)
    assert result == Signal(3, False)
    assert aig.node_map == {3: AndNode(Signal(1), Signal(2, True))}
    assert aig.compute_table == {(Signal(1), Signal(2, True)): Signal(3)}


def test_structural_hashing_reuses_node():
    aig = AIG()
    first = aig.create_and(Signal(1), Signal(2), 3)
    second = aig.create_and(Signal(2), Signal(1), 4)
    assert second == first
    assert list(aig.node_map) == [3]


def test_topological_sort_worked_example():
    aig = AIG()
    aig.create_and(Signal(1), Signal(2), 4)
    aig.create_and(Signal(4), Signal(3), 5)
    order = aig.topological_sort()
    assert order == [1, 2, 4, 3, 5]


def test_topological_sort_includes_unreached_roots():
    aig = AIG()
    aig.create_and(Signal(1), Signal(2), 3)
    aig.create_and(Signal(1), Signal(3), 4)
    aig.create_and(Signal(2, True), Signal(3), 5)
    order = aig.topological_sort()
    assert set(order) == {1, 2, 3, 4, 5}
    assert len(order) == len(set(order))
    for node_id, node in aig.node_map.items():
        pos = order.index(node_id)
        assert order.index(node.left_signal.index) < pos
        assert order.index(node.right_signal.index) < pos


def test_topological_sort_empty_graph():
    assert AIG().topological_sort() == []


def test_topological_sort_deep_chain():
    aig = AIG()
    previous = Signal(1)
    for index in range(3, 3000):
        previous = aig.create_and(previous, Signal(2), index)
    order = aig.topological_sort()
    assert order[-1] == 2999
    assert len(order) == 2999