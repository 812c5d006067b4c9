"""And-inverter graph: signals, AND nodes and the graph with structural hashing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Signal:
    """A reference to a graph variable, possibly complemented.

    Index 0 is the constant: ``Signal(0, False)`` is 0 and ``Signal(0, True)`` is 1.
    """

    index: int
    inverted: bool = False

    def invert(self) -> Signal:
        """Return the complemented signal."""
        return Signal(self.index, not self.inverted)


@dataclass(frozen=True)
class AndNode:
    """A two-input AND gate."""

    left_signal: Signal
    right_signal: Signal


@dataclass
class AIG:
    """An and-inverter graph.

    ``compute_table`` maps an ordered pair of fanins to the signal of the node
    that computes their conjunction; ``node_map`` maps node ids to AND nodes.
    """

    compute_table: dict[tuple[Signal, Signal], Signal] = field(default_factory=dict)
    node_map: dict[int, AndNode] = field(default_factory=dict)

    def create_and(self, a: Signal, b: Signal, new_index: int) -> Signal:
        """Return a signal for ``a AND b``, creating node ``new_index`` if needed."""
        if a.index > b.index:
            a, b = b, a

        if a.index == 0:
            # constant 0 AND b = 0, constant 1 AND b = b
            return b if a.inverted else Signal(0, False)

        if a.index == b.index:
            # x AND NOT x = 0, x AND x = x
            return a if a.inverted == b.inverted else Signal(0, False)

        existing = self.compute_table.get((a, b))
        if existing is not None:
            return Signal(existing.index, False)

        new_signal = Signal(new_index, False)
        self.compute_table[(a, b)] = new_signal
        self.node_map[new_index] = AndNode(a, b)
        return new_signal

    def _fanins(self, node_id: int) -> Iterator[int]:
        node = self.node_map.get(node_id)
        if node is not None:
            yield node.left_signal.index
            yield node.right_signal.index

    def topological_sort(self) -> list[int]:
        """Return all reachable variable ids so that every fanin precedes its node.

        Every AND node is used as a starting point, so nodes that no other node
        reaches are included too. Inputs and the constant appear in the order too.
        """
        visited: set[int] = set()
        order: list[int] = []

        for root in self.node_map:
            if root in visited:
                continue
            visited.add(root)
            stack = [(root, self._fanins(root))]
            while stack:
                node_id, children = stack[-1]
                child = next(children, None)
                if child is None:
                    stack.pop()
                    order.append(node_id)
                elif child not in visited:
                    visited.add(child)
                    stack.append((child, self._fanins(child)))

        return order