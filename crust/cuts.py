"""Enumeration of k-feasible cuts in an and-inverter graph."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from crust.aig import AIG, AndNode, Signal

Cut = frozenset[int]


def filter_minimal_cuts(all_cuts: Iterable[Iterable[int]]) -> list[Cut]:
    """Keep only cuts that no other cut strictly contains, without duplicates.

    A cut ``c1`` dominates ``c2`` when ``c1`` is a proper subset of ``c2``.
    The order of first appearance is preserved.
    """
    cuts = [frozenset(cut) for cut in all_cuts]
    result: list[Cut] = []
    for cut in cuts:
        if any(other < cut for other in cuts):
            continue
        if cut not in result:
            result.append(cut)
    return result


class CutEnumerator:
    """Computes the k-feasible cuts of the nodes of an AIG.

    ``cuts`` maps each processed variable id to its list of cuts, and
    ``topo_order`` holds the order in which the variables were processed.
    """

    def __init__(self, aig: AIG) -> None:
        self.aig = aig
        self.cuts: dict[int, list[Cut]] = {}
        self.topo_order: list[int] = []

    def _node_cuts(self, node: AndNode, cut_size: int) -> list[Cut]:
        left = self.cuts[node.left_signal.index]
        right = self.cuts[node.right_signal.index]
        unions = (cut_l | cut_r for cut_l in left for cut_r in right)
        return [union for union in unions if len(union) <= cut_size]

    def _process(self, nodes: Iterable[int], cut_size: int) -> None:
        for node_idx in nodes:
            node = self.aig.node_map.get(node_idx)
            if node is None:
                self.cuts[node_idx] = [frozenset({node_idx})]
                continue
            minimal = filter_minimal_cuts(self._node_cuts(node, cut_size))
            # the trivial cut always comes last
            minimal.append(frozenset({node_idx}))
            self.cuts[node_idx] = minimal

    def enumerate_cuts(self, cut_size: int, inputs: Sequence[Signal]) -> dict[int, list[Cut]]:
        """Compute the minimal cuts of at most ``cut_size`` leaves for every node."""
        self.cuts.clear()
        self.topo_order = self.aig.topological_sort()
        if not self.topo_order:
            self.topo_order = [signal.index for signal in inputs]
        self._process(self.topo_order, cut_size)
        return self.cuts

    def calculate_cuts_single_node(
        self, cut_size: int, inputs: Sequence[Signal], target_node: int
    ) -> list[Cut]:
        """Compute the minimal cuts of ``target_node`` only.

        Returns an empty list, with a warning on stderr, when the node is
        neither an input nor part of the graph.
        """
        self.cuts.clear()
        self.topo_order = self.aig.topological_sort()

        is_input = any(signal.index == target_node for signal in inputs)
        if not is_input and target_node not in self.topo_order:
            print(
                f"Warning: target_node {target_node} not found in AIG or inputs.",
                file=sys.stderr,
            )
            return []

        if target_node in self.topo_order:
            position = self.topo_order.index(target_node)
            relevant = self.topo_order[: position + 1]
        else:
            relevant = [target_node]

        self._process(relevant, cut_size)
        return list(self.cuts.get(target_node, []))