# src/cgp_core/analysis/delays.py
import logging
from typing import Dict, Optional

import networkx as nx

from ..data_structures import ParsedCgp
from .exceptions import DelayCalculationError
from .graph import INPUT_KIND, NODE_KIND, build_dependency_graph
from .results import DelayMap

logger = logging.getLogger(__name__)


class DelayCalculator:
    """
    Computes each node's delay: the longest chain of defined nodes between a
    primary input and that node.

    delay(input) = 0
    delay(node)  = max over inputs r of (0 if r is a primary input else delay(r) + 1)
    delay(output i) = delay(source) + 1, with primary-input sources counting as 0

    Delays are filled in topological order of the dependency graph, so every
    source is resolved before its consumers.
    """

    def __init__(self, parsed: ParsedCgp, log: Optional[logging.Logger] = None):
        self.parsed = parsed
        self._log = log or logger

    def calculate(self) -> DelayMap:
        graph = build_dependency_graph(self.parsed)
        try:
            evaluation_order = list(nx.topological_sort(graph))
        except nx.NetworkXUnfeasible:
            cycle = [u for u, _ in nx.find_cycle(graph)]
            raise DelayCalculationError(
                node_index=cycle[0],
                details=f"Node definitions form a cycle: {' -> '.join(str(n) for n in cycle + cycle[:1])}.",
            )

        delays: Dict[int, int] = {}
        for element in evaluation_order:
            kind = graph.nodes[element]["kind"]
            if kind == INPUT_KIND:
                delays[element] = 0
            elif kind == NODE_KIND:
                delays[element] = self._node_delay(graph, element, delays)

        output_delays: Dict[int, int] = {}
        for position, source in enumerate(self.parsed.output_node_indices):
            source_delay = 0 if source < self.parsed.config.inputs else delays.get(source, 0)
            output_delays[position] = source_delay + 1

        return DelayMap(node_delays=delays, output_delays=output_delays)

    def _node_delay(self, graph: nx.DiGraph, index: int, delays: Dict[int, int]) -> int:
        stages = [
            0 if graph.nodes[source]["kind"] == INPUT_KIND else delays[source] + 1
            for source in graph.predecessors(index)
        ]
        for reference in graph.nodes[index]["dangling"]:
            self._log.warning(f"Node {index} connects to undefined node index {reference}; counting it as delay 0.")
            stages.append(1)
        return max(stages, default=0)


def calculate_node_delays(parsed: ParsedCgp) -> DelayMap:
    """Convenience wrapper around DelayCalculator."""
    return DelayCalculator(parsed).calculate()
