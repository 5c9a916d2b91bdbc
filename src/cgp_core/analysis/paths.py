# src/cgp_core/analysis/paths.py
import logging
from typing import Optional, Union

import networkx as nx

from ..constants import OUTPUT_KEY_PREFIX
from ..data_structures import ParsedCgp
from .exceptions import PathTraceError
from .graph import INPUT_KIND, build_dependency_graph
from .results import PathHighlight

logger = logging.getLogger(__name__)

NodeKey = Union[int, str]


class PathTracer:
    """Traces the backward dependency path of a selected input, node or output terminal."""

    def __init__(self, parsed: ParsedCgp, log: Optional[logging.Logger] = None):
        self.parsed = parsed
        self.graph = build_dependency_graph(parsed)
        self._log = log or logger

    def trace(self, key: NodeKey) -> PathHighlight:
        graph_key = self._normalize_key(key)
        if graph_key not in self.graph:
            raise PathTraceError(node_key=str(key), details=f"Element '{key}' does not exist in this circuit.")

        # A primary input is a leaf: only the input itself is highlighted.
        if self.graph.nodes[graph_key]["kind"] == INPUT_KIND:
            return PathHighlight(nodes=frozenset({str(graph_key)}), edges=frozenset())

        members = nx.ancestors(self.graph, graph_key) | {graph_key}
        edges = frozenset(f"{u}->{v}" for u, v in self.graph.subgraph(members).edges())
        self._log.debug(f"Traced {len(members)} element(s) and {len(edges)} edge(s) back from '{graph_key}'.")
        return PathHighlight(nodes=frozenset(str(n) for n in members), edges=edges)

    @staticmethod
    def _normalize_key(key: NodeKey) -> NodeKey:
        if isinstance(key, str) and not key.startswith(OUTPUT_KEY_PREFIX) and key.isdigit():
            return int(key)
        return key
