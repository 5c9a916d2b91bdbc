# src/cgp_core/analysis/graph.py
import logging

import networkx as nx

from ..constants import output_key
from ..data_structures import ParsedCgp

logger = logging.getLogger(__name__)

INPUT_KIND = "input"
NODE_KIND = "node"
OUTPUT_KIND = "output"


def build_dependency_graph(parsed: ParsedCgp) -> nx.DiGraph:
    """
    Builds the source -> consumer graph of a parsed circuit.

    Graph nodes are primary-input indices (kind "input"), defined-node indices
    (kind "node") and "output-{i}" terminals (kind "output"). References to
    indices with no definition get no edge; each defined node keeps them in
    its "dangling" attribute instead.
    """
    config = parsed.config
    graph = nx.DiGraph()
    graph.add_nodes_from(range(config.inputs), kind=INPUT_KIND)
    graph.add_nodes_from(parsed.node_definitions, kind=NODE_KIND, dangling=())

    for index, node in parsed.node_definitions.items():
        dangling = []
        for reference in node.inputs:
            if reference in graph:
                graph.add_edge(reference, index)
            elif reference not in dangling:
                logger.debug(f"Skipping edge from undefined index {reference} to node {index}.")
                dangling.append(reference)
        graph.nodes[index]["dangling"] = tuple(dangling)

    for position, source in enumerate(parsed.output_node_indices):
        terminal = output_key(position)
        graph.add_node(terminal, kind=OUTPUT_KIND)
        if source in graph:
            graph.add_edge(source, terminal)
    return graph
