# src/cgp_core/analysis/active_nodes.py
import logging
from typing import FrozenSet, List, Mapping, Optional, Sequence, Set

import networkx as nx

from ..constants import output_key
from ..data_structures import CgpConfig, NodeDefinition, ParsedCgp
from ..validation.issue_codes import CgpIssueCode
from ..validation.issues import ValidationIssue, ValidationIssueLevel
from .graph import NODE_KIND, build_dependency_graph
from .results import ActiveNodeResults

logger = logging.getLogger(__name__)


class ActiveNodeAnalyzer:
    """
    Finds the defined nodes that transitively feed at least one output.

    The active set is the union of the defined-node ancestors of every output
    terminal in the dependency graph. Primary inputs and output terminals are
    never members of the result. An input reference to an index with no
    definition has no edge, so its branch is not followed; for active nodes it
    is reported as a warning.
    """

    def __init__(
        self,
        config: Optional[CgpConfig],
        node_definitions: Optional[Mapping[int, NodeDefinition]],
        output_node_indices: Optional[Sequence[int]],
        log: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.node_definitions = node_definitions
        self.output_node_indices = output_node_indices
        self._log = log or logger

    @classmethod
    def from_parsed(cls, parsed: ParsedCgp, log: Optional[logging.Logger] = None) -> "ActiveNodeAnalyzer":
        return cls(parsed.config, parsed.node_definitions, parsed.output_node_indices, log=log)

    def analyze(self) -> ActiveNodeResults:
        if not self.config or self.node_definitions is None or not self.output_node_indices:
            return ActiveNodeResults(active_nodes=frozenset())

        graph = build_dependency_graph(
            ParsedCgp(self.config, self.node_definitions, tuple(self.output_node_indices))
        )

        active: Set[int] = set()
        for position in range(len(self.output_node_indices)):
            active.update(
                member for member in nx.ancestors(graph, output_key(position))
                if graph.nodes[member]["kind"] == NODE_KIND
            )

        issues: List[ValidationIssue] = []
        for index in sorted(active):
            for reference in graph.nodes[index]["dangling"]:
                message = CgpIssueCode.DANGLING_REFERENCE.format_detail(index=index, reference=reference)
                self._log.warning(message)
                issues.append(ValidationIssue(
                    level=ValidationIssueLevel.WARNING,
                    code=CgpIssueCode.DANGLING_REFERENCE.code,
                    message=message,
                    node_index=index,
                    details={'index': index, 'reference': reference},
                ))

        self._log.debug(f"Active node indices calculated: {sorted(active)}")
        return ActiveNodeResults(active_nodes=frozenset(active), issues=issues)


def find_active_nodes(
    config: Optional[CgpConfig],
    node_definitions: Optional[Mapping[int, NodeDefinition]],
    output_node_indices: Optional[Sequence[int]],
) -> FrozenSet[int]:
    """Returns the set of active node indices; empty when any argument is absent."""
    return ActiveNodeAnalyzer(config, node_definitions, output_node_indices).analyze().active_nodes
