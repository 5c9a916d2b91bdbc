# src/cgp_core/data_structures.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CgpConfig:
    """
    The seven-integer configuration header of a CGP circuit.

    Primary inputs occupy indices `[0, inputs)`; grid nodes follow them, filled
    column by column, so `start_index` is always equal to `inputs`.
    """
    inputs: int
    outputs: int
    rows: int
    cols: int
    arity: int
    lback: int
    func_set_size: int

    @property
    def start_index(self) -> int:
        return self.inputs

    @property
    def max_node_index(self) -> int:
        return self.start_index + self.rows * self.cols - 1

    def is_primary_input(self, reference: int) -> bool:
        return 0 <= reference < self.inputs

    def is_grid_index(self, index: int) -> bool:
        return self.start_index <= index <= self.max_node_index

    def column_of(self, index: int) -> int:
        """Grid column of a node index. Only meaningful for grid indices."""
        return (index - self.start_index) // self.rows

    def row_of(self, index: int) -> int:
        """Grid row of a node index. Only meaningful for grid indices."""
        return (index - self.start_index) % self.rows

    def to_dict(self) -> Dict[str, int]:
        return {
            "inputs": self.inputs,
            "outputs": self.outputs,
            "rows": self.rows,
            "cols": self.cols,
            "arity": self.arity,
            "lback": self.lback,
            "funcSetSize": self.func_set_size,
            "startIndex": self.start_index,
        }


@dataclass(frozen=True)
class NodeDefinition:
    """A defined grid cell: its index, the function it applies and its ordered source references."""
    index: int
    func_id: int
    inputs: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "funcId": self.func_id, "inputs": list(self.inputs)}


@dataclass(frozen=True)
class ParsedCgp:
    """
    The validated structure produced by CgpParser.

    `node_definitions` is a read-only mapping (insertion order follows the order
    of appearance in the source text). Every downstream analysis treats this
    object as immutable.
    """
    config: CgpConfig
    node_definitions: Mapping[int, NodeDefinition]
    output_node_indices: Tuple[int, ...]

    def is_valid_source(self, reference: int) -> bool:
        """True for a primary input or a recorded node index."""
        return self.config.is_primary_input(reference) or reference in self.node_definitions
