# tests/conftest.py
from types import MappingProxyType

import pytest

from cgp_core import CgpConfig, CgpParser, CgpViewPipeline, NodeDefinition, ParsedCgp

# Two nodes; the output depends only on node 3.
SIMPLE_CGP = "{2,1,1,2,2,2,4}([2]0,1,0)([3]0,1,1)(3)"

# A single-row chain 2 -> 3 -> 4 -> 5 with outputs (5, 3).
CHAIN_CGP = "{2,2,1,4,2,2,4}([2]0,1,0)([3]2,1,1)([4]3,2,2)([5]4,0,3)(5,3)"

# Two rows, two columns; node 6 is unused and output 1 is primary input 2.
GRID_CGP = "{3,2,2,2,2,1,2}([3]0,1,0)([4]1,2,1)([5]3,4,0)([6]0,2,1)(5,2)"


@pytest.fixture
def parser():
    return CgpParser()


@pytest.fixture
def pipeline():
    return CgpViewPipeline()


def make_parsed(config_values, nodes, outputs) -> ParsedCgp:
    """
    Builds a ParsedCgp directly, bypassing the parser's validation.
    config_values: the seven header integers.
    nodes: {index: (func_id, (inputs...))}
    """
    config = CgpConfig(*config_values)
    definitions = {
        index: NodeDefinition(index=index, func_id=func_id, inputs=tuple(inputs))
        for index, (func_id, inputs) in nodes.items()
    }
    return ParsedCgp(
        config=config,
        node_definitions=MappingProxyType(definitions),
        output_node_indices=tuple(outputs),
    )
