# src/cgp_core/functions.py
import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Union

from .data_structures import NodeDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunctionInfo:
    """Display information for a function ID."""
    type: str
    description: str
    category: str


DEFAULT_FUNCTION_TYPES: Dict[int, FunctionInfo] = {
    # Arithmetic
    0: FunctionInfo("ADD", "Addition (x + y)", "arithmetic"),
    1: FunctionInfo("SUB", "Subtraction (x - y)", "arithmetic"),
    2: FunctionInfo("MUL", "Multiplication (x * y)", "arithmetic"),
    3: FunctionInfo("DIV", "Protected Division (x / y)", "arithmetic"),
    4: FunctionInfo("SQRT", "Protected Square Root (sqrt(|x|))", "arithmetic"),
    # Trigonometric
    5: FunctionInfo("SIN", "Sine function (sin(x))", "trigonometric"),
    6: FunctionInfo("COS", "Cosine function (cos(x))", "trigonometric"),
    7: FunctionInfo("TAN", "Tangent function (tan(x))", "trigonometric"),
    # Logical
    8: FunctionInfo("AND", "Logical AND", "logical"),
    9: FunctionInfo("OR", "Logical OR", "logical"),
    10: FunctionInfo("XOR", "Logical XOR", "logical"),
    11: FunctionInfo("NOT", "Logical NOT", "logical"),
    # Comparison
    12: FunctionInfo("EQ", "Equal to (x == y)", "comparison"),
    13: FunctionInfo("GT", "Greater than (x > y)", "comparison"),
    14: FunctionInfo("LT", "Less than (x < y)", "comparison"),
    # Conditional
    15: FunctionInfo("IF", "If-then-else", "conditional"),
}


class FunctionCatalog:
    """
    Resolves function IDs to display information.

    Custom labels override only the displayed type; the description and
    category of a known ID are kept. Labels never affect parsed structure.
    """

    def __init__(self, custom_labels: Optional[Mapping[int, str]] = None):
        self.custom_labels: Dict[int, str] = dict(custom_labels or {})

    def get(self, func_id: Union[int, str]) -> FunctionInfo:
        func_id = int(func_id)
        base = DEFAULT_FUNCTION_TYPES.get(func_id)

        if func_id in self.custom_labels:
            description = base.description if base else "Custom function"
            category = base.category if base else "unknown"
            return FunctionInfo(self.custom_labels[func_id], description, category)

        if base is None:
            return FunctionInfo(f"FUNC_{func_id}", "Unknown function", "unknown")
        return base

    def describe(self, node: NodeDefinition) -> FunctionInfo:
        return self.get(node.func_id)
