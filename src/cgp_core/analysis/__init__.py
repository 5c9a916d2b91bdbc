# src/cgp_core/analysis/__init__.py
"""
Public interface of the analysis services: active-node reachability, delay
propagation and path tracing over a ParsedCgp, with their result contracts.
"""
from .results import ActiveNodeResults, DelayMap, PathHighlight
from .active_nodes import ActiveNodeAnalyzer, find_active_nodes
from .delays import DelayCalculator, calculate_node_delays
from .graph import build_dependency_graph
from .paths import PathTracer
from .exceptions import DelayCalculationError, PathTraceError

__all__ = [
    # Result Contracts
    "ActiveNodeResults",
    "DelayMap",
    "PathHighlight",
    # Analysis Services
    "ActiveNodeAnalyzer",
    "find_active_nodes",
    "DelayCalculator",
    "calculate_node_delays",
    "PathTracer",
    "build_dependency_graph",
    # Exceptions
    "DelayCalculationError",
    "PathTraceError",
]
