# src/cgp_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("CGP Core package initialized.")

from .data_structures import CgpConfig, NodeDefinition, ParsedCgp
from .parser import (
    CgpParser, CgpParseError, DirectiveExtractor, DirectiveData, ParseFailure,
    parse_cgp_string, reconcile_names,
)
from .analysis import (
    ActiveNodeAnalyzer, DelayCalculator, DelayMap, PathTracer, PathHighlight,
    find_active_nodes, calculate_node_delays, build_dependency_graph,
    DelayCalculationError, PathTraceError,
)
from .validation import CgpIssueCode, ValidationIssue, ValidationIssueLevel
from .functions import FunctionCatalog, FunctionInfo, DEFAULT_FUNCTION_TYPES
from .settings import ViewerSettings, SettingsError, load_viewer_settings, load_viewer_settings_file
from .viewer import CgpViewPipeline, CgpViewData, CgpViewResult, process_cgp_text
from .errors import CgpCoreError, DiagnosableError

__all__ = [
    # Data Structures
    "CgpConfig", "NodeDefinition", "ParsedCgp",
    # Parser
    "CgpParser", "CgpParseError", "DirectiveExtractor", "DirectiveData", "ParseFailure",
    "parse_cgp_string", "reconcile_names",
    # Analysis
    "ActiveNodeAnalyzer", "DelayCalculator", "DelayMap", "PathTracer", "PathHighlight",
    "find_active_nodes", "calculate_node_delays", "build_dependency_graph",
    "DelayCalculationError", "PathTraceError",
    # Validation
    "CgpIssueCode", "ValidationIssue", "ValidationIssueLevel",
    # Functions & Settings
    "FunctionCatalog", "FunctionInfo", "DEFAULT_FUNCTION_TYPES",
    "ViewerSettings", "SettingsError", "load_viewer_settings", "load_viewer_settings_file",
    # Pipeline
    "CgpViewPipeline", "CgpViewData", "CgpViewResult", "process_cgp_text",
    # Errors
    "CgpCoreError", "DiagnosableError",
]
