# src/cgp_core/viewer.py

"""
The caller-facing pipeline that turns raw editor text into the read-only
bundle consumed by the presentation layer.

Stages: directive pre-pass -> grammar parser -> name reconciliation ->
active-node analysis and delay calculation. The pipeline is the error
boundary of the core: `process` never raises. Known parse errors become a
`ParseFailure` carrying their own error/detail pair; anything unexpected
becomes a generic "Parsing error" failure. A failure suppresses every
downstream analysis.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from .analysis import ActiveNodeAnalyzer, DelayCalculator, DelayMap, PathTracer
from .data_structures import CgpConfig, NodeDefinition, ParsedCgp
from .functions import FunctionCatalog, FunctionInfo
from .parser import (
    CgpParseError,
    CgpParser,
    DirectiveExtractor,
    ParseFailure,
    reconcile_names,
)
from .settings import ViewerSettings
from .validation import CgpIssueCode, ValidationIssue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CgpViewData:
    """Everything the presentation layer needs for one successfully parsed circuit."""
    config: CgpConfig
    node_definitions: Mapping[int, NodeDefinition]
    output_node_indices: Tuple[int, ...]
    input_names: Tuple[str, ...]
    output_names: Tuple[str, ...]
    node_delays: DelayMap
    active_nodes: FrozenSet[int]
    function_catalog: FunctionCatalog = field(default_factory=FunctionCatalog, compare=False, repr=False)

    def function_info(self, index: int) -> FunctionInfo:
        return self.function_catalog.describe(self.node_definitions[index])

    def path_tracer(self) -> PathTracer:
        return PathTracer(ParsedCgp(self.config, self.node_definitions, self.output_node_indices))

    def to_contract(self) -> Dict[str, Any]:
        """The mapping shape shared with the presentation layer."""
        return {
            "config": self.config.to_dict(),
            "nodeDefinitions": {index: node.to_dict() for index, node in self.node_definitions.items()},
            "outputNodeIndices": list(self.output_node_indices),
            "inputNames": list(self.input_names),
            "outputNames": list(self.output_names),
            "nodeDelays": self.node_delays.as_dict(),
            "activeNodes": set(self.active_nodes),
        }


@dataclass(frozen=True)
class CgpViewResult:
    """Outcome of one pipeline run: either `parsed_data` or `parse_error` is set, never both."""
    parsed_data: Optional[CgpViewData]
    parse_error: Optional[ParseFailure]
    active_nodes: FrozenSet[int] = frozenset()
    warnings: List[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.parse_error is None


class CgpViewPipeline:
    """
    Runs the full parse-and-analyse pipeline for raw CGP text.
    Holds no state between calls; every call produces a fresh result.
    """

    def __init__(self, settings: Optional[ViewerSettings] = None, log: Optional[logging.Logger] = None):
        self.settings = settings or ViewerSettings()
        self._log = log or logger
        self._extractor = DirectiveExtractor(log=self._log)
        self._parser = CgpParser(log=self._log)
        self._catalog = FunctionCatalog(self.settings.function_labels)

    def process(self, text: Any) -> CgpViewResult:
        try:
            return self._process(text)
        except CgpParseError as e:
            self._log.info(f"CGP parse failed [{e.code}]: {e.error} {e.detail}")
            return CgpViewResult(parsed_data=None, parse_error=e.to_failure())
        except Exception as e:
            self._log.error(f"Failed to parse CGP string: {e}", exc_info=True)
            failure = ParseFailure(
                error=CgpIssueCode.UNEXPECTED_ERROR.error_template,
                detail=str(e) or "Unknown parsing error occurred.",
                code=CgpIssueCode.UNEXPECTED_ERROR.code,
            )
            return CgpViewResult(parsed_data=None, parse_error=failure)

    def _process(self, text: Any) -> CgpViewResult:
        if text is None or (isinstance(text, str) and not text.strip()):
            raise CgpParseError(CgpIssueCode.EMPTY_INPUT)
        if not isinstance(text, str):
            raise CgpParseError(CgpIssueCode.INVALID_INPUT_TYPE, type_name=type(text).__name__)

        directives = self._extractor.extract(text)
        if not directives.has_data_line:
            raise CgpParseError(CgpIssueCode.NO_DATA_LINE)

        parsed = self._parser.parse(directives.actual_cgp_string)

        names = reconcile_names(
            directives,
            parsed.config,
            input_name_template=self.settings.input_name_template,
            output_name_template=self.settings.output_name_template,
            log=self._log,
        )
        active = ActiveNodeAnalyzer.from_parsed(parsed, log=self._log).analyze()
        delays = DelayCalculator(parsed, log=self._log).calculate()

        view_data = CgpViewData(
            config=parsed.config,
            node_definitions=parsed.node_definitions,
            output_node_indices=parsed.output_node_indices,
            input_names=names.input_names,
            output_names=names.output_names,
            node_delays=delays,
            active_nodes=active.active_nodes,
            function_catalog=self._catalog,
        )
        self._log.debug(
            f"Processed circuit with {len(parsed.node_definitions)} node(s), "
            f"{len(active.active_nodes)} active."
        )
        return CgpViewResult(
            parsed_data=view_data,
            parse_error=None,
            active_nodes=active.active_nodes,
            warnings=names.issues + active.issues,
        )


def process_cgp_text(text: Any, settings: Optional[ViewerSettings] = None) -> CgpViewResult:
    """Convenience wrapper: runs a default CgpViewPipeline once."""
    return CgpViewPipeline(settings=settings).process(text)
