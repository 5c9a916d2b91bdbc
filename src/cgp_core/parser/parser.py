# src/cgp_core/parser/parser.py
import logging
import re
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple

from ..constants import CONFIG_FIELDS
from ..data_structures import CgpConfig, NodeDefinition, ParsedCgp
from ..validation.config_schema import find_first_violation
from ..validation.issue_codes import CgpIssueCode
from .exceptions import CgpParseError

logger = logging.getLogger(__name__)

# --- Grammar ---
# All patterns run on the whitespace-free form of the data line. Digits are
# ASCII only; other Unicode decimal digits never form a number.

CONFIG_REGEX = re.compile(r"\{([^}]+)\}")

# ([<index>]<v1>,<v2>,...,<vk>)
NODE_REGEX = re.compile(r"\(\[(\d+)\]([^)]+)\)", re.ASCII)

# Trailing (<ref>,<ref>,...) block.
OUTPUT_REGEX = re.compile(r"\((\d+(?:,\d+)*)\)$", re.ASCII)

INTEGER_TOKEN_REGEX = re.compile(r"[+-]?\d+", re.ASCII)

WHITESPACE_REGEX = re.compile(r"\s+")


def _split_tokens(content: str) -> Optional[List[str]]:
    """
    Splits on ','. Returns None if any non-empty token is not an integer.
    Empty tokens are kept so a stray comma still counts towards the arity check.
    """
    tokens = content.split(",")
    if not all(INTEGER_TOKEN_REGEX.fullmatch(token) for token in tokens if token):
        return None
    return tokens


def _to_ints(tokens: List[str]) -> Optional[List[int]]:
    if not all(tokens):
        return None
    return [int(token) for token in tokens]


class CgpParser:
    """
    Parses the single-line CGP expression into a validated ParsedCgp.

    The string is scanned once, left to right, and the first failing check is
    raised as a CgpParseError; no partial result is ever returned. Column and
    lookback arithmetic is always derived from the config of the current parse.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self._log = log or logger

    def parse(self, cgp_string: Any) -> ParsedCgp:
        if not isinstance(cgp_string, str):
            raise CgpParseError(CgpIssueCode.INVALID_INPUT_TYPE, type_name=type(cgp_string).__name__)

        compact = WHITESPACE_REGEX.sub("", cgp_string)
        if not compact:
            raise CgpParseError(CgpIssueCode.EMPTY_EXPRESSION)

        self._log.debug(f"--- Parsing start: '{compact}' ---")
        config = self._parse_config(compact)
        self._log.debug(f"Parsed config: {config}")

        node_definitions = self._parse_nodes(compact, config)
        self._log.debug(f"Parsed {len(node_definitions)} node definition(s).")

        parsed = ParsedCgp(
            config=config,
            node_definitions=MappingProxyType(node_definitions),
            output_node_indices=(),
        )
        output_node_indices = self._parse_outputs(compact, parsed)
        self._log.debug(f"--- Parsing end. Outputs: {output_node_indices} ---")

        return replace(parsed, output_node_indices=output_node_indices)

    # --- Configuration block ---

    def _parse_config(self, compact: str) -> CgpConfig:
        match = CONFIG_REGEX.search(compact)
        if not match:
            raise CgpParseError(CgpIssueCode.MISSING_CONFIG)

        tokens = _split_tokens(match.group(1))
        if tokens is None:
            raise CgpParseError(CgpIssueCode.NON_NUMERIC_CONFIG, content=match.group(1))
        if len(tokens) != len(CONFIG_FIELDS):
            raise CgpParseError(CgpIssueCode.WRONG_CONFIG_ARITY, found=len(tokens))
        params = _to_ints(tokens)
        if params is None:
            raise CgpParseError(CgpIssueCode.NON_NUMERIC_CONFIG, content=match.group(1))

        values = dict(zip(CONFIG_FIELDS, params))
        violation = find_first_violation(values)
        if violation is not None:
            field_name, issue = violation
            raise CgpParseError(issue, field=field_name, value=values[field_name])

        return CgpConfig(**values)

    # --- Node definitions ---

    def _parse_nodes(self, compact: str, config: CgpConfig) -> Dict[int, NodeDefinition]:
        node_definitions: Dict[int, NodeDefinition] = {}

        for match in NODE_REGEX.finditer(compact):
            index = int(match.group(1))
            content = match.group(2)

            if not config.is_grid_index(index):
                raise CgpParseError(
                    CgpIssueCode.NODE_INDEX_OUT_OF_RANGE, node_index=index,
                    index=index, start=config.start_index, end=config.max_node_index,
                )
            if index in node_definitions:
                raise CgpParseError(CgpIssueCode.DUPLICATE_NODE_DEFINITION, node_index=index, index=index)

            tokens = _split_tokens(content)
            if tokens is None:
                raise CgpParseError(CgpIssueCode.NON_NUMERIC_NODE_CONTENT, node_index=index, index=index, content=content)
            if len(tokens) != config.arity + 1:
                raise CgpParseError(
                    CgpIssueCode.WRONG_NODE_ARITY, node_index=index,
                    index=index, arity=config.arity, expected=config.arity + 1, found=len(tokens),
                )
            values = _to_ints(tokens)
            if values is None:
                raise CgpParseError(CgpIssueCode.NON_NUMERIC_NODE_CONTENT, node_index=index, index=index, content=content)

            func_id = values[config.arity]
            if not 0 <= func_id < config.func_set_size:
                raise CgpParseError(
                    CgpIssueCode.FUNCTION_ID_OUT_OF_RANGE, node_index=index,
                    index=index, func_id=func_id, max_func_id=config.func_set_size - 1,
                )

            inputs = tuple(values[:config.arity])
            self._check_connections(index, inputs, config)

            node_definitions[index] = NodeDefinition(index=index, func_id=func_id, inputs=inputs)

        if not node_definitions:
            raise CgpParseError(CgpIssueCode.NO_NODE_DEFINITIONS)
        return node_definitions

    @staticmethod
    def _check_connections(index: int, inputs: Tuple[int, ...], config: CgpConfig) -> None:
        node_column = config.column_of(index)
        for position, reference in enumerate(inputs, start=1):
            if config.is_primary_input(reference):
                continue

            # No forward or self references: the graph stays acyclic.
            if not config.start_index <= reference < index:
                raise CgpParseError(
                    CgpIssueCode.INVALID_CONNECTION, node_index=index,
                    index=index, position=position, reference=reference, last_input=config.inputs - 1,
                )

            distance = node_column - config.column_of(reference)
            if distance > config.lback:
                raise CgpParseError(
                    CgpIssueCode.LBACK_VIOLATION, node_index=index,
                    index=index, position=position, reference=reference,
                    distance=distance, lback=config.lback,
                )

    # --- Output mapping ---

    def _parse_outputs(self, compact: str, parsed: ParsedCgp) -> Tuple[int, ...]:
        config = parsed.config
        match = OUTPUT_REGEX.search(compact)
        if not match:
            raise CgpParseError(CgpIssueCode.MISSING_OUTPUT_DEFINITION)

        outputs = _to_ints(match.group(1).split(","))
        if outputs is None:
            raise CgpParseError(CgpIssueCode.INVALID_OUTPUT_DEFINITION, content=match.group(1))
        if len(outputs) != config.outputs:
            raise CgpParseError(CgpIssueCode.OUTPUT_COUNT_MISMATCH, expected=config.outputs, found=len(outputs))

        for reference in outputs:
            if not parsed.is_valid_source(reference):
                raise CgpParseError(
                    CgpIssueCode.INVALID_OUTPUT_REFERENCE,
                    reference=reference, last_input=config.inputs - 1,
                    start=config.start_index, last_node=max(parsed.node_definitions),
                )
        return tuple(outputs)


def parse_cgp_string(cgp_string: Any) -> ParsedCgp:
    """Convenience wrapper: parses with a default CgpParser."""
    return CgpParser().parse(cgp_string)
