# src/cgp_core/parser/directives.py
import logging
from typing import List, Optional

from ..constants import (
    COMMENT_PREFIX,
    DEFAULT_INPUT_NAME_TEMPLATE,
    DEFAULT_OUTPUT_NAME_TEMPLATE,
    INPUT_NAMES_DIRECTIVE,
    OUTPUT_NAMES_DIRECTIVE,
)
from ..data_structures import CgpConfig
from ..validation.issue_codes import CgpIssueCode
from ..validation.issues import ValidationIssue, ValidationIssueLevel
from .raw_data import DirectiveData, ReconciledNames

logger = logging.getLogger(__name__)


def _split_names(line: str) -> List[str]:
    # Everything after the first space; a directive without a space keeps the whole line.
    name_str = line[line.find(" ") + 1:].strip()
    return [name.strip() for name in name_str.split(",")]


class DirectiveExtractor:
    """
    Pre-pass over raw multi-line input.

    Collects `#%i` / `#%o` name directives, skips ordinary `#` comments and
    isolates the first data-bearing line. Lines after the data line are ignored.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self._log = log or logger

    def extract(self, text: str) -> DirectiveData:
        input_names: List[str] = []
        output_names: List[str] = []
        actual_cgp_string: Optional[str] = None

        lines = [line.strip() for line in text.split("\n") if line.strip()]
        for line in lines:
            if line.startswith(INPUT_NAMES_DIRECTIVE):
                input_names.extend(_split_names(line))
            elif line.startswith(OUTPUT_NAMES_DIRECTIVE):
                output_names.extend(_split_names(line))
            elif line.startswith(COMMENT_PREFIX):
                continue
            else:
                actual_cgp_string = line
                break

        if actual_cgp_string is None:
            self._log.debug("Directive pre-pass found no data line.")
        else:
            self._log.debug(
                f"Directive pre-pass: {len(input_names)} input name(s), "
                f"{len(output_names)} output name(s)."
            )
        return DirectiveData(
            actual_cgp_string=actual_cgp_string,
            input_names=tuple(input_names),
            output_names=tuple(output_names),
        )


def _fit_names(names: List[str], count: int, template: str) -> List[str]:
    if len(names) < count:
        return names + [template.format(index=i) for i in range(len(names), count)]
    return names[:count]


def reconcile_names(
    directives: DirectiveData,
    config: CgpConfig,
    input_name_template: str = DEFAULT_INPUT_NAME_TEMPLATE,
    output_name_template: str = DEFAULT_OUTPUT_NAME_TEMPLATE,
    log: Optional[logging.Logger] = None,
) -> ReconciledNames:
    """
    Sizes the directive name lists to the parsed configuration.

    Short lists are padded with synthesized names, long lists truncated, and
    an absent list is replaced entirely by synthesized names. Mismatches and a
    directive kind given without its counterpart are reported as warnings only.
    """
    log = log or logger
    issues: List[ValidationIssue] = []

    def warn(code: CgpIssueCode, **params):
        message = code.format_detail(**params)
        log.warning(f"Warning: {message}")
        issues.append(ValidationIssue(
            level=ValidationIssueLevel.WARNING, code=code.code, message=message, details=params
        ))

    input_names = list(directives.input_names)
    output_names = list(directives.output_names)

    if input_names or output_names:
        if not input_names:
            warn(CgpIssueCode.MISSING_INPUT_NAMES)
        if not output_names:
            warn(CgpIssueCode.MISSING_OUTPUT_NAMES)

        if input_names and len(input_names) != config.inputs:
            warn(CgpIssueCode.INPUT_NAME_COUNT_MISMATCH, found=len(input_names), expected=config.inputs)
            input_names = _fit_names(input_names, config.inputs, input_name_template)

        if output_names and len(output_names) != config.outputs:
            warn(CgpIssueCode.OUTPUT_NAME_COUNT_MISMATCH, found=len(output_names), expected=config.outputs)
            output_names = _fit_names(output_names, config.outputs, output_name_template)

    if not input_names:
        input_names = _fit_names([], config.inputs, input_name_template)
    if not output_names:
        output_names = _fit_names([], config.outputs, output_name_template)

    return ReconciledNames(
        input_names=tuple(input_names),
        output_names=tuple(output_names),
        issues=issues,
    )
