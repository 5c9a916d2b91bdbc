# src/cgp_core/validation/config_schema.py
"""
Cerberus schema for the seven-integer configuration header.

Cerberus reports every violated rule at once; the header contract only
surfaces one, so `find_first_violation` walks the fields in their fixed
header order and returns the first one cerberus rejected.
"""
import logging
from typing import Dict, Optional, Tuple

import cerberus

from ..constants import CONFIG_FIELDS
from .issue_codes import CgpIssueCode

logger = logging.getLogger(__name__)

# Lower bound for each field, in header order.
CONFIG_LOWER_BOUNDS: Dict[str, int] = {
    "inputs": 0,
    "outputs": 1,
    "rows": 1,
    "cols": 1,
    "arity": 2,
    "lback": 1,
    "func_set_size": 1,
}

CONFIG_FIELD_ISSUES: Dict[str, CgpIssueCode] = {
    "inputs": CgpIssueCode.INVALID_INPUTS,
    "outputs": CgpIssueCode.INVALID_OUTPUTS,
    "rows": CgpIssueCode.INVALID_ROWS,
    "cols": CgpIssueCode.INVALID_COLS,
    "arity": CgpIssueCode.INVALID_ARITY,
    "lback": CgpIssueCode.INVALID_LBACK,
    "func_set_size": CgpIssueCode.INVALID_FUNC_SET_SIZE,
}

CONFIG_SCHEMA = {
    name: {"type": "integer", "required": True, "min": CONFIG_LOWER_BOUNDS[name]}
    for name in CONFIG_FIELDS
}


def find_first_violation(values: Dict[str, int]) -> Optional[Tuple[str, CgpIssueCode]]:
    """
    Validates the header values against CONFIG_SCHEMA.

    Returns:
        None when every field is in range, otherwise the name of the first
        offending field (in header order) and its issue code.
    """
    validator = cerberus.Validator(CONFIG_SCHEMA)
    validator.allow_unknown = False
    if validator.validate(values):
        return None

    errors = validator.errors
    logger.debug(f"Configuration header rejected by schema: {errors}")
    for name in CONFIG_FIELDS:
        if name in errors:
            return name, CONFIG_FIELD_ISSUES[name]
    # Only reachable if cerberus flagged a key outside CONFIG_FIELDS.
    raise ValueError(f"Unexpected configuration schema errors: {errors}")
