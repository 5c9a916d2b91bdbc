# src/cgp_core/validation/__init__.py
import logging
logger = logging.getLogger(__name__)

from .issues import ValidationIssue, ValidationIssueLevel
from .issue_codes import CgpIssueCode
from .config_schema import CONFIG_SCHEMA, find_first_violation

__all__ = [
    "ValidationIssue",
    "ValidationIssueLevel",
    "CgpIssueCode",
    "CONFIG_SCHEMA",
    "find_first_violation",
]
