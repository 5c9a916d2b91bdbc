# src/cgp_core/settings.py
"""
Viewer settings: name templates for synthesized input/output names and
custom function-ID labels. Settings are optional; every field has a default.

A settings file is YAML, for example:

    input_name_template: "x{index}"
    output_name_template: "y{index}"
    function_labels:
      0: PLUS
      3: SAFE_DIV
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import cerberus
import yaml

from .constants import DEFAULT_INPUT_NAME_TEMPLATE, DEFAULT_OUTPUT_NAME_TEMPLATE
from .errors import DiagnosableError, format_diagnostic_report

logger = logging.getLogger(__name__)


class SettingsError(DiagnosableError):
    """Raised when a settings mapping or file cannot be loaded or fails validation."""

    def __init__(self, details: str, source_file: Optional[Path] = None):
        self.details = details
        self.source_file = source_file
        location = f" in file '{source_file}'" if source_file else ""
        super().__init__(f"Invalid viewer settings{location}: {details}")

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Viewer Settings Error",
            details=self.details,
            suggestion="Name templates must contain '{index}'; function label keys must be non-negative integers.",
            context={'source_file': self.source_file}
        )


class SettingsValidator(cerberus.Validator):
    """Cerberus validator with a rule for `{index}` name templates."""

    def _validate_index_template(self, constraint, field_name, value):
        """ The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint or not isinstance(value, str):
            return
        if "{index}" not in value:
            self._error(field_name, f"Template '{value}' must contain the '{{index}}' placeholder.")
            return
        try:
            value.format(index=0)
        except (KeyError, IndexError, ValueError) as e:
            self._error(field_name, f"Template '{value}' cannot be formatted: {e}")


SETTINGS_SCHEMA = {
    "input_name_template": {"type": "string", "empty": False, "index_template": True},
    "output_name_template": {"type": "string", "empty": False, "index_template": True},
    "function_labels": {
        "type": "dict",
        "keysrules": {"type": "integer", "min": 0},
        "valuesrules": {"type": "string", "empty": False},
    },
}


@dataclass(frozen=True)
class ViewerSettings:
    input_name_template: str = DEFAULT_INPUT_NAME_TEMPLATE
    output_name_template: str = DEFAULT_OUTPUT_NAME_TEMPLATE
    function_labels: Mapping[int, str] = field(default_factory=dict)


def load_viewer_settings(raw: Optional[Dict[str, Any]], source_file: Optional[Path] = None) -> ViewerSettings:
    """Validates a raw settings mapping and returns ViewerSettings."""
    if not raw:
        return ViewerSettings()

    validator = SettingsValidator(SETTINGS_SCHEMA)
    validator.allow_unknown = False
    if not validator.validate(raw):
        error_lines = [f"{k}: {v}" for k, v in sorted(validator.errors.items())]
        raise SettingsError("; ".join(error_lines), source_file=source_file)

    document = validator.document
    settings = ViewerSettings(
        input_name_template=document.get("input_name_template", DEFAULT_INPUT_NAME_TEMPLATE),
        output_name_template=document.get("output_name_template", DEFAULT_OUTPUT_NAME_TEMPLATE),
        function_labels=dict(document.get("function_labels", {})),
    )
    logger.debug(f"Loaded viewer settings: {settings}")
    return settings


def load_viewer_settings_file(path: Union[str, Path]) -> ViewerSettings:
    """Loads ViewerSettings from a YAML file."""
    source = Path(path).resolve()
    if not source.is_file():
        raise SettingsError(f"Settings file not found at path: {source}", source_file=source)
    try:
        with source.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except PermissionError as e:
        raise SettingsError(f"Permission denied when trying to read file: {e}", source_file=source) from e
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML syntax: {e}", source_file=source) from e

    if content is None:
        return ViewerSettings()
    if not isinstance(content, dict):
        raise SettingsError("The root of the settings file must be a mapping.", source_file=source)
    logger.info(f"Loading viewer settings from {source}")
    return load_viewer_settings(content, source_file=source)
