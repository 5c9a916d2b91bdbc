# src/cgp_core/parser/raw_data.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..validation.issues import ValidationIssue

# Records exchanged between the directive pre-pass, the grammar parser and the
# viewer pipeline. Parsed graph structure itself lives in data_structures.


@dataclass(frozen=True)
class DirectiveData:
    """Result of the directive pre-pass over raw multi-line input."""
    actual_cgp_string: Optional[str]
    input_names: Tuple[str, ...] = ()
    output_names: Tuple[str, ...] = ()

    @property
    def has_data_line(self) -> bool:
        return self.actual_cgp_string is not None


@dataclass(frozen=True)
class ReconciledNames:
    """Input/output names sized to the parsed configuration, plus any warnings raised doing so."""
    input_names: Tuple[str, ...]
    output_names: Tuple[str, ...]
    issues: List[ValidationIssue] = field(default_factory=list)


@dataclass(frozen=True)
class ParseFailure:
    """
    The structured failure value handed to the presentation layer.
    Only `error` and `detail` are part of the public contract; `code` names the
    CgpIssueCode that produced it.
    """
    error: str
    detail: str
    code: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.error, "detail": self.detail}
