# src/cgp_core/errors.py
import logging
from abc import abstractmethod
from typing import Any, Dict, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class CgpCoreError(Exception):
    """Base class for all custom, user-facing errors in CGP Core."""
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """A protocol for exceptions that can generate their own diagnostic report."""
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...


class DiagnosableError(CgpCoreError, Diagnosable):
    """
    Common concrete base class for all internal exceptions that are diagnosable.

    Subclasses must implement `get_diagnostic_report`; callers can catch this
    single type for every known, reportable error.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Formats the final multi-line report string so that all user-facing
    diagnostics share one look.

    Args:
        error_type: The high-level category of the error (e.g., "CGP Parse Error").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: Contextual information (issue code, node index, file path, user input).

    Returns:
        A formatted report string ready for display.
    """
    lines = [
        "\n",
        "================ CGP Core: Actionable Diagnostic Report ================",
        f"Error Type:     {error_type}",
    ]
    if code := context.get('code'):
        lines.append(f"Issue Code:     {code}")
    if (node_index := context.get('node_index')) is not None:
        lines.append(f"Node:           [{node_index}]")
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")
    if user_input := context.get('user_input'):
        lines.append(f"User Input:     '{user_input}'")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("========================================================================")
    return "\n".join(lines)
