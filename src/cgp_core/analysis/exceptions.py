# src/cgp_core/analysis/exceptions.py
"""
Defines custom, diagnosable exceptions for the analysis services.
"""
from dataclasses import dataclass
from ..errors import Diagnosable, format_diagnostic_report


@dataclass()
class PathTraceError(ValueError, Diagnosable):
    """Raised when a path trace is requested for an element the circuit does not contain."""
    node_key: str
    details: str

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Path Trace Error",
            details=self.details,
            suggestion="Select a primary input index, a defined node index or an 'output-<position>' key.",
            context={'user_input': self.node_key}
        )


@dataclass()
class DelayCalculationError(ValueError, Diagnosable):
    """Raised when node definitions form a cycle, which a parsed circuit can never contain."""
    node_index: int
    details: str

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Delay Calculation Error",
            details=self.details,
            suggestion="Node definitions must only reference primary inputs or lower node indices.",
            context={'node_index': self.node_index}
        )
