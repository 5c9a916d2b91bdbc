# src/cgp_core/parser/exceptions.py
"""
Diagnosable exceptions for the directive pre-pass and the grammar parser.

`CgpParseError` is raised at the first failing check; its message text comes
from the CgpIssueCode registry so that the same error/detail strings appear in
logs, diagnostic reports and the `ParseFailure` record given to the viewer.
"""
from typing import Any, Optional

from ..errors import DiagnosableError, format_diagnostic_report
from ..validation.issue_codes import CgpIssueCode
from .raw_data import ParseFailure


class CgpParseError(DiagnosableError):
    """Raised when a CGP string violates the grammar or one of its structural rules."""

    def __init__(self, issue: CgpIssueCode, node_index: Optional[int] = None, **params: Any):
        self.issue = issue
        self.node_index = node_index
        self.params = params
        self.error = issue.format_error(**params)
        self.detail = issue.format_detail(**params)
        super().__init__(f"{self.error} {self.detail}")

    @property
    def code(self) -> str:
        return self.issue.code

    def to_failure(self) -> ParseFailure:
        return ParseFailure(error=self.error, detail=self.detail, code=self.code)

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type=self.error,
            details=self.detail,
            suggestion="Correct the CGP string so that it matches "
                       "{inputs,outputs,rows,cols,arity,lback,funcSetSize}([index]in1,...,inK,funcId)...(out1,...).",
            context={'code': self.code, 'node_index': self.node_index},
        )
