# src/cgp_core/parser/__init__.py
from .raw_data import DirectiveData, ReconciledNames, ParseFailure
from .directives import DirectiveExtractor, reconcile_names
from .parser import CgpParser, parse_cgp_string
from .exceptions import CgpParseError

__all__ = [
    # Records
    "DirectiveData",
    "ReconciledNames",
    "ParseFailure",
    # Directive pre-pass
    "DirectiveExtractor",
    "reconcile_names",
    # Parser and Exceptions
    "CgpParser",
    "parse_cgp_string",
    "CgpParseError",
]
