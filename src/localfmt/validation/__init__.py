"""Argument validation for parsed templates.

Python 3.13+.
"""

from localfmt.validation.arguments import infer_arity, validate_arguments

__all__ = [
    "infer_arity",
    "validate_arguments",
]
