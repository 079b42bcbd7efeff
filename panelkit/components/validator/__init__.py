"""
Validator component - Report duplicate names, extra defaults and unknown colors.
"""

from ._impl import (
    find_duplicate_names,
    find_multiple_defaults,
    find_unknown_colors,
    validate_content,
)
from .component import run_validate
from .models import (
    ContentViolation,
    DuplicateNameError,
    MultipleDefaultsError,
    UnknownColorError,
    ValidateContentInput,
    ValidateContentOutput,
)

__all__ = [
    # Entry points
    "run_validate",
    # Input models
    "ValidateContentInput",
    # Output models
    "ValidateContentOutput",
    "ContentViolation",
    "DuplicateNameError",
    "MultipleDefaultsError",
    "UnknownColorError",
    # Functional core
    "find_duplicate_names",
    "find_multiple_defaults",
    "find_unknown_colors",
    "validate_content",
]
