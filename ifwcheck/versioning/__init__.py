"""
Version comparison utilities for IFWCheck.

Public API
----------
is_newer : function
    Lexicographic comparator, the default for every check.
is_newer_numeric : function
    Opt-in comparator treating dotted segments as integers.
compare_numeric : function
    Compare two version strings numerically, returning -1, 0, or 1.
get_comparator : function
    Resolve a comparator from its configuration name.

Examples
--------
    >>> from ifwcheck.versioning import is_newer, is_newer_numeric
    >>> is_newer("0.5.0", "0.5.1")
    True
    >>> is_newer("0.5.9", "0.5.10")  # string ordering
    False
    >>> is_newer_numeric("0.5.9", "0.5.10")
    True
"""

from .keys import (
    Comparator,
    comparator_names,
    compare_numeric,
    get_comparator,
    is_newer,
    is_newer_numeric,
)

__all__ = [
    "Comparator",
    "comparator_names",
    "compare_numeric",
    "get_comparator",
    "is_newer",
    "is_newer_numeric",
]
