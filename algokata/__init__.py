"""Compact solutions to classic array, string, number and data-structure exercises."""

__version__ = "0.1.0"

__all__ = [
    "counting",
    "linked_list",
    "numbers",
    "rpn",
    "searching",
    "strings",
    "structures",
    "transforms",
]