"""Classic array, number, search and rotation exercises as small Python functions."""

__version__ = "0.1.0"
__all__ = [
    "basics",
    "arrays",
    "digits",
    "subarrays",
    "searching",
    "rotation",
    "problems",
]