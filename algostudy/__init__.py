"""Classic searching, sorting, recursion and array algorithms for study."""

__version__ = "0.1.0"
__all__ = ["arrays", "recursion", "searching", "sorting", "timing"]