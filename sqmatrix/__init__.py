"""Square integer matrices with arithmetic, diagonal sums, swaps and a command-line demo."""

__version__ = "0.1.0"
__all__ = ["matrix", "cli"]