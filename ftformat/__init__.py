"""A printf-style formatter with flags, width and precision, and string helpers."""

__version__ = "0.1.0"
__all__ = ["libft", "spec", "conversions", "printf"]