"""Small teaching exercises: Roman numerals, recursion, bit layouts, moon tables and geometry."""

__version__ = "0.1.0"
__all__ = ["bitflip", "float_binary", "min_perimeter", "moon", "recursion", "roman"]