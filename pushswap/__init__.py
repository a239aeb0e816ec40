"""Order small integer stacks with push_swap operations, plus supporting string, buffer and I/O helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]