"""A small command shell with environment builtins and PATH lookup."""

__version__ = "0.1.0"
__all__ = ["__version__"]