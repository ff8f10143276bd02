"""Build a local component library and link it into consumer SPAs."""

__version__ = "0.3.0"
