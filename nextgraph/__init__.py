"""Directed graphs with a mutable dynamic form, a frozen CSR form and analysis algorithms."""

__version__ = "0.0.1"
__all__ = ["algorithms", "csm", "dynamic", "errors", "freezing", "frontier", "samples"]