"""Routines for sequences, strings, hash-based counting and matrices, with stdin-driven command-line drivers."""

__version__ = "0.1.0"
__all__ = ["__version__"]