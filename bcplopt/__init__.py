"""Syntax tree, constant folding and dead-code passes, and a tree printer for BCPL programs."""

__version__ = "0.1.0"

__all__ = ["tokens", "nodes", "constant_folding", "dead_code", "debug_printer"]