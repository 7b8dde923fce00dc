"""Scaffold new OCaml projects managed by esy."""

__version__ = "0.1.0"
