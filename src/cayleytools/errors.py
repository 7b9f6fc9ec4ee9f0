from __future__ import annotations


class CayleyToolsError(Exception):
    """Base class for errors raised by cayleytools."""


class PreconditionError(CayleyToolsError, ValueError):
    """Malformed input: a graph that is not a Cayley graph, a spanning tree
    that does not cover every vertex, or an element index out of range."""


class AbelianGroupError(CayleyToolsError, RuntimeError):
    """A structural query that is only meaningful for non-abelian groups."""
