from __future__ import annotations


class CRNError(RuntimeError):
    """Base class for all ppkit CRN errors."""


class InvalidReactionError(CRNError):
    """Raised when a reaction equation is malformed or cannot be parsed."""


class GraphImportError(CRNError):
    """Raised when a reaction table cannot be read into a hypergraph."""


class SearchError(CRNError):
    """Raised for path search issues (invalid arguments, unknown preference, etc.)."""
