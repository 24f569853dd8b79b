"""Error taxonomy for the analysis pipeline.

Every stage fails fast and wraps the underlying cause into one of these kinds. Only
:class:`ValidationError` is reported back to callers verbatim; the rest surface as a
generic failure at the HTTP boundary.
"""

from __future__ import annotations


class SkepticError(RuntimeError):
    """Base class for pipeline failures."""


class ValidationError(SkepticError):
    """Missing or malformed input URL."""


class ExtractionError(SkepticError):
    """Article could not be fetched, or too little readable text was found."""


class ModelError(SkepticError):
    pass


class ModelConfigError(ModelError):
    """The language model cannot be called because it is not configured."""


class ModelCallError(ModelError):
    """The language model call failed or returned an unexpected shape."""
