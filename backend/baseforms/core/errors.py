from __future__ import annotations


class BaseFormsError(RuntimeError):
    """Base class for errors raised by the base form pipeline."""


class LemmatizerConfigError(BaseFormsError):
    """Raised when the lemmatization service endpoint cannot be used at all."""
