"""
core/exceptions.py
------------------
Exception types raised by the nationalid SDK.

Validators never raise for malformed input; they return ``False``.  These
exceptions are reserved for caller contract violations and exhausted
generation attempts.
"""


class InvalidSelectorError(ValueError):
    """Raised when a prefix/selector falls outside its closed set."""


class GenerationError(RuntimeError):
    """Raised when a generator cannot produce a valid identifier."""
