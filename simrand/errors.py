"""
Errors raised by simrand.

Degenerate inputs (empty sources, all-zero weights) are not errors: they fall back to
defaults. These types cover misuse that would otherwise corrupt the deterministic stream.
"""

from __future__ import annotations


class RngError(Exception):
    """Base class for simrand errors."""


class UnboundModeError(RngError):
    """Unbalanced or mismatched enter/exit of unbound mode."""


class TypeMismatch(RngError, TypeError):
    """A registered function was called expecting a type it does not produce."""


class UnknownFunction(RngError, LookupError):
    """No registered function has the requested handle."""
