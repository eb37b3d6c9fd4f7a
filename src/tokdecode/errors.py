"""
Exceptions raised by tokdecode.
"""

from __future__ import annotations

NO_VARIANT_MATCHED = "data did not match any variant of untagged enum DecoderWrapper"


class TokdecodeError(Exception):
    """Base class for all tokdecode errors."""


class ConfigurationMismatch(TokdecodeError, ValueError):
    """A decoder configuration object matched none of the known decoders.

    The message is always the same, whichever decoder came closest, so that
    callers can rely on it across schema changes.
    """

    def __init__(self, message: str = NO_VARIANT_MATCHED):
        super().__init__(message)


class DecodeError(TokdecodeError):
    """Raised by a decoding strategy that cannot process its input."""
