"""Errors raised by the ObjectId <-> UUID transform.

All of them are ValueErrors, so callers that already guard
conversions with ``except ValueError`` keep working.
"""

from __future__ import annotations


class OidBridgeError(ValueError):
    """Base class for conversion failures."""


class InvalidLengthError(OidBridgeError):
    """ObjectId (or filler) has the wrong number of characters."""


class InvalidFormatError(OidBridgeError):
    """UUID is not 32 hex characters once hyphens are stripped,
    or its displaced-bits payload is out of range."""


class InvalidCharacterError(OidBridgeError):
    """Input contains characters outside [0-9a-fA-F]."""
