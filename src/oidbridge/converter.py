"""ObjectId <-> UUID transform.

A 12-byte ObjectId is laid out over a 16-byte UUID as five groups:

    P1       P2   P3'  P4'  P5a  vv ww ffff
    xxxxxxxx-xxxx-4xxx-Nxxx-xxxxvvwwffff

The version nibble of P3 and the two variant bits of P4 are overwritten
to make a well-formed version 4 / RFC 4122 UUID. The overwritten bits are
kept in ``vv`` and ``ww`` so the decoder can put them back. ``ffff`` is
filler; the decoder never reads it.
"""

from __future__ import annotations

import string

from oidbridge.errors import (
    InvalidCharacterError,
    InvalidFormatError,
    InvalidLengthError,
)

OBJECT_ID_LENGTH = 24
UUID_HEX_LENGTH = 32
DEFAULT_FILLER = "0000"

# Group slices over the 24-char ObjectId / hyphen-stripped 32-char UUID.
P1 = slice(0, 8)
P2 = slice(8, 12)
P3 = slice(12, 16)
P4 = slice(16, 20)
P5A = slice(20, 24)
P5 = slice(20, 32)

# Offsets inside P5.
TAIL = slice(0, 4)
VERSION_BYTE = slice(4, 6)
VARIANT_BYTE = slice(6, 8)

VERSION_MASK = 0xF000
VERSION_KEEP = 0x0FFF
VERSION_SHIFT = 12
VERSION_4 = 0x4000
VARIANT_MASK = 0xC000
VARIANT_KEEP = 0x3FFF
VARIANT_SHIFT = 14
VARIANT_RFC4122 = 0x8000

_HEX_DIGITS = frozenset(string.hexdigits)


def _require_str(value: object, what: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, not {type(value).__name__}")


def _require_hex(value: str, what: str) -> None:
    bad = [c for c in value if c not in _HEX_DIGITS]
    if bad:
        raise InvalidCharacterError(
            f"Invalid {what}: non-hex character(s) {''.join(sorted(set(bad)))!r}"
        )


def _check_filler(filler: str) -> str:
    _require_str(filler, "filler")
    if len(filler) != 4:
        raise InvalidLengthError(
            f"Invalid filler length {len(filler)}. Must be 4 hex characters."
        )
    _require_hex(filler, "filler")
    return filler.lower()


def object_id_to_uuid(object_id: str, filler: str = DEFAULT_FILLER) -> str:
    """Encode a 24-hex-char ObjectId as a hyphenated version 4 UUID string."""
    _require_str(object_id, "ObjectId")
    if len(object_id) != OBJECT_ID_LENGTH:
        raise InvalidLengthError(
            f"Invalid ObjectId length {len(object_id)}. "
            f"Must be {OBJECT_ID_LENGTH} hex characters."
        )
    _require_hex(object_id, "ObjectId")
    filler = _check_filler(filler)
    oid = object_id.lower()

    p3 = int(oid[P3], 16)
    saved_version = p3 & VERSION_MASK
    p3 = (p3 & VERSION_KEEP) | VERSION_4

    p4 = int(oid[P4], 16)
    saved_variant = p4 & VARIANT_MASK
    p4 = (p4 & VARIANT_KEEP) | VARIANT_RFC4122

    version_byte = saved_version >> VERSION_SHIFT
    variant_byte = saved_variant >> VARIANT_SHIFT
    p5 = f"{oid[P5A]}{version_byte:02x}{variant_byte:02x}{filler}"

    return f"{oid[P1]}-{oid[P2]}-{p3:04x}-{p4:04x}-{p5}"


def uuid_to_object_id(uuid: str) -> str:
    """Decode a UUID produced by :func:`object_id_to_uuid` back to its ObjectId."""
    _require_str(uuid, "UUID")
    clean = uuid.replace("-", "")
    if len(clean) != UUID_HEX_LENGTH:
        raise InvalidFormatError(
            f"Invalid UUID format: {len(clean)} hex characters after removing "
            f"hyphens, expected {UUID_HEX_LENGTH}."
        )
    _require_hex(clean, "UUID")
    clean = clean.lower()

    p5 = clean[P5]
    version_byte = int(p5[VERSION_BYTE], 16)
    variant_byte = int(p5[VARIANT_BYTE], 16)
    if version_byte > VERSION_MASK >> VERSION_SHIFT:
        raise InvalidFormatError(
            f"Invalid UUID format: stored version bits {version_byte:#04x} out of range"
        )
    if variant_byte > VARIANT_MASK >> VARIANT_SHIFT:
        raise InvalidFormatError(
            f"Invalid UUID format: stored variant bits {variant_byte:#04x} out of range"
        )

    p3 = (int(clean[P3], 16) & VERSION_KEEP) | (version_byte << VERSION_SHIFT)
    p4 = (int(clean[P4], 16) & VARIANT_KEEP) | (variant_byte << VARIANT_SHIFT)

    return f"{clean[P1]}{clean[P2]}{p3:04x}{p4:04x}{p5[TAIL]}"
