"""
Identifiers for dump entities.

Every entity gets a short blank-node label: a one-letter kind prefix
followed by its numeric key verbatim, or for tags the tag name in
unpadded base32. The same (kind, key) always yields the same label, so a
foreign key can be turned into a reference without any lookup table.
"""
import base64

# ----------------------------------------------------------------------
# Kind prefixes
# ----------------------------------------------------------------------
BADGE = "b"
COMMENT = "c"
POST = "p"
POST_HISTORY = "h"
POST_LINK = "l"
TAG = "t"
USER = "u"


def derive(prefix: str, key: str) -> str:
    """Identifier for an entity with a numeric key (the decimal string is kept as given)."""
    return prefix + key


def encode_name(name: str) -> str:
    """Unpadded RFC 4648 base32 of the UTF-8 bytes of `name`."""
    return base64.b32encode(name.encode("utf-8")).decode("ascii").rstrip("=")


def derive_tag(name: str) -> str:
    """Identifier for a tag, keyed by its name."""
    return TAG + encode_name(name)
