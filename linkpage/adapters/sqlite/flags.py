"""
Boolean columns are stored as '0' / '1' text.

Conversion happens here and nowhere else; the rest of the code only sees bool.
"""

import logging

logger = logging.getLogger(__name__)

_TRUE = "1"
_FALSE = "0"


def encode_active_flag(value: bool) -> str:
    return _TRUE if value else _FALSE


def decode_active_flag(raw: object) -> bool:
    """
    Decode a stored flag.

    Only '1' is true. Anything else, including 'false' or '', is a corrupt
    value and raises instead of being read by truthiness.
    """
    text = str(raw)
    if text not in (_TRUE, _FALSE):
        raise ValueError(f"Stored flag must be '0' or '1', got {raw!r}")
    return text == _TRUE


def decode_flag_or_default(raw: object, default: bool, column: str) -> bool:
    """Decode a presentation flag; a corrupt value is logged and reads as the default."""
    try:
        return decode_active_flag(raw)
    except ValueError:
        logger.warning("Corrupt %s value %r; using default %s", column, raw, default)
        return default
