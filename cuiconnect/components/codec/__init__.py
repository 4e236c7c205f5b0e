"""
Codec component - delimited text encoding of user records.

Converts a User of any role to one "|"-delimited line and back, with
backslash escaping of the delimiter.
"""

from .component import (
    COMMENT_PREFIX,
    DELIMITER,
    FIELD_COUNTS,
    decode_line,
    encode_user,
    escape_field,
    has_undecodable_bytes,
    is_comment,
    split_fields,
)
from .models import DecodeOutput

__all__ = [
    # Entry points
    "decode_line",
    "encode_user",
    # Helpers
    "escape_field",
    "has_undecodable_bytes",
    "is_comment",
    "split_fields",
    # Constants
    "COMMENT_PREFIX",
    "DELIMITER",
    "FIELD_COUNTS",
    # Output models
    "DecodeOutput",
]
