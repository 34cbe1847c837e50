"""
Checksum helper for transaction family addressing.

Namespace prefixes and state addresses are derived from SHA-512 digests
rendered as lowercase hex. This module hashes bytes (or text encoded as
UTF-8) and nothing else.
"""

import hashlib
from typing import Union


def calculate_checksum(data: Union[bytes, bytearray, str]) -> str:
    """
    Compute the lowercase hex SHA-512 digest of ``data``.

    Args:
        data:
            Raw bytes, or a string which is hashed as its UTF-8 encoding.

    Returns:
        A 128 character lowercase hex string.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(
            "calculate_checksum expects bytes or str, "
            f"got {type(data).__name__}"
        )

    return hashlib.sha512(data).hexdigest()
