"""
KSUID - K-Sortable Unique Identifier.

Used as the session id stamped on every log line and as the tracking id of
game errors and crash records.
Format: 4 bytes timestamp + 16 bytes random = 27 char base62 string.
"""

import os
import struct
import time

# KSUID epoch: 2014-05-13
KSUID_EPOCH = 1400000000
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
KSUID_LENGTH = 27


def generate_ksuid(epoch_s=None, payload=None):
    """Generate a 27-character sortable unique ID.

    epoch_s and payload are only meant for tests that need a fixed id.
    """
    if epoch_s is None:
        epoch_s = int(time.time())
    if payload is None:
        payload = os.urandom(16)

    raw = struct.pack(">I", epoch_s - KSUID_EPOCH) + payload
    n = int.from_bytes(raw, byteorder="big")

    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(BASE62[remainder])

    return "".join(reversed(chars)).rjust(KSUID_LENGTH, "0")


def ksuid_epoch(ksuid):
    """Unix seconds encoded in a KSUID."""
    n = 0
    for char in ksuid:
        n = n * 62 + BASE62.index(char)
    raw = n.to_bytes(20, byteorder="big")
    return struct.unpack(">I", raw[:4])[0] + KSUID_EPOCH
