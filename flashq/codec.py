"""Reversible text encoding for stored flash messages.

Not encryption: it only keeps arbitrary text safe inside cookie-backed
sessions.
"""
import base64


def encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode(text: str) -> str:
    return base64.b64decode(text).decode("utf-8", errors="replace")
