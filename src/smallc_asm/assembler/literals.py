"""
Literal Encoding
================

Converts the two kinds of source literals into hex literal tokens. A hex
literal token is an 'x' followed by hexadecimal digits.

ABI selectors (first pass)
--------------------------
    abi("transfer")   ->  x + first 8 hex digits of SHA-256("transfer")
    ABI("transfer")   ->  x + first 8 hex digits + "00000000"

The upper-case form produces a 16-digit token. Its 8-digit prefix is never
allowed to be all zeros: a "00000000" prefix becomes "00000001", so a wide
selector can never equal the all-zero sentinel.

String literals (second pass)
-----------------------------
    "test"  ->  x74657374

One hex group per UTF-16 code unit, zero-padded to two digits. Strings may
not contain a comma or a double quote.
"""

import hashlib
import re


ABI_CALL_PATTERN = re.compile(r'abi\("([^"]*)"\)')
WIDE_ABI_CALL_PATTERN = re.compile(r'ABI\("([^"]*)"\)')
STRING_LITERAL_PATTERN = re.compile(r'"([^,"]+)"')

SELECTOR_DIGITS = 8
ZERO_SELECTOR = "0" * SELECTOR_DIGITS
ZERO_SELECTOR_REPLACEMENT = "00000001"


def _sha256_prefix(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:SELECTOR_DIGITS]


def abi_selector(text: str) -> str:
    """Return the 8-digit selector token for abi("text")."""
    return "x" + _sha256_prefix(text)


def wide_abi_selector(text: str) -> str:
    """Return the 16-digit selector token for ABI("text")."""
    prefix = _sha256_prefix(text)
    if prefix == ZERO_SELECTOR:
        prefix = ZERO_SELECTOR_REPLACEMENT
    return "x" + prefix + ZERO_SELECTOR


def expand_abi_calls(line: str) -> str:
    """
    Replace abi("...") and ABI("...") calls by their selector tokens.

    Lower-case calls are expanded first; the two forms are case-distinct.
    """
    line = ABI_CALL_PATTERN.sub(lambda m: abi_selector(m.group(1)), line)
    line = WIDE_ABI_CALL_PATTERN.sub(lambda m: wide_abi_selector(m.group(1)), line)
    return line


def encode_string(text: str) -> str:
    """
    Encode raw string contents as a hex literal token.

    Each UTF-16 code unit becomes one group of at least two hex digits,
    so ASCII text maps to one byte per character.
    """
    units = text.encode("utf-16-le", "surrogatepass")
    return "x" + "".join(
        f"{int.from_bytes(units[i:i + 2], 'little'):02x}"
        for i in range(0, len(units), 2)
    )


def encode_string_literals(line: str) -> str:
    """Replace every quoted string literal in a line by its hex token."""
    return STRING_LITERAL_PATTERN.sub(lambda m: encode_string(m.group(1)), line)
