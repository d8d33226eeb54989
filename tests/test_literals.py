# =============================================================================
# test_literals.py - Literal Encoding Tests
# =============================================================================
# Tests for ABI selector expansion and string literal encoding.
# SHA-256 reference values: sha256("abc") = ba7816bf..., sha256("") = e3b0c442...
# =============================================================================

from smallc_asm.assembler import literals
from smallc_asm.assembler.literals import (
    abi_selector,
    encode_string,
    encode_string_literals,
    expand_abi_calls,
    wide_abi_selector,
)


# =============================================================================
# ABI Selectors
# =============================================================================

class TestAbiSelectors:
    """Tests for abi("...") and ABI("...") expansion."""

    def test_abi_selector(self):
        """abi() yields 'x' plus the first 8 hex digits of SHA-256."""
        assert abi_selector("abc") == "xba7816bf"

    def test_abi_selector_empty(self):
        assert abi_selector("") == "xe3b0c442"

    def test_wide_abi_selector(self):
        """ABI() yields a 16-digit token with a zero low half."""
        assert wide_abi_selector("abc") == "xba7816bf00000000"
        assert len(wide_abi_selector("transfer")) == 17

    def test_wide_selector_zero_guard(self, monkeypatch):
        """An all-zero prefix becomes 00000001 for ABI()."""
        monkeypatch.setattr(literals, "_sha256_prefix", lambda text: "00000000")
        assert wide_abi_selector("anything") == "x0000000100000000"

    def test_narrow_selector_has_no_zero_guard(self, monkeypatch):
        """abi() keeps an all-zero prefix as is."""
        monkeypatch.setattr(literals, "_sha256_prefix", lambda text: "00000000")
        assert abi_selector("anything") == "x00000000"

    def test_expand_in_line(self):
        assert expand_abi_calls('LOAD buf,abi("abc"),') == "LOAD buf,xba7816bf,"

    def test_expand_both_forms(self):
        line = 'EVAL64 gi0,ABI("abc"),abi("abc"),'
        assert expand_abi_calls(line) == "EVAL64 gi0,xba7816bf00000000,xba7816bf,"

    def test_forms_are_case_distinct(self):
        """Mixed-case calls are not selector calls."""
        assert expand_abi_calls('Abi("abc")') == 'Abi("abc")'


# =============================================================================
# String Literals
# =============================================================================

class TestStringLiterals:
    """Tests for quoted string encoding."""

    def test_ascii(self):
        assert encode_string("test") == "x74657374"

    def test_zero_padding(self):
        assert encode_string("\x01\n") == "x010a"

    def test_code_unit_encoding(self):
        """Characters above 0xFF emit their full code unit."""
        assert encode_string("é") == "xe9"
        assert encode_string("中") == "x4e2d"

    def test_in_line(self):
        assert encode_string_literals('EVAL8 gi0,"hi",') == "EVAL8 gi0,x6869,"

    def test_multiple_literals(self):
        assert encode_string_literals('"a","b"') == "x61,x62"

    def test_comma_not_allowed(self):
        """Strings containing a comma are left untouched."""
        assert encode_string_literals('EVAL8 "a,b",') == 'EVAL8 "a,b",'

    def test_empty_string_untouched(self):
        assert encode_string_literals('EVAL8 "",') == 'EVAL8 "",'
