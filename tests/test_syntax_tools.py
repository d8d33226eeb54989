# =============================================================================
# test_syntax_tools.py - Validator and Formatter Tests
# =============================================================================
# Tests for the stand-alone source utilities that share the assembler's
# grammar but do not assemble: validate_syntax() and format_code().
# =============================================================================

from smallc_asm import format_code, validate_syntax
from smallc_asm.assembler.formatter import format_line


# =============================================================================
# Validator Tests
# =============================================================================

class TestValidateSyntax:
    """Tests for validate_syntax()."""

    def test_valid_source(self):
        source = 'define BODY .\nMALLOC 0,100,\nEVAL8 gi0,"hi",\nLOAD buf,abi("f"),\nSTOP'
        result = validate_syntax(source)
        assert result.valid
        assert result.errors == []
        assert result

    def test_unmatched_quote_and_paren(self):
        """Both problems are reported; checking does not stop at the first."""
        result = validate_syntax('EVAL32 "unclosed string,\nIF (unmatched parentheses,')
        assert not result.valid
        assert result.errors == [
            "Line 1: Unmatched quotes",
            "Line 2: Unmatched parentheses",
        ]

    def test_several_problems_on_one_line(self):
        result = validate_syntax('EVAL32 \\bad name,"x,(')
        assert result.errors == [
            "Line 1: Invalid variable syntax",
            "Line 1: Unmatched quotes",
            "Line 1: Unmatched parentheses",
        ]

    def test_valid_variable_reference(self):
        assert validate_syntax("EVAL32 \\count,4,").valid

    def test_stray_backslash_after_valid_reference(self):
        result = validate_syntax("EVAL32 \\count,4,\\")
        assert result.errors == ["Line 1: Invalid variable syntax"]

    def test_comment_and_blank_lines_skipped(self):
        result = validate_syntax('; "unbalanced (\n\n   \nSTOP')
        assert result.valid

    def test_never_raises_on_odd_input(self):
        result = validate_syntax("\\\n\"\n)\n(((\n\x00")
        assert len(result.errors) == 4


# =============================================================================
# Formatter Tests
# =============================================================================

class TestFormatCode:
    """Tests for format_code()."""

    def test_instructions_indented(self):
        formatted = format_code("define test .\nEVAL32 ii0,1,\nIF ii0,4,\nRETURN")
        assert formatted == "define test .\n  EVAL32 ii0,1,\n  IF ii0,4,\n  RETURN"

    def test_labels_not_indented(self):
        assert format_line("   loop:") == "loop:"
        assert format_line("loop: NOP") == "  loop: NOP"

    def test_comments_and_blanks(self):
        assert format_line("   ; note") == "; note"
        assert format_line("    ") == ""
        assert format_line(';#{"code":"f"}') == ';#{"code":"f"}'

    def test_line_count_preserved(self):
        source = "NOP\n\n; c\nSTOP\n"
        assert format_code(source).count("\n") == source.count("\n")

    def test_custom_indent(self):
        assert format_code("NOP", indent="    ") == "    NOP"

    def test_idempotent(self):
        source = """; header
define BODY .
MALLOC 0,336,
    EVAL32 gi0,4,
start:
 STOP
"""
        once = format_code(source)
        assert format_code(once) == once

    def test_formatting_preserves_assembly(self):
        """Formatted source assembles to the same bytecode."""
        from smallc_asm import assemble
        source = "define BODY .\nMALLOC 0,100,\n   EVAL32 gi0,42,\nSTOP"
        assert assemble(format_code(source)).bytecode == assemble(source).bytecode
