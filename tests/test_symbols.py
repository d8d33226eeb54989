# =============================================================================
# test_symbols.py - Symbol Table and Variable Resolution Tests
# =============================================================================
# Test coverage includes:
#   - define statements, '.' placeholder, redefinition
#   - Longest-name-first whole-word substitution
#   - BODY preamble value
#   - \name, variable lookup in current and global scopes
# =============================================================================

import pytest

from smallc_asm.assembler.symbols import SymbolTable, match_define, parse_int_prefix
from smallc_asm.assembler.variables import VariableScope, resolve_variables
from smallc_asm.errors import UndefinedVariableError


# =============================================================================
# Define Statements
# =============================================================================

class TestDefineStatements:
    """Tests for define parsing and recording."""

    def test_match_define(self):
        assert match_define("define loop .") == "loop ."
        assert match_define("define   SIZE = 32") == "SIZE = 32"
        assert match_define("EVAL32 gi0,1,") is None
        assert match_define("defines x") is None

    def test_here_marker(self):
        """'.' is replaced by the current statement index."""
        symbols = SymbolTable()
        symbols.define_statement("loop .", statement_index=3)
        assert symbols.get("loop") == "3"

    def test_last_token_is_target(self):
        symbols = SymbolTable()
        symbols.define_statement("SIZE = 32", statement_index=0)
        assert symbols.get("SIZE") == "32"

    def test_redefinition_last_wins(self):
        symbols = SymbolTable()
        symbols.define_statement("x 1", 0)
        symbols.define_statement("x 2", 0)
        assert symbols.get("x") == "2"
        assert len(symbols) == 1

    def test_define_without_target_ignored(self):
        symbols = SymbolTable()
        assert symbols.define_statement("lonely", 0) is None
        assert "lonely" not in symbols

    def test_definition_records_position(self):
        symbols = SymbolTable()
        definition = symbols.define_statement("end .", statement_index=7, source_line=12)
        assert definition.statement_index == 7
        assert definition.source_line == 12


# =============================================================================
# Substitution
# =============================================================================

class TestSubstitution:
    """Tests for second-pass symbol substitution."""

    def test_whole_word_only(self):
        symbols = SymbolTable()
        symbols.define("init", "10")
        assert symbols.substitute("CALL 0,.init,initial,") == "CALL 0,.10,initial,"

    def test_longest_name_first(self):
        """BODY2 is replaced as a whole, never clipped by BODY."""
        symbols = SymbolTable()
        symbols.define("BODY", "4")
        symbols.define("BODY2", "9")
        assert [d.name for d in symbols.by_length()] == ["BODY2", "BODY"]
        assert symbols.substitute("EVAL32 gi0,BODY2,BODY,") == "EVAL32 gi0,9,4,"

    def test_substitution_order_is_length_order(self):
        """A longer name is substituted before a shorter one it expands to."""
        symbols = SymbolTable()
        symbols.define("A", "1")
        symbols.define("LONG", "A")
        # LONG -> A first, then A -> 1
        assert symbols.substitute("LONG") == "1"

    def test_replacement_is_literal(self):
        """Locations are inserted verbatim, not as regex templates."""
        symbols = SymbolTable()
        symbols.define("ref", r"\1")
        assert symbols.substitute("x ref") == r"x \1"

    def test_substitute_after_new_define(self):
        symbols = SymbolTable()
        symbols.define("a", "1")
        assert symbols.substitute("a") == "1"
        symbols.define("b", "2")
        assert symbols.substitute("a b") == "1 2"


class TestPreamble:
    """Tests for the BODY value."""

    def test_undefined_is_zero(self):
        assert SymbolTable().preamble_size == 0

    def test_numeric(self):
        symbols = SymbolTable()
        symbols.define("BODY", "12")
        assert symbols.preamble_size == 12

    def test_non_numeric_is_zero(self):
        symbols = SymbolTable()
        symbols.define("BODY", "abc")
        assert symbols.preamble_size == 0

    def test_parse_int_prefix(self):
        assert parse_int_prefix("12abc") == 12
        assert parse_int_prefix("-3") == -3
        assert parse_int_prefix("x1") is None

    def test_parse_int_prefix_ascii_decimal_only(self):
        """Only ASCII decimal digits count; a 0x prefix stops at the 'x'."""
        assert parse_int_prefix("٣") is None
        assert parse_int_prefix("1٣") == 1
        assert parse_int_prefix("0x10") == 0


# =============================================================================
# Variable Resolution
# =============================================================================

@pytest.fixture
def scopes():
    global_scope = VariableScope("", [
        {"total": {"loc": "gi8", "type": "int"}},
        {"shadowed": {"loc": "gi16"}},
    ])
    local_scope = VariableScope("transfer", [
        {"amount": {"loc": "ii0'8", "type": "long"}},
        {"shadowed": {"loc": "ii0'16"}},
        {"empty": {"loc": ""}},
    ])
    return local_scope, global_scope


class TestVariableResolution:
    """Tests for \\name, references."""

    def test_scope_lookup(self, scopes):
        local_scope, _ = scopes
        assert local_scope.lookup("amount") == "ii0'8"
        assert local_scope.lookup("total") is None

    def test_token_replaced_with_location(self, scopes):
        """The comma is consumed along with the reference."""
        local_scope, global_scope = scopes
        line = resolve_variables(r"EVAL64 \amount,x10,", local_scope, global_scope)
        assert line == "EVAL64 ii0'8x10,"

    def test_global_fallback(self, scopes):
        local_scope, global_scope = scopes
        assert resolve_variables(r"\total,", local_scope, global_scope) == "gi8"

    def test_current_scope_wins(self, scopes):
        local_scope, global_scope = scopes
        assert resolve_variables(r"\shadowed,", local_scope, global_scope) == "ii0'16"

    def test_empty_location_falls_back(self, scopes):
        local_scope, global_scope = scopes
        global_scope.variables.append({"empty": {"loc": "gi24"}})
        assert resolve_variables(r"\empty,", local_scope, global_scope) == "gi24"

    def test_no_scopes(self):
        with pytest.raises(UndefinedVariableError):
            resolve_variables(r"EVAL32 \x,1,", None, None)

    def test_missing_variable(self, scopes):
        local_scope, global_scope = scopes
        with pytest.raises(UndefinedVariableError) as exc_info:
            resolve_variables(r"EVAL32 \missingvar,4,", local_scope, global_scope,
                              filename="t.asm", line_number=5)
        error = exc_info.value
        assert error.token == r"\missingvar,"
        assert r"\missingvar," in str(error)
        assert error.location.line == 5
        assert error.location.column == 8
        assert "'transfer'" in error.hint

    def test_lines_without_references_untouched(self):
        assert resolve_variables("EVAL32 gi0,1,", None, None) == "EVAL32 gi0,1,"
