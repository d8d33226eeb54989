"""
Symbol Table
============

Collects `define` statements during the first pass and substitutes them
into the intermediate code during the second pass.

Define Statements
-----------------
    define NAME ... TARGET

Only the first and the last space-separated tokens matter. A TARGET of '.'
means "here": it is replaced by the emitted-line index the next statement
will receive. Redefining a name silently replaces the previous value.

    define loop .          ; loop -> "7" (if 7 statements precede it)
    define SIZE = 32       ; SIZE -> "32"

Substitution
------------
Names are replaced as whole words, longest name first, so that BODY2 is
never clipped by the replacement for BODY.

The BODY symbol
---------------
BODY marks the end of the preamble block. Its numeric value is subtracted
from every debug region boundary and source-line correlation.
"""

from dataclasses import dataclass
from typing import Iterator, Optional
import logging
import re


logger = logging.getLogger(__name__)

PREAMBLE_SYMBOL = "BODY"
HERE_MARKER = "."

DEFINE_PATTERN = re.compile(r"^define\s+(.*)$")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass
class Definition:
    """
    A single symbol definition.

    Attributes:
        name: Symbol name
        location: Substituted text, a literal value or a statement index
        statement_index: Emitted-line counter when the define was read
        source_line: Line in the source file (1-based, 0 if unknown)
    """
    name: str
    location: str
    statement_index: int = 0
    source_line: int = 0


def match_define(line: str) -> Optional[str]:
    """
    Return the operand text of a define statement, or None if the line is
    not a define.
    """
    match = DEFINE_PATTERN.match(line)
    return match.group(1) if match else None


def parse_int_prefix(value: str) -> Optional[int]:
    """Parse the leading integer of a value ("12", "12abc" -> 12)."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class SymbolTable:
    """
    Name to location mapping built from define statements.

    Usage:
        symbols = SymbolTable()
        symbols.define_statement("loop .", statement_index=3)
        symbols.substitute("IF ii0,.loop,")   # -> "IF ii0,.3,"
    """

    def __init__(self):
        self._symbols: dict[str, Definition] = {}
        self._patterns: Optional[list[tuple[re.Pattern, str]]] = None

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Definition]:
        return iter(self._symbols.values())

    # =========================================================================
    # Definition
    # =========================================================================

    def define(self, name: str, location: str,
               statement_index: int = 0, source_line: int = 0) -> Definition:
        """
        Record a symbol, replacing any previous definition of the same name.
        """
        if name in self._symbols:
            logger.debug(
                f"Redefining '{name}': {self._symbols[name].location} -> {location}"
            )
        definition = Definition(name, location, statement_index, source_line)
        self._symbols[name] = definition
        self._patterns = None
        return definition

    def define_statement(self, operands: str, statement_index: int,
                         source_line: int = 0) -> Optional[Definition]:
        """
        Record the symbol declared by a define statement.

        Args:
            operands: Text after the 'define' keyword
            statement_index: Current emitted-line counter, used for '.'
            source_line: Source line of the statement

        Returns:
            The new Definition, or None if the statement has no target
        """
        parts = operands.split(" ")
        if len(parts) < 2:
            logger.warning(
                f"line {source_line}: define '{operands}' has no target, ignored"
            )
            return None

        target = parts[-1]
        if target == HERE_MARKER:
            target = str(statement_index)
        return self.define(parts[0], target, statement_index, source_line)

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, name: str) -> Optional[str]:
        """Get the location string of a symbol, or None if undefined."""
        definition = self._symbols.get(name)
        return definition.location if definition else None

    def numeric_value(self, name: str) -> int:
        """
        Get the integer value of a symbol.

        Undefined symbols are 0. Values are read with leading-integer
        semantics; a value with no leading integer is 0.
        """
        location = self.get(name)
        if location is None:
            return 0
        value = parse_int_prefix(location)
        if value is None:
            logger.warning(f"symbol '{name}' has non-numeric value '{location}', using 0")
            return 0
        return value

    @property
    def preamble_size(self) -> int:
        """Current numeric value of BODY (0 while undefined)."""
        return self.numeric_value(PREAMBLE_SYMBOL)

    def by_length(self) -> list[Definition]:
        """Definitions sorted by descending name length (stable)."""
        return sorted(self._symbols.values(), key=lambda d: -len(d.name))

    # =========================================================================
    # Substitution
    # =========================================================================

    def substitute(self, line: str) -> str:
        """
        Replace every defined name in a line by its location, as whole
        words, longest name first.
        """
        if self._patterns is None:
            self._patterns = [
                (re.compile(rf"\b{re.escape(d.name)}\b", re.ASCII), d.location)
                for d in self.by_length()
            ]
        for pattern, location in self._patterns:
            line = pattern.sub(lambda m, loc=location: loc, line)
        return line
