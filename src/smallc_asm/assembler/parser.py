"""
First Pass
==========

Turns SmallC ASM source text into a sequence of intermediate statements,
each tagged with its emitted-line index, and collects the symbol table and
debug records on the way.

For every source line (trimmed):

1. ;#{...} debug directives go to the DebugInfoExtractor and are dropped.
2. Everything from the first ';' is a comment and is removed; lines left
   empty are dropped.
3. abi("...") / ABI("...") calls are expanded to selector tokens.
4. \\name, variable references are resolved against the current and the
   global region scopes.
5. define statements update the symbol table and are dropped.
6. Anything else becomes a Statement and receives the next index.

Only step 6 advances the emitted-line counter.
"""

from dataclasses import dataclass, field
from typing import Iterator
import logging
import re

from smallc_asm.assembler.debuginfo import DebugInfoExtractor, DebugRecord, is_directive
from smallc_asm.assembler.literals import expand_abi_calls
from smallc_asm.assembler.symbols import SymbolTable, match_define
from smallc_asm.assembler.variables import resolve_variables


logger = logging.getLogger(__name__)

COMMENT_PATTERN = re.compile(r"\s*;.*$")


@dataclass
class SourceLine:
    """A raw source line with its 1-based line number."""
    number: int
    text: str


@dataclass
class Statement:
    """
    One statement of the intermediate code.

    Attributes:
        text: Statement text after first-pass rewriting
        index: Emitted-line index (0-based)
        source_line: Line number in the source file (1-based)
    """
    text: str
    index: int
    source_line: int


@dataclass
class FirstPassResult:
    """Output of the first pass."""
    statements: list[Statement] = field(default_factory=list)
    symbols: SymbolTable = field(default_factory=SymbolTable)
    debug_info: list[DebugRecord] = field(default_factory=list)


def split_lines(source: str) -> Iterator[SourceLine]:
    """Yield the source lines, numbered from 1."""
    for number, text in enumerate(source.split("\n"), start=1):
        yield SourceLine(number, text)


def strip_comment(line: str) -> str:
    """Remove a ';' comment and the whitespace before it."""
    return COMMENT_PATTERN.sub("", line, count=1)


class FirstPass:
    """
    First assembler pass.

    All state is local to one run() call.
    """

    def __init__(self, filename: str = "<input>"):
        self._filename = filename

    def run(self, source: str) -> FirstPassResult:
        """
        Process a complete source text.

        Raises:
            UndefinedVariableError: If a variable reference cannot be resolved
        """
        symbols = SymbolTable()
        extractor = DebugInfoExtractor(symbols, self._filename)
        statements: list[Statement] = []

        for source_line in split_lines(source):
            line = source_line.text.strip()

            if is_directive(line):
                extractor.consume(line, len(statements), source_line.number)
                continue

            line = strip_comment(line)
            if not line:
                continue

            line = expand_abi_calls(line)
            line = resolve_variables(
                line,
                extractor.current_scope,
                extractor.global_scope,
                filename=self._filename,
                line_number=source_line.number,
            )

            operands = match_define(line)
            if operands is not None:
                symbols.define_statement(operands, len(statements), source_line.number)
                continue

            statements.append(Statement(line, len(statements), source_line.number))

        debug_info = extractor.finish()
        logger.debug(
            f"First pass: {len(statements)} statements, {len(symbols)} symbols, "
            f"{len(debug_info)} debug records"
        )
        return FirstPassResult(statements, symbols, debug_info)
