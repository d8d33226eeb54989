"""
Debug-Info Extraction
=====================

The compiler interleaves its assembly output with structured comments that
delimit functions and correlate statements with C source lines:

    ;#{"code":"init","types":{},"vars":[{"n":{"loc":"ii0'8"}}]}   open
    ;#{"srcline":12}                                               source line
    ;#{"endcode":""}                                               close

Directive lines never reach the intermediate code. A directive whose
payload is not a JSON object is logged and skipped; it never aborts the
assembly.

Regions
-------
Each 'code' directive opens a region (a DebugRecord). Opening a region
completes the current one. The first completed region is the global scope
used as fallback for variable lookups.

All offsets are emitted-line indexes minus the current BODY value, so that
they are relative to the end of the preamble block.

At end of input the open region is completed, and the first record is
stretched to the end of the last one and tagged with the final BODY value
(the 'body' field).

State Machine
-------------
    NONE --open--> OPEN --close--> CLOSED --open--> OPEN
                   OPEN --open--> OPEN
                                CLOSED --close--> CLOSED   (end moves)
    NONE --close/srcline--> NONE                            (ignored)

A CLOSED region stays current: source-line markers, repeated close
directives and variable lookups still apply to it until the next open.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional
import json
import logging
import re

from smallc_asm.assembler.symbols import SymbolTable
from smallc_asm.assembler.variables import VariableScope
from smallc_asm.errors import DirectiveError, SourceLocation


logger = logging.getLogger(__name__)

DIRECTIVE_PATTERN = re.compile(r"^;#\{[^}\n]+\}")
DIRECTIVE_PREFIX = ";#"


# =============================================================================
# Debug Records
# =============================================================================

@dataclass
class DebugRecord:
    """
    Debug information for one function/region.

    Attributes:
        code: Region tag from the open directive (may be empty)
        begin: First statement offset, relative to BODY
        end: End offset, relative to BODY (None until a close directive)
        lines: (statement offset, source line) correlation pairs
        body: Preamble size, set on the first record only
        types: Type payload of the open directive (input only)
        vars: Variable payload of the open directive (input only)
    """
    code: Optional[str] = None
    begin: int = 0
    end: Optional[int] = None
    lines: list[tuple[int, Any]] = field(default_factory=list)
    body: Optional[int] = None
    types: Any = field(default=None, repr=False)
    vars: Optional[list[Any]] = field(default=None, repr=False)

    def has_source_line(self, srcline: Any) -> bool:
        return any(existing == srcline for _, existing in self.lines)

    def scope(self) -> VariableScope:
        """Variable scope declared by this region."""
        variables = self.vars if isinstance(self.vars, list) else []
        return VariableScope(self.code or "", variables)

    def to_dict(self) -> dict[str, Any]:
        """
        Render the record for output. Unset 'end'/'body' are omitted and
        the 'types'/'vars' payloads are never echoed.
        """
        result: dict[str, Any] = {}
        if self.code is not None:
            result["code"] = self.code
        result["begin"] = self.begin
        if self.end is not None:
            result["end"] = self.end
        result["lines"] = [list(pair) for pair in self.lines]
        if self.body is not None:
            result["body"] = self.body
        return result


class DirectiveKind(Enum):
    """Kind of a debug directive, by the key it carries."""
    OPEN = auto()
    CLOSE = auto()
    SOURCE_LINE = auto()
    UNKNOWN = auto()


class RegionState(Enum):
    """State of the region accumulator."""
    NONE = auto()
    OPEN = auto()
    CLOSED = auto()


def is_directive(line: str) -> bool:
    """Check if a trimmed line is a ;#{...} debug directive."""
    return DIRECTIVE_PATTERN.match(line) is not None


def decode_directive(line: str, location: Optional[SourceLocation] = None
                     ) -> tuple[DirectiveKind, dict[str, Any]]:
    """
    Decode the JSON payload of a directive line.

    Raises:
        DirectiveError: If the payload is not a JSON object
    """
    try:
        payload = json.loads(line[len(DIRECTIVE_PREFIX):])
    except json.JSONDecodeError as e:
        raise DirectiveError(
            f"malformed debug directive: {e.msg}",
            location=location,
            source_line=line,
        ) from e
    if not isinstance(payload, dict):
        raise DirectiveError(
            "debug directive is not a JSON object",
            location=location,
            source_line=line,
        )

    if "code" in payload:
        return DirectiveKind.OPEN, payload
    if "endcode" in payload:
        return DirectiveKind.CLOSE, payload
    if "srcline" in payload:
        return DirectiveKind.SOURCE_LINE, payload
    return DirectiveKind.UNKNOWN, payload


# =============================================================================
# Extractor
# =============================================================================

class DebugInfoExtractor:
    """
    Accumulates debug records while the first pass scans the source.

    The extractor reads the BODY value from the shared symbol table at the
    moment each directive is seen.

    Usage:
        extractor = DebugInfoExtractor(symbols)
        extractor.consume(line, statement_index)   # for each directive line
        records = extractor.finish()
    """

    def __init__(self, symbols: SymbolTable, filename: str = "<input>"):
        self._symbols = symbols
        self._filename = filename
        self._records: list[DebugRecord] = []
        self._current: Optional[DebugRecord] = None
        self._global: Optional[DebugRecord] = None
        self.state = RegionState.NONE

    @property
    def current(self) -> Optional[DebugRecord]:
        """Region that directives and variable lookups currently target."""
        return self._current

    @property
    def current_scope(self) -> Optional[VariableScope]:
        return self._current.scope() if self._current else None

    @property
    def global_scope(self) -> Optional[VariableScope]:
        return self._global.scope() if self._global else None

    def _offset(self, statement_index: int) -> int:
        return statement_index - self._symbols.preamble_size

    def consume(self, line: str, statement_index: int, line_number: int = 0) -> None:
        """
        Apply one directive line.

        Malformed directives are logged and ignored.
        """
        location = SourceLocation(self._filename, line_number, 1)
        try:
            kind, payload = decode_directive(line, location)
        except DirectiveError as e:
            logger.warning(f"Failed to parse debug info: {line} ({e.message})")
            return

        if kind is DirectiveKind.OPEN:
            self.open_region(payload, statement_index)
        elif kind is DirectiveKind.CLOSE:
            self.close_region(statement_index)
        elif kind is DirectiveKind.SOURCE_LINE:
            self.mark_source_line(payload["srcline"], statement_index)
        else:
            logger.debug(f"line {line_number}: ignoring directive without known key")

    def open_region(self, payload: dict[str, Any], statement_index: int) -> DebugRecord:
        """Complete the current region (if any) and open a new one."""
        if self.state is not RegionState.NONE:
            self._complete(self._current)

        record = DebugRecord(
            code=payload.get("code"),
            begin=self._offset(statement_index),
            types=payload.get("types"),
            vars=payload.get("vars"),
        )
        self._current = record
        self.state = RegionState.OPEN
        logger.debug(f"Opened region '{record.code}' at offset {record.begin}")
        return record

    def close_region(self, statement_index: int) -> None:
        """Set the end offset of the current region."""
        if self.state is RegionState.NONE:
            logger.debug("close directive outside of any region, ignored")
            return
        self._current.end = self._offset(statement_index)
        self.state = RegionState.CLOSED
        logger.debug(f"Closed region '{self._current.code}' at offset {self._current.end}")

    def mark_source_line(self, srcline: Any, statement_index: int) -> None:
        """Correlate the next statement with a source line (first wins)."""
        if self.state is RegionState.NONE:
            return
        if self._current.has_source_line(srcline):
            return
        self._current.lines.append((self._offset(statement_index), srcline))

    def _complete(self, record: DebugRecord) -> None:
        self._records.append(record)
        if self._global is None:
            self._global = record

    def finish(self) -> list[DebugRecord]:
        """
        Complete the open region and return all records in source order.
        """
        if self.state is not RegionState.NONE:
            self._complete(self._current)
            first = self._records[0]
            first.end = self._current.end
            first.body = self._symbols.preamble_size
            self._current = None
            self.state = RegionState.NONE
        return self._records
