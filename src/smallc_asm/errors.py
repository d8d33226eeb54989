"""
SmallC ASM Error Hierarchy
==========================

This module defines the exception hierarchy for the SmallC ASM toolchain.
All exceptions inherit from SmallCAsmError, allowing callers to catch all
package errors with a single except clause if desired.

Exception Hierarchy
-------------------
SmallCAsmError (base)
└── AssemblerError (assembler-related)
    ├── UndefinedVariableError - \\name, reference found in no scope
    └── DirectiveError - malformed ;#{...} debug directive

Only UndefinedVariableError aborts an assembly. DirectiveError is raised by
the directive decoder and caught by the debug-info extractor, which logs it
and drops the offending line.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class SmallCAsmError(Exception):
    """
    Base exception for all SmallC ASM errors.

        try:
            Assembler().assemble_or_raise(source)
        except SmallCAsmError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(SmallCAsmError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            contract.asm:7:8: error: invalid variable reference '\\amout,'
                EVAL32 \\amout,4,
                       ^
            hint: searched scopes: 'transfer', global
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UndefinedVariableError(AssemblerError):
    """
    Reference to a variable that no debug region declares.

    Raised during the first pass when a \\name, token matches neither the
    current region's variables nor the global region's variables. This is
    a hard failure: the assembly is aborted.
    """

    def __init__(
        self,
        token: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        searched_scopes: Optional[list[str]] = None,
    ):
        self.token = token
        self.searched_scopes = searched_scopes or []

        hint = None
        if self.searched_scopes:
            hint = f"searched scopes: {', '.join(self.searched_scopes)}"
        else:
            hint = "no debug region declares variables at this point"

        super().__init__(
            f"invalid variable reference '{token}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class DirectiveError(AssemblerError):
    """
    Malformed debug directive.

    Raised when the payload after ';#' is not a JSON object. Never escapes
    an assembly: the extractor logs it and skips the line.
    """
    pass
