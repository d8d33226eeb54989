"""
Source Formatter
================

Re-indents SmallC ASM source: define statements and bare labels start at
column 0, instructions are indented, blank and comment lines are kept (with
surrounding whitespace removed). Formatting formatted code changes nothing.

    define init .           define init .
    ALLOC 0,48,      ->       ALLOC 0,48,
    ; setup                 ; setup
    RETURN                    RETURN
"""

import re


DEFAULT_INDENT = "  "
LABEL_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*:$")


def format_line(line: str, indent: str = DEFAULT_INDENT) -> str:
    """Format a single source line."""
    line = line.strip()
    if line.startswith("define ") or LABEL_PATTERN.match(line):
        return line
    if line and not line.startswith(";"):
        return indent + line
    return line


def format_code(source: str, indent: str = DEFAULT_INDENT) -> str:
    """
    Format SmallC ASM source text line by line.

    Args:
        source: Source text
        indent: Indentation for instruction lines (two spaces by default)

    Returns:
        The formatted text, with the same number of lines
    """
    return "\n".join(format_line(line, indent) for line in source.split("\n"))
