"""
Syntax Validation
=================

A lightweight lint pass over SmallC ASM source. It does not assemble the
code and never raises: every problem becomes a message in the returned
ValidationResult, and every line is checked even after a problem is found.

Checks per line (blank and comment lines are skipped):
- every '\\' starts a well-formed \\name, variable reference
- double quotes are balanced
- parentheses are balanced (by count)
"""

from dataclasses import dataclass, field
import logging

from smallc_asm.assembler.variables import VARIABLE_PATTERN


logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """
    Result of validate_syntax().

    Attributes:
        valid: True if no problem was found
        errors: One message per problem, prefixed with "Line N: "
    """
    valid: bool = True
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


def _has_invalid_variable(line: str) -> bool:
    position = line.find("\\")
    while position != -1:
        if not VARIABLE_PATTERN.match(line, position):
            return True
        position = line.find("\\", position + 1)
    return False


def validate_syntax(source: str) -> ValidationResult:
    """
    Check source text for common syntax problems.

    Args:
        source: SmallC ASM source text

    Returns:
        ValidationResult listing every problem found
    """
    errors: list[str] = []

    for number, raw in enumerate(source.split("\n"), start=1):
        line = raw.strip()
        if not line or line.startswith(";"):
            continue

        if _has_invalid_variable(line):
            errors.append(f"Line {number}: Invalid variable syntax")

        if line.count('"') % 2 != 0:
            errors.append(f"Line {number}: Unmatched quotes")

        if line.count("(") != line.count(")"):
            errors.append(f"Line {number}: Unmatched parentheses")

    if errors:
        logger.debug(f"Validation found {len(errors)} problems")
    return ValidationResult(valid=not errors, errors=errors)
