"""
Variable Resolution
===================

Replaces `\\name,` references by the storage location that the compiler
recorded for the variable in the debug directives.

    ;#{"code":"transfer","vars":[{"amount":{"loc":"ii0'8","type":"long"}}]}
    EVAL64 \\amount,x10,    ->  EVAL64 ii0'8x10,

The whole token, trailing comma included, is replaced by the location text.

Lookup order: the variables of the region currently open, then those of
the global region (the first region the extractor completed). A reference
found in neither scope aborts the assembly.
"""

from typing import Any, Optional
import logging
import re

from smallc_asm.errors import SourceLocation, UndefinedVariableError


logger = logging.getLogger(__name__)

VARIABLE_PATTERN = re.compile(r"\\([0-9a-z_]+),", re.IGNORECASE | re.ASCII)


class VariableScope:
    """
    Variables declared by one debug region.

    The compiler emits variables as a list of single-entry objects mapping
    the variable name to its attributes; only the 'loc' attribute is used.

    Attributes:
        label: Region code tag, used in error hints
        variables: The raw 'vars' list from the directive
    """

    def __init__(self, label: str, variables: Optional[list[Any]] = None):
        self.label = label
        self.variables = variables or []

    def __repr__(self) -> str:
        return f"VariableScope({self.label!r}, {len(self.variables)} entries)"

    def lookup(self, name: str) -> Optional[str]:
        """
        Find the location of a variable.

        Returns:
            The location text, or None if the scope does not declare the
            variable or declares it without a location
        """
        for entry in self.variables:
            if not isinstance(entry, dict) or name not in entry:
                continue
            attributes = entry[name]
            if not isinstance(attributes, dict):
                return None
            location = attributes.get("loc")
            if location is None or location == "":
                return None
            return str(location)
        return None


def resolve_variables(
    line: str,
    scope: Optional[VariableScope],
    global_scope: Optional[VariableScope],
    filename: str = "<input>",
    line_number: int = 0,
) -> str:
    """
    Replace every variable reference in a line.

    Args:
        line: Statement text
        scope: Variables of the current region, if a region is open
        global_scope: Variables of the global region, once known
        filename: Source name for error locations
        line_number: Source line for error locations

    Returns:
        The line with all references replaced

    Raises:
        UndefinedVariableError: If a reference is found in neither scope
    """
    def replace(match: re.Match) -> str:
        name = match.group(1)
        for candidate in (scope, global_scope):
            if candidate is None:
                continue
            location = candidate.lookup(name)
            if location is not None:
                logger.debug(f"Resolved variable '{name}' -> '{location}' ({candidate.label})")
                return location

        searched = [repr(s.label) for s in (scope, global_scope) if s is not None]
        raise UndefinedVariableError(
            match.group(0),
            location=SourceLocation(filename, line_number, match.start() + 1),
            source_line=line,
            searched_scopes=searched,
        )

    return VARIABLE_PATTERN.sub(replace, line)
