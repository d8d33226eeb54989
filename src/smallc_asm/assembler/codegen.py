"""
Second Pass
===========

Turns the intermediate statements of the first pass into object code.
Each statement goes through four rewrites, in this order:

1. Opcode encoding      EVAL32 gi0,.loop,  ->  Cgi0,.loop,
2. String literals      "ab"               ->  x6162
3. Symbol substitution  .loop              ->  .3
4. Relative addresses   .3 (at index 5)    ->  n2

Relative Addresses
------------------
After substitution, a '.<digits>' token names an absolute emitted-line
index. It is rewritten as the distance from the statement that uses it:

    distance = target - current
    distance >= 0   ->  "<distance>"
    distance <  0   ->  "n<-distance>"

This must run after symbol substitution, since defines resolving to line
indexes only become '.<digits>' tokens there.
"""

import logging
import re

from smallc_asm.assembler.literals import encode_string_literals
from smallc_asm.assembler.opcodes import encode_opcodes
from smallc_asm.assembler.parser import Statement
from smallc_asm.assembler.symbols import SymbolTable


logger = logging.getLogger(__name__)

RELATIVE_ADDRESS_PATTERN = re.compile(r"\.([0-9]+)")
NEGATIVE_PREFIX = "n"


def encode_distance(target: int, current: int) -> str:
    """Encode the signed distance from current to target."""
    distance = target - current
    if distance < 0:
        return f"{NEGATIVE_PREFIX}{-distance}"
    return str(distance)


def resolve_relative_addresses(line: str, current: int) -> str:
    """Rewrite every '.<digits>' token of a line as a relative distance."""
    return RELATIVE_ADDRESS_PATTERN.sub(
        lambda m: encode_distance(int(m.group(1)), current), line
    )


class CodeGenerator:
    """
    Second assembler pass.

    Usage:
        codegen = CodeGenerator(first_pass.symbols)
        object_code = codegen.generate(first_pass.statements)
    """

    def __init__(self, symbols: SymbolTable):
        self._symbols = symbols

    def encode_statement(self, statement: Statement) -> str:
        """Apply all second-pass rewrites to one statement."""
        line = encode_opcodes(statement.text)
        line = encode_string_literals(line)
        line = self._symbols.substitute(line)
        return resolve_relative_addresses(line, statement.index)

    def generate(self, statements: list[Statement]) -> str:
        """
        Generate the object code text.

        Returns:
            Encoded statements joined by newlines, with surrounding
            whitespace removed
        """
        lines = [self.encode_statement(s) for s in statements if s.text.strip()]
        object_code = "\n".join(lines).strip()
        logger.debug(f"Second pass: {len(lines)} lines, {len(object_code)} characters")
        return object_code
