"""
SmallC ASM - Assembler Toolchain for SmallC Contracts
=====================================================

This package assembles SmallC ASM, the textual stack-machine assembly that
the SmallC contract compiler emits, into the compact object code executed
on chain.

Main Components
---------------
- **assembler**: Two-pass assembler (scasm)
    Produces object code, hex bytecode, a RIPEMD-160 content hash and
    debug records mapping statements to source functions and lines

- **validate_syntax**: Lint pass reporting unbalanced quotes/parentheses
  and malformed variable references

- **format_code**: Source re-indenter (scfmt)

Quick Start
-----------
Assemble a program:
    >>> from smallc_asm import Assembler
    >>> result = Assembler().assemble_file("token.asm")
    >>> if result.success:
    ...     print(result.hash)

Or use the command-line tools:
    $ scasm token.asm -o token.hex -g token.dbg.json
    $ scfmt -i token.asm

Version History
---------------
1.0.0 - Initial release with assembler, validator and formatter
"""

__version__ = "1.0.0"
__author__ = "Hugo José Pinto & Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from smallc_asm.assembler import (
    Assembler,
    AssemblyResult,
    DebugRecord,
    OPCODE_TABLE,
    ValidationResult,
    assemble,
    assemble_file,
    format_code,
    get_supported_opcodes,
    validate_syntax,
)
from smallc_asm.config import AssemblerConfig
from smallc_asm.errors import (
    SmallCAsmError,
    AssemblerError,
    UndefinedVariableError,
    DirectiveError,
    SourceLocation,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Assembler
    "Assembler",
    "AssemblyResult",
    "DebugRecord",
    "OPCODE_TABLE",
    "assemble",
    "assemble_file",
    "get_supported_opcodes",
    # Utilities
    "ValidationResult",
    "validate_syntax",
    "format_code",
    # Configuration
    "AssemblerConfig",
    # Exception hierarchy
    "SmallCAsmError",
    "AssemblerError",
    "UndefinedVariableError",
    "DirectiveError",
    "SourceLocation",
]
