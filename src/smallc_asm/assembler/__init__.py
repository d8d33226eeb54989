"""
SmallC ASM Assembler
====================

This package turns SmallC ASM, the stack-machine assembly emitted by the
SmallC contract compiler, into object code, hex bytecode, a content hash
and debug records mapping statements back to source functions and lines.

Main Components
---------------
- **Assembler**: Runs both passes and builds the AssemblyResult
- **FirstPass**: Directives, comments, ABI selectors, variables, defines
- **CodeGenerator**: Opcodes, strings, symbols, relative addresses
- **DebugInfoExtractor**: Function regions and source-line correlation
- **SymbolTable**: define statements and longest-first substitution
- **validate_syntax / format_code**: Stand-alone source utilities

Assembly Process
----------------
1. **First pass** (per source line):
   - Consume ;#{...} debug directives
   - Strip comments, expand abi()/ABI() calls, resolve \\name, variables
   - Record define statements, number the remaining statements

2. **Second pass** (per statement):
   - Encode mnemonics as single characters
   - Encode string literals as hex
   - Substitute defined symbols, longest name first
   - Convert .N targets to relative distances

3. **Output**: hex bytecode of the object code and its RIPEMD-160 hash

Example Usage
-------------
>>> from smallc_asm.assembler import assemble
>>> result = assemble("EVAL8 gi0,\\"hi\\",\\nSTOP")
>>> result.object_code
'Agi0,x6869,\\nz'
"""

from smallc_asm.assembler.assembler import (
    Assembler,
    AssemblyResult,
    assemble,
    assemble_file,
)
from smallc_asm.assembler.codegen import CodeGenerator, resolve_relative_addresses
from smallc_asm.assembler.debuginfo import DebugInfoExtractor, DebugRecord
from smallc_asm.assembler.formatter import format_code
from smallc_asm.assembler.opcodes import (
    OpcodeInfo,
    OPCODE_TABLE,
    MNEMONICS,
    get_opcode,
    get_supported_opcodes,
    is_valid_mnemonic,
)
from smallc_asm.assembler.parser import FirstPass, Statement
from smallc_asm.assembler.symbols import SymbolTable
from smallc_asm.assembler.validator import ValidationResult, validate_syntax
from smallc_asm.assembler.variables import VariableScope

__all__ = [
    # Main class and functions
    "Assembler",
    "AssemblyResult",
    "assemble",
    "assemble_file",
    # Passes
    "FirstPass",
    "Statement",
    "CodeGenerator",
    "resolve_relative_addresses",
    # Debug info and scopes
    "DebugInfoExtractor",
    "DebugRecord",
    "SymbolTable",
    "VariableScope",
    # Opcodes
    "OpcodeInfo",
    "OPCODE_TABLE",
    "MNEMONICS",
    "get_opcode",
    "get_supported_opcodes",
    "is_valid_mnemonic",
    # Utilities
    "ValidationResult",
    "validate_syntax",
    "format_code",
]
