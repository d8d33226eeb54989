"""
SmallC ASM Command-Line Interface
=================================

This package provides command-line tools for the SmallC ASM toolchain:

- **scasm**: Assembler (bytecode, hash, object code and debug artifacts)
- **scfmt**: Source formatter and syntax checker

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["scasm", "scfmt"]
