#!/usr/bin/env python3
"""
SmallC ASM Assembler Demo
=========================

This script demonstrates how to use the smallc_asm library to:
1. Check a source file for syntax warnings
2. Assemble it into bytecode and a content hash
3. Inspect the debug records
4. List the supported opcodes

Usage:
    source .venv/bin/activate
    python examples/assembler_demo.py [file.asm]

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import sys
from pathlib import Path

from smallc_asm import assemble_file, get_supported_opcodes, validate_syntax


def preview(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def main():
    source_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).with_name("token.asm")

    # ==========================================================================
    # 1. Validate
    # ==========================================================================
    print(f"Checking {source_path}...")
    validation = validate_syntax(source_path.read_text())
    if not validation:
        for error in validation.errors:
            print(f"   {error}")
        return 1
    print("   No warnings")

    # ==========================================================================
    # 2. Assemble
    # ==========================================================================
    print("\nAssembling...")
    result = assemble_file(source_path)
    if not result.success:
        print(f"   Assembly error: {result.error}")
        return 1

    print(f"   Bytecode: {len(result.bytecode)} hex characters")
    print(f"   Hash:     {result.hash}")
    print(f"   Object code:\n{preview(result.object_code, 200)}")
    print(f"   Bytecode preview:\n{preview(result.bytecode, 100)}")

    # ==========================================================================
    # 3. Debug records
    # ==========================================================================
    print(f"\nDebug info: {len(result.debug_info)} functions")
    for record in result.debug_info:
        name = record.code or "<global>"
        print(f"   {name:12} begin={record.begin} end={record.end} lines={len(record.lines)}")

    # ==========================================================================
    # 4. Opcodes
    # ==========================================================================
    opcodes = get_supported_opcodes()
    print(f"\nSupported opcodes ({len(opcodes)}):")
    print("   " + ", ".join(opcode.strip() for opcode in opcodes[:10]) + ", ...")

    return 0


if __name__ == "__main__":
    sys.exit(main())
