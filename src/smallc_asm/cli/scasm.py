"""
scasm - SmallC ASM Assembler Command-Line Interface
===================================================

This module implements the command-line interface for the SmallC ASM
assembler.

Usage Examples
--------------
Basic assembly (writes token.hex, prints the hash):
    $ scasm token.asm

With output file:
    $ scasm token.asm -o build/token.hex

Write every artifact:
    $ scasm token.asm --object token.obj --hash token.hash -g token.dbg.json

Print the full result record as JSON:
    $ scasm token.asm --json

Lint before assembling:
    $ scasm --check token.asm

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from smallc_asm import __version__
from smallc_asm.assembler import Assembler, AssemblyResult, validate_syntax
from smallc_asm.cli.errors import ExitCode, handle_cli_exception
from smallc_asm.config import AssemblerConfig


def write_artifacts(
    result: AssemblyResult,
    output: Path,
    object_file: Optional[Path] = None,
    hash_file: Optional[Path] = None,
    debug_file: Optional[Path] = None,
) -> list[Path]:
    """
    Write the artifacts of a successful assembly.

    Returns:
        The paths written, in order
    """
    written = [output]
    output.write_text(result.bytecode + "\n")

    if object_file:
        object_file.write_text(result.object_code + "\n")
        written.append(object_file)

    if hash_file:
        hash_file.write_text(result.hash + "\n")
        written.append(hash_file)

    if debug_file:
        debug_info = [record.to_dict() for record in result.debug_info]
        debug_file.write_text(json.dumps(debug_info, indent=2) + "\n")
        written.append(debug_file)

    return written


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output hex bytecode file (default: input.hex)",
)
@click.option(
    "--object", "object_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the object code text",
)
@click.option(
    "--hash", "hash_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the content hash",
)
@click.option(
    "-g", "--debug", "debug_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write debug info (function regions and source lines) as JSON",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the full assembly result as JSON",
)
@click.option(
    "--check",
    is_flag=True,
    help="Run the syntax checker first and report its warnings",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="scasm")
def main(
    input_file: Path,
    output: Optional[Path],
    object_file: Optional[Path],
    hash_file: Optional[Path],
    debug_file: Optional[Path],
    as_json: bool,
    check: bool,
    verbose: bool,
) -> None:
    """
    Assemble SmallC ASM source code.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    The assembler writes the hex bytecode and prints the content hash
    of the assembled unit.

    \b
    Examples:
        scasm token.asm                  # Outputs token.hex
        scasm token.asm -o out.hex       # Specify output file
        scasm token.asm -g token.dbg.json
    """
    config = AssemblerConfig.from_env()
    config.verbose = config.verbose or verbose
    config.setup_logging()

    output_file = output if output is not None else input_file.with_suffix(config.bytecode_suffix)

    try:
        if check:
            source = input_file.read_text(encoding=config.encoding)
            validation = validate_syntax(source)
            for message in validation.errors:
                click.echo(f"Warning: {input_file}: {message}", err=True)

        if config.verbose:
            click.echo(f"Assembling {input_file}...")

        asm = Assembler(verbose=config.verbose, encoding=config.encoding)
        result = asm.assemble_file(input_file)

        if as_json:
            click.echo(json.dumps(result.to_dict(), indent=2))

        if not result.success:
            click.echo(f"Assembly error: {result.error}", err=True)
            sys.exit(ExitCode.BUILD_ERROR)

        written = write_artifacts(result, output_file, object_file, hash_file, debug_file)

        if not as_json:
            click.echo(result.hash)

        if config.verbose:
            for path in written:
                click.echo(f"Wrote {path}")
            click.echo(
                f"Assembly complete: {len(result.bytecode) // 2} bytes, "
                f"{len(result.debug_info)} debug records"
            )

    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
