"""
scfmt - SmallC ASM Formatter Command-Line Interface
===================================================

Re-indents SmallC ASM source files and optionally lints them.

Usage Examples
--------------
Print formatted source:
    $ scfmt token.asm

Format in place:
    $ scfmt -i token.asm

Fail if a file is not formatted (for CI):
    $ scfmt --check token.asm

Report syntax warnings as well:
    $ scfmt --validate token.asm
"""

import sys
from pathlib import Path
from typing import Optional

import click

from smallc_asm import __version__
from smallc_asm.assembler import format_code, validate_syntax
from smallc_asm.cli.errors import ExitCode, handle_cli_exception
from smallc_asm.config import AssemblerConfig


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write formatted source to FILE (default: stdout)",
)
@click.option(
    "-i", "--in-place",
    is_flag=True,
    help="Rewrite INPUT_FILE with the formatted source",
)
@click.option(
    "--check",
    is_flag=True,
    help="Exit with status 1 if INPUT_FILE is not formatted; write nothing",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Instruction indent in spaces (default: 2)",
)
@click.option(
    "--validate",
    is_flag=True,
    help="Report syntax warnings on stderr",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="scfmt")
def main(
    input_file: Path,
    output: Optional[Path],
    in_place: bool,
    check: bool,
    indent: Optional[int],
    validate: bool,
    verbose: bool,
) -> None:
    """
    Format SmallC ASM source code.

    INPUT_FILE is the assembly source file (.asm) to format. Define
    statements and labels start at column 0, instructions are indented.
    """
    if sum([output is not None, in_place, check]) > 1:
        click.echo("Error: -o/--output, -i/--in-place and --check are mutually exclusive", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    config = AssemblerConfig.from_env()
    config.verbose = config.verbose or verbose
    config.setup_logging()
    if indent is not None:
        config.indent = " " * indent

    try:
        source = input_file.read_text(encoding=config.encoding)

        if validate:
            for message in validate_syntax(source).errors:
                click.echo(f"Warning: {input_file}: {message}", err=True)

        formatted = format_code(source, config.indent)

        if check:
            if formatted != source:
                click.echo(f"{input_file} would be reformatted", err=True)
                sys.exit(ExitCode.BUILD_ERROR)
            if config.verbose:
                click.echo(f"{input_file} is formatted")
            return

        if in_place:
            input_file.write_text(formatted, encoding=config.encoding)
            if config.verbose:
                click.echo(f"Formatted {input_file}")
        elif output is not None:
            output.write_text(formatted, encoding=config.encoding)
            if config.verbose:
                click.echo(f"Wrote {output}")
        else:
            click.echo(formatted, nl=False)

    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose, error_type="Format")


if __name__ == "__main__":
    main()
