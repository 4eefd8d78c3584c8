"""
fxbind - fox32 C Binding Generator Command-Line Interface
=========================================================

This module implements the command-line interface for the jump-table
binding generator. With no arguments it prints the complete ``fox32.h``
header to standard output.

Usage Examples
--------------
Print the header:
    $ fxbind > fox32.h

Write the header and its call.h primitives:
    $ fxbind -o fox32.h --call-header call.h

Reject duplicate names or addresses before generating:
    $ fxbind --strict -o fox32.h
"""

from pathlib import Path
from typing import Optional

import click

from fox32_sdk import __version__
from fox32_sdk.bindings import (
    BINDINGS_TABLE,
    build_document,
    check_table,
    generate_call_header,
)
from fox32_sdk.cli.errors import handle_cli_exception


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output header file (default: stdout)",
)
@click.option(
    "--call-header",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the call.h register primitives to this file",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if a function name, address or constant is declared twice",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (on stderr)",
)
@click.version_option(version=__version__, prog_name="fxbind")
def main(
    output: Optional[Path],
    call_header: Optional[Path],
    strict: bool,
    verbose: bool,
) -> None:
    """
    Generate C bindings for the fox32rom and fox32os jump tables.

    Each jump-table routine becomes a static inline C function that
    stages its arguments into registers, calls the routine's address and
    returns its result. The header includes "call.h" for the register
    primitives; use --call-header to write that file as well.

    \b
    Examples:
        fxbind > fox32.h                       # Print to stdout
        fxbind -o fox32.h --call-header call.h
    """
    try:
        if strict:
            check_table(BINDINGS_TABLE)
            if verbose:
                click.echo("Table check passed", err=True)

        document = build_document(BINDINGS_TABLE)
        header = document.render()

        if output:
            output.write_text(header + "\n", encoding="utf-8")
            if verbose:
                click.echo(f"Wrote {output}", err=True)
        else:
            click.echo(header)

        if call_header:
            call_header.write_text(generate_call_header(), encoding="utf-8")
            if verbose:
                click.echo(f"Wrote {call_header}", err=True)

        if verbose:
            click.echo(
                f"Generated {document.function_count} functions and "
                f"{document.constant_count} constants",
                err=True,
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Generation")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
