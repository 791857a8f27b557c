#!/usr/bin/env python3
"""
Generate a cover letter from a YAML request file.

The request file holds LetterRequest fields (snake_case or camelCase keys).
The letter is printed to stdout unless --output is given.

Examples:\n
    generate_letter.py requests/acme_letter.yaml
    generate_letter.py requests/acme_letter.yaml --structure story-based
    generate_letter.py requests/acme_letter.yaml -o outs/letters/ --print-html
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from compass.contexts.rendering import letter_filename, resolve_output_path, wrap_letter_for_print
from compass.contexts.rendering.logger import setup_rendering_logger
from compass.contexts.templating import LetterRequest, LetterStructure, generate_letter
from compass.contexts.templating.logger import setup_templating_logger
from compass.utils.config import LOGS_PATH, load_yaml_config
from compass.utils.timestamp import now

load_dotenv()

app = typer.Typer(help="Generate a cover letter from a YAML request file", add_completion=False)


def load_letter_request(request_path: Path) -> LetterRequest:
    """Load and build a LetterRequest, exiting with a message on bad input."""
    try:
        return LetterRequest.from_dict(load_yaml_config(request_path))
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def main(
    request_path: Annotated[
        Path,
        typer.Argument(help="YAML file with letter request fields", exists=True, dir_okay=False),
    ],
    structure: Annotated[
        Optional[LetterStructure],
        typer.Option("--structure", "-s", help="Override the letter structure"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help=(
                "Write the letter to this file, or into this directory (any suffix-less "
                "path, created if missing) under its default name"
            ),
        ),
    ] = None,
    print_html: Annotated[
        bool,
        typer.Option("--print-html", help="Also write a printable HTML page next to the letter"),
    ] = False,
):
    """
    Generate a cover letter.

    Examples:\n
        $ generate_letter.py request.yaml
        $ generate_letter.py request.yaml -s achievement-focused -o outs/
    """
    request = load_letter_request(request_path)
    if structure is not None:
        request = replace(request, structure=structure)

    log_dir = LOGS_PATH / f"letter_{now()}"
    setup_templating_logger(log_dir, document_type="letter")

    result = generate_letter(request)
    if not result.success:
        typer.secho(
            f"✗ Letter rejected, missing: {', '.join(result.missing_fields)}",
            fg=typer.colors.RED,
            bold=True,
            err=True,
        )
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(result.document)
        raise typer.Exit()

    output_path = resolve_output_path(output, letter_filename(request.company_name))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.document, encoding="utf-8")
    typer.secho(f"✓ Letter written: {output_path}", fg=typer.colors.GREEN, bold=True)

    if print_html:
        setup_rendering_logger(log_dir, output_format="html")
        html_path = output_path.with_suffix(".html")
        html_path.write_text(
            wrap_letter_for_print(result.document, request.company_name), encoding="utf-8"
        )
        typer.echo(f"  Print page: {html_path}")


if __name__ == "__main__":
    app()
