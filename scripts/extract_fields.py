#!/usr/bin/env python3
"""
Extract best-effort fields from a plain-text resume.

Reads an already-decoded UTF-8 text file, runs the intake field extractor and
prints what it recovered. Every field is a suggestion for human review.

Examples:\n
    extract_fields.py data/uploads/jane_doe.txt          # Human-readable summary
    extract_fields.py data/uploads/jane_doe.txt --yaml   # YAML, ready to paste into a request file
"""

from pathlib import Path

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from compass.contexts.intake import extract_fields_from_file
from compass.contexts.intake.logger import setup_intake_logger
from compass.utils.config import LOGS_PATH
from compass.utils.text_processing import truncate_display
from compass.utils.timestamp import now, now_exact

load_dotenv()

app = typer.Typer(help="Extract best-effort fields from a plain-text resume", add_completion=False)


@app.command()
def main(
    text_file: Annotated[
        Path,
        typer.Argument(help="Plain-text resume (UTF-8)", exists=True, dir_okay=False),
    ],
    as_yaml: Annotated[
        bool,
        typer.Option("--yaml", help="Print recovered fields as YAML"),
    ] = False,
):
    """
    Extract name, contact details, skills, achievements, degree and job title.

    Examples:\n
        $ extract_fields.py resume.txt
        $ extract_fields.py resume.txt --yaml > extracted.yaml
    """
    log_dir = LOGS_PATH / f"intake_{now()}"
    setup_intake_logger(log_dir, source=str(text_file))

    extracted = extract_fields_from_file(text_file)
    populated = extracted.populated_fields()

    if as_yaml:
        typer.echo(OmegaConf.to_yaml(OmegaConf.create({"extracted_at": now_exact(), **populated})))
        raise typer.Exit()

    typer.secho(f"\nExtracted from: {text_file}", fg=typer.colors.BLUE, bold=True)
    if extracted.is_empty:
        typer.secho("✗ No fields recovered", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    for name, value in populated.items():
        display = ", ".join(value) if isinstance(value, list) else value.replace("\n", " / ")
        typer.echo(f"  ✓ {name}: {truncate_display(display, 80)}")
    typer.echo("\nReview every field before using it.\n")


if __name__ == "__main__":
    app()
