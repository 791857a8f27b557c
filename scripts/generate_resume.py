#!/usr/bin/env python3
"""
Generate a resume from a YAML request file.

The request file holds ResumeRequest fields (snake_case or camelCase keys),
with experience/education/projects/certifications as lists of mappings.
The HTML fragment is printed to stdout unless --output is given.

Examples:\n
    generate_resume.py requests/jane_resume.yaml
    generate_resume.py requests/jane_resume.yaml --template creative
    generate_resume.py requests/jane_resume.yaml -o outs/resumes/ --standalone
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from compass.contexts.rendering import resolve_output_path, resume_filename, wrap_resume_for_download
from compass.contexts.rendering.logger import setup_rendering_logger
from compass.contexts.templating import ResumeRequest, ResumeTemplate, generate_resume
from compass.contexts.templating.logger import setup_templating_logger
from compass.utils.config import LOGS_PATH, load_yaml_config
from compass.utils.timestamp import now

load_dotenv()

app = typer.Typer(help="Generate a resume from a YAML request file", add_completion=False)


def load_resume_request(request_path: Path) -> ResumeRequest:
    """Load and build a ResumeRequest, exiting with a message on bad input."""
    try:
        return ResumeRequest.from_dict(load_yaml_config(request_path))
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def main(
    request_path: Annotated[
        Path,
        typer.Argument(help="YAML file with resume request fields", exists=True, dir_okay=False),
    ],
    template: Annotated[
        Optional[ResumeTemplate],
        typer.Option("--template", "-t", help="Override the resume layout"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help=(
                "Write the resume to this file, or into this directory (any suffix-less "
                "path, created if missing) under its default name"
            ),
        ),
    ] = None,
    standalone: Annotated[
        bool,
        typer.Option("--standalone", help="Wrap the fragment into a full HTML page"),
    ] = False,
):
    """
    Generate a resume.

    Examples:\n
        $ generate_resume.py request.yaml
        $ generate_resume.py request.yaml -t modern -o outs/ --standalone
    """
    request = load_resume_request(request_path)
    if template is not None:
        request = replace(request, template=template)

    log_dir = LOGS_PATH / f"resume_{now()}"
    setup_templating_logger(log_dir, document_type="resume")

    result = generate_resume(request)
    if not result.success:
        if result.missing_fields:
            message = f"✗ Resume rejected, missing: {', '.join(result.missing_fields)}"
        else:
            message = f"✗ Resume failed to render: {result.error}"
        typer.secho(message, fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    document = result.document
    if standalone:
        setup_rendering_logger(log_dir, output_format="html")
        document = wrap_resume_for_download(document, request.full_name)

    if output is None:
        typer.echo(document)
        raise typer.Exit()

    output_path = resolve_output_path(output, resume_filename(request.full_name))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8")
    typer.secho(f"✓ Resume written: {output_path}", fg=typer.colors.GREEN, bold=True)


if __name__ == "__main__":
    app()
