"""Typer CLI for gallery wall layout generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from gallerywall.application.config import (
    ConfigError,
    config_to_budget,
    config_to_input,
    config_to_rng,
    load_config,
    merge_config_with_cli,
    validate_config,
)
from gallerywall.application.generators import GeneratorFactory
from gallerywall.application.services import RecommenderService
from gallerywall.cli.commands import (
    display_load_error,
    display_validation_result,
    validate_command,
)
from gallerywall.domain.value_objects import LayoutAlgorithm
from gallerywall.infrastructure import (
    LayoutDiagramRenderer,
    MessageJsonFormatter,
    SolutionSummaryFormatter,
    split_messages,
)

OUTPUT_FORMATS = ("text", "json", "diagram")

app = typer.Typer(
    name="gallerywall",
    help="Recommend gallery wall arrangements for a set of picture frames.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON request file"),
    ],
    algorithm: Annotated[
        str | None,
        typer.Option(
            "--algorithm",
            "-a",
            help="Layout algorithm: grid, masonry, monte_carlo, spiral, skyline",
        ),
    ] = None,
    spacing: Annotated[
        float | None,
        typer.Option("--spacing", min=0, help="Gap between frames in inches"),
    ] = None,
    margin: Annotated[
        float | None,
        typer.Option("--margin", min=0, help="Gap to the wall edges in inches"),
    ] = None,
    force_all: Annotated[
        bool | None,
        typer.Option(
            "--force-all/--no-force-all",
            help="Only accept layouts that place every frame",
        ),
    ] = None,
    shelves: Annotated[
        int | None,
        typer.Option("--shelves", min=1, max=20, help="Shelf count (skyline only)"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for reproducible layouts"),
    ] = None,
    time_limit: Annotated[
        float | None,
        typer.Option("--time-limit", min=0.01, help="Search budget in seconds"),
    ] = None,
    max_attempts: Annotated[
        int | None,
        typer.Option("--max-attempts", min=1, help="Cap on randomized attempts"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, diagram"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log search progress to stderr"),
    ] = False,
) -> None:
    """Generate layouts for the frames, wall and obstacles in a request file."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    config = merge_config_with_cli(
        config,
        algorithm=algorithm,
        spacing=spacing,
        margin=margin,
        force_all=force_all,
        shelf_count=shelves,
        time_limit=time_limit,
        max_attempts=max_attempts,
        seed=seed,
    )

    validation = validate_config(config)
    if not validation.is_valid or validation.has_warnings:
        display_validation_result(validation, err=True)
    if not validation.is_valid:
        raise typer.Exit(code=1)

    data = config_to_input(config)
    service = RecommenderService(
        GeneratorFactory(budget=config_to_budget(config), rng=config_to_rng(config))
    )
    messages = list(service.run_generation(data))
    solutions, count, error = split_messages(messages)

    if error is not None:
        typer.echo(f"Error: layout generation failed: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        output = MessageJsonFormatter().format(messages)
    else:
        output = SolutionSummaryFormatter().format(
            solutions, total=count or 0, requested=data.total_requested
        )
        if output_format == "diagram" and solutions:
            diagrams = LayoutDiagramRenderer().render_all_ascii(
                solutions, data.wall, data.obstacles
            )
            output = f"{output}\n\n{diagrams}"

    if output_file is not None:
        output_file.write_text(output + "\n", encoding="utf-8")
        typer.echo(f"Wrote {len(solutions)} layouts to {output_file}")
    else:
        typer.echo(output)


@app.command()
def algorithms() -> None:
    """List the available layout algorithms."""
    for algorithm in LayoutAlgorithm:
        typer.echo(algorithm.value)


if __name__ == "__main__":
    app()
