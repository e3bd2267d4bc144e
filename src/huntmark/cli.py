"""CLI entry point for huntmark."""

import asyncio
import json
from pathlib import Path
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.live import Live

from huntmark import __version__
from huntmark.config.loader import load_config
from huntmark.markup.blocks import HandwrittenBlock, ImageBlock
from huntmark.markup.formatting import to_json_string
from huntmark.markup.metrics import total_text_length
from huntmark.markup.parser import parse_rich_text
from huntmark.models.config import Config
from huntmark.services.typewriter import Typewriter
from huntmark.tui.render import render_page
from huntmark.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)
console = Console()


def load_app_config(config_path: Optional[Path]) -> Config:
    """
    Load configuration for a CLI command.

    Args:
        config_path: Explicit config file, or None for ~/.config/huntmark/config.yaml

    Returns:
        Validated Config instance

    Raises:
        click.ClickException: If the config file is missing or invalid
    """
    try:
        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path) if config_path else "default")
        return config
    except FileNotFoundError as e:
        logger.error("config_not_found", path=str(config_path))
        raise click.ClickException(str(e))
    except ValueError as e:
        logger.error("config_validation_error", error=str(e))
        raise click.ClickException(str(e))


def read_source(source: TextIO) -> str:
    """Read markup from an open file (or stdin)."""
    text = source.read()
    logger.info("source_read", name=getattr(source, "name", "<stream>"), length=len(text))
    return text


def count_blocks(blocks) -> dict[str, int]:
    """Count blocks by type, including nested handwritten children."""
    counts: dict[str, int] = {}
    for block in blocks:
        counts[block.type] = counts.get(block.type, 0) + 1
        if isinstance(block, HandwrittenBlock):
            for block_type, count in count_blocks(block.children).items():
                counts[block_type] = counts.get(block_type, 0) + count
    return counts


def image_paths(blocks) -> list[str]:
    """List image paths in tree order, including images inside handwritten spans."""
    paths = []
    for block in blocks:
        if isinstance(block, ImageBlock):
            paths.append(block.content)
        elif isinstance(block, HandwrittenBlock):
            paths.extend(image_paths(block.children))
    return paths


@click.group()
@click.version_option(version=__version__, prog_name="huntmark")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: ~/.config/huntmark/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]):
    """huntmark: parse, preview and reveal puzzle-hunt rich text."""
    configure_logging()
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--indent", type=click.IntRange(min=0), default=2, show_default=True, help="JSON indentation")
def parse(source: TextIO, indent: int):
    """
    Parse markup and print the block tree as JSON.

    Examples:
        huntmark parse riddle.txt
        echo "Hello **world**" | huntmark parse -
    """
    text = read_source(source)
    pages = parse_rich_text(text)
    logger.info("parse_command_completed", pages=len(pages), blocks=len(pages[0].blocks))
    click.echo(
        json.dumps(
            [page.model_dump(mode="json") for page in pages],
            indent=indent or None,
            ensure_ascii=False,
        )
    )


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_context
def render(ctx: click.Context, source: TextIO):
    """
    Render markup to the terminal.

    Examples:
        huntmark render riddle.txt
    """
    config = load_app_config(ctx.obj["config_path"])
    text = read_source(source)
    for page in parse_rich_text(text):
        console.print(render_page(page.blocks, config.render))


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
def stats(source: TextIO):
    """
    Show page, block and character counts for markup.

    Examples:
        huntmark stats riddle.txt
    """
    text = read_source(source)
    pages = parse_rich_text(text)
    blocks = pages[0].blocks

    counts = count_blocks(blocks)
    images = image_paths(blocks)

    click.echo(f"Pages: {len(pages)}")
    click.echo(f"Blocks: {len(blocks)}")
    click.echo(f"Characters: {total_text_length(blocks)}")
    for block_type in sorted(counts):
        click.echo(f"  {block_type}: {counts[block_type]}")
    for image in images:
        click.echo(f"Image: {image}")


@cli.command(name="type")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--delay", type=click.FloatRange(min=0.0), default=None, help="Seconds per character (default: from config)")
@click.option("--skip", is_flag=True, help="Show the text fully revealed")
@click.pass_context
def type_command(ctx: click.Context, source: TextIO, delay: Optional[float], skip: bool):
    """
    Reveal markup with a typewriter animation.

    Output that is not a terminal gets the fully revealed text.

    Examples:
        huntmark type riddle.txt
        huntmark type riddle.txt --delay 0.02
    """
    config = load_app_config(ctx.obj["config_path"])
    text = read_source(source)

    typewriter = Typewriter.from_config(text, config.typewriter)
    if delay is not None:
        typewriter.delay = delay

    if skip or typewriter.skip_animation or not console.is_terminal:
        console.print(render_page(typewriter.skip().blocks, config.render))
        return

    async def animate():
        with Live(console=console, auto_refresh=False, transient=False) as live:
            async for frame in typewriter.frames():
                live.update(render_page(frame.blocks, config.render), refresh=True)

    logger.info("typewriter_started", total=typewriter.total, delay=typewriter.delay)
    try:
        asyncio.run(animate())
    except KeyboardInterrupt:
        logger.info("typewriter_interrupted", budget=typewriter.budget, total=typewriter.total)
        raise click.Abort()
    logger.info("typewriter_finished", total=typewriter.total)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
def export(source: TextIO):
    """
    Print markup as an escaped JSON string for hunt JSON files.

    A trailing newline from the file is dropped.

    Examples:
        huntmark export riddle.txt
    """
    text = read_source(source).rstrip("\n")
    click.echo(to_json_string(text))


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def edit(ctx: click.Context, path: Path):
    """
    Edit a markup file with live preview.

    The file is created on first save if it doesn't exist.

    Examples:
        huntmark edit riddle.txt
    """
    from huntmark.tui.app import EditorApp

    config = load_app_config(ctx.obj["config_path"])
    text = path.read_text(encoding="utf-8") if path.exists() else ""

    logger.info("launching_editor", path=str(path), length=len(text))
    EditorApp(text=text, path=path, config=config).run()
    logger.info("editor_closed", path=str(path))


def main():
    """Main entry point for the console script."""
    cli()


if __name__ == "__main__":
    main()
