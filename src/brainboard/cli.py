"""Brainboard CLI - capture and review thoughts."""

import json
import logging
import sys

import click

from .adapters.file_capture import ImageCaptureSource, TextCaptureSource
from .adapters.http_store import HttpThoughtStore, StoreError
from .config import load_config
from .core.ranking import RankedThought
from .core.report import (
    format_due_line,
    format_recent_line,
    format_section,
    format_stats,
    thought_label,
)
from .core.thoughts import Thought
from .overview import OVERVIEW_KEY, build_overview, is_overview, load_thoughts


def _thought_json(t: Thought) -> dict:
    return {
        "id": t.id,
        "title": t.title,
        "content": t.content,
        "modality": t.modality,
        "folder": t.folder,
        "created_at": t.created_at.isoformat(),
        "updated_at": t.updated_at.isoformat() if t.updated_at else None,
    }


def _ranked_json(item: RankedThought) -> dict:
    data = _thought_json(item.thought)
    data["due_at"] = item.due_at.isoformat() if item.due_at else None
    data["days_until_due"] = item.days_until_due
    data["days_since_update"] = item.days_since_update
    return data


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _store(ctx: click.Context) -> HttpThoughtStore:
    return HttpThoughtStore(ctx.obj["config"])


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Brainboard - capture thoughts, let the backend file them."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config()


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def folders(ctx, as_json: bool):
    """List the store's smart folders."""
    try:
        items = _store(ctx).list_folders()
    except StoreError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps([{"key": f.key, "name": f.name} for f in items], indent=2))
        return

    for folder in items:
        click.echo(f"{folder.key:10} {folder.name}")


@main.command("list")
@click.argument("folder", required=False)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_thoughts(ctx, folder: str | None, as_json: bool):
    """List thoughts in FOLDER (default: configured folder)."""
    folder = folder or ctx.obj["config"].default_folder
    try:
        thoughts = load_thoughts(_store(ctx), folder)
    except StoreError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps([_thought_json(t) for t in thoughts], indent=2))
        return

    if not thoughts:
        click.echo(f"{folder} is empty.")
        return

    for t in thoughts:
        click.echo(f"• {thought_label(t)}")


@main.command()
@click.argument("folder", default=OVERVIEW_KEY)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def stats(ctx, folder: str, as_json: bool):
    """Show statistics for FOLDER (default: overview of tasks, notes, inbox)."""
    try:
        result = build_overview(_store(ctx), folder)
    except StoreError as e:
        _fail(e)

    if as_json:
        data = result.stats.to_dict()
        data["other"] = result.stats.other
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Statistics for {result.folder}\n")
    for line in format_stats(result.stats):
        click.echo(line)


@main.command()
@click.argument("folder", default=OVERVIEW_KEY)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def overview(ctx, folder: str, as_json: bool):
    """Show statistics, due soon and recently updated thoughts."""
    try:
        result = build_overview(_store(ctx), folder)
    except StoreError as e:
        _fail(e)

    rankings = result.rankings
    if as_json:
        stats_data = result.stats.to_dict()
        stats_data["other"] = result.stats.other
        click.echo(
            json.dumps(
                {
                    "folder": result.folder,
                    "stats": stats_data,
                    "due_soon": [_ranked_json(r) for r in rankings.due_soon],
                    "recently_updated": [_ranked_json(r) for r in rankings.recently_updated],
                },
                indent=2,
            )
        )
        return

    folder_label = "tasks + notes + inbox" if is_overview(folder) else folder
    click.echo(f"Overview of {folder_label}\n")
    click.echo("\n".join(format_stats(result.stats)))
    click.echo()
    click.echo(format_section("Due Soon", [format_due_line(r) for r in rankings.due_soon]))
    click.echo()
    click.echo(
        format_section(
            "Recently Updated", [format_recent_line(r) for r in rankings.recently_updated]
        )
    )


@main.command()
@click.argument("text", required=False)
@click.option("--folder", help="Target folder tag (default: inbox)")
@click.option("--url", "source_url", help="Source URL of a captured link")
@click.option("--image", "image_path", type=click.Path(dir_okay=False), help="Capture an image file")
@click.pass_context
def capture(
    ctx,
    text: str | None,
    folder: str | None,
    source_url: str | None,
    image_path: str | None,
):
    """Capture a thought. Use '-' to read TEXT from stdin."""
    if folder is None or is_overview(folder):
        folder = "inbox"

    if image_path:
        source = ImageCaptureSource(
            image_path,
            caption=None if text == "-" else text,
            folder=folder,
            source_url=source_url,
        )
    elif text == "-" or text is None:
        stdin = click.get_text_stream("stdin")
        source = TextCaptureSource(stdin, folder=folder, source_url=source_url)
    else:
        source = TextCaptureSource(text, folder=folder, source_url=source_url)

    try:
        draft = source.read()
    except (ValueError, OSError) as e:
        _fail(e)

    if draft is None:
        _fail(ValueError("Nothing to capture"))

    try:
        _store(ctx).ingest(draft)
    except StoreError as e:
        _fail(e)

    click.echo(f"Captured into {folder}.")


if __name__ == "__main__":
    main()
