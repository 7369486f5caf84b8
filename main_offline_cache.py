"""Mini README: Command line entry point for the offline cache engine.

The Typer CLI classifies an asset listing (one path per line, as a build
tool would report its emitted files) and prints the resulting cache buckets
as JSON. Defaults come from ``OFFLINE_CACHE_*`` environment variables;
command line options override them.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from pydantic import ValidationError

from offlinecache import ConfigurationError, OfflinePlugin
from offlinecache.configuration import get_settings
from offlinecache.logging_utils import configure_root_logger
from offlinecache.tools import REGISTRY

cli = typer.Typer(help="Classify build output into offline cache buckets.")


def _read_assets(source: str) -> List[str]:
    if source == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise typer.BadParameter(f"cannot read {source}: {exc}", param_hint="ASSETS_FILE") from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


def _read_json(path: Optional[Path], option: str) -> Any:
    if path is None:
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc}", param_hint=option) from exc


@cli.command()
def classify(
    assets_file: str = typer.Argument(..., help="File listing emitted assets, or '-' for stdin."),
    caches: Optional[Path] = typer.Option(None, help="JSON file with bucket selector lists."),
    rewrites: Optional[Path] = typer.Option(None, help="JSON file mapping assets to public paths."),
    scope: Optional[str] = typer.Option(None, help="Public URL prefix for cached assets."),
    entry_prefix: Optional[str] = typer.Option(None, help="Prefix of assets never cached."),
) -> None:
    """Print the classified, rewritten cache buckets as JSON."""

    settings = get_settings()
    configure_root_logger(settings.log_level)

    overrides: Dict[str, Any] = {}
    for key, value in (
        ("caches", _read_json(caches, "--caches")),
        ("rewrites", _read_json(rewrites, "--rewrites")),
        ("scope", scope),
        ("entry_prefix", entry_prefix),
    ):
        if value is not None:
            overrides[key] = value

    try:
        plugin = OfflinePlugin(overrides, settings=settings)
    except (ConfigurationError, ValidationError, ValueError) as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    buckets = plugin.set_assets(_read_assets(assets_file))
    typer.echo(json.dumps(buckets, indent=2))


@cli.command()
def tools() -> None:
    """List registered cache tools, including entry-point plugins."""

    REGISTRY.load_plugins()
    for name in REGISTRY.available_tools():
        typer.echo(name)


if __name__ == "__main__":
    cli()
