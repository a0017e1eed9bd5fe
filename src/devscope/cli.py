"""Click-based CLI for devscope profile scoring."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from devscope.authenticity import AuthenticityScorer
from devscope.config import load_config
from devscope.exceptions import ConfigError, SnapshotError
from devscope.formatter import (
    format_authenticity_cli,
    format_cli_output,
    format_json,
    format_markdown,
)
from devscope.models import ProfileSnapshot
from devscope.scorer import ProfileScorer


def load_snapshot(path: str | Path) -> ProfileSnapshot:
    """Read and validate a JSON profile snapshot."""
    snapshot_path = Path(path)
    try:
        raw = snapshot_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(str(snapshot_path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SnapshotError(str(snapshot_path), "not valid UTF-8") from exc
    try:
        return ProfileSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        raise SnapshotError(
            str(snapshot_path), f"{exc.error_count()} validation errors"
        ) from exc


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )


@click.group()
@click.version_option(package_name="devscope")
def main() -> None:
    """devscope - developer profile scoring."""


@main.command()
@click.argument("snapshot")
@click.option("--config", "config_path", default=None, help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def score(
    snapshot: str,
    config_path: str | None,
    verbose: bool,
    output_json: bool,
) -> None:
    """Score every metric and category of a profile SNAPSHOT (JSON file)."""
    _configure_logging(verbose)
    try:
        config = load_config(config_path)
        profile = load_snapshot(snapshot)
    except (ConfigError, SnapshotError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    report = ProfileScorer(config).score(profile)

    if output_json:
        click.echo(format_json(report))
    else:
        click.echo(format_cli_output(report, verbose=verbose))


@main.command()
@click.argument("snapshot")
@click.option("--config", "config_path", default=None, help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--markdown", "output_markdown", is_flag=True, help="Output as Markdown")
def authenticity(
    snapshot: str,
    config_path: str | None,
    verbose: bool,
    output_json: bool,
    output_markdown: bool,
) -> None:
    """Score only the authenticity of a profile SNAPSHOT (JSON file)."""
    _configure_logging(verbose)
    try:
        config = load_config(config_path)
        profile = load_snapshot(snapshot)
    except (ConfigError, SnapshotError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    result = AuthenticityScorer(config).score(profile.repositories)

    if output_json:
        click.echo(format_json(result))
    elif output_markdown:
        click.echo(format_markdown(result))
    else:
        click.echo(format_authenticity_cli(result, verbose=verbose))
