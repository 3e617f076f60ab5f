"""CLI interface for prfix - click-based commands."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import click

from prfix.collectors.git import GitCollector
from prfix.config import DEFAULT_CONFIG_PATH, ReleaseConfig, generate_config_toml
from prfix.models import Release, ReleaseContext, ReleaseType
from prfix.pipeline import ReleasePipeline
from prfix.semver import next_version
from prfix.transformer import CommitNormalizer

FROM_HELP = "Start after this ref (default: last release tag)"


@click.group()
@click.version_option(package_name="prfix")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the prfix TOML config",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path, verbose: bool) -> None:
    """prfix - strip 'Merged PR <n>:' prefixes before release analysis.

    Reads commits since the last release tag, normalizes pull-request merge
    messages, then decides the version bump and renders release notes.

    Run 'prfix init' to set up your configuration.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Create a default configuration file."""
    config_path: Path = ctx.obj["config_path"]
    if config_path.exists() and not click.confirm(
        f"Config already exists at {config_path}. Overwrite?"
    ):
        return

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_config_toml(ReleaseConfig()))

    click.echo(f"✓ Config created at: {config_path}")
    click.echo("Edit to customize presets, release rules, etc.")


@cli.command()
@click.option("--from", "since", default=None, help=FROM_HELP)
@click.pass_context
def normalize(ctx: click.Context, since: str | None) -> None:
    """Show commit subjects with merge prefixes stripped."""
    config = _load_config(ctx)
    context = _build_context(config, since)

    normalized = CommitNormalizer().normalize_all(context.commits or [])
    if not normalized:
        click.echo(click.style("  (no commits)", dim=True))
        return
    for before, after in zip(context.commits or [], normalized):
        if before.subject != after.subject:
            click.echo(f"  {click.style('~', fg='yellow')} {after.subject}")
            click.echo(click.style(f"      was: {before.subject}", dim=True))
        else:
            click.echo(f"    {after.subject}")


@cli.command()
@click.option("--from", "since", default=None, help=FROM_HELP)
@click.pass_context
def analyze(ctx: click.Context, since: str | None) -> None:
    """Print the release type the commits call for."""
    config = _load_config(ctx)
    context = _build_context(config, since)

    release_type = asyncio.run(ReleasePipeline().analyze_commits(config.plugin, context))
    click.echo(ReleaseType(release_type).value if release_type else "no release")


@cli.command()
@click.option("--from", "since", default=None, help=FROM_HELP)
@click.pass_context
def notes(ctx: click.Context, since: str | None) -> None:
    """Print release notes for the commits."""
    config = _load_config(ctx)
    context = _build_context(config, since)

    text = asyncio.run(ReleasePipeline().generate_notes(config.plugin, context))
    if text is None:
        click.echo("Notes generation is disabled in config")
        return
    click.echo(text or click.style("  (nothing to note)", dim=True))


@cli.command()
@click.option("--from", "since", default=None, help=FROM_HELP)
@click.pass_context
def run(ctx: click.Context, since: str | None) -> None:
    """Analyze commits, compute the next version and print its notes."""
    config = _load_config(ctx)
    context = _build_context(config, since)

    release_type, notes_text = asyncio.run(_release(ReleasePipeline(), config, context))
    if release_type is None or context.next_release is None:
        click.echo("No release needed")
        return

    last = context.last_release.git_tag if context.last_release else "(none)"
    click.echo(f"  Last release: {last}")
    click.echo(f"  Next release: {context.next_release.git_tag} ({release_type.value})")
    if notes_text:
        click.echo()
        click.echo(notes_text)


async def _release(
    pipeline: ReleasePipeline, config: ReleaseConfig, context: ReleaseContext
) -> tuple[ReleaseType | None, str | None]:
    """Analyze, then render notes for the computed next release."""
    result = await pipeline.analyze_commits(config.plugin, context)
    if result is None:
        return None, None

    release_type = ReleaseType(result)
    last_version = context.last_release.version if context.last_release else None
    try:
        version = next_version(last_version, release_type)
    except ValueError as e:
        raise click.ClickException(str(e)) from None

    tag = f"{config.repository.tag_prefix}{version}"
    context.next_release = Release(version=version, git_tag=tag)
    return release_type, await pipeline.generate_notes(config.plugin, context)


def _build_context(config: ReleaseConfig, since: str | None) -> ReleaseContext:
    """Collect commits since the given ref, or since the last release tag."""
    collector = GitCollector(config.repository.path)
    try:
        last_release = collector.last_tag(config.repository.tag_prefix)
        if since is None and last_release is not None:
            since = last_release.git_tag
        commits = collector.collect(since=since)
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from None
    return ReleaseContext(commits=commits, last_release=last_release)


def _load_config(ctx: click.Context) -> ReleaseConfig:
    """Load config, with helpful error message if missing or invalid."""
    from prfix.config import load_config

    try:
        return load_config(ctx.obj["config_path"])
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from None
