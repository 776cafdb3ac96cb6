"""
Maven Deploy — CLI entrypoint.

Usage:
    python -m maven_deploy.main --help
    maven-deploy validate
    maven-deploy deploy --version 1.2.0 --dry-run
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from maven_deploy import __version__
from maven_deploy.core.config.loader import ConfigError, load_config_map
from maven_deploy.core.observability.logging_config import (
    FILE_ENV,
    FILE_LEVEL_ENV,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="maven-deploy")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to maven-deploy.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Maven Deploy — validated, injection-safe mvn deploy."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(FILE_ENV),
        log_file_level=os.environ.get(FILE_LEVEL_ENV),
    )


def _load_or_exit(ctx: click.Context, as_json: bool) -> dict:
    """Load the config map, or print the error and exit 1."""
    try:
        return load_config_map(ctx.obj.get("config_path"))
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def validate(ctx: click.Context, as_json: bool) -> None:
    """Check the deploy configuration and report every problem."""
    from maven_deploy.core.use_cases.validate import validate_config

    raw = _load_or_exit(ctx, as_json)
    result = validate_config(raw)

    if as_json:
        click.echo(json.dumps(result.model_dump(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        return

    click.secho("❌ Configuration errors:", fg="red", bold=True)
    for issue in result.errors:
        click.echo(f"   • {issue.field}: {issue.message}")
    click.echo()
    sys.exit(1)


@cli.command()
@click.option("--version", "release_version", default="", help="Release version being published.")
@click.option("--hook", default="post-publish", show_default=True, help="Lifecycle hook to run.")
@click.option("--dry-run", is_flag=True, help="Show the mvn command without running it.")
@click.option("--timeout", type=float, default=None, help="Abort mvn after this many seconds.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def deploy(
    ctx: click.Context,
    release_version: str,
    hook: str,
    dry_run: bool,
    timeout: float | None,
    as_json: bool,
) -> None:
    """Deploy the Maven artifact described by the config file.

    Examples:

        maven-deploy deploy --version 1.4.0 --dry-run

        maven-deploy --config release/maven-deploy.yml deploy --version 1.4.0
    """
    from maven_deploy.core.context import RunContext
    from maven_deploy.core.models.deploy import ExecuteRequest, ReleaseContext
    from maven_deploy.core.use_cases.deploy import execute

    raw = _load_or_exit(ctx, as_json)
    request = ExecuteRequest(
        hook=hook,
        config=raw,
        context=ReleaseContext(version=release_version),
        dry_run=dry_run,
    )
    response = execute(request, context=RunContext.with_timeout(timeout))

    if as_json:
        click.echo(json.dumps(response.model_dump(), indent=2))
        sys.exit(0 if response.success else 1)

    if not response.success:
        click.secho("❌ Deploy failed", fg="red", bold=True)
        for line in (response.error or "").split("\n"):
            click.echo(f"   │ {line}")
        click.echo()
        sys.exit(1)

    icon = "🔍" if dry_run else "📦"
    click.secho(f"{icon} {response.message}", fg="green", bold=True)
    outputs = response.outputs
    if "command" in outputs:
        click.echo(f"   $ {outputs['command']}")
    if ctx.obj.get("verbose"):
        for key, value in outputs.items():
            if key != "command":
                click.echo(f"   {key}: {value}")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def info(as_json: bool) -> None:
    """Show deployer metadata and the configuration schema."""
    from maven_deploy.core.use_cases.info import get_info

    plugin = get_info()

    if as_json:
        click.echo(json.dumps(plugin.model_dump(mode="json"), indent=2))
        return

    click.secho(f"\n📋 {plugin.name} {plugin.version}", fg="cyan", bold=True)
    click.echo(f"   {plugin.description}")
    click.echo(f"   Hooks: {', '.join(h.value for h in plugin.hooks)}")
    required = set(plugin.config_schema.get("required", []))
    click.secho("   Config:", bold=True)
    for key, prop in plugin.config_schema["properties"].items():
        marker = " (required)" if key in required else ""
        click.echo(f"     • {key}{marker}: {prop['description']}")
    click.echo()


if __name__ == "__main__":
    cli()
