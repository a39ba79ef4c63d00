"""CLI entry point for minigit."""

from __future__ import annotations

import click

from .core.errors import GitError


def _overrides(ctx: click.Context) -> dict:
    overrides: dict = {}
    log_level = ctx.obj.get("log_level")
    log_format = ctx.obj.get("log_format")
    if log_level:
        overrides.setdefault("observability", {})["log_level"] = log_level
    if log_format:
        overrides.setdefault("observability", {})["log_format"] = log_format
    return overrides


@click.group()
@click.option("--config", default=None, type=click.Path(dir_okay=False), help="TOML config file path")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-format", default=None, type=click.Choice(["json", "console"]), help="Log output format")
@click.pass_context
def main(ctx: click.Context, config: str | None, log_level: str | None, log_format: str | None) -> None:
    """Minimal git repository tool."""
    ctx.ensure_object(dict)
    ctx.obj.update(config=config, log_level=log_level, log_format=log_format)


@main.command()
@click.argument("path", required=False, type=click.Path(file_okay=False))
@click.option("--initial-branch", "-b", default=None, help="Branch name HEAD points at")
@click.pass_context
def init(ctx: click.Context, path: str | None, initial_branch: str | None) -> None:
    """Create an empty repository, or fill in a partial one."""
    from .main import run_init

    overrides = _overrides(ctx)
    if initial_branch is not None:
        overrides.setdefault("init", {})["initial_branch"] = initial_branch

    try:
        outcome = run_init(path=path, config_path=ctx.obj["config"], overrides=overrides)
    except GitError as exc:
        raise click.ClickException(str(exc)) from exc

    verb = "Reinitialized existing" if outcome.reinitialized else "Initialized empty"
    click.echo(f"{verb} repository in {outcome.layout.git_dir}")


@main.command()
@click.argument("path", required=False, type=click.Path(file_okay=False))
@click.pass_context
def root(ctx: click.Context, path: str | None) -> None:
    """Print the root directory of the enclosing repository."""
    from .main import run_locate

    try:
        layout = run_locate(path=path, config_path=ctx.obj["config"], overrides=_overrides(ctx))
    except GitError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(str(layout.base_dir))


if __name__ == "__main__":
    main()
