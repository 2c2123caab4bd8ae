"""Command-line front end for dice_roller.

Examples:
  dice-roller roll --count 2 --sides 6 --modifier 3
  dice-roller roll -n 1 -s 20 -m -2 --json
  dice-roller advantage --sides 20
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click
import orjson
from pydantic import ValidationError

from dice_roller.config import Settings, load_settings
from dice_roller.logging import setup_logging
from dice_roller.rng import thread_source
from dice_roller.roller import DiceError, InvalidCountError, Roller

T = TypeVar("T")

_LEVELS = click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "NONE"], case_sensitive=False)


def _load_settings_or_warn() -> Settings:
    try:
        return load_settings()
    except ValidationError as e:
        click.echo(click.style(f"WARNING: invalid configuration ignored:\n{e}", fg="yellow"), err=True)
        return Settings.model_construct()


def _roller(ctx: click.Context) -> Roller:
    return ctx.obj["roller"]


def _sides(ctx: click.Context, sides: int | None) -> int:
    return sides if sides is not None else ctx.obj["settings"].default_sides


def _guard(fn: Callable[..., T], *args: Any) -> T:
    """Call into the roller, turning parameter errors into usage errors."""
    try:
        return fn(*args)
    except DiceError as e:
        param = "count" if isinstance(e, InvalidCountError) else "sides"
        raise click.BadParameter(str(e), param_hint=f"'--{param}'") from e


@click.group()
@click.option("--log-level", type=_LEVELS, default=None, help="Console log level (overrides config).")
@click.pass_context
def app(ctx: click.Context, log_level: str | None) -> None:
    """Roll dice from the command line."""
    ctx.ensure_object(dict)
    settings = ctx.obj.get("settings")
    if settings is None:
        settings = _load_settings_or_warn()
        ctx.obj["settings"] = settings
    if log_level is not None:
        settings = settings.model_copy(update={"logging_console": log_level.upper()})
        ctx.obj["settings"] = settings
    setup_logging(settings)
    ctx.obj.setdefault("roller", Roller(thread_source()))


@app.command()
@click.option("-n", "--count", "dice_count", type=int, default=1, show_default=True, help="Number of dice.")
@click.option("-s", "--sides", type=int, required=True, help="Faces per die.")
@click.option("-m", "--modifier", type=int, default=0, show_default=True, help="Added once to the sum.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON.")
@click.pass_context
def roll(ctx: click.Context, dice_count: int, sides: int, modifier: int, as_json: bool) -> None:
    """Roll COUNT dice with SIDES faces and add MODIFIER."""
    res = _guard(_roller(ctx).roll_with_modifier, dice_count, sides, modifier)
    if as_json:
        click.echo(orjson.dumps(res.to_dict()).decode())
    else:
        click.echo(str(res))


@app.command()
@click.option("-s", "--sides", type=int, default=None, help="Faces per die (default from config).")
@click.pass_context
def single(ctx: click.Context, sides: int | None) -> None:
    """Roll one die."""
    s = _sides(ctx, sides)
    value = _guard(_roller(ctx).roll_single, s)
    click.echo(f"d{s}: {value}")


@app.command()
@click.option("-s", "--sides", type=int, default=None, help="Faces per die (default from config).")
@click.pass_context
def advantage(ctx: click.Context, sides: int | None) -> None:
    """Roll two dice and keep the higher."""
    s = _sides(ctx, sides)
    value = _guard(_roller(ctx).roll_with_advantage, s)
    click.echo(f"d{s} (adv): {value}")


@app.command()
@click.option("-s", "--sides", type=int, default=None, help="Faces per die (default from config).")
@click.pass_context
def disadvantage(ctx: click.Context, sides: int | None) -> None:
    """Roll two dice and keep the lower."""
    s = _sides(ctx, sides)
    value = _guard(_roller(ctx).roll_with_disadvantage, s)
    click.echo(f"d{s} (dis): {value}")


def main() -> None:  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
