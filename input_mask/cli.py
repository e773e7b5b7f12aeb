"""
Command line access to the input-mask engine.
Compiles masks, formats text as if it were typed into a masked field, and
validates complete values.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .compiler import compile_mask
from .config import ConfigError, MaskConfig, build_config, resolve_mask
from .engine import accept_batch, placeholder, validate
from .exceptions import MaskValidationError
from .models import CaseMode, CompiledMask, CursorState

__all__ = ["cli"]

_CASE_LABELS = {CaseMode.NONE: "-", CaseMode.UPPER: "upper", CaseMode.LOWER: "lower"}


def _compiled_from_option(config: MaskConfig, mask: str) -> CompiledMask:
    try:
        return compile_mask(resolve_mask(mask, config))
    except ConfigError as error:
        raise click.BadParameter(str(error), param_hint="MASK") from error


def _check_length(config: MaskConfig, text: str) -> None:
    if len(text) > config.max_value_length:
        raise click.ClickException(
            f"Input is {len(text)} characters long (limit: {config.max_value_length})"
        )


@click.group()
@click.version_option()
@click.option("--placeholder-char", help="Character shown for wildcard slots")
@click.option("-v", "--verbose", is_flag=True, help="Log engine decisions to stderr")
@click.pass_context
def cli(ctx: click.Context, placeholder_char: str | None = None, verbose: bool = False):
    """
    Compile MS Access style input masks and run text through them.

    MASK may be a raw mask or `@name` for a mask configured under
    `[tool.input-mask.masks]` in pyproject.toml or `.input-mask.toml`.

    Raises:
        click.BadParameter: If the configuration is invalid.

    Examples:
        input-mask validate "(000) 000-0000" "(555) 123-4567"
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        ctx.obj = build_config(Path.cwd(), placeholder_char=placeholder_char)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error


@cli.command("compile")
@click.argument("mask")
@click.pass_obj
def compile_command(config: MaskConfig, mask: str):
    """Show the slots a mask compiles to."""
    compiled = _compiled_from_option(config, mask)

    click.echo(f"Slots: {compiled.length}")
    click.echo(f"Template: {placeholder(compiled, config.placeholder_char)}")
    for index in range(compiled.length):
        if compiled.is_symbol_slot(index):
            kind, char = "wildcard", compiled.symbols[index]
        else:
            kind, char = "literal", compiled.literals[index]
        click.echo(f"{index:>4}  {kind:<8}  {char!r:<6}  {_CASE_LABELS[compiled.cases[index]]}")


@cli.command("format")
@click.argument("mask")
@click.argument("text")
@click.option("--strict", is_flag=True, help="Fail unless the result is a complete value")
@click.pass_obj
def format_command(config: MaskConfig, mask: str, text: str, strict: bool = False):
    """
    Type TEXT into a field with MASK and print the resulting value.

    Characters the mask rejects are dropped and separators are filled in.

    Raises:
        click.ClickException: If TEXT is too long, or with `--strict` when the
            result does not validate.

    Examples:
        input-mask format "(000) 000-0000" 5551234567
    """
    compiled = _compiled_from_option(config, mask)
    _check_length(config, text)

    value = accept_batch(compiled, CursorState(), text)
    if strict:
        try:
            validate(compiled, value).raise_for_status()
        except MaskValidationError as error:
            raise click.ClickException(f"{value!r}: {error}") from error
    click.echo(value)


@cli.command("validate")
@click.argument("mask")
@click.argument("values", nargs=-1, required=True)
@click.pass_context
def validate_command(ctx: click.Context, mask: str, values: tuple[str, ...]):
    """
    Check complete VALUES against MASK.

    Prints one line per value and exits with status 1 when any value fails.

    Examples:
        input-mask validate ">LL<LL" ABcd abcd 12ab
    """
    config: MaskConfig = ctx.obj
    compiled = _compiled_from_option(config, mask)

    failures = 0
    for value in values:
        _check_length(config, value)
        try:
            validate(compiled, value).raise_for_status()
        except MaskValidationError as error:
            failures += 1
            click.echo(f"{value!r}: {error}")
        else:
            click.echo(f"{value!r}: ok")

    if failures:
        ctx.exit(1)


if __name__ == "__main__":
    cli()
