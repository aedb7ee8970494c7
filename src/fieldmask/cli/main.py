"""CLI commands for fieldmask."""

import json
import logging
import sys
from pathlib import Path

import click

from fieldmask.attributes.format import FormatAttribute
from fieldmask.config import Config
from fieldmask.errors import ErrorCollector
from fieldmask.mask import compile_mask, join_values, split_value


def _load_config(config_path: str | None) -> Config:
    if config_path is not None:
        return Config.from_toml(config_path)
    try:
        return Config.find_and_load()
    except FileNotFoundError:
        return Config()


def _attribute(ctx: click.Context, mask: str, name: str = "value") -> FormatAttribute:
    config: Config = ctx.obj["config"]
    return FormatAttribute(
        name,
        format_mask=mask,
        translator=config.make_translator(),
        show_hints=config.render.show_hints,
    )


@click.group()
@click.version_option(package_name="fieldmask")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to fieldmask.toml (default: search upwards from cwd)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """fieldmask - formatted string attributes for record forms."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = _load_config(str(config_path) if config_path else None)


@cli.command("compile")
@click.argument("mask")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def compile_cmd(mask: str, output_json: bool) -> None:
    """Show the segment breakdown of a format mask."""
    breakdown = compile_mask(mask)

    if output_json:
        click.echo(
            json.dumps(
                [
                    {"kind": s.kind.name, "length": s.length, "mask": s.display_mask}
                    for s in breakdown
                ],
                indent=2,
            )
        )
        return

    click.echo(f"Mask: {mask}")
    for i, segment in enumerate(breakdown):
        click.echo(f"  [{i}] {segment.kind.name:<12} {segment.length:>3}  {segment.display_mask!r}")


@cli.command()
@click.argument("mask")
@click.argument("value")
@click.option("--quiet", "-q", is_flag=True, help="Only output result (0=valid, 1=invalid)")
@click.pass_context
def validate(ctx: click.Context, mask: str, value: str, quiet: bool) -> None:
    """Validate a stored value against a format mask."""
    attribute = _attribute(ctx, mask)
    errors = ErrorCollector()
    result = attribute.validate({attribute.field_name(): value}, "add", errors)

    if quiet:
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.echo(f"✓ Valid value: {value}")
        sys.exit(0)
    else:
        click.echo(f"✗ Invalid value: {errors.errors[0].message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("mask")
@click.argument("value")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def split(mask: str, value: str, output_json: bool) -> None:
    """Split a stored value into its editable fragments."""
    fragments = split_value(value, compile_mask(mask))

    if output_json:
        click.echo(json.dumps(fragments))
    else:
        for i, fragment in enumerate(fragments, start=1):
            click.echo(f"  {i}: {fragment!r}")


@cli.command()
@click.argument("mask")
@click.argument("parts", nargs=-1)
def join(mask: str, parts: tuple[str, ...]) -> None:
    """Join fragments (one per editable segment) into a stored value."""
    click.echo(join_values(list(parts), compile_mask(mask)))


@cli.command()
@click.argument("mask")
@click.argument("value", required=False, default="")
@click.option("--name", default="value", help="Attribute name (default: value)")
@click.option("--prefix", default=None, help="Field prefix for html element names")
@click.pass_context
def render(ctx: click.Context, mask: str, value: str, name: str, prefix: str | None) -> None:
    """Render the html editor for a format mask."""
    config: Config = ctx.obj["config"]
    attribute = _attribute(ctx, mask, name)
    field_prefix = prefix if prefix is not None else config.render.field_prefix
    click.echo(attribute.edit({name: value}, field_prefix, "edit"))


if __name__ == "__main__":
    cli()
