#!/usr/bin/env python3

from pathlib import Path

import click
import pydantic
import yaml
from dotenv import load_dotenv

from consul_exporter.defaults import GlobalDefaults
from consul_exporter.error_details import get_error_human_message
from consul_exporter.exceptions import ValidationError
from consul_exporter.installer import VarsFileInstaller, render_vars
from consul_exporter.resolver import ConfigResolver
from consul_exporter.types import ExporterConfig
from consul_exporter.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def load_params(params_file: str) -> ExporterConfig:
    """Load exporter parameters from a YAML mapping."""
    data = yaml.safe_load(Path(params_file).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{params_file} must contain a mapping of parameters")
    return ExporterConfig.model_validate(data)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """consul_exporter - resolve exporter install parameters"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument(
    "params_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    help="Write the daemon vars file here instead of printing it",
)
def resolve(params_file, output) -> None:
    """Resolve a parameter file into the daemon installer's vars"""
    try:
        config = load_params(params_file)
        defaults = GlobalDefaults.from_settings()
        if output:
            ConfigResolver(defaults, VarsFileInstaller(output)).apply(config)
            click.echo(f"Wrote {output}")
        else:
            click.echo(render_vars(ConfigResolver(defaults).resolve(config)), nl=False)
    except (
        ValidationError,
        pydantic.ValidationError,
        yaml.YAMLError,
        OSError,
        ValueError,
    ) as e:
        logger.debug("Resolution failed", params_file=params_file, error=str(e))
        raise click.ClickException(get_error_human_message(e)) from e


@cli.command()
def defaults() -> None:
    """Show the host-wide defaults used for undeclared parameters"""
    values = GlobalDefaults.from_settings()
    click.echo(
        yaml.safe_dump(
            {
                "os": values.os,
                "arch": values.arch,
                "bin_dir": values.bin_dir,
                "install_method": values.install_method,
                "init_style": values.init_style,
                "host": values.host,
            },
            default_flow_style=False,
            sort_keys=False,
        ),
        nl=False,
    )


def main() -> None:
    load_dotenv()
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
