"""Main CLI entry point for labelnotes."""

import logging

import click

from .. import __version__
from ..config import create_sample_config
from .generate import generate


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--config-file', '-c', help='Path to release config (default: .github/release.yml)')
@click.version_option(version=__version__, prog_name="labelnotes")
@click.pass_context
def cli(ctx, debug, config_file):
    """labelnotes - release notes from labelled GitHub pull requests."""

    # Setup logging
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    ctx.ensure_object(dict)
    ctx.obj['config_file'] = config_file
    ctx.obj['logger'] = logging.getLogger('labelnotes')


@cli.command()
@click.option('--path', '-p', default='.github/release.yml', help='Path for the config file')
def init_config(path):
    """Create a sample release config file."""
    try:
        create_sample_config(path)
    except OSError as e:
        click.echo(f"Error creating config file: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Sample release config created at: {path}")
    click.echo("Edit the categories and labels to match your repository.")


@cli.command()
def version():
    """Show version information."""
    click.echo(f"labelnotes version {__version__}")


cli.add_command(generate)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == '__main__':
    main()
