"""Generate command implementation."""

import logging
import sys

import click

from ..config import get_config, load_release_config
from ..errors import LabelNotesError
from ..github import GitHubClient
from ..releasenote import generate_release_notes, get_merged_prs, require_tags


@click.command()
@click.option('--from', 'from_tag', help='Older tag, start of the range')
@click.option('--to', 'to_tag', help='Newer tag, end of the range')
@click.option('--output', '-o', help='Write markdown to file instead of stdout')
@click.option('--api-url', help='GitHub API URL (overrides GITHUB_API_URL)')
@click.pass_context
def generate(ctx, from_tag, to_tag, output, api_url):
    """Generate release notes for pull requests merged between two tags."""
    ctx.ensure_object(dict)
    logger = ctx.obj.get('logger') or logging.getLogger('labelnotes')

    try:
        config = get_config(github_api_url=api_url)

        require_tags(from_tag, to_tag)

        release_config = load_release_config(ctx.obj.get('config_file'))

        logger.info(f"Generating release notes from {from_tag} to {to_tag}...")

        with GitHubClient(config, logger) as client:
            logger.info("Fetching merged pull requests from GitHub...")
            prs = get_merged_prs(client, from_tag, to_tag)

        logger.info(f"Found {len(prs)} merged pull requests")

        if not prs:
            logger.warning("No pull requests found between tags")
            return

        release_notes = generate_release_notes(prs, release_config)

        if output:
            with open(output, 'w', encoding='utf-8') as f:
                f.write(release_notes)
            click.echo(f"Release notes written to {output}")
        else:
            click.echo("Generated Release Notes:\n")
            click.echo(release_notes)

    except LabelNotesError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
