"""
Command Line Interface for D2C.
"""
import os
import click
import docker
from ..CONVERTERS.to_compose import ComposeConverter, FORMATS
from ..ENGINE.docker_inspector import DockerInspector
from ..MANAGERS.project_generator import ProjectGenerator
from ..UTILS.logger import setup_logging
from ..UTILS.project_options import (
    ProjectOptions,
    load_env_file,
    PROJECT_NAME_ENV,
    PROJECT_DIRECTORY_ENV,
)

@click.group()
@click.option('--env-file', default=None, type=click.Path(dir_okay=False),
              help='Load environment variables from this file first')
@click.option('--project-name', '-p', default=None, help='Project name')
@click.option('--project-directory', default=None, help='Project working directory')
@click.option('--verbose', '-v', is_flag=True, help='Show debug output')
@click.pass_context
def cli(ctx, env_file, project_name, project_directory, verbose):
    """
    D2C - Docker to Compose.

    Generates a Compose file from containers that are already running.
    """
    setup_logging(verbose)
    load_env_file(env_file)

    ctx.ensure_object(dict)
    ctx.obj['options'] = ProjectOptions(
        project_name=project_name or os.environ.get(PROJECT_NAME_ENV, ""),
        working_dir=project_directory or os.environ.get(PROJECT_DIRECTORY_ENV, ""),
    )

@cli.command()
@click.argument('containers', nargs=-1, required=True)
@click.option('--format', '-f', 'fmt', type=click.Choice(FORMATS), default='yaml', help='Output format')
@click.pass_context
def generate(ctx, containers, fmt):
    """EXPERIMENTAL - Generate a compose file from existing container(s)."""
    click.echo("generate command is EXPERIMENTAL", err=True)

    try:
        inspector = DockerInspector()
    except docker.errors.DockerException as e:
        raise click.ClickException(f"unable to connect to the Docker engine: {e}")

    try:
        project = ProjectGenerator(inspector, ctx.obj['options']).generate(list(containers))
    except docker.errors.DockerException as e:
        raise click.ClickException(f"failed to inspect container: {e}")
    finally:
        inspector.close()

    click.echo(ComposeConverter(project, fmt).convert(), nl=False)

def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})

if __name__ == '__main__':
    main()
