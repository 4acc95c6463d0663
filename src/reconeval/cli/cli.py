"""
reconeval CLI - Reconstruction Robustness Evaluation
"""

import click

from reconeval import __version__

from .commands import config, evaluate


@click.group()
@click.version_option(version=__version__, prog_name="reconeval")
def cli() -> None:
    """reconeval - discriminator robustness under autoencoder reconstruction

    Use 'reconeval COMMAND --help' for more information on a command.
    """
    pass


# Register commands
cli.add_command(config)
cli.add_command(evaluate)


if __name__ == "__main__":
    cli()
