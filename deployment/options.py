from pathlib import Path

import click

env_file_option = click.option(
    "--env-file",
    "-e",
    help="dotenv file holding the endpoint, signing key and explorer API key.",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
    default=None,
)
