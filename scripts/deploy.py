#!/usr/bin/python3

import click

from deployment.deployer import Deployer
from deployment.options import env_file_option


@click.command()
@env_file_option
def cli(env_file):
    """
    Deploy SimpleVoting to Kovan and verify its source on Etherscan.

    ape run deploy --env-file .env
    """
    deployer = Deployer.from_environment(env_file=env_file)
    try:
        deployer.run()
    except Exception as error:
        if deployer.instance is not None:
            click.echo(
                f"(!) {deployer.contract_name} remains deployed at "
                f"{deployer.instance.address} but was not verified.",
                err=True,
            )
        raise click.ClickException(str(error) or repr(error)) from error


if __name__ == "__main__":
    cli()
