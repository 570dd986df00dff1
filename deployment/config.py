import os
from pathlib import Path
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from deployment.constants import DOTENV_FILEPATH, NETWORK_PROFILES, TARGET_NETWORK


class Settings(NamedTuple):
    """Environment-provided values for a single deployment run."""

    network: str
    endpoint_uri: Optional[str]
    private_key: Optional[str]
    explorer_api_key: Optional[str]

    @property
    def network_choice(self) -> str:
        """Returns the ape network choice, e.g. 'ethereum:kovan:node'."""
        profile = NETWORK_PROFILES[self.network]
        return f"{profile.ecosystem}:{self.network}:{profile.provider}"


def load_settings(network: str = TARGET_NETWORK, env_file: Optional[Path] = None) -> Settings:
    """
    Reads the endpoint, signing key and explorer API key for a network.

    A dotenv file is loaded first; variables already set in the process
    environment take precedence over it. Nothing is validated here: a missing
    value is None and fails later, at the first call that needs it.
    """
    load_dotenv(dotenv_path=env_file or DOTENV_FILEPATH)
    profile = NETWORK_PROFILES[network]
    return Settings(
        network=network,
        endpoint_uri=os.environ.get(profile.endpoint_envvar),
        private_key=os.environ.get(profile.private_key_envvar),
        explorer_api_key=os.environ.get(profile.explorer_api_key_envvar),
    )
