import os
from typing import Any, Optional, Sequence

from ape import networks, project
from ape.contracts import ContractContainer, ContractInstance
from ape_etherscan.utils import API_KEY_ENV_KEY_MAP


def get_contract_container(contract: str) -> ContractContainer:
    try:
        return getattr(project, contract)
    except AttributeError:
        raise ValueError(f"No contract found with name '{contract}'.")


def export_explorer_api_key(api_key: Optional[str]) -> None:
    """
    Exposes the explorer API key under the environment variable
    that the ape-etherscan plugin reads for the connected ecosystem.
    """
    if not api_key:
        return  # let the explorer reject the request
    ecosystem_name = networks.provider.network.ecosystem.name
    explorer_envvar = API_KEY_ENV_KEY_MAP.get(ecosystem_name)
    if explorer_envvar:
        os.environ[explorer_envvar] = api_key


def verify_contract(
    instance: ContractInstance, constructor_args: Sequence[Any], api_key: Optional[str] = None
) -> None:
    """
    Publishes the source of a deployed contract to the network's block explorer.

    The constructor arguments are informational only: ape-etherscan reads them
    back from the creation transaction.
    """
    explorer = networks.provider.network.explorer
    if explorer is None:
        raise ValueError(f"No block explorer available for {networks.provider.network.name}.")

    export_explorer_api_key(api_key)
    pretty_args = ", ".join(str(arg) for arg in constructor_args)
    print(
        f"(i) Verifying {instance.contract_type.name} at {instance.address} "
        f"with constructor arguments [{pretty_args}]..."
    )
    explorer.publish_contract(instance.address)
