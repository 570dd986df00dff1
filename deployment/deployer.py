import time
from pathlib import Path
from typing import Any, Optional, Sequence

from ape import networks
from ape.api import AccountAPI
from ape.contracts import ContractContainer, ContractInstance

from deployment.accounts import EnvironmentAccount
from deployment.config import Settings, load_settings
from deployment.constants import (
    EXPLORER_INDEXING_DELAY,
    KOVAN_BALANCER_ADDRESS,
    SIMPLE_VOTING,
    DeploymentStage,
)
from deployment.utils import get_contract_container, verify_contract


class Deployer:
    """
    Deploys a single contract and publishes its source to the block explorer.

    The steps always run in the same order: resolve the contract container,
    submit the deployment, wait for confirmation, wait for the explorer to
    index the contract, verify. Any failure propagates to the caller and
    nothing is rolled back; `stage` tells how far the run got.
    """

    def __init__(
        self,
        settings: Settings,
        contract_name: str = SIMPLE_VOTING,
        constructor_args: Sequence[Any] = (KOVAN_BALANCER_ADDRESS,),
        indexing_delay: int = EXPLORER_INDEXING_DELAY,
    ):
        self.settings = settings
        self.contract_name = contract_name
        self.constructor_args = tuple(constructor_args)
        self.indexing_delay = indexing_delay
        self.stage = DeploymentStage.NON_INITIATED
        self.instance: Optional[ContractInstance] = None

    @classmethod
    def from_environment(cls, env_file: Optional[Path] = None, **kwargs) -> "Deployer":
        settings = load_settings(env_file=env_file)
        return cls(settings=settings, **kwargs)

    def get_account(self) -> AccountAPI:
        """Returns the account holding the configured signing key."""
        return EnvironmentAccount(private_key=self.settings.private_key)

    def connect(self):
        """Returns a provider context for the configured network."""
        provider_settings = {}
        if self.settings.endpoint_uri:
            provider_settings["uri"] = self.settings.endpoint_uri
        return networks.parse_network_choice(
            self.settings.network_choice, provider_settings=provider_settings
        )

    def resolve_factory(self) -> ContractContainer:
        container = get_contract_container(self.contract_name)
        self.stage = DeploymentStage.FACTORY_RESOLVED
        return container

    def submit(self, container: ContractContainer) -> ContractInstance:
        account = self.get_account()
        self._print_deployment_info(account)
        print(f"\nDeploying {self.contract_name}...")
        self.instance = account.deploy(container, *self.constructor_args)
        self.stage = DeploymentStage.DEPLOY_SUBMITTED
        return self.instance

    def confirm(self, instance: ContractInstance) -> ContractInstance:
        instance.receipt.await_confirmations()
        self.stage = DeploymentStage.DEPLOY_CONFIRMED
        print("Contract Address:", instance.address)
        return instance

    def cooldown(self) -> None:
        print("Sleeping.....")
        time.sleep(self.indexing_delay)
        self.stage = DeploymentStage.COOLDOWN

    def verify(self, instance: ContractInstance) -> None:
        verify_contract(
            instance,
            constructor_args=self.constructor_args,
            api_key=self.settings.explorer_api_key,
        )
        self.stage = DeploymentStage.VERIFY_SUBMITTED

    def run(self) -> ContractInstance:
        container = self.resolve_factory()
        with self.connect():
            instance = self.submit(container)
            self.confirm(instance)
            self.cooldown()
            self.verify(instance)
        return instance

    def _print_deployment_info(self, account: AccountAPI) -> None:
        print(
            f"Account: {account.address}",
            f"Contract: {self.contract_name}",
            f"Constructor arguments: {', '.join(map(str, self.constructor_args))}",
            f"Ecosystem: {networks.provider.network.ecosystem.name}",
            f"Network: {networks.provider.network.name}",
            f"Chain ID: {networks.provider.network.chain_id}",
            sep="\n",
        )
