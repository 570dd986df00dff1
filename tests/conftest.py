from unittest.mock import MagicMock

import pytest

from deployment import deployer as deployer_module
from deployment.config import Settings
from deployment.constants import KOVAN, SIMPLE_VOTING

DEPLOYED_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"

# Hardhat's first well-known development account
DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

ENVIRONMENT_VARIABLES = ("ALCHEMY_API_KEY_URL", "KOVAN_PRIVATE_KEY", "ETHERSCAN_KEY")


@pytest.fixture
def clean_environment(monkeypatch):
    # set before deleting so values loaded from a dotenv file are undone too
    for envvar in ENVIRONMENT_VARIABLES:
        monkeypatch.setenv(envvar, "")
        monkeypatch.delenv(envvar)


@pytest.fixture
def settings():
    return Settings(
        network=KOVAN,
        endpoint_uri="https://eth-kovan.example/v2/key",
        private_key=DEV_PRIVATE_KEY,
        explorer_api_key="ETHERSCANKEY",
    )


@pytest.fixture
def events():
    """Ordered record of every external call made by the deployer."""
    return []


@pytest.fixture
def contract_instance(events):
    instance = MagicMock(name=SIMPLE_VOTING)
    instance.address = DEPLOYED_ADDRESS
    instance.contract_type.name = SIMPLE_VOTING
    instance.receipt.await_confirmations.side_effect = lambda: events.append(("confirm",))
    return instance


@pytest.fixture
def contract_container():
    container = MagicMock(name=f"{SIMPLE_VOTING}Container")
    container.contract_type.name = SIMPLE_VOTING
    return container


@pytest.fixture
def account(events, contract_instance):
    account = MagicMock(name="account")
    account.address = DEV_ADDRESS

    def deploy(container, *args, **kwargs):
        events.append(("deploy", container.contract_type.name, args))
        return contract_instance

    account.deploy.side_effect = deploy
    return account


@pytest.fixture
def platform(monkeypatch, events, contract_container):
    """
    Replaces the network, the project, the clock and the explorer seen by the
    deployer with recording fakes. The signing account is left untouched.
    """

    def resolve(contract_name):
        events.append(("resolve", contract_name))
        return contract_container

    def parse_network_choice(network_choice, provider_settings=None):
        events.append(("connect", network_choice, provider_settings))
        return MagicMock(name="provider_context")

    def verify(instance, constructor_args, api_key=None):
        events.append(("verify", instance.address, tuple(constructor_args), api_key))

    network_manager = MagicMock(name="networks")
    network_manager.parse_network_choice.side_effect = parse_network_choice

    monkeypatch.setattr(deployer_module, "get_contract_container", resolve)
    monkeypatch.setattr(deployer_module, "networks", network_manager)
    monkeypatch.setattr(deployer_module, "verify_contract", verify)
    monkeypatch.setattr(
        deployer_module.time, "sleep", lambda seconds: events.append(("sleep", seconds))
    )
    return network_manager


@pytest.fixture
def fake_account(monkeypatch, account):
    monkeypatch.setattr(deployer_module, "EnvironmentAccount", lambda private_key: account)
    return account


def event_names(events):
    return [event[0] for event in events]
