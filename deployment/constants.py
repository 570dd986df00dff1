from enum import IntEnum
from pathlib import Path
from typing import NamedTuple

#
# Filesystem
#

DOTENV_FILEPATH = Path(".env")

#
# Networks
#

ETHEREUM = "ethereum"
KOVAN = "kovan"


class NetworkProfile(NamedTuple):
    """Where a network's endpoint, signing key and explorer key come from."""

    ecosystem: str
    provider: str
    endpoint_envvar: str
    private_key_envvar: str
    explorer_api_key_envvar: str


NETWORK_PROFILES = {
    KOVAN: NetworkProfile(
        ecosystem=ETHEREUM,
        provider="node",
        endpoint_envvar="ALCHEMY_API_KEY_URL",
        private_key_envvar="KOVAN_PRIVATE_KEY",
        explorer_api_key_envvar="ETHERSCAN_KEY",
    ),
}

TARGET_NETWORK = KOVAN

#
# Contracts
#

SIMPLE_VOTING = "SimpleVoting"

# Balancer token on Kovan
KOVAN_BALANCER_ADDRESS = "0x41286Bb1D3E870f3F750eB7E1C25d7E48c8A1Ac7"

#
# Explorer
#

# seconds to wait for etherscan to index a new contract
EXPLORER_INDEXING_DELAY = 10

#
# Deployment stages, in the order they are completed
#


class DeploymentStage(IntEnum):
    NON_INITIATED = 0
    FACTORY_RESOLVED = 1
    DEPLOY_SUBMITTED = 2
    DEPLOY_CONFIRMED = 3
    COOLDOWN = 4
    VERIFY_SUBMITTED = 5
