from typing import Any, Optional

from ape.api import AccountAPI, TransactionAPI
from ape.exceptions import SignatureError
from ape.types import AddressType, MessageSignature, TransactionSignature
from eth_account import Account as EthAccount
from eth_account.messages import SignableMessage, encode_defunct
from eth_utils import to_bytes, to_checksum_address, to_hex


class EnvironmentAccount(AccountAPI):
    """
    An ape account signing with a raw private key taken from the environment.
    The key only lives in memory; nothing is written to the ape keystore.
    """

    private_key: Optional[str] = None

    @property
    def alias(self) -> str:
        return "environment"

    @property
    def address(self) -> AddressType:
        return to_checksum_address(EthAccount.from_key(self.private_key).address)

    def sign_message(self, msg: Any, **signer_options) -> Optional[MessageSignature]:
        if isinstance(msg, str):
            msg = encode_defunct(text=msg)
        elif isinstance(msg, int):
            msg = encode_defunct(hexstr=to_hex(msg))
        elif isinstance(msg, bytes):
            msg = encode_defunct(primitive=msg)

        if not isinstance(msg, SignableMessage):
            return None

        signed_msg = EthAccount.sign_message(msg, self.private_key)
        return MessageSignature(
            v=signed_msg.v,
            r=to_bytes(signed_msg.r),
            s=to_bytes(signed_msg.s),
        )

    def sign_transaction(self, txn: TransactionAPI, **signer_options) -> Optional[TransactionAPI]:
        # only primitive types can be signed
        tx_data = txn.model_dump(mode="json", by_alias=True, exclude={"sender"})
        try:
            signature = EthAccount.sign_transaction(tx_data, self.private_key)
        except (TypeError, ValueError) as err:
            # missing fields needed to sign
            raise SignatureError(str(err)) from err

        txn.signature = TransactionSignature(
            v=signature.v,
            r=to_bytes(signature.r),
            s=to_bytes(signature.s),
        )
        return txn
