"""
Reusable field types for action input schemas.
"""
from typing import Annotated

from pydantic import AfterValidator
from solders.pubkey import Pubkey


def check_public_key(value: str) -> str:
    """Ensure a string is a valid base58 Solana public key."""
    try:
        Pubkey.from_string(value)
    except Exception as e:
        raise ValueError(f"'{value}' is not a valid Solana public key") from e
    return value


PublicKeyStr = Annotated[str, AfterValidator(check_public_key)]
