"""
Client-side encoding of the Metaplex Core ``CreateCollectionV1`` instruction.

Arguments are borsh encoded: strings and vectors are u32 little-endian length
prefixed, options carry a one byte tag, enums a one byte variant index.
"""

import struct
from typing import List, Optional, Tuple

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from solana_agent_kit.domains.tokens import MPL_CORE_PROGRAM_ID, SYSTEM_PROGRAM_ID

CREATE_COLLECTION_V1 = 1
ROYALTIES_PLUGIN = 0
RULE_SET_NONE = 0
MAX_BASIS_POINTS = 10000


def _string(value: str) -> bytes:
    encoded = value.encode("utf-8")
    return struct.pack("<I", len(encoded)) + encoded


def encode_royalties(basis_points: int, creators: List[Tuple[Pubkey, int]]) -> bytes:
    """Encode a Royalties plugin paired with no explicit authority."""
    if not 0 <= basis_points <= MAX_BASIS_POINTS:
        raise ValueError(f"Royalty basis points must be within 0..{MAX_BASIS_POINTS}")
    if creators and sum(share for _, share in creators) != 100:
        raise ValueError("Creator shares must add up to 100")

    data = bytes([ROYALTIES_PLUGIN]) + struct.pack("<H", basis_points)
    data += struct.pack("<I", len(creators))
    for address, share in creators:
        data += bytes(address) + struct.pack("<B", share)
    data += bytes([RULE_SET_NONE])
    # PluginAuthorityPair.authority: None, defaults to the plugin's manager
    data += bytes([0])
    return data


def encode_create_collection_args(
    name: str, uri: str, plugins: Optional[List[bytes]] = None
) -> bytes:
    data = bytes([CREATE_COLLECTION_V1]) + _string(name) + _string(uri)
    if plugins is None:
        return data + bytes([0])
    data += bytes([1]) + struct.pack("<I", len(plugins))
    for plugin in plugins:
        data += plugin
    return data


def create_collection_v1(
    collection: Pubkey,
    payer: Pubkey,
    name: str,
    uri: str,
    royalty_basis_points: int,
    update_authority: Optional[Pubkey] = None,
) -> Instruction:
    """Build a CreateCollectionV1 instruction with a royalties plugin paying the payer."""
    royalties = encode_royalties(royalty_basis_points, [(payer, 100)])
    return Instruction(
        MPL_CORE_PROGRAM_ID,
        encode_create_collection_args(name, uri, [royalties]),
        [
            AccountMeta(collection, is_signer=True, is_writable=True),
            AccountMeta(update_authority or payer, is_signer=False, is_writable=False),
            AccountMeta(payer, is_signer=True, is_writable=True),
            AccountMeta(SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
        ],
    )
