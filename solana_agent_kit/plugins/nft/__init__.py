"""
NFT plugin: Metaplex Core collection deployment and DAS asset lookup.
"""
import logging
from typing import Any, Dict, List, Optional

from solders.keypair import Keypair

from solana_agent_kit.adapters.rpc_adapter import SolanaRpcAdapter
from solana_agent_kit.interfaces.plugins.plugins import Action, Plugin, PluginMethod
from solana_agent_kit.plugins.nft import actions
from solana_agent_kit.plugins.nft.mpl_core import create_collection_v1
from solana_agent_kit.services.transactions import build_transaction, send_and_confirm

# Setup logger for this module
logger = logging.getLogger(__name__)


class NftPlugin(Plugin):
    """NFT collections on Metaplex Core.

    Collections deployed through this plugin are remembered by name so that
    later lookups can refer to them the way a user would.
    """

    def __init__(self):
        self._collections: Dict[str, str] = {}  # name -> collection address
        self._das: Optional[SolanaRpcAdapter] = None

    @property
    def name(self) -> str:
        return "nft"

    @property
    def description(self) -> str:
        return "Deploy Metaplex Core NFT collections and fetch asset details"

    @property
    def methods(self) -> Dict[str, PluginMethod]:
        return {
            "deploy_collection": self.deploy_collection,
            "get_asset": self.get_asset,
        }

    @property
    def actions(self) -> List[Action]:
        return [actions.DEPLOY_COLLECTION_ACTION, actions.GET_ASSET_ACTION]

    def initialize(self, agent: Any) -> None:
        das_url = agent.plugin_config("nft").get("das_url")
        if das_url:
            self._das = SolanaRpcAdapter(das_url)
            logger.info(f"NFT plugin using DAS endpoint {das_url}")

    async def aclose(self) -> None:
        if self._das is not None:
            await self._das.aclose()
            self._das = None

    @property
    def collections(self) -> Dict[str, str]:
        return dict(self._collections)

    async def deploy_collection(
        self, agent: Any, name: str, uri: str, royalty_basis_points: int = 500
    ) -> Dict[str, str]:
        """Deploy a collection and return its address and transaction signature."""
        collection = Keypair()
        instruction = create_collection_v1(
            collection.pubkey(),
            agent.wallet.public_key,
            name,
            uri,
            royalty_basis_points,
        )
        transaction = await build_transaction(agent, [instruction], [collection])
        signature = await send_and_confirm(agent, transaction)

        address = str(collection.pubkey())
        self._collections[name] = address
        logger.info(f"Deployed collection {name} at {address}: {signature}")
        return {"collection_address": address, "signature": signature}

    async def get_asset(self, agent: Any, asset: str) -> Dict[str, Any]:
        """Fetch an asset by address, or by the name of a collection deployed here."""
        asset_id = self._collections.get(asset, asset)
        connection = self._das or agent.connection
        return await connection.get_asset(asset_id)
