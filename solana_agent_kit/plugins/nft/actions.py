"""
NFT plugin actions.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from solana_agent_kit.domains.results import ActionResult
from solana_agent_kit.plugins.actions.action import Action, ActionExample
from solana_agent_kit.plugins.actions.types import PublicKeyStr
from solana_agent_kit.plugins.nft.mpl_core import MAX_BASIS_POINTS


class DeployCollectionInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Name of the collection")
    uri: str = Field(
        ..., pattern=r"^https?://", description="URI of the collection metadata JSON"
    )
    royalty_basis_points: int = Field(
        500,
        alias="royaltyBasisPoints",
        ge=0,
        le=MAX_BASIS_POINTS,
        description="Royalty in basis points (100 = 1%)",
    )


class GetAssetInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    collection: Optional[str] = Field(
        None, description="Name or address of a collection deployed by this agent"
    )
    asset_id: Optional[PublicKeyStr] = Field(
        None, alias="assetId", description="Address of the asset"
    )

    @model_validator(mode="after")
    def one_identifier(self) -> "GetAssetInput":
        if not self.collection and not self.asset_id:
            raise ValueError("Provide either collection or assetId")
        return self


async def _deploy_collection(agent, params: DeployCollectionInput) -> ActionResult:
    deployed = await agent.methods.deploy_collection(
        params.name, params.uri, params.royalty_basis_points
    )
    return ActionResult.success(
        f"Collection {params.name} deployed successfully",
        transaction=deployed["signature"],
        collectionAddress=deployed["collection_address"],
        name=params.name,
    )


async def _get_asset(agent, params: GetAssetInput) -> ActionResult:
    asset = await agent.methods.get_asset(params.asset_id or params.collection)
    return ActionResult.success("Asset retrieved successfully", data=asset)


DEPLOY_COLLECTION_ACTION = Action(
    name="solana_deploy_collection",
    similes=["DEPLOY_COLLECTION", "create NFT collection", "launch collection"],
    description=(
        "Deploy a new NFT collection on Solana. Requires the collection name, the "
        "metadata URI and the royalty in basis points"
    ),
    schema=DeployCollectionInput,
    handler=_deploy_collection,
    examples=[
        ActionExample(
            input={
                "name": "My Collection",
                "uri": "https://example.com/collection.json",
                "royaltyBasisPoints": 500,
            },
            output={"status": "success", "collectionAddress": "7nE9GvcwsqzYxmJLSrYmSB1V1YoJWVK1KWzAcWAzjXkN"},
            explanation="Deploy a collection with 5% royalties",
        )
    ],
)

GET_ASSET_ACTION = Action(
    name="solana_get_asset",
    similes=["GET_ASSET", "fetch asset", "collection details"],
    description=(
        "Get details of a Solana asset or collection, by address or by the name "
        "of a collection deployed in this session"
    ),
    schema=GetAssetInput,
    handler=_get_asset,
)
