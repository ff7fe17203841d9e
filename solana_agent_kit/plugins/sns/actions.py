"""
SNS plugin actions.
"""
from pydantic import BaseModel, ConfigDict, Field

from solana_agent_kit.domains.results import ActionResult
from solana_agent_kit.plugins.actions.action import Action, ActionExample
from solana_agent_kit.plugins.sns import methods


class ResolveDomainInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    domain: str = Field(
        ..., min_length=1, description="The .sol domain to resolve, e.g. toly.sol"
    )


async def _resolve(agent, params: ResolveDomainInput) -> ActionResult:
    address = await methods.resolve_sol_domain(agent, params.domain)
    return ActionResult.success(
        f"Resolved {params.domain} to {address}",
        domain=params.domain,
        address=address,
    )


RESOLVE_SOL_DOMAIN_ACTION = Action(
    name="solana_resolve_domain",
    similes=["RESOLVE_SOL_DOMAIN", "resolve domain", "lookup .sol"],
    description="Resolve a .sol domain to its owner's Solana wallet address",
    schema=ResolveDomainInput,
    handler=_resolve,
    examples=[
        ActionExample(
            input={"domain": "toly.sol"},
            output={"status": "success", "address": "86xCnPeV69n6t3DnyGvkKobf9FdN2H9oiVDdaMpo2MMY"},
            explanation="Resolve toly.sol to its wallet address",
        )
    ],
)
