"""
SNS plugin methods: .sol domain resolution through the Bonfida SNS proxy.
"""

from solana_agent_kit.domains.errors import ProtocolApiError

SNS_PROXY_API = "https://sns-sdk-proxy.bonfida.workers.dev"


async def resolve_sol_domain(agent, domain: str) -> str:
    """Resolve a .sol domain to the owner's wallet address."""
    name = domain.strip().lower()
    if name.endswith(".sol"):
        name = name[: -len(".sol")]
    if not name:
        raise ValueError("Domain name cannot be empty")

    api_url = agent.plugin_config("sns").get("api_url", SNS_PROXY_API)
    data = await agent.http.get_json(f"{api_url}/resolve/{name}")
    if data.get("s") != "ok":
        raise ProtocolApiError(
            f"Failed to resolve domain {name}.sol: {data.get('result', 'unknown error')}"
        )
    return data["result"]
