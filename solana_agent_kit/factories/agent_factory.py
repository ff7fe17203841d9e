"""
Factory for creating and wiring components of the Solana Agent Kit.

This module handles configuration validation and the creation of the
wallet, RPC connection, plugins and language model provider.
"""

import importlib
import logging
import os
from typing import Any, Callable, Dict, List, Mapping, Optional

from solana_agent_kit.adapters.openai_adapter import OpenAIAdapter
from solana_agent_kit.adapters.rpc_adapter import DEFAULT_RPC_URL, SolanaRpcAdapter
from solana_agent_kit.adapters.wallet_adapter import KeypairWallet
from solana_agent_kit.client.agent_kit import SolanaAgentKit, load_config
from solana_agent_kit.domains.errors import ConfigError
from solana_agent_kit.interfaces.plugins.plugins import Plugin
from solana_agent_kit.plugins.jupiter import JupiterPlugin
from solana_agent_kit.plugins.lulo import LuloPlugin
from solana_agent_kit.plugins.nft import NftPlugin
from solana_agent_kit.plugins.sns import SnsPlugin
from solana_agent_kit.plugins.token import TokenPlugin
from solana_agent_kit.services.agent import AgentService

# Setup logger for this module
logger = logging.getLogger(__name__)

BUILTIN_PLUGINS: Dict[str, Callable[[], Plugin]] = {
    "token": TokenPlugin,
    "jupiter": JupiterPlugin,
    "lulo": LuloPlugin,
    "sns": SnsPlugin,
    "nft": NftPlugin,
}


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Build a configuration dictionary from environment variables."""
    env = os.environ if environ is None else environ

    config: Dict[str, Any] = {
        "solana": {
            "rpc_url": env.get("RPC_URL", DEFAULT_RPC_URL),
        },
        "plugins": {
            "jupiter": {},
            "lulo": {},
            "nft": {},
        },
    }
    if env.get("SOLANA_PRIVATE_KEY"):
        config["solana"]["private_key"] = env["SOLANA_PRIVATE_KEY"]
    if env.get("OPENAI_API_KEY"):
        config["openai"] = {"api_key": env["OPENAI_API_KEY"]}
        if env.get("OPENAI_MODEL"):
            config["openai"]["model"] = env["OPENAI_MODEL"]
    if env.get("LOGFIRE_API_KEY"):
        config["logfire"] = {"api_key": env["LOGFIRE_API_KEY"]}
    if env.get("JUPITER_REFERRAL_ACCOUNT"):
        config["plugins"]["jupiter"]["fee_account"] = env["JUPITER_REFERRAL_ACCOUNT"]
    if env.get("JUPITER_FEE_BPS"):
        config["plugins"]["jupiter"]["fee_bps"] = int(env["JUPITER_FEE_BPS"])
    if env.get("FLEXLEND_API_KEY"):
        config["plugins"]["lulo"]["api_key"] = env["FLEXLEND_API_KEY"]
    if env.get("HELIUS_API_KEY"):
        config["plugins"]["nft"]["das_url"] = (
            f"https://mainnet.helius-rpc.com/?api-key={env['HELIUS_API_KEY']}"
        )
    # Keys for plugins that are not built in are passed through untouched
    for key in ("ORBOFI_API_KEY", "ETHEREUM_PRIVATE_KEY"):
        if env.get(key):
            config.setdefault("extra", {})[key] = env[key]
    return config


class SolanaAgentKitFactory:
    """Factory for creating and wiring components of the Solana Agent Kit."""

    @staticmethod
    def _create_plugins(names: List[str]) -> List[Plugin]:
        """Instantiate built-in plugins by name, or any plugin by dotted class path."""
        plugins = []
        for name in names:
            if name in BUILTIN_PLUGINS:
                plugins.append(BUILTIN_PLUGINS[name]())
                continue
            try:
                module_path, class_name = name.rsplit(".", 1)
                module = importlib.import_module(module_path)
                plugins.append(getattr(module, class_name)())
                logger.info(f"Successfully loaded plugin class: {name}")
            except (ImportError, AttributeError, ValueError) as e:
                raise ConfigError(f"Unknown plugin '{name}': {e}") from e
        return plugins

    @staticmethod
    def create_from_config(config: Dict[str, Any]) -> SolanaAgentKit:
        """Create an agent with its plugins registered.

        Args:
            config: Configuration dictionary

        Returns:
            Configured SolanaAgentKit instance

        Raises:
            ConfigError: if required settings are missing
        """
        solana = config.get("solana")
        if not solana:
            raise ConfigError("Solana configuration is required.")
        if not solana.get("private_key"):
            raise ConfigError("Solana private key is required.")

        rpc_url = solana.get("rpc_url", DEFAULT_RPC_URL)
        connection = SolanaRpcAdapter(
            rpc_url,
            commitment=solana.get("commitment", "confirmed"),
            confirm_timeout=solana.get("confirm_timeout", 60),
        )
        wallet = KeypairWallet.from_base58(solana["private_key"], connection)
        logger.info(f"Using Solana RPC {rpc_url} with wallet {wallet.public_key}")

        agent = SolanaAgentKit(wallet, connection, config=config)
        for plugin in SolanaAgentKitFactory._create_plugins(
            config.get("use_plugins", list(BUILTIN_PLUGINS))
        ):
            agent.use(plugin)

        if config.get("load_entry_points"):
            loaded = agent.plugin_manager.load_plugins()
            logger.info(f"Loaded entry point plugins: {loaded}")

        return agent

    @staticmethod
    def create_from_path(config_path: str) -> SolanaAgentKit:
        return SolanaAgentKitFactory.create_from_config(load_config(config_path))

    @staticmethod
    def create_llm_provider(config: Dict[str, Any]) -> OpenAIAdapter:
        """Create the OpenAI provider, instrumented with Logfire when configured."""
        # OpenAI is the only supported LLM provider
        if "openai" not in config or "api_key" not in config["openai"]:
            raise ConfigError("OpenAI API key is required in config.")

        llm_model = config["openai"].get("model")
        if llm_model:
            logger.info(f"Using OpenAI as LLM provider with model: {llm_model}")
        else:
            logger.info("Using OpenAI as LLM provider")

        logfire_api_key = None
        if "logfire" in config:
            if "api_key" not in config["logfire"]:
                raise ConfigError("Pydantic Logfire API key is required.")
            logfire_api_key = config["logfire"]["api_key"]

        return OpenAIAdapter(
            api_key=config["openai"]["api_key"],
            model=llm_model,
            logfire_api_key=logfire_api_key,
        )

    @staticmethod
    def create_agent_service(
        config: Dict[str, Any], agent: SolanaAgentKit, dry_run: bool = False
    ) -> AgentService:
        return AgentService(
            agent,
            SolanaAgentKitFactory.create_llm_provider(config),
            system_prompt=config.get("system_prompt"),
            dry_run=dry_run,
        )
