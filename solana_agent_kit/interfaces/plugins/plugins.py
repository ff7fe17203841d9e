"""
Plugin system interfaces.

These interfaces define the contracts for the plugin system: plugins bundle
methods and actions, actions are schema-validated operations a language
model can invoke, and the registry keeps them addressable by name.
"""
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from pydantic import BaseModel

# An async method bound to the agent at registration time: method(agent, *args, **kwargs)
PluginMethod = Callable[..., Awaitable[Any]]


class Action(ABC):
    """Interface for actions that can be invoked by a language model."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the name of the action."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Get the description of the action."""
        pass

    @property
    @abstractmethod
    def similes(self) -> List[str]:
        """Get alternate names the action answers to."""
        pass

    @property
    @abstractmethod
    def schema(self) -> Type[BaseModel]:
        """Get the model validating the action input."""
        pass

    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """Get the JSON schema for the action parameters."""
        pass

    @abstractmethod
    async def execute(self, agent: Any, params: Dict[str, Any]) -> Dict[str, Any]:
        """Validate the input and run the action, returning a result envelope."""
        pass


class ActionRegistry(ABC):
    """Interface for the action registry."""

    @abstractmethod
    def register_action(self, action: Action) -> None:
        """Register an action in the registry."""
        pass

    @abstractmethod
    def get_action(self, name: str) -> Optional[Action]:
        """Get an action by name or simile."""
        pass

    @abstractmethod
    def list_all_actions(self) -> List[Action]:
        """List all registered actions in registration order."""
        pass


class Plugin(ABC):
    """Interface for plugins that can be registered on an agent."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the name of the plugin."""
        pass

    @property
    @abstractmethod
    def methods(self) -> Dict[str, PluginMethod]:
        """Get the mapping of method names to async handlers."""
        pass

    @property
    @abstractmethod
    def actions(self) -> List[Action]:
        """Get the actions exposed by the plugin, in order."""
        pass

    @property
    def description(self) -> str:
        """Get the description of the plugin."""
        return ""

    def initialize(self, agent: Any) -> None:
        """Hook run once when the plugin is registered on an agent."""
        pass

    async def aclose(self) -> None:
        """Release resources the plugin opened in ``initialize``."""
        pass


class PluginManager(ABC):
    """Interface for the plugin manager."""

    @abstractmethod
    def register_plugin(self, plugin: Plugin) -> None:
        """Register a plugin on the managed agent."""
        pass

    @abstractmethod
    def load_plugins(self) -> List[str]:
        """Discover and register plugins from entry points."""
        pass

    @abstractmethod
    def get_plugin(self, name: str) -> Optional[Plugin]:
        """Get a plugin by name."""
        pass

    @abstractmethod
    def list_plugins(self) -> List[Dict[str, Any]]:
        """List all registered plugins with their details."""
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Close every registered plugin."""
        pass
