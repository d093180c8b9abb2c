from typing import TYPE_CHECKING, Any, Optional, cast

from open_closed_linter.domain.config import ConfigurationLoader
from open_closed_linter.infrastructure.config_file_loader import ConfigFileLoader
from open_closed_linter.infrastructure.gateways.astroid_gateway import (
    AstroidGateway,
    NullTypeResolver,
)
from open_closed_linter.infrastructure.services.guidance_service import GuidanceService

if TYPE_CHECKING:
    from open_closed_linter.domain.protocols import TypeResolverProtocol


class OpenClosedContainer:
    """Dependency Injection Container for the open-closed linter."""

    _instance: Optional["OpenClosedContainer"] = None

    def __init__(self, config_loader: Optional[ConfigurationLoader] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    @classmethod
    def get_instance(cls) -> "OpenClosedContainer":
        """Return the process-wide container, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def _register_defaults(self, config_loader: Optional[ConfigurationLoader]) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)
        # type_resolution = false runs with the empty binding context
        if config_loader.type_resolution:
            self.register_singleton("TypeResolver", AstroidGateway())
        else:
            self.register_singleton("TypeResolver", NullTypeResolver())
        self.register_singleton("GuidanceService", GuidanceService())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_type_resolver(self) -> "TypeResolverProtocol":
        """Return the semantic type resolver (protocol)."""
        return cast("TypeResolverProtocol", self.get("TypeResolver"))

    def get_guidance_service(self) -> GuidanceService:
        return cast(GuidanceService, self.get("GuidanceService"))
