"""GuidanceService: loads the packaged rule registry."""

import logging
from pathlib import Path
from typing import Optional, cast

import yaml

from open_closed_linter.domain.protocols import GuidanceServiceProtocol
from open_closed_linter.domain.registry_types import RuleRegistryEntry

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_PATH = Path(__file__).resolve().parents[2] / "resources" / "rule_registry.yaml"


class GuidanceService(GuidanceServiceProtocol):
    """Reads rule_registry.yaml once. Missing file means an empty registry."""

    def __init__(self, registry_path: Optional[str] = None) -> None:
        self._path = Path(registry_path) if registry_path is not None else DEFAULT_REGISTRY_PATH
        self._registry = self._read_registry(self._path)

    @staticmethod
    def _read_registry(path: Path) -> dict[str, RuleRegistryEntry]:
        if not path.is_file():
            logger.warning("Rule registry not found at %s", path)
            return {}
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            logger.warning("Rule registry at %s is not a mapping; ignoring it", path)
            return {}
        return cast(dict[str, RuleRegistryEntry], data)

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Shallow copy, safe to hand to rules and checkers."""
        return dict(self._registry)
