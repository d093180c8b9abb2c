"""Configuration for linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from open_closed_linter.domain.constants import DEFAULT_MAX_FUNCTIONS_PER_FILE

logger = logging.getLogger(__name__)

_BOOL_KEYS: tuple[str, ...] = (
    "type_resolution",
    "check_match_statements",
    "check_if_chains",
)

class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from the [tool.open-closed] table. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about values of the wrong type. Defaults apply in their place."""
        for key in _BOOL_KEYS:
            if key in config and not isinstance(config[key], bool):
                logger.warning(
                    "Configuration Warning: '%s' must be true or false, got %r. Using default.",
                    key, config[key],
                )
        ignored = config.get("ignored_enums")
        if ignored is not None and not isinstance(ignored, list):
            logger.warning(
                "Configuration Warning: 'ignored_enums' must be a list of names, got %r.", ignored
            )
        max_functions = config.get("max_functions_per_file")
        if max_functions is not None and (
            isinstance(max_functions, bool) or not isinstance(max_functions, int) or max_functions < 0
        ):
            logger.warning(
                "Configuration Warning: 'max_functions_per_file' must be a non-negative integer, "
                "got %r. Using %d.",
                max_functions, DEFAULT_MAX_FUNCTIONS_PER_FILE,
            )

    def _flag(self, key: str, default: bool) -> bool:
        raw = self._config.get(key, default)
        return raw if isinstance(raw, bool) else default

    @property
    def type_resolution(self) -> bool:
        """False runs without a semantic binding context: no dispatch is reported."""
        return self._flag("type_resolution", True)

    @property
    def check_match_statements(self) -> bool:
        return self._flag("check_match_statements", True)

    @property
    def check_if_chains(self) -> bool:
        return self._flag("check_if_chains", True)

    @property
    def ignored_enums(self) -> frozenset[str]:
        """Enum names (simple or qualified) never reported as dispatch subjects."""
        raw = self._config.get("ignored_enums", [])
        if isinstance(raw, list):
            return frozenset(str(x) for x in raw if isinstance(x, str))
        return frozenset()

    @property
    def max_functions_per_file(self) -> int:
        raw = self._config.get("max_functions_per_file", DEFAULT_MAX_FUNCTIONS_PER_FILE)
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
            return DEFAULT_MAX_FUNCTIONS_PER_FILE
        return raw
