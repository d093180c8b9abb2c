"""Load [tool.open-closed] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

TOOL_SECTION_NAME: str = "open-closed"


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from a start directory.
    """

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Returns the [tool.open-closed] table, empty when nothing is found."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Could not read %s: %s", config_file, exc)
                return {}
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(TOOL_SECTION_NAME, {}) or {}
            logger.debug("Loaded [tool.%s] from %s", TOOL_SECTION_NAME, config_file)
            return config_dict
        return {}
