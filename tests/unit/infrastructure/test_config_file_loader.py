"""Unit tests for ConfigFileLoader."""

import tempfile
import unittest
from pathlib import Path

from open_closed_linter.infrastructure.config_file_loader import ConfigFileLoader


class TestConfigFileLoader(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, text: str) -> None:
        (self.root / "pyproject.toml").write_text(text, encoding="utf-8")

    def test_reads_own_table_from_nested_directory(self) -> None:
        self._write(
            '[tool.open-closed]\nignored_enums = ["Color"]\nmax_functions_per_file = 5\n'
            "[tool.other]\nvalue = 1\n"
        )
        nested = self.root / "src" / "pkg"
        nested.mkdir(parents=True)

        config = ConfigFileLoader.load_config_from_fs(nested)

        self.assertEqual(config, {"ignored_enums": ["Color"], "max_functions_per_file": 5})

    def test_pyproject_without_section_gives_empty_config(self) -> None:
        self._write('[project]\nname = "x"\n')

        self.assertEqual(ConfigFileLoader.load_config_from_fs(self.root), {})

    def test_invalid_toml_warns_and_gives_empty_config(self) -> None:
        self._write("[tool.open-closed\n")

        with self.assertLogs(
            "open_closed_linter.infrastructure.config_file_loader", level="WARNING"
        ):
            config = ConfigFileLoader.load_config_from_fs(self.root)

        self.assertEqual(config, {})
