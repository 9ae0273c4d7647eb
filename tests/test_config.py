"""Unit tests for ScaffoldSettings (avs_scaffold.config).

Tests cover:
- Defaults and derived paths
- from_env overrides
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from avs_scaffold.config import DEFAULT_RESOURCES_DIR, ScaffoldSettings
from avs_scaffold.models import DEFAULT_DESCRIPTION


class TestScaffoldSettings:
    @pytest.mark.unit
    def test_defaults(self, tmp_path):
        settings = ScaffoldSettings(base_dir=tmp_path)
        assert settings.resources_dir == DEFAULT_RESOURCES_DIR
        assert settings.interactive is True
        assert settings.default_description == DEFAULT_DESCRIPTION

    @pytest.mark.unit
    def test_derived_paths(self, tmp_path):
        settings = ScaffoldSettings(base_dir=tmp_path, resources_dir=tmp_path / "res")
        assert settings.templates_dir == tmp_path / "res" / "templates"
        assert settings.contracts_dir == tmp_path / "res" / "contracts"
        assert settings.project_path("demo") == tmp_path / "demo"

    @pytest.mark.unit
    def test_packaged_resources_exist(self):
        assert (DEFAULT_RESOURCES_DIR / "templates" / "package.json.j2").is_file()
        assert (DEFAULT_RESOURCES_DIR / "contracts" / "TaskMailbox.sol").is_file()

    @pytest.mark.unit
    def test_base_dir_required(self):
        with pytest.raises(ValidationError):
            ScaffoldSettings()


class TestFromEnv:
    @pytest.mark.unit
    def test_uses_fallback_base_dir(self, tmp_path):
        with patch.dict("os.environ", {}, clear=True):
            settings = ScaffoldSettings.from_env(base_dir=tmp_path)
        assert settings.base_dir == tmp_path
        assert settings.interactive is True

    @pytest.mark.unit
    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch.dict("os.environ", {}, clear=True):
            settings = ScaffoldSettings.from_env()
        assert settings.base_dir == Path.cwd()

    @pytest.mark.unit
    def test_env_overrides(self, tmp_path):
        env = {
            "AVS_SCAFFOLD_BASE_DIR": str(tmp_path / "out"),
            "AVS_SCAFFOLD_RESOURCES_DIR": str(tmp_path / "res"),
            "AVS_SCAFFOLD_NO_INPUT": "true",
            "AVS_SCAFFOLD_DESCRIPTION": "From env",
        }
        with patch.dict("os.environ", env, clear=True):
            settings = ScaffoldSettings.from_env(base_dir=tmp_path)
        assert settings.base_dir == tmp_path / "out"
        assert settings.resources_dir == tmp_path / "res"
        assert settings.interactive is False
        assert settings.default_description == "From env"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["0", "false", "", "no"])
    def test_no_input_falsy(self, tmp_path, value):
        with patch.dict("os.environ", {"AVS_SCAFFOLD_NO_INPUT": value}, clear=True):
            settings = ScaffoldSettings.from_env(base_dir=tmp_path)
        assert settings.interactive is True
