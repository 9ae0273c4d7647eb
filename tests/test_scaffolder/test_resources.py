"""Tests for bundled resource access.

Covers:
- resolve_template choosing bundled vs embedded bodies
- load_template fallback when the bundled body is missing or unreadable
- Static contract copies, including the skip when the bundle is absent
"""

from __future__ import annotations

import shutil

import pytest

from avs_scaffold.config import DEFAULT_RESOURCES_DIR
from avs_scaffold.errors import ResourceReadError
from avs_scaffold.models import BundledTemplate, EmbeddedTemplate, TemplateOrigin
from avs_scaffold.scaffolder.payloads import PACKAGE_JSON_TEMPLATE
from avs_scaffold.scaffolder.resources import ResourceProvider, resolve_template


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# resolve_template
# ---------------------------------------------------------------------------


class TestResolveTemplate:
    def test_bundled_preferred(self, tmp_path):
        result = resolve_template("package.json", tmp_path, ["package.json"])
        assert isinstance(result, BundledTemplate)
        assert result.path == tmp_path / "package.json.j2"

    def test_embedded_when_not_bundled(self, tmp_path):
        result = resolve_template("package.json", tmp_path, [])
        assert isinstance(result, EmbeddedTemplate)
        assert result.body == PACKAGE_JSON_TEMPLATE

    def test_unknown_name_raises(self, tmp_path):
        with pytest.raises(ResourceReadError):
            resolve_template("nope", tmp_path, [], {})

    def test_does_not_touch_filesystem(self, tmp_path):
        missing = tmp_path / "does-not-exist"
        result = resolve_template("package.json", missing, ["package.json"])
        assert isinstance(result, BundledTemplate)
        assert not missing.exists()


# ---------------------------------------------------------------------------
# load_template
# ---------------------------------------------------------------------------


class TestLoadTemplate:
    def test_packaged_template_is_bundled(self):
        provider = ResourceProvider(DEFAULT_RESOURCES_DIR)
        source = provider.load_template("package.json")
        assert source.origin == TemplateOrigin.BUNDLED
        assert "project_name" in source.body

    def test_missing_bundled_falls_back(self, resources_copy):
        (resources_copy / "templates" / "package.json.j2").unlink()
        provider = ResourceProvider(resources_copy)
        source = provider.load_template("package.json")
        assert source.origin == TemplateOrigin.EMBEDDED_DEFAULT
        assert source.body == PACKAGE_JSON_TEMPLATE

    def test_missing_resources_root_falls_back(self, tmp_path):
        provider = ResourceProvider(tmp_path / "nowhere")
        source = provider.load_template("package.json")
        assert source.origin == TemplateOrigin.EMBEDDED_DEFAULT

    def test_undecodable_bundled_falls_back(self, resources_copy):
        (resources_copy / "templates" / "package.json.j2").write_bytes(b"\xff\xfe\x00bad")
        provider = ResourceProvider(resources_copy)
        source = provider.load_template("package.json")
        assert source.origin == TemplateOrigin.EMBEDDED_DEFAULT

    def test_unknown_template_raises(self, resources_copy):
        provider = ResourceProvider(resources_copy)
        with pytest.raises(ResourceReadError):
            provider.load_template("README.md")

    def test_bundled_names(self, resources_copy):
        provider = ResourceProvider(resources_copy)
        assert provider.bundled_template_names() == ["package.json"]


# ---------------------------------------------------------------------------
# Static files
# ---------------------------------------------------------------------------


class TestStaticFiles:
    def test_copy_static_tree_is_verbatim(self, resources_copy):
        provider = ResourceProvider(resources_copy)
        artifacts = provider.copy_static_tree("interfaces", "contracts/interfaces")
        paths = {a.relative_path for a in artifacts}
        assert paths == {
            "contracts/interfaces/ITaskMailbox.sol",
            "contracts/interfaces/ITaskAVSRegistrar.sol",
        }
        for artifact in artifacts:
            name = artifact.relative_path.rsplit("/", 1)[-1]
            original = (resources_copy / "contracts" / "interfaces" / name).read_bytes()
            assert artifact.content == original
            assert artifact.origin == "copied"

    def test_copy_static_tree_preserves_subdirectories(self, resources_copy):
        nested = resources_copy / "contracts" / "interfaces" / "extra"
        nested.mkdir()
        (nested / "IExtra.sol").write_text("// extra\n", encoding="utf-8")
        provider = ResourceProvider(resources_copy)
        paths = {
            a.relative_path
            for a in provider.copy_static_tree("interfaces", "contracts/interfaces")
        }
        assert "contracts/interfaces/extra/IExtra.sol" in paths

    def test_load_static_file(self, resources_copy):
        provider = ResourceProvider(resources_copy)
        artifact = provider.load_static_file("TaskMailbox.sol", "contracts/TaskMailbox.sol")
        assert artifact is not None
        assert artifact.content == (resources_copy / "contracts" / "TaskMailbox.sol").read_bytes()

    def test_absent_contracts_root_is_skipped(self, resources_copy):
        shutil.rmtree(resources_copy / "contracts")
        provider = ResourceProvider(resources_copy)
        assert provider.has_contracts() is False
        assert provider.copy_static_tree("interfaces", "contracts/interfaces") == []
        assert provider.load_static_file("TaskMailbox.sol", "contracts/TaskMailbox.sol") is None

    def test_missing_file_in_present_root_raises(self, resources_copy):
        (resources_copy / "contracts" / "SlashingConditions.sol").unlink()
        provider = ResourceProvider(resources_copy)
        with pytest.raises(ResourceReadError):
            provider.load_static_file("SlashingConditions.sol", "contracts/SlashingConditions.sol")

    def test_missing_interfaces_dir_returns_empty(self, resources_copy):
        shutil.rmtree(resources_copy / "contracts" / "interfaces")
        provider = ResourceProvider(resources_copy)
        assert provider.copy_static_tree("interfaces", "contracts/interfaces") == []
