"""Tests for package manager detection."""

from __future__ import annotations

from ts_typie.tools import TOOLS, PackageManager, detect_default_tool, resolve_tool


def _which(available: set[str]):
    return lambda name: f"/usr/bin/{name}" if name in available else None


class TestDetectDefaultTool:
    def test_npm_only(self):
        assert detect_default_tool(_which({"npm"})) == "npm"

    def test_yarn_only(self):
        assert detect_default_tool(_which({"yarn"})) == "yarn"

    def test_first_declared_wins(self):
        assert detect_default_tool(_which({"yarn", "npm"})) == "npm"

    def test_none_available(self):
        assert detect_default_tool(_which(set())) is None


class TestResolveTool:
    def test_known(self):
        assert resolve_tool("yarn") == PackageManager("yarn", ("yarn", "add", "-D"))

    def test_unknown(self):
        assert resolve_tool("pnpm") is None

    def test_none(self):
        assert resolve_tool(None) is None

    def test_declaration_order(self):
        assert list(TOOLS) == ["npm", "yarn"]
        assert TOOLS["npm"].install_command == ("npm", "install", "--save-dev")
