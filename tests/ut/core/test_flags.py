"""链接参数组装测试"""

from __future__ import annotations

import pytest

from linkflags.core.flags import LEGACY_SYNTAX_MAX, LinkFlagBuilder
from linkflags.core.models import LinkSetting, ToolVersion, TreeState

PKG = "github.com/gravitational/version"
GO14 = ToolVersion(value=14)
GO15 = ToolVersion(value=15)


@pytest.fixture()
def builder() -> LinkFlagBuilder:
    return LinkFlagBuilder(PKG)


class TestLinkSetting:
    def test_legacy_format(self) -> None:
        assert LinkSetting("version", "v1", legacy=True).format("pkg") == "-X pkg.version v1"

    def test_equals_format(self) -> None:
        assert LinkSetting("version", "v1").format("pkg") == "-X pkg.version=v1"


class TestBuild:
    def test_threshold(self) -> None:
        assert LEGACY_SYNTAX_MAX == 14

    def test_order(self, builder: LinkFlagBuilder) -> None:
        settings = builder.build("abc", TreeState.CLEAN, "v1.0.0", GO15)
        assert [s.key for s in settings] == ["gitCommit", "gitTreeState", "version"]
        assert [s.value for s in settings] == ["abc", "clean", "v1.0.0"]

    def test_boundary_uses_legacy(self, builder: LinkFlagBuilder) -> None:
        settings = builder.build("abc", TreeState.CLEAN, "v1", GO14)
        assert all(s.legacy for s in settings)

    def test_above_boundary_uses_equals(self, builder: LinkFlagBuilder) -> None:
        settings = builder.build("abc", TreeState.CLEAN, "v1", GO15)
        assert not any(s.legacy for s in settings)

    def test_unknown_version_uses_legacy(self, builder: LinkFlagBuilder) -> None:
        settings = builder.build("abc", TreeState.CLEAN, "v1", ToolVersion())
        assert all(s.legacy for s in settings)

    def test_no_version(self, builder: LinkFlagBuilder) -> None:
        settings = builder.build("abc", TreeState.DIRTY, "", GO15)
        assert [(s.key, s.value) for s in settings] == [("gitCommit", "abc"), ("gitTreeState", "dirty")]

    def test_no_commit_drops_pair(self, builder: LinkFlagBuilder) -> None:
        settings = builder.build("", TreeState.DIRTY, "v1", GO15)
        assert [s.key for s in settings] == ["version"]

    def test_nothing(self, builder: LinkFlagBuilder) -> None:
        assert builder.build("", TreeState.CLEAN, "", GO15) == []


class TestRender:
    def test_equals(self, builder: LinkFlagBuilder) -> None:
        settings = builder.build("abc", TreeState.CLEAN, "v1.0.0", ToolVersion(value=31))
        assert builder.render(settings) == (
            f"-X {PKG}.gitCommit=abc -X {PKG}.gitTreeState=clean -X {PKG}.version=v1.0.0"
        )

    def test_legacy(self, builder: LinkFlagBuilder) -> None:
        settings = builder.build("abc", TreeState.DIRTY, "", GO14)
        assert builder.render(settings) == f"-X {PKG}.gitCommit abc -X {PKG}.gitTreeState dirty"

    def test_empty(self, builder: LinkFlagBuilder) -> None:
        assert builder.render([]) == ""
