"""describe 输出 -> semver 转换测试"""

from __future__ import annotations

import pytest

from linkflags.core.models import TreeState
from linkflags.core.semver import DescribeParts, normalize_version, parse_describe, semverify

HASH = "abc12300000000"


class TestParseDescribe:
    def test_basic(self) -> None:
        parts = parse_describe(f"v1.2.0-3-g{HASH}")
        assert parts == DescribeParts(prefix="v1.2.0", commits="3", commit_hash=HASH)

    def test_prefix_with_dashes(self) -> None:
        parts = parse_describe(f"release-1.0-rc-12-g{HASH}")
        assert parts is not None
        assert parts.prefix == "release-1.0-rc"
        assert parts.commits == "12"

    @pytest.mark.parametrize("text", [
        "v1.2.0",                              # 恰好位于 tag 上
        f"v1.2.0-3-g{HASH[:-1]}",              # 哈希宽度不足
        f"v1.2.0-3-g{HASH.upper()}",           # 大写十六进制
        f"v1.2.0-x-g{HASH}",                   # 提交数非数字
        f"v1.2.0--g{HASH}",                    # 提交数为空
        f"-3-g{HASH}",                         # 前缀为空
        f"v1.2.0-3-{HASH}",                    # 缺少 g
        f"v1.2.0-3-g{HASH}-dirty",
        "",
    ])
    def test_no_match(self, text: str) -> None:
        assert parse_describe(text) is None

    def test_unicode_digits_rejected(self) -> None:
        assert parse_describe(f"v1-٣-g{HASH}") is None


class TestSemverify:
    def test_rewrites_trailing_shape(self) -> None:
        assert semverify(f"v1.2.0-3-g{HASH}") == f"v1.2.0.3+{HASH}"

    def test_zero_commits_still_matches(self) -> None:
        assert semverify(f"v1.2.0-0-g{HASH}") == f"v1.2.0.0+{HASH}"

    def test_exact_tag_unchanged(self) -> None:
        assert semverify("v1.2.0") == "v1.2.0"

    def test_second_pass_is_noop(self) -> None:
        once = semverify(f"v2.0.0-7-g{HASH}")
        assert semverify(once) == once


class TestNormalizeVersion:
    def test_empty_stays_empty(self) -> None:
        assert normalize_version("", TreeState.DIRTY) == ""

    def test_clean(self) -> None:
        assert normalize_version(f"v1.2.0-0-g{HASH}", TreeState.CLEAN) == f"v1.2.0.0+{HASH}"

    def test_dirty_suffix(self) -> None:
        v = normalize_version(f"v1.2.0-0-g{HASH}", TreeState.DIRTY)
        assert v == f"v1.2.0.0+{HASH}-dirty"

    def test_dirty_suffix_on_passthrough(self) -> None:
        assert normalize_version("v1.2.0", TreeState.DIRTY) == "v1.2.0-dirty"

    def test_dirty_output_not_rematched(self) -> None:
        v = normalize_version(f"v1.2.0-1-g{HASH}", TreeState.DIRTY)
        assert semverify(v) == v


class TestHashWidth:
    def test_custom_width(self) -> None:
        assert semverify("v1.0.0-1-g3c6d3fa9", width=8) == "v1.0.0.1+3c6d3fa9"

    def test_width_mismatch_passes_through(self) -> None:
        assert semverify("v1.0.0-1-g3c6d3fa9") == "v1.0.0-1-g3c6d3fa9"

    def test_normalize_with_width(self) -> None:
        assert normalize_version("v2-4-gdeadbeef", TreeState.DIRTY, width=8) == "v2.4+deadbeef-dirty"
