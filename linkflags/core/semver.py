"""git describe 输出转换为 semver 兼容版本号

`<prefix>-<N>-g<hash>` 改写为 `<prefix>.<N>+<hash>`，其它形式（例如恰好位于
tag 上的提交）原样保留，工作区 dirty 时追加 `-dirty`。

describe 尾部按固定文法从右向左解析，不依赖正则:

    <prefix> "-" <digits> "-g" <hex{width}>

width 与 `git describe --abbrev=<width>` 保持一致，默认 14。
"""

from __future__ import annotations

from dataclasses import dataclass

from linkflags.core.models import TreeState

HASH_WIDTH = 14
DIRTY_SUFFIX = "-dirty"

_DIGITS = frozenset("0123456789")
_HEX = frozenset("0123456789abcdef")


@dataclass(frozen=True)
class DescribeParts:
    """describe 输出的三个组成部分"""

    prefix: str
    commits: str  # tag 之后的提交数，保留原始十进制文本
    commit_hash: str

    def semver(self) -> str:
        return f"{self.prefix}.{self.commits}+{self.commit_hash}"


def parse_describe(text: str, width: int = HASH_WIDTH) -> DescribeParts | None:
    """解析 describe 尾部，不符合文法返回 None"""
    # 最短形式: "x-0-g" + 哈希
    if width <= 0 or len(text) < width + 5:
        return None

    commit_hash = text[-width:]
    if not set(commit_hash) <= _HEX:
        return None

    rest = text[:-width]
    if not rest.endswith("-g"):
        return None
    rest = rest[:-2]

    sep = rest.rfind("-")
    if sep <= 0:
        return None
    prefix, commits = rest[:sep], rest[sep + 1:]
    if not commits or not set(commits) <= _DIGITS:
        return None
    return DescribeParts(prefix=prefix, commits=commits, commit_hash=commit_hash)


def semverify(text: str, width: int = HASH_WIDTH) -> str:
    """改写匹配的 describe 输出，不匹配原样返回"""
    parts = parse_describe(text, width)
    if parts is None:
        return text
    return parts.semver()


def normalize_version(raw: str, tree_state: TreeState, width: int = HASH_WIDTH) -> str:
    """describe 原始输出 -> 最终版本号，空输入返回空串"""
    if not raw:
        return ""
    version = semverify(raw, width)
    if tree_state is TreeState.DIRTY:
        version += DIRTY_SUFFIX
    return version
