"""核心数据模型

每次调用重新创建，只在推导期间驻留内存，不做任何持久化。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# 未知工具版本的哨兵值，任何真实版本编码都 >= 10
TOOL_VERSION_UNKNOWN = 0


class TreeState(str, Enum):
    """工作区状态"""

    CLEAN = "clean"
    DIRTY = "dirty"


@dataclass(frozen=True)
class RepositorySnapshot:
    """某一时刻的 git 状态"""

    commit_id: str
    tree_state: TreeState
    raw_describe: str = ""  # describe 失败时为空


@dataclass(frozen=True)
class ToolVersion:
    """构建工具版本，编码为 major*10 + minor"""

    value: int = TOOL_VERSION_UNKNOWN
    raw: str = ""
    reason: str = ""  # 未知时的原因，单行

    @classmethod
    def encode(cls, major: int, minor: int, raw: str = "") -> ToolVersion:
        return cls(value=major * 10 + minor, raw=raw)

    @property
    def known(self) -> bool:
        return self.value != TOOL_VERSION_UNKNOWN


@dataclass(frozen=True)
class VersionInfo:
    """最终推导出的版本信息"""

    version: str = ""
    git_commit: str = ""
    git_tree_state: str = ""

    def to_dict(self) -> dict[str, str]:
        """按链接变量名输出，供 JSON / YAML 打印"""
        return {
            "version": self.version,
            "gitCommit": self.git_commit,
            "gitTreeState": self.git_tree_state,
        }


@dataclass(frozen=True)
class LinkSetting:
    """单个链接期键值设置"""

    key: str
    value: str
    legacy: bool = False  # True: `-X pkg.key value`，False: `-X pkg.key=value`

    def format(self, package: str) -> str:
        if self.legacy:
            return f"-X {package}.{self.key} {self.value}"
        return f"-X {package}.{self.key}={self.value}"
