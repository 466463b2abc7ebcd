"""链接参数组装

按固定顺序生成 gitCommit / gitTreeState / version 三个链接变量:
提交 ID 非空时成对输出前两个，版本号非空时输出 version。
"""

from __future__ import annotations

from linkflags.core.models import LinkSetting, ToolVersion, TreeState

# go1.4 及更早的链接器只接受 `-X name value` 形式
LEGACY_SYNTAX_MAX = 1 * 10 + 4


class LinkFlagBuilder:
    """链接参数构造器"""

    def __init__(self, package: str) -> None:
        self.package = package

    def build(
        self,
        commit_id: str,
        tree_state: TreeState,
        version: str,
        tool_version: ToolVersion,
    ) -> list[LinkSetting]:
        legacy = tool_version.value <= LEGACY_SYNTAX_MAX
        settings: list[LinkSetting] = []
        if commit_id:
            settings.append(LinkSetting("gitCommit", commit_id, legacy=legacy))
            settings.append(LinkSetting("gitTreeState", tree_state.value, legacy=legacy))
        if version:
            settings.append(LinkSetting("version", version, legacy=legacy))
        return settings

    def render(self, settings: list[LinkSetting]) -> str:
        """格式化并以单个空格拼接"""
        return " ".join(s.format(self.package) for s in settings)
