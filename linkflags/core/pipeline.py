"""版本推导管线

依次执行:
    1. 探测 go 工具版本（未知即致命，语法无法安全选择）
    2. 采集 git 状态（提交 ID / 工作区状态致命，describe 失败仅置空版本）
    3. 规范化版本号
    4. 组装链接参数

用法:
    result = derive(Config(path="/src/app"))
    print(result.render())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from linkflags.core.config import Config
from linkflags.core.exceptions import ToolVersionError
from linkflags.core.flags import LinkFlagBuilder
from linkflags.core.git import RepositoryInspector
from linkflags.core.models import LinkSetting, ToolVersion, VersionInfo
from linkflags.core.semver import normalize_version
from linkflags.core.toolchain import ToolVersionDetector
from linkflags.utils.shell import CommandExecutor, LocalExecutor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Derivation:
    """一次推导的完整结果"""

    info: VersionInfo
    tool_version: ToolVersion
    package: str
    settings: list[LinkSetting] = field(default_factory=list)

    def render(self) -> str:
        return LinkFlagBuilder(self.package).render(self.settings)


def derive(config: Config, executor: CommandExecutor | None = None) -> Derivation:
    """从工作区推导版本信息和链接参数，致命失败抛 LinkFlagsError 子类"""
    executor = executor or LocalExecutor()

    tool_version = ToolVersionDetector(config.go_cmd, executor=executor).detect()
    if not tool_version.known:
        raise ToolVersionError(f"无法确定 {config.go_cmd} 工具版本: {tool_version.reason}")

    inspector = RepositoryInspector(
        config.path, git_cmd=config.git_cmd, abbrev=config.abbrev, executor=executor,
    )
    snapshot = inspector.snapshot()
    version = normalize_version(snapshot.raw_describe, snapshot.tree_state, config.abbrev)
    logger.info(
        "推导完成: commit=%s tree=%s version=%s",
        snapshot.commit_id, snapshot.tree_state.value, version or "<none>",
    )

    builder = LinkFlagBuilder(config.package)
    settings = builder.build(
        snapshot.commit_id, snapshot.tree_state, version, tool_version,
    )
    info = VersionInfo(
        version=version,
        git_commit=snapshot.commit_id,
        git_tree_state=snapshot.tree_state.value,
    )
    return Derivation(
        info=info, tool_version=tool_version,
        package=config.package, settings=settings,
    )
