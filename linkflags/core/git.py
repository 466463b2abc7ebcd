"""git 工作区查询

所有命令都以 `--work-tree <path> --git-dir <path>/.git` 绑定到目标工作区，
不修改任何 git 状态。
"""

from __future__ import annotations

import logging
import os

from linkflags.core.exceptions import ToolError
from linkflags.core.models import RepositorySnapshot, TreeState
from linkflags.utils.shell import CommandExecutor, LocalExecutor

logger = logging.getLogger(__name__)


class RepositoryInspector:
    """针对单个工作区执行 git 查询"""

    def __init__(
        self,
        path: str,
        *,
        git_cmd: str = "git",
        abbrev: int = 14,
        executor: CommandExecutor | None = None,
    ) -> None:
        self.path = path
        self.git_cmd = git_cmd
        self.abbrev = abbrev
        self._executor = executor or LocalExecutor()
        self._args = ["--work-tree", path, "--git-dir", os.path.join(path, ".git")]

    def commit_id(self) -> str:
        """解析 HEAD 对应的完整提交 ID"""
        return self._exec("rev-parse", "HEAD^{commit}")

    def tree_state(self) -> TreeState:
        """status --porcelain 输出为空即 clean，否则 dirty"""
        out = self._exec("status", "--porcelain")
        return TreeState.DIRTY if out else TreeState.CLEAN

    def describe(self, commit_id: str) -> str:
        """最近可达 tag 的描述，尾部哈希固定缩写宽度"""
        return self._exec(
            "describe", "--tags", f"--abbrev={self.abbrev}", f"{commit_id}^{{commit}}",
        )

    def snapshot(self) -> RepositorySnapshot:
        """一次性采集提交 ID、工作区状态和 describe 输出

        提交 ID 和工作区状态失败直接抛出；describe 任何失败都视为
        没有版本号（例如仓库没有 tag），不中断推导。
        """
        commit_id = self.commit_id()
        tree_state = self.tree_state()
        # TODO: 仅在 git 返回非零退出码时置空版本，无法启动进程时应向上抛出
        try:
            raw_describe = self.describe(commit_id)
        except ToolError as e:
            logger.warning("git describe 失败，版本号置空: %s", e)
            raw_describe = ""
        return RepositorySnapshot(
            commit_id=commit_id, tree_state=tree_state, raw_describe=raw_describe,
        )

    def _exec(self, *args: str) -> str:
        """执行 git 子命令，成功时返回去除首尾空白的输出"""
        cmd = [self.git_cmd, *self._args, *args]
        try:
            r = self._executor.execute(cmd)
        except OSError as e:
            raise ToolError(self.git_cmd, cause=e) from e
        if not r.success:
            # git 把出错的参数回显到 stdout，诊断优先取 stderr
            raise ToolError(
                self.git_cmd, output=r.stderr.strip() or r.stdout.strip(),
                cause=f"exit status {r.returncode}",
            )
        return r.stdout.strip()
