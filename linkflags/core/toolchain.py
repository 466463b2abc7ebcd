"""构建工具版本探测

执行 `go version`，把 `go1.21.3` 这样的版本号编码为 major*10 + minor，
用于选择链接参数语法。探测失败只返回未知哨兵，是否致命由调用方决定。
"""

from __future__ import annotations

import logging

from linkflags.core.exceptions import ParseError, ToolError
from linkflags.core.models import ToolVersion
from linkflags.utils.shell import CommandExecutor, LocalExecutor

logger = logging.getLogger(__name__)

# `go version go1.21.3 linux/amd64` 中版本号所在字段
_VERSION_FIELD = 2


def _to_int(text: str) -> int:
    """十进制数字串转整数，失败抛 ParseError"""
    if not text or not text.isascii() or not text.isdigit():
        raise ParseError(f"不是合法的十进制整数: {text!r}")
    return int(text)


def _leading_digits(text: str) -> str:
    end = 0
    while end < len(text) and text[end].isascii() and text[end].isdigit():
        end += 1
    return text[:end]


def parse_tool_version(token: str, tool: str = "go") -> ToolVersion:
    """解析 `<tool><major>.<minor>[.<patch>...]`，patch 及之后忽略

    >>> parse_tool_version("go1.4.3").value
    14
    >>> parse_tool_version("devel").known
    False
    """
    start = token.find(tool)
    if start < 0:
        return ToolVersion(raw=token)
    body = token[start + len(tool):]

    major_text = _leading_digits(body)
    rest = body[len(major_text):]
    if not rest.startswith("."):
        return ToolVersion(raw=token)
    minor_text = _leading_digits(rest[1:])

    try:
        major = _to_int(major_text)
        minor = _to_int(minor_text)
    except ParseError as e:
        logger.debug("无法解析工具版本 %r: %s", token, e)
        return ToolVersion(raw=token)
    if major == 0:
        return ToolVersion(raw=token)
    return ToolVersion.encode(major, minor, raw=token)


class ToolVersionDetector:
    """通过 `<tool> version` 探测构建工具版本"""

    def __init__(
        self,
        tool: str = "go",
        *,
        prefix: str = "go",
        executor: CommandExecutor | None = None,
    ) -> None:
        self.tool = tool
        self.prefix = prefix  # 版本号前缀，与可执行文件路径无关
        self._executor = executor or LocalExecutor()

    def detect(self) -> ToolVersion:
        """命令失败或输出无法解析时返回未知哨兵并附带原因，不抛异常"""
        try:
            r = self._executor.execute([self.tool, "version"])
        except OSError as e:
            return self._unknown(str(ToolError(self.tool, cause=e)))
        if not r.success:
            return self._unknown(str(ToolError(
                self.tool, output=r.stderr.strip() or r.stdout.strip(),
                cause=f"exit status {r.returncode}",
            )))

        fields = r.stdout.split()
        if len(fields) <= _VERSION_FIELD:
            return self._unknown(f"`{self.tool} version` 输出格式无法识别: {r.stdout.strip()!r}")
        version = parse_tool_version(fields[_VERSION_FIELD], tool=self.prefix)
        if not version.known:
            return self._unknown(f"无法解析版本号: {version.raw!r}", raw=version.raw)
        logger.debug("%s 版本: %s -> %d", self.tool, version.raw, version.value)
        return version

    def _unknown(self, reason: str, raw: str = "") -> ToolVersion:
        # 是否致命由调用方决定，此处只记 DEBUG
        logger.debug("无法确定 %s 版本: %s", self.tool, reason)
        return ToolVersion(raw=raw, reason=reason)
