"""统一异常体系

所有业务异常继承 LinkFlagsError，CLI 层据此输出单行诊断并以非零码退出。
"""

from __future__ import annotations


def _first_line(text: str) -> str:
    """诊断只保留第一条非空输出行"""
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


class LinkFlagsError(Exception):
    """基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(LinkFlagsError):
    """配置文件缺失或内容无效"""

    code = "CONFIG_ERROR"


class ToolError(LinkFlagsError):
    """外部工具执行失败（非零退出或无法启动）"""

    code = "TOOL_ERROR"

    def __init__(self, tool: str, output: str = "", cause: object = None) -> None:
        self.tool = tool
        self.output = output
        self.cause = cause
        detail = _first_line(output)
        message = f"执行 `{tool}` 出错: {cause}"
        super().__init__(f"{message} ({detail})" if detail else message)


class ParseError(LinkFlagsError):
    """数值解析失败"""

    code = "PARSE_ERROR"


class ToolVersionError(LinkFlagsError):
    """无法确定构建工具版本，链接参数语法无法选择"""

    code = "TOOL_VERSION_ERROR"
