"""版本信息输出 - Strategy 模式

每种输出格式实现 InfoFormatter 接口，通过注册制工厂调用。
新增格式只需继承 InfoFormatter 并调用 register_formatter。
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod

from linkflags.core.exceptions import ConfigError
from linkflags.core.pipeline import Derivation
from linkflags.utils.yaml_io import dump_yaml


class InfoFormatter(ABC):
    """输出格式化策略基类"""

    @abstractmethod
    def format(self, derivation: Derivation) -> str:
        """将推导结果格式化为字符串"""


class FlagsFormatter(InfoFormatter):
    """空格分隔的链接参数，直接喂给 `go build -ldflags`"""

    def format(self, derivation: Derivation) -> str:
        return derivation.render()


class JSONFormatter(InfoFormatter):
    def format(self, derivation: Derivation) -> str:
        return json.dumps(derivation.info.to_dict(), indent=2)


class YAMLFormatter(InfoFormatter):
    def format(self, derivation: Derivation) -> str:
        return dump_yaml(derivation.info.to_dict()).rstrip("\n")


_FORMATTERS: dict[str, InfoFormatter] = {
    "flags": FlagsFormatter(),
    "json": JSONFormatter(),
    "yaml": YAMLFormatter(),
}


def register_formatter(name: str, formatter: InfoFormatter) -> None:
    """注册自定义输出格式"""
    _FORMATTERS[name] = formatter


def available_formats() -> list[str]:
    return list(_FORMATTERS)


def format_derivation(derivation: Derivation, fmt: str = "flags") -> str:
    """按指定格式输出推导结果"""
    formatter = _FORMATTERS.get(fmt)
    if formatter is None:
        raise ConfigError(f"不支持的输出格式: {fmt}")
    return formatter.format(derivation)
