"""集中配置管理

Config 在 CLI 入口构造一次，之后显式传入推导管线，运行期不可变。
支持从 YAML 文件加载 + 命令行覆盖。
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from linkflags.core.exceptions import ConfigError
from linkflags.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE = "github.com/gravitational/version"

# git describe 哈希缩写宽度范围（git 最短 4 位，完整 SHA-1 为 40 位）
MIN_ABBREV = 4
MAX_ABBREV = 40


@dataclass(frozen=True)
class Config:
    """一次推导的全部配置"""

    # 目标工作区
    path: str = "."

    # 链接变量所在的 Go 包
    package: str = DEFAULT_PACKAGE

    # 外部工具
    git_cmd: str = "git"
    go_cmd: str = "go"
    abbrev: int = 14

    # 输出
    output_format: str = "flags"

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if (
            not isinstance(self.abbrev, int) or isinstance(self.abbrev, bool)
            or not MIN_ABBREV <= self.abbrev <= MAX_ABBREV
        ):
            raise ConfigError(f"abbrev 必须为 {MIN_ABBREV}~{MAX_ABBREV} 之间的整数: {self.abbrev!r}")
        if not self.package:
            raise ConfigError("package 不能为空")

    @classmethod
    def from_file(cls, config_path: str = "", **overrides: Any) -> Config:
        """从 YAML 文件加载配置，再叠加值非 None 的覆盖项

        config_path 为空时使用默认值；显式指定但不存在时抛 ConfigError。
        """
        data: dict[str, Any] = {}
        if config_path:
            if not Path(config_path).is_file():
                raise ConfigError(f"配置文件不存在: {config_path}")
            try:
                data = load_yaml(config_path)
            except (yaml.YAMLError, OSError, ValueError) as e:
                raise ConfigError(f"无法加载配置文件 {config_path}: {e}") from e
            logger.info("配置文件 %s: %d 项", config_path, len(data))

        known = {f.name for f in fields(cls)} - {"extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        matched.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**matched, extra=extra)

    def to_dict(self) -> dict:
        return asdict(self)
