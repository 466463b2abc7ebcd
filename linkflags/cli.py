"""linkflags 命令行接口

    $ go build -ldflags "$(linkflags .)" ./cmd/app
"""

from __future__ import annotations

import os

import click

from linkflags import __version__
from linkflags.core.config import Config
from linkflags.core.exceptions import LinkFlagsError
from linkflags.core.pipeline import derive
from linkflags.core.reporter import available_formats, format_derivation
from linkflags.utils.logger import setup_logging


@click.command()
@click.version_option(version=__version__)
@click.argument("path", type=click.Path(file_okay=False))
@click.option("--config", "-c", "config_path", default="", help="YAML 配置文件路径")
@click.option("--package", "-p", default=None, help="链接变量所在的 Go 包路径")
@click.option(
    "--format", "-f", "fmt", default=None,
    type=click.Choice(available_formats()), help="输出格式（默认 flags）",
)
def main(path: str, config_path: str, package: str | None, fmt: str | None) -> None:
    """根据 PATH 处 git 工作区的状态输出 Go 链接参数"""
    setup_logging(
        level=os.getenv("LINKFLAGS_LOG_LEVEL", "WARNING"),
        json_output=os.getenv("LINKFLAGS_LOG_JSON", "") == "1",
    )
    try:
        cfg = Config.from_file(config_path, path=path, package=package, output_format=fmt)
        result = derive(cfg)
        output = format_derivation(result, cfg.output_format)
    except LinkFlagsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(output)


if __name__ == "__main__":
    main()
