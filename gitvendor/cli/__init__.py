"""gitvendor 命令行接口

CLI 按领域拆分为子模块，每个模块注册自己的命令到 main group。
"""

import os

import click

from gitvendor import __version__
from gitvendor.utils.logger import setup_logging


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """gitvendor - 以 git submodule 方式 vendor 项目的外部依赖"""
    setup_logging(
        level=os.getenv("GITVENDOR_LOG_LEVEL", "INFO"),
        json_output=os.getenv("GITVENDOR_LOG_JSON", "") == "1",
    )


# 注册各领域子命令
from gitvendor.cli.cmd_vendor import register as _reg_vendor  # noqa: E402

_reg_vendor(main)
