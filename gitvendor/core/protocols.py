"""外部协作者协议

遍历与解析逻辑只依赖这里的抽象，不直接依赖 go / git 进程，
测试时注入假实现即可。
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gitvendor.core.importer import ImportSet


# =========================================================================
# 导入分析协议
# =========================================================================

class Importer(Protocol):
    """宿主工具链的导入分析器

    给定目录返回其导入与仅测试使用的导入；目录中没有可编译源文件时
    抛 NoSourcesError，其它失败抛 ImporterError。
    """

    def import_dir(self, path: Path) -> ImportSet:
        ...


# =========================================================================
# 版本控制协议
# =========================================================================

class VcsClient(Protocol):
    """版本控制客户端，所有调用均为同步阻塞"""

    def remotes(self) -> list[tuple[str, str, str]]:
        """返回 (remote 名, url, 方向) 列表"""
        ...

    def submodules(self) -> list[tuple[str, str, str]]:
        """返回 (状态字符, 路径, 描述) 列表"""
        ...

    def submodule_add(self, url: str, path: str) -> None:
        """添加 submodule，失败抛 VcsError"""
        ...
