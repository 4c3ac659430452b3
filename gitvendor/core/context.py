"""单次运行的上下文

注册表和已访问目录集合都挂在这里，由顶层运行持有并显式传给
各组件，不使用任何模块级全局状态。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gitvendor.core.config import Config
from gitvendor.core.dep.models import Project
from gitvendor.core.dep.registry import ProjectRegistry


@dataclass
class VendorContext:
    root: Path
    config: Config = field(default_factory=Config)
    registry: ProjectRegistry = field(default_factory=ProjectRegistry)
    visited: set[str] = field(default_factory=set)
    fetched: list[Project] = field(default_factory=list)

    def abspath(self, rel: str) -> Path:
        """相对根目录的路径 → 绝对路径（空串即根目录）"""
        return self.root / rel if rel else self.root
