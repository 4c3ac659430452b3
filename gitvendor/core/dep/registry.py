"""项目注册表

按 name 排序的有序序列，支持精确查找和按路径段的最长前缀归属查找。
只会追加，已插入的条目不会被删除或修改。
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterator

from gitvendor.core.dep.models import Project
from gitvendor.core.exceptions import DuplicateProjectError

logger = logging.getLogger(__name__)


class ProjectRegistry:
    """已知项目的有序注册表"""

    def __init__(self, projects: list[Project] | None = None) -> None:
        self._projects: list[Project] = []
        self._names: list[str] = []
        for proj in projects or []:
            self.add(proj)

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(list(self._projects))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._exact(name) is not None

    def _exact(self, name: str) -> Project | None:
        i = bisect.bisect_left(self._names, name)
        if i < len(self._names) and self._names[i] == name:
            return self._projects[i]
        return None

    def find(self, package: str) -> Project | None:
        """查找拥有 package 的项目

        先精确匹配；未命中时从最长的祖先路径开始逐级精确查找，
        因此 github.com/org/re 永远不会被当作 github.com/org/repo 的所有者。
        """
        proj = self._exact(package)
        if proj is not None:
            return proj

        prefix = package
        while "/" in prefix:
            prefix = prefix.rsplit("/", 1)[0]
            proj = self._exact(prefix)
            if proj is not None:
                return proj
        return None

    def add(self, project: Project) -> None:
        """按序插入，重名时抛 DuplicateProjectError"""
        i = bisect.bisect_left(self._names, project.name)
        if i < len(self._names) and self._names[i] == project.name:
            raise DuplicateProjectError(f"项目已注册: {project.name}")
        self._names.insert(i, project.name)
        self._projects.insert(i, project)
        logger.debug("注册项目: %s -> %r", project.name, project.location)

    def names(self) -> list[str]:
        return list(self._names)
