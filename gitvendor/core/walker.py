"""导入图遍历器

从根目录开始深度优先遍历子目录，对每个目录调用导入分析器，并把
每个导入交给解析器。解析得到的依赖目录同样被处理（但不含其测试导入），
已访问集合保证每个目录至多处理一次。
"""

from __future__ import annotations

import logging
import os

from gitvendor.core.context import VendorContext
from gitvendor.core.dep.resolver import DependencyResolver
from gitvendor.core.exceptions import NoSourcesError
from gitvendor.core.protocols import Importer

logger = logging.getLogger(__name__)


class ImportWalker:
    """遍历项目目录树及其依赖目录"""

    def __init__(
        self,
        context: VendorContext,
        importer: Importer,
        resolver: DependencyResolver,
    ) -> None:
        self.context = context
        self.importer = importer
        self.resolver = resolver

    # ------------------------------------------------------------------
    # 目录树遍历
    # ------------------------------------------------------------------

    def walk(self, directory: str = "", root: bool = True) -> None:
        """处理 directory（含测试导入），再递归处理其子目录"""
        self.process(directory, tests_too=True)

        for name in self._subdirs(directory):
            if root and name == self.context.config.vendor_dir:
                continue
            if name in self.context.config.skip_dirs or name.startswith("."):
                continue
            self.walk(os.path.join(directory, name), root=False)

    def _subdirs(self, directory: str) -> list[str]:
        with os.scandir(self.context.abspath(directory)) as it:
            return sorted(
                entry.name for entry in it
                if entry.is_dir(follow_symlinks=False)
            )

    # ------------------------------------------------------------------
    # 单目录处理
    # ------------------------------------------------------------------

    def process(self, directory: str, tests_too: bool) -> None:
        """处理 directory 及经由导入可达的全部依赖目录

        依赖目录用显式栈处理，依赖链再长也不会耗尽调用栈。
        """
        pending = [(directory, tests_too)]
        while pending:
            current, with_tests = pending.pop()
            if current in self.context.visited:
                continue
            self.context.visited.add(current)

            deps = [
                dep for dep in self._dependencies(current, with_tests)
                if dep not in self.context.visited
            ]
            pending.extend((dep, False) for dep in reversed(deps))

    def _dependencies(self, directory: str, tests_too: bool) -> list[str]:
        """分析目录导入并逐个解析，返回需要继续处理的依赖目录"""
        try:
            imports = self.importer.import_dir(self.context.abspath(directory))
        except NoSourcesError:
            logger.debug("无源文件: %s", directory or ".")
            return []

        logger.debug("处理目录: %s", directory or ".")
        packages = list(imports.imports)
        if tests_too:
            packages += imports.test_imports

        deps = []
        for pkg in packages:
            dep = self.resolver.resolve(pkg)
            # 空串是根目录自身，由目录树遍历负责
            if dep:
                deps.append(dep)
        return deps
