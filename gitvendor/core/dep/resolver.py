"""依赖解析器

对每个导入的包名判定: 已知项目（映射到其磁盘位置）、标准库（忽略）
或未知外部项目（拉取后再映射）。无法识别的托管约定直接报错。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitvendor.core.context import VendorContext
    from gitvendor.core.dep.fetcher import SubmoduleFetcher
    from gitvendor.core.dep.hosting import HostingTable

logger = logging.getLogger(__name__)


class DependencyResolver:
    """包名 → 相对根目录的待处理目录"""

    def __init__(
        self,
        context: VendorContext,
        hosting: HostingTable,
        fetcher: SubmoduleFetcher,
    ) -> None:
        self.context = context
        self.hosting = hosting
        self.fetcher = fetcher

    def resolve(self, package: str) -> str | None:
        """返回包所在目录；标准库包返回 None

        未知的外部项目会先被拉取并注册。
        """
        proj = self.context.registry.find(package)
        if proj is None:
            resolution = self.hosting.resolve(package)
            if resolution is None:
                logger.debug("标准库包，忽略: %s", package)
                return None
            proj = self.fetcher.materialize(resolution)

        directory = proj.package_dir(package)
        logger.debug("解析: %s -> %s (%r)", package, proj.name, directory)
        return directory
