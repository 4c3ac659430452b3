"""vendor 运行入口

流程:
  1. 读取 git remote / submodule 填充注册表
  2. 从根目录遍历导入图，按需把未知外部项目添加为 submodule

任何错误都会中止整个运行，不产生部分 vendor 的结果。

用法:
    from gitvendor.core.vendorer import Vendorer

    report = Vendorer("path/to/project").run()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from gitvendor.core.config import Config
from gitvendor.core.context import VendorContext
from gitvendor.core.dep.fetcher import SubmoduleFetcher
from gitvendor.core.dep.hosting import HostingTable
from gitvendor.core.dep.models import Project
from gitvendor.core.dep.resolver import DependencyResolver
from gitvendor.core.importer import GoListImporter
from gitvendor.core.protocols import Importer, VcsClient
from gitvendor.core.vcs import GitClient, seed_registry
from gitvendor.core.walker import ImportWalker

logger = logging.getLogger(__name__)


@dataclass
class VendorReport:
    """一次运行的汇总"""

    projects: list[Project] = field(default_factory=list)
    fetched: list[Project] = field(default_factory=list)
    visited: int = 0


class Vendorer:
    """组装注册表、遍历器、解析器和拉取器并执行一次 vendor"""

    def __init__(
        self,
        root: str | Path,
        config: Config | None = None,
        *,
        project_name: str = "",
        vcs: VcsClient | None = None,
        importer: Importer | None = None,
    ) -> None:
        self.root = Path(root)
        self.config = config or Config.for_root(self.root)
        self.project_name = project_name
        self.vcs = vcs or GitClient(self.root, git_bin=self.config.git_bin)
        self.importer = importer or GoListImporter(go_bin=self.config.go_bin)
        self.context = VendorContext(root=self.root, config=self.config)

    def seed(self) -> list[Project]:
        """仅执行启动扫描，返回已知项目"""
        seed_registry(
            self.context.registry, self.vcs,
            vendor_dir=self.config.vendor_dir,
            project_name=self.project_name,
        )
        return list(self.context.registry)

    def run(self) -> VendorReport:
        self.seed()

        hosting = HostingTable.from_config(self.config.hosting_aliases)
        fetcher = SubmoduleFetcher(self.context, self.vcs)
        resolver = DependencyResolver(self.context, hosting, fetcher)
        ImportWalker(self.context, self.importer, resolver).walk()

        report = VendorReport(
            projects=list(self.context.registry),
            fetched=list(self.context.fetched),
            visited=len(self.context.visited),
        )
        logger.info(
            "完成: 访问 %d 个目录, 新增 %d 个项目",
            report.visited, len(report.fetched),
        )
        return report
