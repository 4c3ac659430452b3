"""依赖项目拉取器

把未知的外部项目作为 git submodule 添加到 vendor 目录下，成功后立即
注册，保证随后遍历该项目时其内部自引用能命中注册表而不会再次拉取。
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitvendor.core.context import VendorContext

from gitvendor.core.dep.hosting import Resolution
from gitvendor.core.dep.models import Project, package_to_path
from gitvendor.core.protocols import VcsClient

logger = logging.getLogger(__name__)


class SubmoduleFetcher:
    """以 submodule 方式 vendor 外部项目"""

    def __init__(self, context: VendorContext, vcs: VcsClient) -> None:
        self.context = context
        self.vcs = vcs

    def vendor_path(self, project_name: str) -> str:
        return os.path.join(self.context.config.vendor_dir, package_to_path(project_name))

    def materialize(self, resolution: Resolution) -> Project:
        """拉取并注册项目，失败时 VcsError 直接向上抛出，不注册"""
        proj = Project(
            name=resolution.project_name,
            location=self.vendor_path(resolution.project_name),
        )
        logger.info("Adding %s", resolution.url)
        self.vcs.submodule_add(resolution.url, proj.location)

        self.context.registry.add(proj)
        self.context.fetched.append(proj)
        logger.info("已 vendor: %s -> %s", proj.name, proj.location)
        return proj
