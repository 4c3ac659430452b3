"""依赖解析模块

- models.py: 数据模型
- registry.py: 项目注册表
- hosting.py: 托管域名命名规则
- resolver.py: 包名解析
- fetcher.py: submodule 拉取
"""

from gitvendor.core.dep.fetcher import SubmoduleFetcher
from gitvendor.core.dep.hosting import HostingTable, Resolution
from gitvendor.core.dep.models import Project
from gitvendor.core.dep.registry import ProjectRegistry
from gitvendor.core.dep.resolver import DependencyResolver

__all__ = [
    "Project",
    "ProjectRegistry",
    "HostingTable",
    "Resolution",
    "DependencyResolver",
    "SubmoduleFetcher",
]
