"""git 客户端与启动时的版本控制信息扫描

职责:
- 调用 git 读取 remote / submodule 状态、添加 submodule
- 由 remote 推断项目自身的包名
- 由 vendor 目录下已有的 submodule 预先填充注册表
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from gitvendor.core.dep.models import Project, path_to_package
from gitvendor.core.dep.registry import ProjectRegistry
from gitvendor.core.exceptions import IdentityError, VcsError
from gitvendor.core.protocols import VcsClient
from gitvendor.utils.shell import CommandExecutor, CommandResult, get_executor

logger = logging.getLogger(__name__)

_REMOTE_URL_RE = re.compile(r"^(?:https://github\.com/|git@github\.com:)(.+)$")
_WS_RE = re.compile(r"[ \t]+")


def _split_ws(line: str) -> list[str]:
    return _WS_RE.split(line.strip())


class GitClient:
    """基于 git 命令行的 VcsClient 实现"""

    def __init__(
        self, root: str | Path, git_bin: str = "git",
        executor: CommandExecutor | None = None,
    ) -> None:
        self.root = str(root)
        self.git_bin = git_bin
        self.executor = executor or get_executor()

    def _git(self, *args: str) -> CommandResult:
        cmd = [self.git_bin, "-C", self.root, *args]
        r = self.executor.execute(cmd, cwd=self.root)
        if not r.success:
            if r.output.strip():
                logger.error("git %s 输出:\n%s", " ".join(args), r.output.rstrip())
            raise VcsError(
                f"git {' '.join(args)} 失败 (rc={r.returncode}): {r.summary()[:300]}",
                output=r.output, returncode=r.returncode,
            )
        return r

    def remotes(self) -> list[tuple[str, str, str]]:
        result = []
        for line in self._git("remote", "-v").lines():
            fields = _split_ws(line)
            if len(fields) < 2:
                continue
            direction = fields[2].strip("()") if len(fields) > 2 else ""
            result.append((fields[0], fields[1], direction))
        return result

    def submodules(self) -> list[tuple[str, str, str]]:
        result = []
        for line in self._git("submodule", "status").lines():
            # 状态字符紧贴在 SHA 前面，去掉首尾空白后路径总是第二个字段
            status = line[0] if line[0] in " -+U" else " "
            fields = _split_ws(line)
            if len(fields) < 2:
                continue
            result.append((status, fields[1], " ".join(fields[2:])))
        return result

    def submodule_add(self, url: str, path: str) -> None:
        self._git("submodule", "add", url, path)


# =========================================================================
# 启动扫描
# =========================================================================

def github_project_name(url: str) -> str | None:
    """GitHub remote URL → github.com/<org>/<repo>，不匹配返回 None"""
    m = _REMOTE_URL_RE.match(url)
    if m is None:
        return None
    proj = m.group(1)
    if proj.endswith(".git"):
        proj = proj[:-4]
    return "github.com/" + proj


def seed_from_remotes(registry: ProjectRegistry, vcs: VcsClient) -> list[str]:
    """从 remote 推断项目自身的包名并注册（location 为空）

    返回推断出的包名列表。
    """
    inferred = []
    for _name, url, _direction in vcs.remotes():
        proj = github_project_name(url)
        if proj is None or registry.find(proj) is not None:
            continue
        logger.info("Inferred package name %s from git remote", proj)
        registry.add(Project(name=proj, location=""))
        inferred.append(proj)
    return inferred


def seed_from_submodules(
    registry: ProjectRegistry, vcs: VcsClient, vendor_dir: str = "vendor",
) -> list[Project]:
    """把 vendor 目录下已有的 submodule 注册为项目"""
    prefix = vendor_dir.rstrip("/" + os.sep) + os.sep
    added = []
    for _status, path, _desc in vcs.submodules():
        native = path.replace("/", os.sep)
        if not native.startswith(prefix):
            continue
        proj = Project(name=path_to_package(native[len(prefix):]), location=native)
        if proj.name in registry:
            continue
        registry.add(proj)
        added.append(proj)
        logger.info("已有 submodule: %s -> %s", proj.name, proj.location)
    return added


def seed_registry(
    registry: ProjectRegistry, vcs: VcsClient, *,
    vendor_dir: str = "vendor", project_name: str = "",
) -> None:
    """启动时填充注册表: 项目自身身份 + 已 vendor 的 submodule

    无法得到任何项目身份时抛 IdentityError。
    """
    if project_name and registry.find(project_name) is None:
        logger.info("使用指定的项目包名: %s", project_name)
        registry.add(Project(name=project_name, location=""))

    inferred = seed_from_remotes(registry, vcs)
    if not inferred and not project_name:
        raise IdentityError("Unable to infer project name")

    seed_from_submodules(registry, vcs, vendor_dir)
