"""共享测试替身 — 假 git / 假导入分析器 / 假命令执行器

所有外部进程都通过协议注入，测试中不会真正调用 git 或 go。
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gitvendor.core.exceptions import NoSourcesError, VcsError
from gitvendor.core.importer import ImportSet
from gitvendor.utils.shell import CommandResult


class FakeVcs:
    """记录 submodule_add 调用的 VcsClient"""

    def __init__(
        self,
        remotes: list[tuple[str, str, str]] | None = None,
        submodules: list[tuple[str, str, str]] | None = None,
        fail_urls: set[str] | None = None,
    ) -> None:
        self._remotes = remotes if remotes is not None else [
            ("origin", "https://github.com/acme/app.git", "fetch"),
            ("origin", "https://github.com/acme/app.git", "push"),
        ]
        self._submodules = submodules or []
        self.fail_urls = fail_urls or set()
        self.added: list[tuple[str, str]] = []

    def remotes(self) -> list[tuple[str, str, str]]:
        return list(self._remotes)

    def submodules(self) -> list[tuple[str, str, str]]:
        return list(self._submodules)

    def submodule_add(self, url: str, path: str) -> None:
        if url in self.fail_urls:
            raise VcsError(
                f"git submodule add {url} 失败 (rc=128)",
                output=f"fatal: repository '{url}' not found\n", returncode=128,
            )
        self.added.append((url, path))


class FakeImporter:
    """按相对路径返回预设导入；未配置的目录视为无源文件"""

    def __init__(self, root: Path, packages: dict[str, object] | None = None) -> None:
        self.root = root
        self.packages = packages or {}
        self.calls: list[str] = []

    def import_dir(self, path: Path) -> ImportSet:
        rel = "" if path == self.root else str(path.relative_to(self.root))
        self.calls.append(rel)
        entry = self.packages.get(rel)
        if entry is None:
            raise NoSourcesError(f"no Go files in {path}")
        if isinstance(entry, Exception):
            raise entry
        assert isinstance(entry, ImportSet)
        return entry


class FakeExecutor:
    """按命令前缀返回预设结果的 CommandExecutor"""

    def __init__(self, responses: dict[tuple[str, ...], CommandResult] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[list[str]] = []
        self.envs: list[dict[str, str] | None] = []

    def execute(self, cmd, *, cwd=".", env=None):  # type: ignore[no-untyped-def]
        args = list(cmd)
        self.calls.append(args)
        self.envs.append(env)
        for prefix, result in self.responses.items():
            if tuple(args[:len(prefix)]) == prefix:
                return result
        return CommandResult(returncode=0, stdout="", stderr="")


@pytest.fixture()
def fake_vcs() -> FakeVcs:
    return FakeVcs()


@pytest.fixture()
def make_vcs() -> type[FakeVcs]:
    return FakeVcs


@pytest.fixture()
def make_importer() -> type[FakeImporter]:
    return FakeImporter


@pytest.fixture()
def make_executor() -> type[FakeExecutor]:
    return FakeExecutor
