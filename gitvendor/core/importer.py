"""基于 `go list` 的导入分析器

以 GOPATH 语义（GO111MODULE=off）对单个目录执行 `go list -e -json`，
读取 Imports / TestImports / XTestImports。
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from gitvendor.core.exceptions import ImporterError, NoSourcesError
from gitvendor.utils.shell import CommandExecutor, get_executor

logger = logging.getLogger(__name__)

_NO_SOURCES_MARKERS = (
    "no Go files in",
    "build constraints exclude all Go files in",
)


@dataclass
class ImportSet:
    """单个目录的导入集合"""

    imports: list[str] = field(default_factory=list)
    test_imports: list[str] = field(default_factory=list)


class GoListImporter:
    """调用 go 工具链分析目录导入"""

    def __init__(
        self, go_bin: str = "go", executor: CommandExecutor | None = None,
    ) -> None:
        self.go_bin = go_bin
        self.executor = executor or get_executor()

    def import_dir(self, path: Path) -> ImportSet:
        env = {**os.environ, "GO111MODULE": "off"}
        r = self.executor.execute(
            [self.go_bin, "list", "-e", "-json", "."], cwd=str(path), env=env,
        )
        if not r.stdout.strip():
            raise ImporterError(
                f"go list 失败 (rc={r.returncode}) {path}: {r.summary()[:300]}"
            )
        try:
            data = json.loads(r.stdout)
        except json.JSONDecodeError as e:
            raise ImporterError(f"go list 输出无法解析 {path}: {e}") from e

        err = (data.get("Error") or {}).get("Err", "")
        if err:
            if any(marker in err for marker in _NO_SOURCES_MARKERS):
                raise NoSourcesError(err)
            logger.error("go list 错误 %s:\n%s", path, err.rstrip())
            raise ImporterError(f"{path}: {err.strip().splitlines()[0]}")
        if not r.success:
            raise ImporterError(
                f"go list 失败 (rc={r.returncode}) {path}: {r.summary()[:300]}"
            )

        return ImportSet(
            imports=list(data.get("Imports") or []),
            test_imports=list(data.get("TestImports") or [])
            + list(data.get("XTestImports") or []),
        )
