"""GoListImporter 单元测试"""

from __future__ import annotations

import json

import pytest

from gitvendor.core.exceptions import ImporterError, NoSourcesError
from gitvendor.core.importer import GoListImporter
from gitvendor.utils.shell import CommandResult


def _go_list(data: dict, rc: int = 0, stderr: str = "") -> CommandResult:
    return CommandResult(rc, json.dumps(data), stderr)


class TestGoListImporter:
    def test_imports_and_test_imports(self, tmp_path, make_executor) -> None:
        ex = make_executor({("go",): _go_list({
            "ImportPath": "_/x",
            "Imports": ["fmt", "github.com/org/repo"],
            "TestImports": ["testing"],
            "XTestImports": ["github.com/stretchr/testify/assert"],
        })})
        result = GoListImporter(executor=ex).import_dir(tmp_path)
        assert result.imports == ["fmt", "github.com/org/repo"]
        assert result.test_imports == ["testing", "github.com/stretchr/testify/assert"]

    def test_runs_in_gopath_mode(self, tmp_path, make_executor) -> None:
        ex = make_executor({("go1.10",): _go_list({"Imports": []})})
        GoListImporter(go_bin="go1.10", executor=ex).import_dir(tmp_path)
        assert ex.calls[0] == ["go1.10", "list", "-e", "-json", "."]
        assert ex.envs[0]["GO111MODULE"] == "off"

    def test_missing_fields_default_empty(self, tmp_path, make_executor) -> None:
        ex = make_executor({("go",): _go_list({"ImportPath": "_/x"})})
        result = GoListImporter(executor=ex).import_dir(tmp_path)
        assert result.imports == []
        assert result.test_imports == []

    @pytest.mark.parametrize("err", [
        "no Go files in /src/docs",
        "build constraints exclude all Go files in /src/win",
    ])
    def test_no_sources(self, tmp_path, make_executor, err: str) -> None:
        ex = make_executor({("go",): _go_list({"Error": {"Err": err}}, rc=1)})
        with pytest.raises(NoSourcesError):
            GoListImporter(executor=ex).import_dir(tmp_path)

    def test_other_package_error(self, tmp_path, make_executor) -> None:
        ex = make_executor({("go",): _go_list(
            {"Error": {"Err": "found packages a (a.go) and b (b.go)"}}, rc=1,
        )})
        with pytest.raises(ImporterError, match="found packages"):
            GoListImporter(executor=ex).import_dir(tmp_path)

    def test_multiline_package_error_single_line_message(self, tmp_path, make_executor) -> None:
        ex = make_executor({("go",): _go_list(
            {"Error": {"Err": "import cycle not allowed\npackage a\n\timports b"}}, rc=1,
        )})
        with pytest.raises(ImporterError) as exc:
            GoListImporter(executor=ex).import_dir(tmp_path)
        assert str(exc.value) == f"{tmp_path}: import cycle not allowed"

    def test_command_failure_without_output(self, tmp_path, make_executor) -> None:
        ex = make_executor({("go",): CommandResult(2, "", "go: command not found")})
        with pytest.raises(ImporterError, match="rc=2"):
            GoListImporter(executor=ex).import_dir(tmp_path)

    def test_undecodable_output(self, tmp_path, make_executor) -> None:
        ex = make_executor({("go",): CommandResult(0, "not json", "")})
        with pytest.raises(ImporterError, match="无法解析"):
            GoListImporter(executor=ex).import_dir(tmp_path)

    def test_no_sources_is_not_importer_error(self) -> None:
        assert not issubclass(NoSourcesError, ImporterError)
