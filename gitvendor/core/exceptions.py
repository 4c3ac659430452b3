"""统一异常体系

所有错误继承 GitVendorError。除 NoSourcesError 由遍历器自行消化外，
其余异常一律向上传播并终止本次运行，不做任何重试或跳过。
CLI 层据此输出单行诊断并以非零状态退出。
"""

from __future__ import annotations


class GitVendorError(Exception):
    """基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(GitVendorError):
    """配置文件内容无效"""

    code = "CONFIG_ERROR"


class IdentityError(GitVendorError):
    """无法推断项目自身的包名"""

    code = "IDENTITY_ERROR"


class VcsError(GitVendorError):
    """git 命令执行失败"""

    code = "VCS_ERROR"

    def __init__(self, message: str, output: str = "", returncode: int = 1) -> None:
        super().__init__(message)
        self.output = output
        self.returncode = returncode


class ImporterError(GitVendorError):
    """导入分析失败（"无源文件" 以外的错误）"""

    code = "IMPORTER_ERROR"


class NoSourcesError(GitVendorError):
    """目录中没有可编译的源文件，非致命"""

    code = "NO_SOURCES"


class UnresolvablePackageError(GitVendorError):
    """包名无法映射到任何已知托管约定"""

    code = "UNRESOLVABLE_PACKAGE"

    def __init__(self, package: str) -> None:
        super().__init__(f"Don't know how to handle package '{package}'")
        self.package = package


class DuplicateProjectError(GitVendorError):
    """注册表中已存在同名项目"""

    code = "DUPLICATE_PROJECT"
