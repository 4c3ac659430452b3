"""依赖项目数据模型

数据类:
- Project: 一个外部项目（或根项目自身）
- HostingMatch: 托管规则的匹配结果
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """注册表中的一个项目

    name 是规范包路径（如 github.com/org/repo），location 是相对根目录的
    磁盘位置，空字符串表示根项目自身。
    """

    name: str
    location: str = ""

    def owns(self, package: str) -> bool:
        """package 是否等于本项目或其子包（按路径段边界判断）"""
        return package == self.name or has_path_prefix(package, self.name)

    def package_dir(self, package: str) -> str:
        """子包在磁盘上的位置: location 拼接相对于 name 的后缀"""
        if package == self.name:
            return self.location
        suffix = package_to_path(package[len(self.name) + 1:])
        return os.path.join(self.location, suffix)


@dataclass(frozen=True)
class HostingMatch:
    """托管规则匹配结果: 项目名占用的前导段数 + 拉取地址"""

    url: str
    segments: int


def has_path_prefix(s: str, prefix: str) -> bool:
    """prefix 是 s 的真前缀，且恰好止于 '/' 边界"""
    return (
        s.startswith(prefix)
        and len(s) > len(prefix)
        and s[len(prefix)] == "/"
    )


def package_to_path(name: str) -> str:
    """包名 → 文件系统路径"""
    return name.replace("/", os.sep)


def path_to_package(path: str) -> str:
    """文件系统路径 → 包名"""
    return path.replace(os.sep, "/")
