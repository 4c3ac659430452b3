"""包名 → 托管位置的命名规则

按包名首段（托管域名）分派到一组规则变体，每个变体实现同一个
match(segments) -> HostingMatch | None 接口。首段不含 '.' 的包视为
标准库，直接忽略；未知域名或规则结构校验失败时抛
UnresolvablePackageError，不做任何猜测。

新增托管约定只需在 HostingTable 中注册一个新的变体。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from gitvendor.core.dep.models import HostingMatch
from gitvendor.core.exceptions import ConfigError, UnresolvablePackageError

logger = logging.getLogger(__name__)


class HostingRule(Protocol):
    """托管规则协议"""

    def match(self, segments: list[str]) -> HostingMatch | None:
        """返回匹配结果；结构不符时返回 None"""
        ...


# =========================================================================
# 规则变体
# =========================================================================

@dataclass(frozen=True)
class FixedDepthRule:
    """authority/org/repo 形式: 前 depth 段即项目名和拉取地址"""

    depth: int = 3

    def match(self, segments: list[str]) -> HostingMatch | None:
        if len(segments) < self.depth:
            return None
        return HostingMatch(
            url="https://" + "/".join(segments[:self.depth]),
            segments=self.depth,
        )


@dataclass(frozen=True)
class VersionedRule:
    """gopkg.in 形式: authority/pkg.vN 或 authority/user/pkg.vN

    第二段含 '.' 时为两段式，否则为带用户名的三段式。
    """

    def match(self, segments: list[str]) -> HostingMatch | None:
        if len(segments) < 2:
            return None
        n = 2 if "." in segments[1] else 3
        if len(segments) < n:
            return None
        return HostingMatch(url="https://" + "/".join(segments[:n]), segments=n)


@dataclass(frozen=True)
class AliasRule:
    """虚名域名: 第 depth 段查固定表得到真实仓库地址"""

    depth: int
    repos: Mapping[str, str] = field(default_factory=dict)

    def match(self, segments: list[str]) -> HostingMatch | None:
        if len(segments) < self.depth:
            return None
        url = self.repos.get(segments[self.depth - 1])
        if url is None:
            return None
        return HostingMatch(url=url, segments=self.depth)


BUILTIN_RULES: dict[str, HostingRule] = {
    "github.com": FixedDepthRule(3),
    "gopkg.in": VersionedRule(),
    "google.golang.org": AliasRule(2, {
        "cloud": "https://code.googlesource.com/gocloud",
        "grpc": "https://github.com/grpc/grpc-go",
        "appengine": "https://github.com/golang/appengine",
        "api": "https://code.googlesource.com/google-api-go-client",
    }),
    "golang.org": AliasRule(3, {
        "net": "https://go.googlesource.com/net",
        "crypto": "https://go.googlesource.com/crypto",
        "text": "https://go.googlesource.com/text",
        "oauth2": "https://go.googlesource.com/oauth2",
        "tools": "https://go.googlesource.com/tools",
        "sys": "https://go.googlesource.com/sys",
    }),
}


# =========================================================================
# 规则表
# =========================================================================

@dataclass(frozen=True)
class Resolution:
    """外部包的解析结果"""

    project_name: str
    url: str


class HostingTable:
    """托管域名 → 规则 的分派表"""

    def __init__(self, rules: Mapping[str, HostingRule] | None = None) -> None:
        self._rules: dict[str, HostingRule] = dict(
            BUILTIN_RULES if rules is None else rules
        )

    @classmethod
    def from_config(cls, aliases: Mapping[str, Any]) -> HostingTable:
        """内置规则 + 配置中的额外别名域名（不可覆盖内置规则）"""
        table = cls()
        for authority, spec in aliases.items():
            if authority in table._rules:
                logger.warning("忽略配置中的别名规则，与内置规则冲突: %s", authority)
                continue
            try:
                rule = AliasRule(int(spec["segments"]), dict(spec["repos"]))
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigError(f"hosting_aliases.{authority} 无效: {e!r}") from e
            table.register(authority, rule)
        return table

    def register(self, authority: str, rule: HostingRule) -> None:
        self._rules[authority] = rule
        logger.debug("注册托管规则: %s -> %r", authority, rule)

    def authorities(self) -> list[str]:
        return sorted(self._rules)

    def resolve(self, package: str) -> Resolution | None:
        """解析外部包的项目名和拉取地址

        返回 None 表示标准库包（首段不含 '.'）。
        """
        segments = package.split("/")
        if "." not in segments[0]:
            return None

        rule = self._rules.get(segments[0])
        if rule is None:
            raise UnresolvablePackageError(package)

        m = rule.match(segments)
        if m is None:
            raise UnresolvablePackageError(package)

        return Resolution(
            project_name="/".join(segments[:m.segments]),
            url=m.url,
        )
