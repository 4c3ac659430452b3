"""集中配置管理

vendor 目录名、跳过的目录、外部可执行文件以及额外的别名托管规则。
支持从 YAML 文件加载 + 编程式覆盖。
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from gitvendor.core.exceptions import ConfigError
from gitvendor.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".gitvendor.yml"


@dataclass
class Config:
    """运行配置"""

    # 目录约定
    vendor_dir: str = "vendor"
    skip_dirs: list[str] = field(default_factory=lambda: ["testdata"])

    # 外部可执行文件
    git_bin: str = "git"
    go_bin: str = "go"

    # 额外的别名托管规则: {authority: {segments: N, repos: {name: url}}}
    hosting_aliases: dict[str, Any] = field(default_factory=dict)

    # 放不到字段里的配置项
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        try:
            data = load_yaml(path)
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigError(f"配置文件无效: {path}: {e}") from e
        if not data:
            return cls()
        known = {f for f in cls.__dataclass_fields__ if f != "extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        cfg = cls(**matched)
        cfg.extra = extra
        logger.info("配置已加载: %s", path)
        return cfg

    @classmethod
    def for_root(cls, root: str | Path, path: str = "") -> Config:
        """显式路径优先，其次 <root>/.gitvendor.yml，都没有则用默认值"""
        if path:
            if not Path(path).exists():
                raise ConfigError(f"配置文件不存在: {path}")
            return cls.from_file(path)
        candidate = Path(root) / CONFIG_FILENAME
        if candidate.exists():
            return cls.from_file(candidate)
        return cls()

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """校验字段，并把 vendor_dir 规范为不带斜杠的单级目录名"""
        if not isinstance(self.vendor_dir, str):
            raise ConfigError(f"vendor_dir 必须是字符串: {self.vendor_dir!r}")
        name = self.vendor_dir.strip("/")
        if not name or "/" in name or name in (".", ".."):
            raise ConfigError(f"vendor_dir 必须是单级目录名: {self.vendor_dir!r}")
        self.vendor_dir = name
        if not isinstance(self.skip_dirs, list):
            raise ConfigError("skip_dirs 必须是列表")
        if not isinstance(self.hosting_aliases, dict):
            raise ConfigError("hosting_aliases 必须是字典")
        for authority, spec in self.hosting_aliases.items():
            if not isinstance(spec, dict):
                raise ConfigError(f"hosting_aliases.{authority} 必须是字典")
            segments = spec.get("segments")
            repos = spec.get("repos")
            if not isinstance(segments, int) or segments < 2:
                raise ConfigError(
                    f"hosting_aliases.{authority}.segments 必须是 >= 2 的整数"
                )
            if not isinstance(repos, dict) or not repos:
                raise ConfigError(f"hosting_aliases.{authority}.repos 不能为空")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
