"""CLI — vendor / projects / resolve 命令"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from gitvendor.core.config import Config
from gitvendor.core.dep.hosting import HostingTable
from gitvendor.core.exceptions import GitVendorError


def register(group: click.Group) -> None:
    group.add_command(vendor)
    group.add_command(projects)
    group.add_command(resolve_pkg)


def _one_line(message: str) -> str:
    return " ".join(line.strip() for line in message.splitlines() if line.strip())


@contextmanager
def _fatal_errors() -> Iterator[None]:
    """任何中止性错误都输出单行诊断并以状态 1 退出"""
    try:
        yield
    except (GitVendorError, OSError) as e:
        click.echo(f"error: {_one_line(str(e))}", err=True)
        raise SystemExit(1) from e


@click.command()
@click.argument("root", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("--config", "-c", "config_path", default="", help="配置文件路径（默认 <root>/.gitvendor.yml）")
@click.option("--project-name", default="", help="显式指定项目自身的包名")
def vendor(root: str, config_path: str, project_name: str) -> None:
    """遍历 ROOT 的导入图，把缺失的外部项目添加为 submodule"""
    from gitvendor.core.vendorer import Vendorer

    with _fatal_errors():
        cfg = Config.for_root(root, config_path)
        report = Vendorer(root, cfg, project_name=project_name).run()

    for proj in report.fetched:
        click.echo(f"  + {proj.name:40s} {proj.location}")
    click.echo(f"访问目录 {report.visited} 个，新增项目 {len(report.fetched)} 个")


@click.command()
@click.argument("root", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("--config", "-c", "config_path", default="", help="配置文件路径（默认 <root>/.gitvendor.yml）")
@click.option("--project-name", default="", help="显式指定项目自身的包名")
def projects(root: str, config_path: str, project_name: str) -> None:
    """列出由 git remote / submodule 推断出的已知项目（不遍历、不拉取）"""
    from gitvendor.core.vendorer import Vendorer

    with _fatal_errors():
        cfg = Config.for_root(root, config_path)
        known = Vendorer(root, cfg, project_name=project_name).seed()

    for proj in known:
        click.echo(f"  {proj.name:40s} {proj.location or '.'}")


@click.command(name="resolve")
@click.argument("package")
@click.option("--config", "-c", "config_path", default="", help="配置文件路径")
def resolve_pkg(package: str, config_path: str) -> None:
    """按命名规则解析包所属的项目和拉取地址（不调用 git）"""
    with _fatal_errors():
        cfg = Config.for_root(".", config_path)
        resolution = HostingTable.from_config(cfg.hosting_aliases).resolve(package)

    if resolution is None:
        click.echo(f"{package}: std")
    else:
        click.echo(f"{resolution.project_name} {resolution.url}")
