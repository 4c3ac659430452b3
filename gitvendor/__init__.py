"""gitvendor - 以 git submodule 方式把项目的外部依赖拉取到 vendor 目录"""

__version__ = "0.1.0"
