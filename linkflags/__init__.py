"""linkflags - 从 git 状态推导构建版本并生成 Go 链接参数"""

__version__ = "1.0.0"
