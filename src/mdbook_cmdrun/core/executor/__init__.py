from mdbook_cmdrun.core.executor.abc import ShellExecutor
from mdbook_cmdrun.core.executor.real import RealShellExecutor

__all__ = ["RealShellExecutor", "ShellExecutor"]
