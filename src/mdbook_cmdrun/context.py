"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from mdbook_cmdrun.core.config import CmdRunConfig, load_config
from mdbook_cmdrun.core.executor import RealShellExecutor, ShellExecutor
from mdbook_cmdrun.core.pipeline import CmdRun
from mdbook_cmdrun.core.platform import Platform, detect_platform
from mdbook_cmdrun.preprocessor import CmdRunPreprocessor


@dataclass(frozen=True)
class CmdRunContext:
    """Immutable context holding everything the CLI commands need.

    Created once at the CLI entry point; tests pass their own instance
    (usually with a fake executor) through `CliRunner.invoke(obj=...)`.
    """

    config: CmdRunConfig
    platform: Platform
    executor: ShellExecutor

    @property
    def cmdrun(self) -> CmdRun:
        return CmdRun(self.config, self.executor, self.platform)

    @property
    def preprocessor(self) -> CmdRunPreprocessor:
        return CmdRunPreprocessor(self.cmdrun)


def create_context(book_root: Path | None = None) -> CmdRunContext:
    """Build the production context.

    book.toml is read here, exactly once, relative to `book_root` (the current
    directory when not given, which is where mdBook runs preprocessors).
    """
    platform = detect_platform()
    return CmdRunContext(
        config=load_config(book_root if book_root is not None else Path()),
        platform=platform,
        executor=RealShellExecutor(platform),
    )
