"""Directive expansion pipeline for a single chapter.

run_on_content() is the whole-chapter transform: it returns either fully
substituted text or raises, never a partially substituted chapter.
"""

import logging
from pathlib import Path

from mdbook_cmdrun.core.arguments import parse_arguments
from mdbook_cmdrun.core.config import CmdRunConfig
from mdbook_cmdrun.core.executor.abc import ShellExecutor
from mdbook_cmdrun.core.formatting import compose_result
from mdbook_cmdrun.core.platform import Platform
from mdbook_cmdrun.core.scanner import substitute_all
from mdbook_cmdrun.core.tokenizer import split_command
from mdbook_cmdrun.core.types import Directive, ParsedCommand

logger = logging.getLogger(__name__)


class CmdRun:
    """Runs the commands named in cmdrun directives and splices in their output."""

    def __init__(self, config: CmdRunConfig, executor: ShellExecutor, platform: Platform) -> None:
        self._config = config
        self._executor = executor
        self._platform = platform

    def working_dir_for(self, chapter_path: Path | None) -> Path:
        """Directory a chapter's commands run in.

        That is the directory containing the chapter's source file, or the
        source root for chapters without a path (drafts).
        """
        if chapter_path is None:
            return self._config.src_dir
        return (self._config.src_dir / chapter_path).parent

    def run_on_content(self, content: str, working_dir: Path) -> str:
        """Expand every directive in `content`.

        Raises:
            TokenizationError, ArgumentError, ExecutionError: From the first
                directive that fails; remaining directives are not run
        """

        def replace(directive: Directive) -> str:
            return self.run_cmdrun(directive.command, working_dir, inline=directive.mode.inline)

        return substitute_all(content, replace)

    def run_cmdrun(self, command: str, working_dir: Path, inline: bool) -> str:
        """Parse, execute and format one directive's raw command text."""
        logger.debug("Raw directive: %r", command)
        words = split_command(command)
        logger.debug("Shell words: %r", words)
        parsed = parse_arguments(words)
        return self.execute(parsed, working_dir, inline)

    def execute(self, parsed: ParsedCommand, working_dir: Path, inline: bool) -> str:
        shell_command = parsed.shell_command
        logger.debug(
            "Reconstructed command: %r (expected exit code: %s)",
            shell_command,
            parsed.expected_code,
        )
        result = self._executor.run(shell_command, working_dir)
        return compose_result(
            shell_command, result, parsed.expected_code, inline=inline, platform=self._platform
        )
