"""Integration tests that spawn a real POSIX shell."""

import json
import os
import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from mdbook_cmdrun.cli.cli import cli
from mdbook_cmdrun.context import CmdRunContext, create_context
from mdbook_cmdrun.core.config import CmdRunConfig
from mdbook_cmdrun.core.errors import ExecutionError
from mdbook_cmdrun.core.executor.real import RealShellExecutor
from mdbook_cmdrun.core.pipeline import CmdRun
from mdbook_cmdrun.core.platform import POSIX_PLATFORM

pytestmark = pytest.mark.skipif(
    os.name != "posix" or shutil.which("sh") is None, reason="requires a POSIX sh"
)


def _cmdrun(src_dir: Path) -> CmdRun:
    return CmdRun(CmdRunConfig(src_dir=src_dir), RealShellExecutor(POSIX_PLATFORM), POSIX_PLATFORM)


def test_line_directive_example(tmp_path: Path) -> None:
    assert _cmdrun(tmp_path).run_on_content("<!-- cmdrun echo hi -->\n", tmp_path) == "hi\n"


def test_inline_directive_example(tmp_path: Path) -> None:
    result = _cmdrun(tmp_path).run_on_content("x <!-- cmdrun echo hi --> y", tmp_path)

    assert result == "x hi y"


def test_false_with_expectation_yields_banner(tmp_path: Path) -> None:
    result = _cmdrun(tmp_path).run_on_content(
        "<!-- cmdrun false --expect-return-code 0 -->\n", tmp_path
    )

    assert result.startswith("**cmdrun error**: 'false' returned exit code 1 instead of 0.")


def test_stderr_is_captured_in_banner(tmp_path: Path) -> None:
    result = _cmdrun(tmp_path).run_on_content(
        "<!-- cmdrun --strict ls does-not-exist -->\n", tmp_path
    )

    assert "**cmdrun error**" in result
    assert "does-not-exist" in result


def test_commands_run_in_working_dir(tmp_path: Path) -> None:
    chapter_dir = tmp_path / "guide"
    chapter_dir.mkdir()
    (chapter_dir / "script.sh").write_text("echo from script\n", encoding="utf-8")

    result = _cmdrun(tmp_path).run_on_content("<!-- cmdrun sh script.sh -->\n", chapter_dir)

    assert result == "from script\n"


def test_pipeline_and_quoting(tmp_path: Path) -> None:
    text = "<!-- cmdrun sh -c 'seq 1 10 | tail -n 2' -->\n<!-- cmdrun printf '%s|' \"a b\" c -->\n"

    result = _cmdrun(tmp_path).run_on_content(text, tmp_path)

    assert result == "9\n10\na b|c|"


def test_redirection_words_are_printed_not_interpreted(tmp_path: Path) -> None:
    result = _cmdrun(tmp_path).run_on_content("<!-- cmdrun echo hi > a.txt -->\n", tmp_path)

    assert result == "hi > a.txt\n"
    assert not (tmp_path / "a.txt").exists()


def test_literally_quoted_argument_is_printed_with_quotes(tmp_path: Path) -> None:
    result = _cmdrun(tmp_path).run_on_content("<!-- cmdrun echo \"'x y'\" -->\n", tmp_path)

    assert result == "'x y'\n"


def test_invalid_utf8_output_is_replaced(tmp_path: Path) -> None:
    result = _cmdrun(tmp_path).run_on_content("<!-- cmdrun printf 'caf\\351' -->", tmp_path)

    assert result == "caf\ufffd"


def test_killed_process_yields_message(tmp_path: Path) -> None:
    (tmp_path / "kill.sh").write_text("kill -9 $$\n", encoding="utf-8")

    result = _cmdrun(tmp_path).run_on_content(
        "<!-- cmdrun --strict exec sh kill.sh -->\n", tmp_path
    )

    assert result.endswith("was ended before completing.")


def test_missing_working_dir_is_execution_error(tmp_path: Path) -> None:
    with pytest.raises(ExecutionError):
        _cmdrun(tmp_path).run_on_content("<!-- cmdrun true -->\n", tmp_path / "missing")


def test_create_context_reads_book_toml(tmp_path: Path) -> None:
    (tmp_path / "book.toml").write_text('[book]\nsrc = "docs"\n', encoding="utf-8")

    context = create_context(tmp_path)

    assert context.config.src_dir == tmp_path / "docs"
    assert isinstance(context.executor, RealShellExecutor)


def test_full_preprocess_run(tmp_path: Path) -> None:
    src = tmp_path / "src"
    (src / "part").mkdir(parents=True)
    (src / "part" / "data.txt").write_text("payload\n", encoding="utf-8")
    context = CmdRunContext(
        config=CmdRunConfig(src_dir=src),
        platform=POSIX_PLATFORM,
        executor=RealShellExecutor(POSIX_PLATFORM),
    )
    book_input = [
        {"root": str(tmp_path), "config": {}, "renderer": "html", "mdbook_version": "0.4.40"},
        {
            "sections": [
                {
                    "Chapter": {
                        "name": "Part",
                        "content": "# Part\n<!-- cmdrun cat data.txt -->\nend\n",
                        "number": [1],
                        "sub_items": [],
                        "path": "part/index.md",
                        "source_path": "part/index.md",
                        "parent_names": [],
                    }
                }
            ],
            "__non_exhaustive": None,
        },
    ]

    result = CliRunner().invoke(cli, [], input=json.dumps(book_input), obj=context)

    assert result.exit_code == 0
    content = json.loads(result.stdout)["sections"][0]["Chapter"]["content"]
    assert content == "# Part\npayload\nend\n"
