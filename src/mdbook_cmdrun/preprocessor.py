"""mdBook preprocessor wrapper around the directive pipeline."""

import logging

from mdbook_cmdrun.book import Book, Chapter, PreprocessorContext
from mdbook_cmdrun.core.pipeline import CmdRun

logger = logging.getLogger(__name__)

SUPPORTED_RENDERERS = frozenset({"html"})


class CmdRunPreprocessor:
    """Applies CmdRun to every chapter of a book."""

    name = "cmdrun"

    def __init__(self, cmdrun: CmdRun) -> None:
        self._cmdrun = cmdrun

    def supports_renderer(self, renderer: str) -> bool:
        return renderer in SUPPORTED_RENDERERS

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Expand directives in all chapters, in book order.

        The first fatal error stops processing and propagates; the caller must
        not emit the partially processed book.
        """
        logger.debug("Preprocessing book at %s for renderer %s", ctx.root, ctx.renderer)
        for chapter in book.iter_chapters():
            self.run_on_chapter(chapter)
        return book

    def run_on_chapter(self, chapter: Chapter) -> None:
        working_dir = self._cmdrun.working_dir_for(chapter.source_file)
        logger.debug("Chapter %r runs in %s", chapter.name, working_dir)
        chapter.content = self._cmdrun.run_on_content(chapter.content, working_dir)
