from pathlib import Path
from typing import Iterable, Iterator, Optional

from vuereg.config import Settings, normalize_ext
from vuereg.engine.compiler import ComponentCompiler
from vuereg.engine.errors import CompileError, SourceDecodeError
from vuereg.models.component import FailurePolicy
from vuereg.models.file import SourceFile
from vuereg.utils.logger import get_logger

logger = get_logger(__name__)


def rewrite_path(file: SourceFile, ext: str) -> Path:
    """<base>/<dir>/<name>.vue -> <base>/<dir>/<name><ext>"""
    return file.base / file.relative.parent / (file.stem + normalize_ext(ext))


class ProcessingPipeline:
    """Streaming pipeline: file -> eligibility -> compile -> rename.

    Files are handled one at a time and yielded in input order. Files that
    are not .vue sources pass through untouched.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.compiler = ComponentCompiler(self.settings.registry)
        self.stats = {"compiled": 0, "skipped": 0, "passed": 0}

    def is_eligible(self, file: SourceFile) -> bool:
        return file.suffix == self.settings.source_ext

    def _decode(self, file: SourceFile) -> str:
        try:
            return file.text
        except UnicodeDecodeError as e:
            raise SourceDecodeError(str(file.path), e.reason) from e

    def process_file(self, file: SourceFile) -> SourceFile:
        """Process a single file, returning the file to forward downstream."""
        if not self.is_eligible(file):
            self.stats["passed"] += 1
            return file

        name = file.stem
        try:
            content = self.compiler.compile(self._decode(file), name)
        except CompileError as e:
            if self.settings.on_error == FailurePolicy.FAIL:
                logger.error(
                    "pipeline.compile_failed", path=str(file.path), error=str(e)
                )
                raise
            logger.warning(
                "pipeline.compile_skipped", path=str(file.path), error=str(e)
            )
            self.stats["skipped"] += 1
            return file

        new_path = rewrite_path(file, self.settings.ext)
        logger.debug(
            "pipeline.compiled", component=name, src=str(file.path), dest=str(new_path)
        )
        self.stats["compiled"] += 1
        return file.model_copy(
            update={"path": new_path, "contents": content.encode("utf-8")}
        )

    def process(self, files: Iterable[SourceFile]) -> Iterator[SourceFile]:
        """Lazily process ``files`` in order."""
        for file in files:
            yield self.process_file(file)
        logger.info("pipeline.complete", **self.stats)
