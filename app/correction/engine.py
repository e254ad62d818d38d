from app.config.settings import Settings
from app.correction.analyzer import determine_options
from app.correction.chunker import split_into_chunks
from app.correction.exceptions import ChunkingConfigurationError
from app.logging.logger import Log
from app.speller.base import BaseSpellerClient
from app.speller.factory import SpellerFactory
from app.tasks.models import CorrectionResult, Task


class CorrectionEngine:
    """Turns a task's original text into corrected text.

    Pipeline: analyze options -> chunk -> correct each chunk in order -> join.
    A failure on any chunk aborts the whole task; there is no partial result.
    Callers serialize access per task.
    """

    def __init__(self, speller: BaseSpellerClient, max_chunk_size: int) -> None:
        if max_chunk_size <= 0:
            raise ChunkingConfigurationError(
                f"max_chunk_size must be > 0, got {max_chunk_size}"
            )
        self._speller = speller
        self._max_chunk_size = max_chunk_size

    def correct(self, task: Task) -> CorrectionResult:
        Log.info(f"Starting text correction for task: {task.id}")

        options = determine_options(task.original_text)
        chunks = split_into_chunks(task.original_text, self._max_chunk_size)
        Log.debug(
            f"Task {task.id}: {len(chunks)} chunk(s), "
            f"options={[o.value for o in options]}"
        )

        corrected_chunks = [
            self._speller.correct(chunk, task.language, options) for chunk in chunks
        ]

        Log.info(f"Text correction completed for task: {task.id}")
        return CorrectionResult(
            corrected_text="".join(corrected_chunks),
            options=options,
        )

    def close(self) -> None:
        self._speller.close()


def build_correction_engine(settings: Settings) -> CorrectionEngine:
    """Build a CorrectionEngine with the configured speller adapter."""
    return CorrectionEngine(
        speller=SpellerFactory.create(settings),
        max_chunk_size=settings.max_chunk_size,
    )
