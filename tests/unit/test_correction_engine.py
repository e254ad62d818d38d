from datetime import datetime, timezone
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from app.correction.engine import CorrectionEngine, build_correction_engine
from app.correction.exceptions import ChunkingConfigurationError
from app.speller.base import BaseSpellerClient
from app.speller.example_client_adapter import ExampleSpellerAdapter
from app.speller.exceptions import SpellerNetworkError
from app.speller.yandex_client_adapter import YandexSpellerAdapter
from app.tasks.models import CorrectionOption, Language, PendingTask

_NOW = datetime(2026, 2, 15, 12, 0, tzinfo=timezone.utc)


def _make_task(text: str, language: Language = Language.EN) -> PendingTask:
    return PendingTask(
        id=uuid4(),
        original_text=text,
        language=language,
        created_at=_NOW,
        updated_at=_NOW,
    )


def _echo_speller() -> MagicMock:
    speller = MagicMock(spec=BaseSpellerClient)
    speller.correct.side_effect = lambda text, language, options: text
    return speller


class TestCorrect:
    def test_long_text_is_sent_in_chunks(self) -> None:
        speller = _echo_speller()
        engine = CorrectionEngine(speller, max_chunk_size=10000)
        text = "a" * 15000

        result = engine.correct(_make_task(text))

        assert len(result.corrected_text) == 15000
        assert speller.correct.call_count >= 2
        assert result.options == ()

    def test_chunks_are_sent_in_order(self) -> None:
        speller = _echo_speller()
        engine = CorrectionEngine(speller, max_chunk_size=5)

        engine.correct(_make_task("one two three"))

        sent = [call.args[0] for call in speller.correct.call_args_list]
        assert sent == ["one", "two", "three"]

    def test_joins_corrected_chunks(self) -> None:
        speller = MagicMock(spec=BaseSpellerClient)
        speller.correct.side_effect = lambda text, language, options: text.upper()
        engine = CorrectionEngine(speller, max_chunk_size=4)

        result = engine.correct(_make_task("abcdefgh"))

        assert result.corrected_text == "ABCDEFGH"

    def test_passes_language_and_options(self) -> None:
        speller = _echo_speller()
        engine = CorrectionEngine(speller, max_chunk_size=100)

        result = engine.correct(_make_task("Курс 42 на http://example.com", Language.RU))

        expected = (CorrectionOption.IGNORE_DIGITS, CorrectionOption.IGNORE_URLS)
        speller.correct.assert_called_once_with(
            "Курс 42 на http://example.com", Language.RU, expected
        )
        assert result.options == expected

    def test_failure_on_any_chunk_aborts(self) -> None:
        speller = MagicMock(spec=BaseSpellerClient)
        speller.correct.side_effect = ["ok", SpellerNetworkError("down"), "never"]
        engine = CorrectionEngine(speller, max_chunk_size=3)

        with pytest.raises(SpellerNetworkError, match="down"):
            engine.correct(_make_task("abcdefghi"))

        assert speller.correct.call_count == 2

    def test_scenario_with_example_speller(self) -> None:
        engine = CorrectionEngine(ExampleSpellerAdapter(), max_chunk_size=10000)
        result = engine.correct(_make_task("Helo world! How are yuo?"))
        assert result.corrected_text == "Helo world! How are yuo?"


class TestConstruction:
    @pytest.mark.parametrize("size", [0, -10])
    def test_non_positive_chunk_size_is_fatal(self, size: int) -> None:
        with pytest.raises(ChunkingConfigurationError):
            CorrectionEngine(ExampleSpellerAdapter(), max_chunk_size=size)

    def test_build_from_settings(self) -> None:
        settings = MagicMock(
            speller_provider="yandex",
            speller_api_url="https://speller.example/checkTexts",
            speller_connect_timeout_ms=5000,
            speller_read_timeout_ms=10000,
            speller_max_attempts=3,
            speller_retry_delay_ms=1000,
            max_chunk_size=10000,
        )
        engine = build_correction_engine(settings)
        assert isinstance(engine._speller, YandexSpellerAdapter)
        assert engine._max_chunk_size == 10000


class TestClose:
    def test_close_releases_speller(self) -> None:
        speller = _echo_speller()
        engine = CorrectionEngine(speller, max_chunk_size=100)

        engine.close()

        speller.close.assert_called_once_with()
