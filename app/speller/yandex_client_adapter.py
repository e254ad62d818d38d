import time
from typing import Any

import httpx

from app.correction.analyzer import options_to_bitmask
from app.logging.logger import Log
from app.speller.applier import apply_corrections
from app.speller.base import BaseSpellerClient
from app.speller.exceptions import SpellerNetworkError
from app.speller.models import SpellingCorrection
from app.tasks.models import CorrectionOption, Language


class YandexSpellerAdapter(BaseSpellerClient):
    """Speller adapter built on the Yandex Speller `checkTexts` endpoint."""

    def __init__(
        self,
        *,
        api_url: str,
        connect_timeout_seconds: float,
        read_timeout_seconds: float,
        max_attempts: int = 3,
        retry_delay_seconds: float = 1.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_url = api_url
        self._max_attempts = max(1, max_attempts)
        self._retry_delay_seconds = max(0.0, retry_delay_seconds)
        timeout = httpx.Timeout(
            read_timeout_seconds,
            connect=connect_timeout_seconds,
        )
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def correct(
        self,
        text: str,
        language: Language,
        options: tuple[CorrectionOption, ...] = (),
    ) -> str:
        form = {
            "text": text,
            "lang": language.value.lower(),
            "options": str(options_to_bitmask(options)),
        }
        last_error: SpellerNetworkError | None = None
        for attempt in range(1, self._max_attempts + 1):
            try:
                payload = self._post(form)
            except SpellerNetworkError as exc:
                last_error = exc
                Log.warning(
                    f"Speller call failed (attempt {attempt}/{self._max_attempts}): {exc}"
                )
                if attempt < self._max_attempts and self._retry_delay_seconds > 0:
                    time.sleep(self._retry_delay_seconds)
                continue
            return apply_corrections(text, self._parse_corrections(payload))

        raise SpellerNetworkError(f"Failed to correct text: {last_error}") from last_error

    def close(self) -> None:
        self._client.close()

    def _post(self, form: dict[str, str]) -> Any:
        try:
            response = self._client.post(self._api_url, data=form)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise SpellerNetworkError(f"Speller timeout: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise SpellerNetworkError(
                f"Speller returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SpellerNetworkError(f"Speller network error: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise SpellerNetworkError(f"Speller returned invalid JSON: {exc}") from exc

    @staticmethod
    def _parse_corrections(payload: Any) -> list[SpellingCorrection]:
        """checkTexts answers with one list of records per submitted text."""
        if not isinstance(payload, list):
            raise SpellerNetworkError("Speller response must be a list")
        if not payload or not payload[0]:
            return []
        first = payload[0]
        if not isinstance(first, list):
            raise SpellerNetworkError("Speller response must be a list of lists")
        return [SpellingCorrection.from_payload(record) for record in first]
