from app.config.settings import Settings
from app.speller.base import BaseSpellerClient
from app.speller.example_client_adapter import ExampleSpellerAdapter
from app.speller.yandex_client_adapter import YandexSpellerAdapter


class SpellerFactory:
    """Creates the configured speller adapter."""

    PROVIDERS = ("yandex", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseSpellerClient:
        provider = settings.speller_provider.lower()
        if provider == "example":
            return ExampleSpellerAdapter()
        if provider == "yandex":
            return YandexSpellerAdapter(
                api_url=settings.speller_api_url,
                connect_timeout_seconds=settings.speller_connect_timeout_ms / 1000,
                read_timeout_seconds=settings.speller_read_timeout_ms / 1000,
                max_attempts=settings.speller_max_attempts,
                retry_delay_seconds=settings.speller_retry_delay_ms / 1000,
            )
        raise ValueError(
            f"Unknown speller provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
