from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "errorfreetext"
    db_username: str = "errorfreetext"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    task_store: str = "postgres"

    speller_provider: str = "yandex"
    speller_api_url: str = (
        "https://speller.yandex.net/services/spellservice.json/checkTexts"
    )
    speller_connect_timeout_ms: int = 5000
    speller_read_timeout_ms: int = 10000
    speller_max_attempts: int = 3
    speller_retry_delay_ms: int = 1000

    max_chunk_size: int = 10000

    drain_interval_ms: int = 30000
    recovery_interval_ms: int = 300000
    drain_batch_size: int = 10

    api_host: str = "0.0.0.0"
    api_port: int = 8081
