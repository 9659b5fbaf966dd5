from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CONTEST_", env_file=".env", env_file_encoding="utf-8"
    )

    log_level: str = "INFO"
    json_logs: bool = True

    # Leaderboard defaults
    default_metric: str = "overall"
    default_view: str = "average"
    anonymous_entry_label: str = "Pizza #{rank}"


settings = Settings()
