from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_name: str = "Zone Advisor"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Synthesized zone intelligence is seeded from sha256(salt:zone_id)
    synthesis_salt: str = "zone-intel-v1"

    # Recommendations
    default_rank_limit: int = 10


settings = Settings()
