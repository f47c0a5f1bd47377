from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    quest_api_key: str | None = None
    save_dir: str = "data"  # Save files are resolved inside this directory
    log_level: str = "INFO"

    # Default re-awards points each time a completed simple goal is recorded.
    # Set to pay a simple goal out only once.
    strict_single_award: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
