from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / "MutoConsults"
    session_ttl_seconds: int = 7 * 24 * 3600  # one week
    min_password_length: int = 8
    # Job posting is a public intake form unless this is switched off.
    allow_anonymous_job_posts: bool = True
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ]
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "db.sqlite"

    model_config = {"env_prefix": "MUTO_"}


settings = Settings()
