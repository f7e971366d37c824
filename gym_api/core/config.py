import os
from dataclasses import dataclass

# Sent on every response, OPTIONS preflights included.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

@dataclass(frozen=True)
class Settings:
    app_title: str = "Gym API"
    service_name: str = "gym-api"
    db_path: str = "gym.db"
    host: str = "127.0.0.1"
    port: int = 8787
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            db_path=os.getenv("GYM_API_DB_PATH", cls.db_path),
            host=os.getenv("GYM_API_HOST", cls.host),
            port=int(os.getenv("GYM_API_PORT", str(cls.port))),
            log_level=os.getenv("GYM_API_LOG_LEVEL", cls.log_level).upper(),
        )

settings = Settings.from_env()
