# backend/config.py
import os
from dotenv import load_dotenv

load_dotenv() # Carrega as variáveis do arquivo .env


class Settings:
    """Configuração lida das variáveis de ambiente."""

    def __init__(self):
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./finance.db")
        self.allowed_origins_raw = os.getenv("ALLOWED_ORIGINS", "*")
        self.default_user_id = os.getenv("DEFAULT_USER_ID", "local").strip() or "local"
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.environment = os.getenv("ENVIRONMENT", "development")

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins_raw.split(",") if o.strip()]

    @property
    def json_logs(self) -> bool:
        return self.environment == "production"


def get_settings() -> Settings:
    return Settings()


settings = get_settings()
