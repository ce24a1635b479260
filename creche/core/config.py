# ================================
# file: creche/core/config.py
# ================================
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # override with DB_URL env or .env, e.g. mysql+pymysql://root:@localhost:3306/creche?charset=utf8mb4
    DB_URL: str = "sqlite:///./creche.db"

    # signed session cookie
    SESSION_SECRET: str = "creche_management_system_secret"
    SESSION_MAX_AGE: int = 60 * 60 * 24 * 30  # 30 days
    SESSION_HTTPS_ONLY: bool = False
    IDLE_TIMEOUT_SEC: int = 60 * 60

    BCRYPT_ROUNDS: int = 12
    PASSWORD_PEPPER: str = ""

    LOG_LEVEL: str = "INFO"

    # receipts / exports
    CRECHE_NAME: str = "Creche Management System"
    CURRENCY_SYMBOL: str = "R"
    FONT_PATH: str = "assets/DejaVuSans.ttf"
    FONT_PATH_BOLD: str = "assets/DejaVuSans-Bold.ttf"

    SEED_ON_STARTUP: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
