"""
➡️ But : Centraliser tous les paramètres configurables (nom d'app, stockage, logs, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d'environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.STORAGE_BACKEND)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import List, Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo-Back"
    ENV: str = "dev"  # dev | prod | test
    HOST: str = "127.0.0.1"
    PORT: int = 4000
    API_PREFIX: str = ""  # ex: "/api/v1"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # Stockage
    # -----------------------------
    STORAGE_BACKEND: Literal["file", "memory", "sql"] = "file"

    TODOS_FILE: str = "todos.json"
    TODOS_FILE_AUTO_CREATE: bool = True  # écrit [] au démarrage si absent

    SQLITE_PATH: str = "todos.db"
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

    @property
    def docs_enabled(self) -> bool:
        return self.ENV != "prod"


# Instance globale importable partout
settings = Settings()
