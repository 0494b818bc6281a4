"""
Konfigurationsmanagement für den Notebook-Preismonitor.
Lädt Umgebungsvariablen aus .env Datei.
"""

import os
from pathlib import Path
from typing import Dict, List
from dotenv import load_dotenv

# Lade .env Datei
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Fallback: Suche im aktuellen Verzeichnis
    load_dotenv()

DEFAULT_MODELS = "asus vivobook 15,lenovo ideapad 3,acer nitro 5,dell inspiron 15,macbook"


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Zentrale Konfigurationsklasse."""

    # Suche
    MODELS: List[str] = _split_list(os.getenv("MONITOR_MODELS", DEFAULT_MODELS))
    PAGES_TO_FETCH: int = int(os.getenv("PAGES_TO_FETCH", "2"))
    MAX_ITEMS_PER_PAGE: int = int(os.getenv("MAX_ITEMS_PER_PAGE", "5"))

    # Scraping
    REQUEST_DELAY_MIN: float = float(os.getenv("REQUEST_DELAY_MIN", "3"))
    REQUEST_DELAY_MAX: float = float(os.getenv("REQUEST_DELAY_MAX", "7"))
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "15"))

    BASE_URLS: Dict[str, str] = {
        "amazon": os.getenv("AMAZON_BASE_URL", "https://www.amazon.com.br"),
        "mercadolivre": os.getenv("MERCADOLIVRE_BASE_URL", "https://lista.mercadolivre.com.br"),
    }

    # Database
    DB_PATH: str = os.getenv("DB_PATH", "./data/produtos.db")

    # CSV-Spiegel
    MIRROR_ENABLED: bool = os.getenv("MIRROR_ENABLED", "true").lower() == "true"
    OUTPUT_FILE: str = os.getenv("OUTPUT_FILE", "resultados.csv")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "monitor.log")

    @classmethod
    def validate(cls) -> None:
        """Validiert die Konfiguration."""
        errors = []

        if not cls.MODELS:
            errors.append("MONITOR_MODELS fehlt")

        if cls.PAGES_TO_FETCH < 1:
            errors.append("PAGES_TO_FETCH muss >= 1 sein")

        if cls.MAX_ITEMS_PER_PAGE < 1:
            errors.append("MAX_ITEMS_PER_PAGE muss >= 1 sein")

        if cls.REQUEST_DELAY_MIN < 0 or cls.REQUEST_DELAY_MAX < cls.REQUEST_DELAY_MIN:
            errors.append("REQUEST_DELAY_MIN/MAX ungültig")

        if cls.REQUEST_TIMEOUT < 1:
            errors.append("REQUEST_TIMEOUT muss >= 1 sein")

        if errors:
            raise ValueError(f"Konfigurationsfehler: {', '.join(errors)}")

    @classmethod
    def get_db_path(cls) -> Path:
        """Gibt den absoluten Pfad zur Datenbank zurück."""
        db_path = Path(cls.DB_PATH)
        if not db_path.is_absolute():
            # Relativ zum Projekt-Root
            db_path = Path(__file__).parent.parent / db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
        return db_path


# Globale Config-Instanz
config = Config()
