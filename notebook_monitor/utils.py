"""
Helper-Funktionen für den Notebook-Preismonitor.
"""

import logging
import random
from datetime import datetime
from typing import Optional

from .models import Observation, RawListing, SpecRecord

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# User-Agent Liste für Rotation
USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/117.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15",
]


def rotate_user_agent() -> str:
    """
    Gibt einen zufälligen User-Agent zurück.

    Returns:
        User-Agent String
    """
    return random.choice(USER_AGENTS)


def batch_timestamp() -> datetime:
    """Zeitpunkt eines Laufs, auf volle Sekunden gekürzt."""
    return datetime.now().replace(microsecond=0)


def format_timestamp(value: datetime) -> str:
    """Formatiert einen Zeitpunkt als "YYYY-MM-DD HH:MM:SS"."""
    return value.strftime(TIMESTAMP_FORMAT)


def normalize(raw: RawListing, specs: SpecRecord, timestamp: datetime) -> Observation:
    """
    Kombiniert Rohdaten, Spezifikationen und Lauf-Zeitpunkt zu einer Beobachtung.

    Args:
        raw: Suchergebnis eines Site-Adapters
        specs: Extrahierte Spezifikationen des Titels
        timestamp: Gemeinsamer Zeitpunkt des Batches

    Returns:
        Observation im Persistenz-Schema
    """
    return Observation(
        data_hora=timestamp,
        site=raw.site,
        modelo_busca=raw.query,
        titulo=raw.title,
        preco=raw.price,
        processador=specs.processor,
        ram=specs.ram,
        armazenamento=specs.storage,
        gpu=specs.gpu,
        tela=specs.screen,
        link=raw.link,
    )


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Konfiguriert das Logging-System (Konsole und optional Datei).

    Args:
        level: Log-Level als String
        log_file: Pfad zur Log-Datei oder None für nur Konsole
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
