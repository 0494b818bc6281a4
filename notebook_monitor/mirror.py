"""
CSV-Spiegel der Beobachtungen als Backup.
Die Datenbank ist maßgeblich, Fehler beim Schreiben sind nicht kritisch.
"""

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Sequence, Union

from .models import NOT_AVAILABLE, Observation
from .utils import format_timestamp

logger = logging.getLogger(__name__)

FIELDNAMES = [
    "data_hora",
    "site",
    "modelo_busca",
    "titulo",
    "preco",
    "processador",
    "ram",
    "armazenamento",
    "gpu",
    "tela",
    "link",
]

DELIMITER = ";"


def _to_row(observation: Observation) -> dict:
    row = {}
    for key in FIELDNAMES:
        value = getattr(observation, key, None)
        if isinstance(value, datetime):
            value = format_timestamp(value)
        row[key] = value or NOT_AVAILABLE
    return row


def append_batch(batch: Sequence[Observation], target: Union[str, Path]) -> bool:
    """
    Hängt einen Batch an die CSV-Datei an.

    Die Kopfzeile wird nur geschrieben, wenn die Datei neu oder leer ist.

    Args:
        batch: Beobachtungen eines Laufs
        target: Pfad zur CSV-Datei

    Returns:
        True wenn geschrieben wurde, False bei leerem Batch oder Fehler
    """
    if not batch:
        logger.warning("Keine Daten zum Speichern.")
        return False

    path = Path(target)
    try:
        write_header = not path.exists() or path.stat().st_size == 0
        with path.open("a", newline="", encoding="utf-8") as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=FIELDNAMES, delimiter=DELIMITER)
            if write_header:
                writer.writeheader()
            writer.writerows(_to_row(observation) for observation in batch)
    except (OSError, csv.Error) as e:
        logger.error(f"Fehler beim Speichern der CSV {path}: {e}")
        return False

    logger.info(f"{len(batch)} Ergebnisse gespeichert in {path}")
    return True
