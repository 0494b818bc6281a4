"""
Spezifikations-Extraktion aus Notebook-Titeln.
Erkennt Prozessor, RAM, Speicher, GPU und Bildschirmgröße.
"""

import re
import logging
from typing import Callable, Optional, Tuple

from .models import NOT_AVAILABLE, SpecRecord

logger = logging.getLogger(__name__)

# Regex-Patterns pro Feld
REGEX_SPECS = {
    "processor": re.compile(r"(i[3579]|ryzen\s*[3579])(\s*-\s*\w+)?", re.IGNORECASE),
    "ram": re.compile(r"(\d+)\s*(GB|G)\s*(DE\s*)?(RAM)?", re.IGNORECASE),
    # Erste Zahl+GB ohne "ssd"/"hd" irgendwo im Rest des Titels
    "ram_fallback": re.compile(r"(\d+)(gb|g)\b(?!.*\b(ssd|hd)\b)", re.IGNORECASE),
    # Erste Zahl+GB, die nicht direkt als SSD/HD markiert ist
    "ram_untyped": re.compile(r"\b(\d+)\s*(GB|G)\b(?!\s*(SSD|HD)\b)", re.IGNORECASE),
    "storage": re.compile(r"(\d+)\s*(GB|TB)\s*(SSD|HD)?", re.IGNORECASE),
    "ram_label": re.compile(r"\s*(DE\s*)?RAM", re.IGNORECASE),
    "gpu": re.compile(r"(RTX|GTX|Radeon|Iris\s*Xe|UHD\s*Graphics|AMD\s*Radeon)", re.IGNORECASE),
    "screen": re.compile(r"(\d{2}\.?\d?)\s*(''|polegadas|pol)", re.IGNORECASE),
}


class SpecParser:
    """Parser für Notebook-Spezifikationen aus Angebots-Titeln."""

    @staticmethod
    def extract_processor(title: str) -> Optional[str]:
        """
        Extrahiert den Prozessor (Intel Core i3-i9 oder Ryzen 3-9).

        Args:
            title: Titel des Angebots

        Returns:
            Prozessor in Großbuchstaben (z.B. "I5-1235U", "RYZEN 5") oder None
        """
        match = REGEX_SPECS["processor"].search(title)
        if match:
            return match.group(0).strip().upper()
        return None

    @staticmethod
    def extract_ram(title: str) -> Optional[str]:
        """
        Extrahiert die RAM-Größe.

        Bevorzugt wird ein Treffer mit "RAM" im Text, da Speicher und RAM
        oft beide als "<N>GB" im Titel stehen.

        Args:
            title: Titel des Angebots

        Returns:
            RAM-String (z.B. "16GB") oder None
        """
        for match in REGEX_SPECS["ram"].finditer(title):
            if "RAM" in match.group(0).upper():
                return f"{match.group(1)}GB"

        match = REGEX_SPECS["ram_fallback"].search(title)
        if match:
            return f"{match.group(1)}GB"

        match = REGEX_SPECS["ram_untyped"].search(title)
        if match:
            return f"{match.group(1)}GB"

        return None

    @staticmethod
    def extract_storage(title: str) -> Optional[str]:
        """
        Extrahiert Speichergröße und -typ.

        Args:
            title: Titel des Angebots

        Returns:
            Speicher-String (z.B. "512GB SSD", "1TB") oder None
        """
        candidates = [
            match
            for match in REGEX_SPECS["storage"].finditer(title)
            if not REGEX_SPECS["ram_label"].match(title, match.end())
        ]
        if not candidates:
            return None

        # Treffer mit SSD/HD haben Vorrang
        match = next((m for m in candidates if m.group(3)), candidates[0])
        storage = f"{match.group(1)}{match.group(2).upper()}"
        if match.group(3):
            storage += f" {match.group(3).upper()}"
        return storage

    @staticmethod
    def extract_gpu(title: str) -> Optional[str]:
        """Extrahiert die GPU-Familie (z.B. "RTX", "IRIS XE")."""
        match = REGEX_SPECS["gpu"].search(title)
        if match:
            return match.group(1).strip().upper()
        return None

    @staticmethod
    def extract_screen(title: str) -> Optional[str]:
        """Extrahiert die Bildschirmgröße in Zoll (z.B. '15.6"')."""
        match = REGEX_SPECS["screen"].search(title)
        if match:
            return f'{match.group(1)}"'
        return None

    def parse(self, title: str) -> SpecRecord:
        """
        Extrahiert alle Spezifikationen aus einem Titel.

        Jedes Feld wird einzeln extrahiert. Schlägt ein Feld fehl, bleibt es
        "N/A", die übrigen Felder sind davon nicht betroffen.

        Args:
            title: Titel des Angebots

        Returns:
            SpecRecord, jedes Feld gesetzt oder "N/A"
        """
        if not isinstance(title, str):
            title = "" if title is None else str(title)

        values = {}
        for field, extractor in FIELD_EXTRACTORS:
            try:
                value = extractor(title)
            except Exception as e:
                logger.warning(f"Fehler beim Extrahieren von '{field}' aus \"{title}\": {e}")
                value = None
            values[field] = value or NOT_AVAILABLE

        return SpecRecord(**values)


# Feld -> Extraktor, in Reihenfolge der Auswertung
FIELD_EXTRACTORS: Tuple[Tuple[str, Callable[[str], Optional[str]]], ...] = (
    ("processor", SpecParser.extract_processor),
    ("ram", SpecParser.extract_ram),
    ("storage", SpecParser.extract_storage),
    ("gpu", SpecParser.extract_gpu),
    ("screen", SpecParser.extract_screen),
)

_parser = SpecParser()


def extract_specs(title: str) -> SpecRecord:
    """Extrahiert die Spezifikationen eines Titels (siehe SpecParser.parse)."""
    return _parser.parse(title)
