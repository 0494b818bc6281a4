"""
Datenbank-Management für Notebook-Preisbeobachtungen.
Verwendet SQLite zur Persistierung, ein Eintrag pro Angebots-Link.
"""

import sqlite3
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .models import Observation
from .utils import format_timestamp

logger = logging.getLogger(__name__)

# SQLite Schema
DB_SCHEMA = """
CREATE TABLE IF NOT EXISTS produtos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    data_hora TIMESTAMP NOT NULL,
    site VARCHAR(50),
    modelo_busca VARCHAR(100),
    titulo TEXT NOT NULL,
    preco VARCHAR(50),
    processador VARCHAR(50),
    ram VARCHAR(50),
    armazenamento VARCHAR(50),
    gpu VARCHAR(50),
    tela VARCHAR(50),
    link TEXT UNIQUE,
    criado_em TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_data_hora ON produtos(data_hora DESC);
"""

# Bei bekanntem Link werden nur Preis und Zeitpunkt aktualisiert
UPSERT_SQL = """
INSERT INTO produtos
    (data_hora, site, modelo_busca, titulo, preco,
     processador, ram, armazenamento, gpu, tela, link)
VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
ON CONFLICT(link) DO UPDATE SET
    preco = excluded.preco,
    data_hora = excluded.data_hora
"""


class StoreUnavailableError(RuntimeError):
    """Datenbank kann nicht geöffnet oder initialisiert werden."""


class Database:
    """Verwaltet die SQLite-Datenbank für Notebook-Angebote."""

    def __init__(self, db_path: Union[str, Path]):
        """
        Args:
            db_path: Pfad zur SQLite-Datenbankdatei (oder ":memory:")
        """
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """
        Öffnet die Verbindung und erstellt die Tabelle falls nötig.

        Raises:
            StoreUnavailableError: wenn Verbindung oder Schema fehlschlagen
        """
        if self._conn is not None:
            return

        try:
            conn = sqlite3.connect(str(self.db_path))
        except sqlite3.Error as e:
            logger.error(f"Datenbank nicht erreichbar ({self.db_path}): {e}")
            raise StoreUnavailableError(f"Datenbank nicht erreichbar: {e}") from e

        try:
            conn.row_factory = sqlite3.Row
            with conn:
                conn.executescript(DB_SCHEMA)
        except sqlite3.Error as e:
            conn.close()
            logger.error(f"Fehler beim Initialisieren der Datenbank: {e}")
            raise StoreUnavailableError(f"Schema konnte nicht erstellt werden: {e}") from e

        self._conn = conn
        logger.info(f'Datenbank initialisiert: Tabelle "produtos" geprüft ({self.db_path})')

    def close(self) -> None:
        """Schließt die Verbindung. Mehrfacher Aufruf ist unkritisch."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug("Datenbankverbindung geschlossen")

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreUnavailableError("Datenbank ist nicht geöffnet")
        return self._conn

    def _upsert(self, conn: sqlite3.Connection, observation: Observation) -> bool:
        """
        Speichert eine Beobachtung in einer eigenen Transaktion.

        Args:
            conn: Offene Verbindung
            observation: Observation Objekt

        Returns:
            True bei Erfolg, False bei Fehler
        """
        try:
            with conn:
                conn.execute(
                    UPSERT_SQL,
                    (
                        format_timestamp(observation.data_hora),
                        observation.site,
                        observation.modelo_busca,
                        observation.titulo,
                        observation.preco,
                        observation.processador,
                        observation.ram,
                        observation.armazenamento,
                        observation.gpu,
                        observation.tela,
                        observation.link,
                    ),
                )
            return True
        except sqlite3.Error as e:
            logger.error(f"Fehler beim Speichern von {observation.link}: {e}")
            return False

    def persist(self, batch: Iterable[Observation]) -> Dict[str, int]:
        """
        Speichert einen Batch, Eintrag für Eintrag in Eingabereihenfolge.

        Neue Links werden eingefügt, bekannte Links bekommen nur neuen Preis
        und Zeitpunkt. Ein fehlgeschlagener Eintrag bricht den Batch nicht ab.

        Args:
            batch: Beobachtungen eines Laufs

        Returns:
            Dictionary mit "updated" (erfolgreich) und "failed"

        Raises:
            StoreUnavailableError: wenn die Datenbank nicht geöffnet ist
        """
        conn = self._connection()
        updated = 0
        failed = 0

        for observation in batch:
            if self._upsert(conn, observation):
                updated += 1
            else:
                failed += 1

        logger.info(f"Datenbank: {updated} gespeichert/aktualisiert, {failed} fehlgeschlagen")
        return {"updated": updated, "failed": failed}

    def get_recent(self, limit: int = 10) -> List[Dict]:
        """
        Gibt die zuletzt angelegten Einträge zurück (neueste zuerst).

        Args:
            limit: Anzahl der Einträge (max 100)

        Returns:
            Liste von Zeilen-Dictionaries
        """
        limit = min(max(1, limit), 100)
        cursor = self._connection().execute(
            "SELECT * FROM produtos ORDER BY id DESC LIMIT ?",
            (limit,)
        )
        return [dict(row) for row in cursor.fetchall()]

    def get_by_link(self, link: str) -> Optional[Dict]:
        """Gibt den Eintrag zu einem Link zurück oder None."""
        row = self._connection().execute(
            "SELECT * FROM produtos WHERE link = ?",
            (link,)
        ).fetchone()
        return dict(row) if row else None

    def count(self) -> int:
        """Anzahl der gespeicherten Angebote."""
        return self._connection().execute("SELECT COUNT(*) FROM produtos").fetchone()[0]
