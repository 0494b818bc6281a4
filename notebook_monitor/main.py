"""
Hauptprogramm für den Notebook-Preismonitor.
Orchestriert Scraping, Spezifikations-Extraktion, Datenbank und CSV-Spiegel.
"""

import argparse
import logging
import random
import sys
import time
from typing import Callable, Dict, List, Optional

from .config import config, Config
from .database import Database, StoreUnavailableError
from .mirror import append_batch
from .models import Observation, RunSummary
from .parser import extract_specs
from .scraper import SCRAPERS, SiteScraper
from .utils import batch_timestamp, normalize, setup_logging

logger = logging.getLogger(__name__)


class NotebookMonitor:
    """Hauptklasse für einen Monitoring-Lauf."""

    def __init__(
        self,
        database: Optional[Database] = None,
        scrapers: Optional[Dict[str, SiteScraper]] = None,
        models: Optional[List[str]] = None,
        pages: Optional[int] = None,
        mirror_file: Optional[str] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialisiert den Monitor. Ohne Argumente wird alles aus der Config gebaut.

        Args:
            database: Datenbank (noch nicht geöffnet)
            scrapers: Site-Name -> Adapter
            models: Suchbegriffe
            pages: Anzahl Ergebnisseiten pro Site
            mirror_file: CSV-Datei für den Spiegel, None deaktiviert ihn
            sleep: Wartefunktion zwischen Requests
        """
        self.database = database or Database(config.get_db_path())
        self.scrapers = scrapers if scrapers is not None else {
            name: scraper_cls(
                config.BASE_URLS[name],
                timeout=config.REQUEST_TIMEOUT,
                max_items=config.MAX_ITEMS_PER_PAGE,
            )
            for name, scraper_cls in SCRAPERS.items()
        }
        self.models = models if models is not None else config.MODELS
        self.pages = pages if pages is not None else config.PAGES_TO_FETCH
        self.mirror_file = mirror_file
        self.sleep = sleep

    def _wait(self) -> None:
        delay = random.uniform(config.REQUEST_DELAY_MIN, config.REQUEST_DELAY_MAX)
        logger.info(f"Warte {delay:.2f} Sekunden...")
        self.sleep(delay)

    def _collect(self) -> List[Observation]:
        """Durchläuft Modelle, Sites und Seiten nacheinander."""
        timestamp = batch_timestamp()
        observations: List[Observation] = []

        for model in self.models:
            logger.info(f"--- Suche Modell: {model} ---")

            for site_name, scraper in self.scrapers.items():
                for page in range(1, self.pages + 1):
                    logger.info(f"Suche in [{site_name.upper()}] - Seite {page}...")

                    try:
                        listings = scraper.search(model, page)
                    except Exception as e:
                        logger.error(f"Fehler beim Suchen in {site_name}: {e}")
                        continue

                    for listing in listings:
                        specs = extract_specs(listing.title)
                        observations.append(normalize(listing, specs, timestamp))

                    logger.info(
                        f"{len(listings)} Ergebnisse für {model} in {site_name} (Seite {page})"
                    )
                    self._wait()

        return observations

    def run(self) -> RunSummary:
        """
        Führt einen kompletten Lauf durch.

        Raises:
            StoreUnavailableError: wenn die Datenbank nicht verfügbar ist
        """
        logger.info("Starte Monitoring...")
        start = time.monotonic()

        # Ohne Datenbank lohnt sich das Scraping nicht
        self.database.open()
        try:
            observations = self._collect()
            logger.info(f"Suche abgeschlossen. Insgesamt {len(observations)} Ergebnisse gefunden.")

            result = {"updated": 0, "failed": 0}
            mirrored = False
            if observations:
                result = self.database.persist(observations)
                if self.mirror_file:
                    mirrored = append_batch(observations, self.mirror_file)
        finally:
            self.database.close()
            for scraper in self.scrapers.values():
                scraper.close()

        summary = RunSummary(
            found=len(observations),
            persisted=result["updated"],
            failed=result["failed"],
            mirrored=mirrored,
            elapsed_seconds=round(time.monotonic() - start, 2),
        )
        logger.info(
            f"Lauf beendet: {summary.found} gefunden, {summary.persisted} gespeichert, "
            f"{summary.failed} fehlgeschlagen. Gesamtzeit: {summary.elapsed_seconds:.2f} Sekunden."
        )
        return summary


def show_recent(database: Database, limit: int) -> None:
    """Gibt die zuletzt gespeicherten Angebote auf der Konsole aus."""
    with database:
        rows = database.get_recent(limit)

    print("--- Gespeicherte Produkte ---")
    if not rows:
        print("Keine Produkte gefunden.")
        return
    for row in rows:
        print(f"{row['id']:>6} | {row['site']:<12} | {row['preco']:<14} | {row['titulo']}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Preis-Monitor für Notebooks")
    parser.add_argument(
        "--show",
        nargs="?",
        const=10,
        type=int,
        metavar="N",
        help="Zeigt die letzten N gespeicherten Produkte (Standard: 10)",
    )
    parser.add_argument(
        "--no-mirror",
        action="store_true",
        help="Schreibt keinen CSV-Spiegel",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Hauptfunktion."""
    args = parse_args(argv)
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)

    try:
        Config.validate()
        database = Database(config.get_db_path())

        if args.show is not None:
            show_recent(database, args.show)
            return 0

        mirror_file = None
        if config.MIRROR_ENABLED and not args.no_mirror:
            mirror_file = config.OUTPUT_FILE

        NotebookMonitor(database=database, mirror_file=mirror_file).run()
    except KeyboardInterrupt:
        logger.info("Monitor wird beendet...")
    except (ValueError, StoreUnavailableError) as e:
        logger.error(f"Kritischer Fehler: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
