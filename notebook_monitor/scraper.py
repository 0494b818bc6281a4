"""
Site-Adapter für Amazon und MercadoLivre.
Laden Suchergebnisseiten und extrahieren Titel, Preis und Link.
"""

import logging
from typing import Dict, List, Optional, Type
from urllib.parse import quote_plus

import requests
from bs4 import BeautifulSoup

from .models import RawListing
from .utils import rotate_user_agent

logger = logging.getLogger(__name__)

AMAZON_LINK_PREFIX = "https://www.amazon.com.br"


class SiteScraper:
    """Basisklasse für einen Marktplatz-Adapter."""

    site_name = ""

    def __init__(self, base_url: str, timeout: int = 15, max_items: int = 5):
        """
        Initialisiert den Scraper.

        Args:
            base_url: Basis-URL des Marktplatzes
            timeout: Timeout für HTTP-Requests in Sekunden
            max_items: Maximale Anzahl Ergebnisse pro Seite
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_items = max_items

        # Session für persistente Verbindungen
        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "pt-BR,pt;q=0.9,en;q=0.8",
            "Connection": "keep-alive",
        })

    def build_search_url(self, query: str, page: int) -> str:
        raise NotImplementedError

    def parse_item(self, item, query: str) -> Optional[RawListing]:
        raise NotImplementedError

    def find_items(self, soup: BeautifulSoup) -> list:
        raise NotImplementedError

    def _get_soup(self, url: str) -> Optional[BeautifulSoup]:
        """
        Lädt eine Seite mit rotiertem User-Agent.

        Returns:
            BeautifulSoup Objekt oder None bei Fehler
        """
        try:
            response = self.session.get(
                url,
                headers={"User-Agent": rotate_user_agent()},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Fehler beim Abrufen von {url}: {e}")
            return None
        return BeautifulSoup(response.content, "lxml")

    def parse_results(self, html: str, query: str) -> List[RawListing]:
        """Extrahiert die Ergebnisse aus dem HTML einer Suchseite."""
        return self._parse_soup(BeautifulSoup(html, "lxml"), query)

    def _parse_soup(self, soup: BeautifulSoup, query: str) -> List[RawListing]:
        items = self.find_items(soup)
        logger.info(f"[{self.site_name}] Selektor fand {len(items)} Elemente.")

        results = []
        for item in items[: self.max_items]:
            try:
                listing = self.parse_item(item, query)
            except Exception as e:
                logger.debug(f"[{self.site_name}] Fehler beim Parsen eines Elements: {e}")
                continue
            if listing:
                results.append(listing)
        return results

    def search(self, query: str, page: int = 1) -> List[RawListing]:
        """
        Sucht nach einem Modell auf einer Ergebnisseite.

        Args:
            query: Suchbegriff
            page: Seitennummer ab 1

        Returns:
            Liste von RawListing Objekten (leer bei Fehler)
        """
        url = self.build_search_url(query, page)
        soup = self._get_soup(url)
        if soup is None:
            return []
        return self._parse_soup(soup, query)

    def close(self) -> None:
        self.session.close()


class AmazonScraper(SiteScraper):
    """Adapter für amazon.com.br."""

    site_name = "Amazon"

    def build_search_url(self, query: str, page: int) -> str:
        return f"{self.base_url}/s?k={quote_plus(query)}&page={page}"

    def find_items(self, soup: BeautifulSoup) -> list:
        return soup.select('div[cel_widget_id^="MAIN-SEARCH_RESULTS-"]')

    @staticmethod
    def _parse_price(item) -> Optional[str]:
        whole = item.select_one(".a-price-whole")
        if whole:
            price = whole.get_text(strip=True)
            fraction = item.select_one(".a-price-fraction")
            if fraction:
                if not price.endswith(","):
                    price += ","
                price += fraction.get_text(strip=True)
            return f"R$ {price}"

        offscreen = item.select_one(".a-offscreen")
        if offscreen:
            return offscreen.get_text(strip=True) or None
        return None

    def parse_item(self, item, query: str) -> Optional[RawListing]:
        title_tag = item.select_one("h2.a-size-base-plus")
        title = title_tag.get_text(strip=True) if title_tag else ""

        link_tag = item.select_one("a.a-link-normal.s-line-clamp-4")
        href = link_tag.get("href") if link_tag else None
        link = AMAZON_LINK_PREFIX + href if href else ""

        price = self._parse_price(item)

        # Zubehör wie "Flat para ..." überspringen
        if not title or not link or not price or "Flat para" in title:
            return None

        return RawListing(site=self.site_name, query=query, title=title, price=price, link=link)


class MercadoLivreScraper(SiteScraper):
    """Adapter für lista.mercadolivre.com.br."""

    site_name = "MercadoLivre"
    page_size = 50

    def build_search_url(self, query: str, page: int) -> str:
        slug = query.strip().replace(" ", "-")
        offset = 1 + (page - 1) * self.page_size
        return f"{self.base_url}/{slug}_Desde_{offset}"

    def find_items(self, soup: BeautifulSoup) -> list:
        return soup.select("div.andes-card.poly-card")

    def parse_item(self, item, query: str) -> Optional[RawListing]:
        title_tag = item.select_one("a.poly-component__title")
        if not title_tag:
            return None
        title = title_tag.get_text(strip=True)
        link = title_tag.get("href") or ""

        symbol = item.select_one("span.andes-money-amount__currency-symbol")
        fraction = item.select_one("span.andes-money-amount__fraction")
        if not symbol or not fraction:
            return None
        price = f"{symbol.get_text(strip=True)} {fraction.get_text(strip=True)}"

        if not title or not link:
            return None

        return RawListing(site=self.site_name, query=query, title=title, price=price, link=link)


SCRAPERS: Dict[str, Type[SiteScraper]] = {
    "amazon": AmazonScraper,
    "mercadolivre": MercadoLivreScraper,
}
