"""
Pydantic Datenmodelle für Notebook-Angebote.
"""

from datetime import datetime
from pydantic import BaseModel, Field

NOT_AVAILABLE = "N/A"


class RawListing(BaseModel):
    """Rohes Suchergebnis eines Site-Adapters."""

    site: str = Field(..., description="Quelle z.B. Amazon, MercadoLivre")
    query: str = Field(..., description="Suchbegriff z.B. asus vivobook 15")
    title: str = Field(..., description="Titel des Angebots")
    price: str = Field(..., description="Angezeigter Preis, unverändert z.B. R$ 3.499,00")
    link: str = Field(..., description="URL zum Angebot, natürliche Identität")


class SpecRecord(BaseModel):
    """Hardware-Spezifikationen aus dem Titel. Unbekannte Felder sind "N/A"."""

    processor: str = Field(NOT_AVAILABLE, description="Prozessor z.B. I5-1235U, RYZEN 5")
    ram: str = Field(NOT_AVAILABLE, description="Arbeitsspeicher z.B. 16GB")
    storage: str = Field(NOT_AVAILABLE, description="Speicher z.B. 512GB SSD")
    gpu: str = Field(NOT_AVAILABLE, description="Grafikfamilie z.B. RTX")
    screen: str = Field(NOT_AVAILABLE, description='Bildschirm z.B. 15.6"')


class Observation(BaseModel):
    """Eine Preisbeobachtung im Persistenz-Schema (Tabelle produtos)."""

    data_hora: datetime = Field(..., description="Zeitpunkt des Laufs, gleich für den ganzen Batch")
    site: str = Field(..., description="Quelle")
    modelo_busca: str = Field(..., description="Suchbegriff")
    titulo: str = Field(..., description="Titel des Angebots")
    preco: str = Field(..., description="Angezeigter Preis")
    processador: str = Field(NOT_AVAILABLE)
    ram: str = Field(NOT_AVAILABLE)
    armazenamento: str = Field(NOT_AVAILABLE)
    gpu: str = Field(NOT_AVAILABLE)
    tela: str = Field(NOT_AVAILABLE)
    link: str = Field(..., description="URL zum Angebot")

    class Config:
        """Pydantic Config."""

        frozen = True


class RunSummary(BaseModel):
    """Zusammenfassung eines Monitoring-Laufs."""

    found: int = 0
    persisted: int = 0
    failed: int = 0
    mirrored: bool = False
    elapsed_seconds: float = 0.0
