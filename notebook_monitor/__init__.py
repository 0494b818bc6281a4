"""Preis-Monitor für Notebooks auf brasilianischen Marktplätzen."""

__version__ = "0.1.0"
