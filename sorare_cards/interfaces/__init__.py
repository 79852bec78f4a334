from .card_fetcher import ICardFetcher
from .exporter import IExporter

__all__ = ["ICardFetcher", "IExporter"]
