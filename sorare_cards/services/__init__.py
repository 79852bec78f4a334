from .card_service import CardService, CollectionResult
from .user_loader import load_user_slugs

__all__ = ["CardService", "CollectionResult", "load_user_slugs"]
