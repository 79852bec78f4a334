from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from sorare_cards.api.models import Card, CardPage


class ICardFetcher(ABC):
    """Interface for fetching a user's cards from a data source."""

    @abstractmethod
    def fetch_cards_page(
        self,
        user_slug: str,
        after: Optional[str] = None,
        fields: Optional[Iterable[str]] = None,
    ) -> CardPage:
        """Fetch a single page of cards for a user."""
        pass

    @abstractmethod
    def fetch_user_cards(
        self, user_slug: str, fields: Optional[Iterable[str]] = None
    ) -> List[Card]:
        """Fetch all cards for a user, following pagination."""
        pass
