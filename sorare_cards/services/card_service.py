import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import requests

from sorare_cards.api.models import ReportRow, ReportVariant
from sorare_cards.exceptions import SorareAPIError
from sorare_cards.interfaces.card_fetcher import ICardFetcher

logger = logging.getLogger(__name__)


@dataclass
class CollectionResult:
    """Rows gathered over one run, plus which users failed and why."""

    rows: List[ReportRow] = field(default_factory=list)
    processed: List[str] = field(default_factory=list)
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


class CardService:
    """
    Collects report rows for a list of users.

    Depends on the ICardFetcher abstraction. A failure for one user is
    logged and that user skipped; the loop always continues.
    """

    RECOVERABLE_ERRORS = (requests.RequestException, SorareAPIError, ValueError)

    def __init__(
        self,
        card_fetcher: ICardFetcher,
        variant: ReportVariant = ReportVariant.EXTENDED,
    ):
        self._card_fetcher = card_fetcher
        self._variant = variant

    @property
    def variant(self) -> ReportVariant:
        return self._variant

    def collect(self, user_slugs: List[str]) -> CollectionResult:
        """Fetch cards for every user in order and flatten them into rows."""
        result = CollectionResult()
        total = len(user_slugs)

        for index, user_slug in enumerate(user_slugs, start=1):
            print(f"      [{index}/{total}] Processing user: {user_slug}")
            result.processed.append(user_slug)

            try:
                cards = self._card_fetcher.fetch_user_cards(
                    user_slug, fields=self._variant.node_fields
                )
            except self.RECOVERABLE_ERRORS as e:
                logger.warning(f"Failed to fetch cards for {user_slug}: {e}")
                result.failures.append((user_slug, str(e)))
                continue

            result.rows.extend(ReportRow(user_slug=user_slug, card=card) for card in cards)
            logger.info(f"{user_slug}: {len(cards)} cards")

        return result
