import logging
from typing import Iterable, List, Optional

import requests

from sorare_cards.api.models import Card, CardPage, EXTENDED_NODE_FIELDS
from sorare_cards.api.queries import build_user_cards_query
from sorare_cards.exceptions import SorareAPIError
from sorare_cards.interfaces.card_fetcher import ICardFetcher

logger = logging.getLogger(__name__)


class SorareClient(ICardFetcher):
    """
    Client for the Sorare GraphQL API.

    Every request is a POST of ``{"query": ..., "variables": ...}`` to a
    single endpoint, authenticated with a bearer token. Cards are read from
    the ``user.cards`` connection, which is paginated by cursor.
    """

    API_URL = "https://api.sorare.com/graphql"
    PAGE_SIZE = 50  # Cards requested per page
    REQUEST_TIMEOUT = 30
    MAX_PAGINATION_ITERATIONS = 200

    def __init__(
        self,
        api_key: str,
        session: Optional[requests.Session] = None,
        page_size: int = PAGE_SIZE,
        paginate: bool = True,
    ):
        self._page_size = page_size
        self._paginate = paginate
        self._session = session or requests.Session()
        self._session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {api_key}",
            "User-Agent": "SorareCardReport/1.0",
        })

    def _post(self, query: str, variables: dict) -> dict:
        """Send one GraphQL request and return the ``data`` object."""
        response = self._session.post(
            self.API_URL,
            json={"query": query, "variables": variables},
            timeout=self.REQUEST_TIMEOUT,
        )
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as e:
            raise SorareAPIError(f"Response is not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise SorareAPIError("Response body is not a JSON object")

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            raise SorareAPIError(f"GraphQL errors: {messages}")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise SorareAPIError("Response has no 'data' object")
        return data

    def fetch_cards_page(
        self,
        user_slug: str,
        after: Optional[str] = None,
        fields: Optional[Iterable[str]] = None,
    ) -> CardPage:
        """Fetch a single page of a user's cards starting after ``after``."""
        self._validate_user_slug(user_slug)

        query = build_user_cards_query(fields or EXTENDED_NODE_FIELDS)
        variables = {"slug": user_slug, "first": self._page_size, "after": after}
        data = self._post(query, variables)

        user = data.get("user")
        if user is None:
            raise SorareAPIError(f"User '{user_slug}' not found")

        cards = user.get("cards") if isinstance(user, dict) else None
        if not isinstance(cards, dict):
            raise SorareAPIError("Response is missing 'user.cards'")

        nodes = cards.get("nodes") or []
        if not isinstance(nodes, list):
            raise SorareAPIError("'user.cards.nodes' is not a list")

        if any(node is not None and not isinstance(node, dict) for node in nodes):
            raise SorareAPIError("'user.cards.nodes' contains a non-object entry")

        page_info = cards.get("pageInfo") or {}
        if not isinstance(page_info, dict):
            raise SorareAPIError("'user.cards.pageInfo' is not an object")

        return CardPage(
            cards=[Card.from_api_response(node or {}) for node in nodes],
            end_cursor=page_info.get("endCursor"),
            has_next_page=bool(page_info.get("hasNextPage", False)),
        )

    def fetch_user_cards(
        self, user_slug: str, fields: Optional[Iterable[str]] = None
    ) -> List[Card]:
        """
        Fetch all cards owned by a user.

        Follows ``pageInfo.endCursor`` while ``hasNextPage`` is set. With
        pagination disabled only the first page is returned.
        """
        fields = tuple(fields or EXTENDED_NODE_FIELDS)
        all_cards: List[Card] = []
        cursor: Optional[str] = None

        iteration = 0
        while True:
            iteration += 1
            if iteration > self.MAX_PAGINATION_ITERATIONS:
                logger.warning(f"fetch_user_cards hit MAX_PAGINATION_ITERATIONS ({self.MAX_PAGINATION_ITERATIONS}) for {user_slug}")
                break

            page = self.fetch_cards_page(user_slug, after=cursor, fields=fields)
            all_cards.extend(page.cards)
            logger.debug(f"{user_slug}: page {iteration} returned {len(page.cards)} cards")

            if not self._paginate or not page.has_next_page:
                break

            # A next page without a cursor would refetch the first page forever
            if not page.end_cursor or page.end_cursor == cursor:
                logger.warning(f"{user_slug}: hasNextPage set without a new endCursor, stopping")
                break
            cursor = page.end_cursor

        return all_cards

    @staticmethod
    def _validate_user_slug(user_slug: str) -> None:
        if not user_slug or not user_slug.strip():
            raise ValueError("User slug must not be empty")
