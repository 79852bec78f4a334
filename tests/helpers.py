from typing import Dict, Iterable, List, Optional, Union
from unittest.mock import MagicMock

import requests

from sorare_cards.api.models import Card, CardPage
from sorare_cards.interfaces.card_fetcher import ICardFetcher


def card_node(n: int, **overrides) -> dict:
    """A GraphQL card node as the API returns it."""
    node = {
        "assetId": f"0x{n:04x}",
        "slug": f"player-{n}-2024-limited-{n}",
        "name": f"Player {n}",
        "position": "Forward",
        "priceEUR": 1.5 * n,
        "onSale": n % 2 == 0,
    }
    node.update(overrides)
    return node


def cards_payload(nodes: List[dict], end_cursor: Optional[str] = None, has_next_page: bool = False) -> dict:
    return {
        "data": {
            "user": {
                "cards": {
                    "nodes": nodes,
                    "pageInfo": {"endCursor": end_cursor, "hasNextPage": has_next_page},
                }
            }
        }
    }


def make_response(payload=None, status_code: int = 200, json_error: Optional[Exception] = None) -> MagicMock:
    """Minimal requests.Response stand-in."""
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def make_session(*responses) -> MagicMock:
    session = MagicMock()
    session.headers = {}
    session.post.side_effect = list(responses)
    return session


class MockCardFetcher(ICardFetcher):
    """Test fetcher with injectable per-user cards or errors."""

    def __init__(self, results: Dict[str, Union[List[Card], Exception]]):
        self._results = results
        self.calls: List[str] = []
        self.fields_seen: List[tuple] = []

    def fetch_cards_page(self, user_slug, after=None, fields=None) -> CardPage:
        return CardPage(cards=self.fetch_user_cards(user_slug, fields))

    def fetch_user_cards(self, user_slug: str, fields: Optional[Iterable[str]] = None) -> List[Card]:
        self.calls.append(user_slug)
        self.fields_seen.append(tuple(fields or ()))
        result = self._results.get(user_slug, [])
        if isinstance(result, Exception):
            raise result
        return result
