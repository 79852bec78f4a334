from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple


class ReportVariant(Enum):
    """
    Column set of the produced report.

    BASIC is the three-column report; EXTENDED adds name,
    position, price and sale status and is the default.
    """

    BASIC = "basic"
    EXTENDED = "extended"

    @property
    def columns(self) -> Tuple[str, ...]:
        if self is ReportVariant.BASIC:
            return BASIC_COLUMNS
        return EXTENDED_COLUMNS

    @property
    def node_fields(self) -> Tuple[str, ...]:
        """GraphQL fields requested for every card node."""
        if self is ReportVariant.BASIC:
            return BASIC_NODE_FIELDS
        return EXTENDED_NODE_FIELDS


BASIC_COLUMNS = ("UserSlug", "AssetID", "CardSlug")
EXTENDED_COLUMNS = BASIC_COLUMNS + ("Name", "Position", "PriceEUR", "OnSale")

BASIC_NODE_FIELDS = ("assetId", "slug")
EXTENDED_NODE_FIELDS = BASIC_NODE_FIELDS + ("name", "position", "priceEUR", "onSale")


@dataclass(frozen=True)
class Card:
    """A collectible card owned by a user, as returned by the API."""

    asset_id: Any
    slug: Any
    name: Optional[Any] = None
    position: Optional[Any] = None
    price_eur: Optional[Any] = None
    on_sale: Optional[bool] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Card":
        """Factory method to create a Card from a GraphQL card node."""
        return cls(
            asset_id=data.get("assetId"),
            slug=data.get("slug"),
            name=data.get("name"),
            position=data.get("position"),
            price_eur=data.get("priceEUR"),
            on_sale=data.get("onSale"),
        )

    @classmethod
    def from_row(cls, values: Sequence[Any]) -> "Card":
        """Rebuild a card from its report columns (without the user slug)."""
        padded = list(values) + [None] * (6 - len(values))
        return cls(*padded[:6])

    def to_row(self, variant: ReportVariant = ReportVariant.EXTENDED) -> List[Any]:
        if variant is ReportVariant.BASIC:
            return [self.asset_id, self.slug]
        return [
            self.asset_id,
            self.slug,
            self.name,
            self.position,
            self.price_eur,
            self.on_sale,
        ]


@dataclass(frozen=True)
class CardPage:
    """One page of a user's card connection."""

    cards: List[Card]
    end_cursor: Optional[str] = None
    has_next_page: bool = False


@dataclass(frozen=True)
class ReportRow:
    """One spreadsheet row: a card attributed to the user it was fetched for."""

    user_slug: str
    card: Card

    def to_row(self, variant: ReportVariant = ReportVariant.EXTENDED) -> List[Any]:
        return [self.user_slug] + self.card.to_row(variant)

    def to_dict(self, variant: ReportVariant = ReportVariant.EXTENDED) -> dict:
        """Convert to a column-name keyed dict for export."""
        return dict(zip(variant.columns, self.to_row(variant)))
