"""GraphQL documents sent to the Sorare API."""

from typing import Iterable

# The user slug and cursor travel as variables; nothing user-supplied is
# ever formatted into the document text.
USER_CARDS_QUERY_TEMPLATE = """
query UserCards($slug: String!, $first: Int!, $after: String) {
  user(slug: $slug) {
    cards(first: $first, after: $after) {
      nodes {
%(fields)s
      }
      pageInfo {
        endCursor
        hasNextPage
      }
    }
  }
}
"""


def build_user_cards_query(fields: Iterable[str]) -> str:
    """Build the card connection query selecting ``fields`` on each node."""
    selection = "\n".join(f"        {field}" for field in fields)
    return USER_CARDS_QUERY_TEMPLATE % {"fields": selection}
