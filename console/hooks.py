import logging
from typing import List, Tuple

import httpx

from console.api import API_URLS, ApiClient

logger = logging.getLogger(__name__)


def use_category(api: ApiClient) -> List[dict]:
    """All categories, or an empty list when the fetch fails."""
    try:
        data = api.get(API_URLS["GET_CATEGORIES"])
        return (data or {}).get("category") or []
    except httpx.HTTPError as e:
        logger.warning(f"Could not load categories: {e}")
        return []


def category_links(categories: List[dict]) -> List[Tuple[str, str]]:
    """(label, href) pairs for the All Categories page."""
    return [(c["name"], f"/category/{c['slug']}") for c in categories]
