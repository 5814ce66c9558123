"""
Dashboard metrics derived from the catalog.

All functions here are pure: they take the current recipe list and return
plain values, recomputed on every render. Nothing is cached.

# NOTE: "Service Score" and the trend labels are fixed display values, not
    measurements. recent_recipes() takes the first entries of the fetch
    order, which is alphabetical by name, not by modification time.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence

from .models import Recipe

SERVICE_SCORE = 98
RECENT_LIMIT = 5


@dataclass
class CatalogSummary:
    """
    Aggregate counts shown on the overview page.

    Attributes:
        total: Number of recipes
        region_count: Number of distinct region values
        category_count: Number of distinct category values
        service_score: Constant display figure (SERVICE_SCORE)
    """
    total: int
    region_count: int
    category_count: int
    service_score: int = SERVICE_SCORE


def summarize_catalog(recipes: Sequence[Recipe]) -> CatalogSummary:
    """Compute the overview counts for a recipe list."""
    return CatalogSummary(
        total=len(recipes),
        region_count=len({r.region for r in recipes}),
        category_count=len({r.category for r in recipes}),
    )


def stat_cards(summary: CatalogSummary) -> List[Dict[str, object]]:
    """
    Build the four overview stat cards.

    Returns:
        List of dicts with label, value, delta and icon keys (kpi_row format)
    """
    return [
        {"label": "Cuisine Catalog", "value": summary.total, "delta": "+4%", "icon": "🍽️"},
        {"label": "Map Coverage", "value": summary.region_count, "delta": "Stable", "icon": "🌍"},
        {"label": "Asset Groups", "value": summary.category_count, "delta": "Updated", "icon": "📊"},
        {"label": "Service Score", "value": summary.service_score, "delta": "+0.2%", "icon": "⚡"},
    ]


def count_by(recipes: Sequence[Recipe], field: str) -> Dict[str, int]:
    """
    Count recipes per value of a string field (e.g. "region", "category").

    Returns:
        Mapping of value to count, most common first
    """
    counter = Counter(getattr(r, field) or "—" for r in recipes)
    return dict(counter.most_common())


def recent_recipes(recipes: Sequence[Recipe], limit: int = RECENT_LIMIT) -> List[Recipe]:
    """First `limit` recipes of the fetch order (the "Living Feed" list)."""
    return list(recipes[:limit])
