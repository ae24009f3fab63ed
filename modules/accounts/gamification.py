"""
Profile gamification rules.

Everything here is computed on read from the stored user row; nothing
is persisted.
"""

from modules.collections.models import Collection
from .models import ActivityItem, Rank

XP_PER_LEVEL = 1000

# (exclusive lower bound, rank), highest first
RANK_THRESHOLDS: list[tuple[int, Rank]] = [
    (10000, Rank.MYTHIC),
    (5000, Rank.DIAMOND),
    (1500, Rank.GOLD),
    (500, Rank.SILVER),
]


def rank_for_points(points: int) -> Rank:
    """Rank for a point balance. A balance must exceed a threshold to reach it."""
    for threshold, rank in RANK_THRESHOLDS:
        if points > threshold:
            return rank
    return Rank.BRONZE


def xp_needed_for_level(level: int) -> int:
    """XP required to leave the given level."""
    return level * XP_PER_LEVEL


def activity_from_collection(collection: Collection) -> ActivityItem:
    """Describe a confirmed collection for the activity feed."""
    weight = f"{collection.weight_in_kg:g}"
    return ActivityItem(
        id=collection.id,
        type="recycling",
        description=f"Recycled {weight}kg of {collection.material_type}",
        date=collection.created_at,
    )
