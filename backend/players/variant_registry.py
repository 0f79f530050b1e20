"""
Registry for autopilot player variants.

Maps variant keys (e.g., 'random', 'greedy') to player classes so the
command line can pick one by name.
"""

from typing import Dict, Optional, Type

from .base import Player
from .random_player import RandomPlayer, GreedyPlayer


PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

DEFAULT_VARIANT = "random"

# Canonical list of available variant keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of 'random', 'greedy'. If None or empty, returns default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip()

    if variant_key not in PLAYER_VARIANTS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANTS[variant_key]


def list_variants() -> list:
    """
    Return metadata about all available player variants.

    Returns:
        List of dicts with 'key' and 'description' for each variant.
    """
    return [
        {"key": key, "description": player_class.description}
        for key, player_class in PLAYER_VARIANTS.items()
    ]
