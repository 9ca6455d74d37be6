"""
balloon_types.py
----------------
Balloon variant tags and their tuning records.

A balloon is one shared entity class plus a BalloonVariant; the scene
dispatches on-pop effects on the variant tag.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping

import pygame


class BalloonType(str, Enum):
    """Discrete balloon variant tag."""
    NORMAL = "normal"
    SPEEDUP = "speedup"
    BOMB = "bomb"


@dataclass(frozen=True)
class BalloonVariant:
    """
    Per-variant tuning.

    Attributes:
        balloon_type: Variant tag
        popping_rate: Size growth per second while popping
        popping_time: Pop animation length in seconds
        spawn_lift: Extra upward speed at spawn (pixels/second)
    """
    balloon_type: BalloonType
    popping_rate: float
    popping_time: float
    spawn_lift: float = 0.0


def build_variants(config: Mapping[str, Mapping]) -> Dict[BalloonType, BalloonVariant]:
    """
    Build the variant table from the 'variants' config section.

    Raises:
        KeyError: If a variant section is missing
    """
    variants = {}
    for balloon_type in BalloonType:
        section = config[balloon_type.value]
        variants[balloon_type] = BalloonVariant(
            balloon_type=balloon_type,
            popping_rate=float(section["popping_rate"]),
            popping_time=float(section["popping_time_s"]),
            spawn_lift=float(section.get("spawn_lift", 0.0)),
        )
    return variants


def roll_variant(roll: float, thresholds: Mapping[str, float]) -> BalloonType:
    """
    Map a uniform roll in [0, 1) to a variant using cumulative thresholds.

    Args:
        roll: Uniform random value
        thresholds: {"normal": 0.95, "speedup": 0.98}, everything above is a bomb
    """
    if roll <= thresholds["normal"]:
        return BalloonType.NORMAL
    if roll <= thresholds["speedup"]:
        return BalloonType.SPEEDUP
    return BalloonType.BOMB


def parse_color(value) -> pygame.Color:
    """Accept '#RGB', '#RRGGBB' or an RGB tuple."""
    if isinstance(value, str) and value.startswith("#") and len(value) == 4:
        value = "#" + "".join(ch * 2 for ch in value[1:])
    if isinstance(value, str):
        return pygame.Color(value)
    return pygame.Color(*value)
