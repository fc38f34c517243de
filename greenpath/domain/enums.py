"""Domain enums."""

from enum import Enum


class TransportType(str, Enum):
    PLANE = "plane"
    VAN = "van"


class ActivityCategory(str, Enum):
    SHOP = "shop"
    RESTAURANT = "restaurant"
