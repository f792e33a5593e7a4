"""Port interfaces (Hexagonal Architecture)."""

from bookmarker.ports.outbound import Blocked, Delivered, DeliveryOutcome, DiscordPort

__all__ = [
    "Blocked",
    "Delivered",
    "DeliveryOutcome",
    "DiscordPort",
]
