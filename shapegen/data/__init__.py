# Our data: color pairings and the packaged catalogue artifact (catalogue.json)

from .pairings import COLOR_PAIRINGS, PAIRING_HUES

__all__ = ["COLOR_PAIRINGS", "PAIRING_HUES"]
