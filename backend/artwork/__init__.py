"""NPC Artwork — token artwork substitution service for NPC actors."""

__version__ = "0.1.0"
