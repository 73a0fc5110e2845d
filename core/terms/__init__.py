"""Football vocabulary used to steer prompts and score translations."""

from core.terms.library import DetectedEntities, FootballTermLibrary

__all__: list[str] = ["DetectedEntities", "FootballTermLibrary"]
