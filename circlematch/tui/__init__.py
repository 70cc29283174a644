"""TUI module for the CircleMatch terminal interface."""

from circlematch.tui.screens import MatchmakingScreen

__all__ = ["MatchmakingScreen"]
