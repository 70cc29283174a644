"""CircleMatch TUI application entry point."""

import logging
from typing import Optional, Sequence

from textual.app import App

from circlematch.config import (
    MATCHMAKING_LOG_PATH,
    RECOMPUTE_DELAY_SECONDS,
    ensure_data_dir,
    load_candidates,
    load_profile,
)
from circlematch.profile.models import Profile
from circlematch.tui.screens import MatchmakingScreen


def configure_logging() -> None:
    """Configure application logging."""
    ensure_data_dir()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    log_path = str(MATCHMAKING_LOG_PATH.resolve())
    has_file_handler = any(
        isinstance(handler, logging.FileHandler)
        and handler.baseFilename == log_path
        for handler in root_logger.handlers
    )
    if not has_file_handler:
        file_handler = logging.FileHandler(MATCHMAKING_LOG_PATH, encoding="utf-8")
        file_handler.setLevel(logging.WARNING)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


class CircleMatchApp(App):
    """Main TUI application for CircleMatch."""

    TITLE = "CircleMatch"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+c", "quit", "Quit"),
    ]

    def __init__(
        self,
        reference: Optional[Profile] = None,
        candidates: Optional[Sequence[Profile]] = None,
        delay: float = RECOMPUTE_DELAY_SECONDS,
    ) -> None:
        super().__init__()
        self.reference = reference if reference is not None else load_profile()
        self.candidates = list(candidates) if candidates is not None else load_candidates()
        self.delay = delay

    def on_mount(self) -> None:
        """Push the matchmaking screen when app mounts."""
        self.push_screen(MatchmakingScreen(self.reference, self.candidates, delay=self.delay))


def main() -> None:
    """Entry point for the application."""
    configure_logging()
    app = CircleMatchApp()
    app.run()


if __name__ == "__main__":
    main()
