"""Matchmaking screen."""

import asyncio
import logging
from typing import List, Optional, Sequence, Set

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Button, Footer, Static

from circlematch.config import RECOMPUTE_DELAY_SECONDS
from circlematch.matching.ranker import MatchRanker, MatchResult
from circlematch.matching.recompute import MatchRecomputer
from circlematch.profile.models import InvalidProfileError, Profile
from circlematch.tui.modals import MatchDetailModal
from circlematch.tui.widgets import MatchContainer, MatchSummaryBar, MatchTable

logger = logging.getLogger(__name__)

ALGORITHM_TEXT = (
    "[bold]How matching works[/bold]  "
    "Interests and communities are compared with Jaccard similarity "
    "(shared labels / all labels). Compatibility = 70% interests + 30% communities."
)


class MatchmakingScreen(Screen):
    """Ranked matches for the reference profile."""

    CSS = """
    #header {
        text-style: bold;
        padding: 1 2 0 2;
    }

    #algorithm {
        color: $text-muted;
        padding: 0 2 1 2;
    }

    #actions {
        height: auto;
        align: right middle;
        padding: 0 2;
    }
    """

    AUTO_FOCUS = "#match-table"

    BINDINGS = [
        Binding("r", "recompute", "Find New Matches"),
        Binding("c", "connect", "Connect"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    IDLE_LABEL = "Find New Matches"
    BUSY_LABEL = "Calculating..."

    def __init__(
        self,
        reference: Profile,
        candidates: Sequence[Profile],
        delay: float = RECOMPUTE_DELAY_SECONDS,
    ) -> None:
        super().__init__()
        self.reference = reference
        self.candidates: List[Profile] = list(candidates)
        self.ranker = MatchRanker()
        self.recomputer = MatchRecomputer(
            ranker=self.ranker,
            delay=delay,
            on_publish=self._on_results_published,
        )
        self.connection_requests: Set[str] = set()
        self._results: List[MatchResult] = []

    def compose(self) -> ComposeResult:
        yield Static("Smart Matchmaking", id="header")
        yield Static(ALGORITHM_TEXT, id="algorithm")
        with Horizontal(id="actions"):
            yield Button(self.IDLE_LABEL, id="recompute-btn", variant="primary")
        with MatchContainer(id="matches"):
            yield MatchTable(id="match-table")
            yield MatchSummaryBar(id="match-summary")
        yield Footer()

    def on_mount(self) -> None:
        """Rank once, without delay, so the table is never empty on entry."""
        self._show_results(self.ranker.rank(self.reference, self.candidates))
        self.query_one(MatchTable).focus()

    def on_unmount(self) -> None:
        self.recomputer.cancel()

    @property
    def results(self) -> List[MatchResult]:
        """Results currently displayed."""
        return list(self._results)

    def _show_results(self, results: Sequence[MatchResult]) -> None:
        self._results = list(results)
        self.query_one(MatchContainer).load_matches(self._results)

    def _set_calculating(self, calculating: bool) -> None:
        for button in self.query("#recompute-btn").results(Button):
            button.disabled = calculating
            button.label = self.BUSY_LABEL if calculating else self.IDLE_LABEL

    def action_recompute(self) -> None:
        self.request_recompute()

    def request_recompute(self) -> Optional[asyncio.Task]:
        """Start a delayed recomputation of all matches.

        Returns:
            The scheduled task, or None if rejected or already running
        """
        try:
            task = self.recomputer.request(self.reference, self.candidates)
        except InvalidProfileError as e:
            logger.error(f"Recompute rejected: {e}")
            self.notify(str(e), title="Could not update matches", severity="error")
            return None

        if task is None:
            return None

        self._set_calculating(True)
        task.add_done_callback(self._on_recompute_done)
        return task

    def _on_results_published(self, results: Sequence[MatchResult]) -> None:
        self._show_results(results)
        self.notify(
            "Compatibility scores recalculated using Jaccard similarity.",
            title="Matches Updated",
        )

    def _on_recompute_done(self, task: asyncio.Task) -> None:
        if not self.is_mounted:
            return
        self._set_calculating(False)
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Recompute failed: {task.exception()}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "recompute-btn":
            self.request_recompute()

    def action_connect(self) -> None:
        """Send a connection request to the selected candidate."""
        result = self.query_one(MatchTable).get_selected_match()
        if result is None:
            return

        name = result.candidate.display_name if result.candidate else result.candidate_id
        if result.candidate_id in self.connection_requests:
            self.notify(f"You already sent a request to {name}.", title="Already Requested")
            return

        self.connection_requests.add(result.candidate_id)
        logger.info(f"Connection request sent to {result.candidate_id}")
        self.notify(
            f"Your connection request has been sent to {name}.",
            title="Connection Request Sent",
        )

    def on_match_table_match_selected(self, message: MatchTable.MatchSelected) -> None:
        self.app.push_screen(MatchDetailModal(message.result))

    def action_quit(self) -> None:
        self.app.exit()
