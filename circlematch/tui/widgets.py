"""Custom TUI widgets for CircleMatch."""

from typing import Iterable, List, Optional, Sequence

from rich.text import Text
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import DataTable, Static

from circlematch.matching.ranker import (
    GOOD_MATCH_THRESHOLD,
    HIGH_MATCH_THRESHOLD,
    MatchResult,
)


def compatibility_style(score: int) -> str:
    """Rich style for a compatibility score.

    - Green (>= 80): High match
    - Yellow (60-79): Good match
    - Red (< 60): Low match
    """
    if score >= HIGH_MATCH_THRESHOLD:
        return "bold green"
    if score >= GOOD_MATCH_THRESHOLD:
        return "bold yellow"
    return "bold red"


class MatchTable(DataTable):
    """Data table of ranked candidates.
    
    7 columns:
    - #: Rank
    - Name: Candidate display name
    - Location: Candidate location
    - Match: Compatibility percentage with color
    - Tier: High / Good / Low Match
    - Interests: Shared interests
    - Communities: Shared communities
    """
    
    BINDINGS = [
        Binding("enter", "select_row", "View Details", show=True),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]
    
    COLUMNS = [
        ("#", 4),
        ("Name", 20),
        ("Location", 18),
        ("Match", 6),
        ("Tier", 11),
        ("Interests", 30),
        ("Communities", 30),
    ]
    
    class MatchSelected(Message):
        """Message sent when a match row is selected."""
        def __init__(self, result: MatchResult, row_index: int) -> None:
            self.result = result
            self.row_index = row_index
            super().__init__()
    
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, cursor_type="row", zebra_stripes=True, **kwargs)
        self._results: List[MatchResult] = []
    
    def on_mount(self) -> None:
        """Set up table columns on mount."""
        self._ensure_columns()
    
    def _ensure_columns(self) -> None:
        if self.columns:
            return
        for name, width in self.COLUMNS:
            self.add_column(name, width=width)
    
    def load_matches(self, results: Sequence[MatchResult]) -> int:
        """Replace the table contents with ranked results.
        
        Returns:
            Number of rows added
        """
        self._ensure_columns()
        self.clear()
        self._results = list(results)
        
        for idx, result in enumerate(self._results, 1):
            self._add_match_row(result, idx)
        
        return len(self._results)
    
    def _add_match_row(self, result: MatchResult, row_num: int) -> None:
        candidate = result.candidate
        name = candidate.display_name if candidate else result.candidate_id
        location = (candidate.location if candidate else None) or "-"
        
        self.add_row(
            str(row_num),
            self._truncate(name, 19),
            self._truncate(location, 17),
            Text(f"{result.compatibility}%", style=compatibility_style(result.compatibility)),
            result.tier,
            self._format_labels(result.shared_interests, 29),
            self._format_labels(result.shared_communities, 29),
            key=result.candidate_id,
        )
    
    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis if too long."""
        if len(text) <= max_len:
            return text
        return text[:max_len - 1] + "…"
    
    def _format_labels(self, labels: Iterable[str], max_len: int) -> Text:
        ordered = sorted(labels)
        if not ordered:
            return Text("none", style="dim")
        return Text(self._truncate(", ".join(ordered), max_len))
    
    @property
    def results(self) -> List[MatchResult]:
        return list(self._results)
    
    def get_selected_match(self) -> Optional[MatchResult]:
        """Get the match under the cursor."""
        if self.cursor_row is None or self.cursor_row >= len(self._results):
            return None
        return self._results[self.cursor_row]
    
    def action_select_row(self) -> None:
        """Handle row selection (Enter key)."""
        result = self.get_selected_match()
        if result:
            self.post_message(self.MatchSelected(result, self.cursor_row or 0))


class MatchSummaryBar(Static):
    """Status bar showing match summary."""
    
    DEFAULT_CSS = """
    MatchSummaryBar {
        height: 1;
        background: $surface;
        padding: 0 2;
    }
    """
    
    def update_stats(self, results: Sequence[MatchResult]) -> None:
        """Update the summary from the current results."""
        total = len(results)
        high = sum(1 for r in results if r.compatibility >= HIGH_MATCH_THRESHOLD)
        
        parts = [f"[bold]{total}[/bold] matches"]
        if high:
            parts.append(f"[green]{high}[/green] high")
        if total:
            parts.append(f"top {results[0].compatibility}%")
        
        text = " | ".join(parts)
        text += "  [dim]r recalculate, c connect, Enter details[/dim]"
        
        self.update(text)


class MatchContainer(Vertical):
    """Container for the match table and summary."""
    
    DEFAULT_CSS = """
    MatchContainer {
        height: 1fr;
    }
    
    MatchContainer > MatchTable {
        height: 1fr;
    }
    
    MatchContainer > MatchSummaryBar {
        dock: bottom;
    }
    """
    
    def load_matches(self, results: Sequence[MatchResult]) -> int:
        """Load ranked results into the table and summary.
        
        Returns:
            Number of matches shown
        """
        count = self.query_one(MatchTable).load_matches(results)
        self.query_one(MatchSummaryBar).update_stats(results)
        return count
    
    @property
    def table(self) -> MatchTable:
        return self.query_one(MatchTable)
