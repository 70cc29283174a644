from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, RichLog, Static

from circlematch.matching.ranker import MatchResult
from circlematch.tui.widgets import compatibility_style


class MatchDetailModal(ModalScreen):
    """Modal screen for displaying why a candidate matched."""
    
    BINDINGS = [("escape", "close", "Close")]
    
    CSS = """
    MatchDetailModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.5);
    }
    
    #detail-dialog {
        width: 70%;
        height: 70%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
        layout: grid;
        grid-size: 1;
        grid-rows: auto 1fr auto;
    }
    
    #modal-header {
        text-style: bold;
        content-align: center middle;
        background: $secondary;
        color: $text;
        padding: 1;
        margin-bottom: 1;
    }

    #detail-content {
        height: 100%;
        scrollbar-gutter: stable;
    }
    
    #close-btn {
        dock: bottom;
        width: 100%;
        margin-top: 1;
    }
    """
    
    def __init__(self, result: MatchResult) -> None:
        super().__init__()
        self._result = result
        
    def compose(self) -> ComposeResult:
        candidate = self._result.candidate
        title = candidate.display_name if candidate else self._result.candidate_id
        
        with Vertical(id="detail-dialog"):
            yield Static(title, id="modal-header")
            yield RichLog(id="detail-content", highlight=True, markup=True)
            yield Button("Close", id="close-btn", variant="primary")
            
    def on_mount(self) -> None:
        output = self.query_one("#detail-content", RichLog)
        self._render_details(output)
        
    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "close-btn":
            self.dismiss()
            
    def action_close(self) -> None:
        self.dismiss()

    def _render_details(self, output: RichLog) -> None:
        r = self._result
        candidate = r.candidate
        
        if candidate and candidate.location:
            output.write(f"[dim]Location: {candidate.location}[/dim]")
            output.write("")
        
        style = compatibility_style(r.compatibility)
        output.write(f"[{style}]Compatibility: {r.compatibility}% ({r.tier})[/{style}]")
        output.write(f"  Interests (70%): {r.interest_score:.1f}%")
        output.write(f"  Communities (30%): {r.community_score:.1f}%")
        output.write("")
        
        output.write(f"[bold]Shared interests ({len(r.shared_interests)}):[/bold]")
        for label in sorted(r.shared_interests) or ["none"]:
            output.write(f"  • {label}")
        output.write("")
        
        output.write(f"[bold]Shared communities ({len(r.shared_communities)}):[/bold]")
        for label in sorted(r.shared_communities) or ["none"]:
            output.write(f"  • {label}")
