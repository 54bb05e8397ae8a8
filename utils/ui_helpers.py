import os
import json
from typing import Any, Dict, List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from outcomes import Outcome

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()

def print_record(text: str, record: Optional[Any] = None, title: str = "") -> None:
    """Print one book, author or user.
    - plain: the record's string form, or the not-found message
    - json: the record's to_dict() payload, or {"error": message}
    - rich: a Panel
    """
    mode = get_output_mode()

    if mode == "json":
        payload = record.to_dict() if record is not None else {"error": text}
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        style = "blue" if record is not None else "red"
        _console.print(Panel.fit(escape(text), title=title or None, border_style=style))
    else:
        print(text)

def print_listing(title: str, items: List[str], joined: str) -> None:
    """Print a list of titles or names.
    - plain: the comma separated line produced by LibraryManager
    - json: JSON array
    - rich: single column Table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(items, ensure_ascii=False))
    elif mode == "rich":
        if not items:
            _console.print(f"[yellow]{escape(joined)}[/]")
            return
        table = Table(title=title, header_style="bold cyan")
        table.add_column(title, style="white")
        for item in items:
            table.add_row(item)
        _console.print(table)
    else:
        print(joined)

def print_outcome(outcome: Outcome, subject: str = "", success: str = "") -> None:
    mode = get_output_mode()
    text = success if outcome.ok and success else outcome.message(subject)

    if mode == "json":
        print(json.dumps({"outcome": outcome.value, "message": text}, ensure_ascii=False))
    elif mode == "rich":
        color = "green" if outcome.ok else "red"
        _console.print(f"[{color}]{escape(text)}[/]")
    else:
        print(text)

def print_stats_result(stats: Dict[str, Any]) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = "\n".join(f"[bold]{key.replace('_', ' ').title()}:[/] {value}" for key, value in stats.items())
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        for key, value in stats.items():
            print(f"{key.replace('_', ' ').title()}: {value}")
