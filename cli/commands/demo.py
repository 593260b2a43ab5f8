"""
Demo command: dispatch actions against an in-memory modal store
"""

import json
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tdux.core import DidEvent, Emitter, ShouldEvent, TduxError, TeardownPolicy

console = Console()

ACTION_VALUES = {
    "OPEN": True,
    "CLOSE": False,
}


class ModalApp(Emitter):
    """Example consumer: tracks which modals are open, keyed by modal id."""

    def __init__(self, store: Dict[int, bool], **kwargs) -> None:
        self.store = store
        super().__init__(
            {
                "OPEN": self._set_open,
                "CLOSE": self._set_open,
            },
            **kwargs,
        )

    def _set_open(self, event: ShouldEvent) -> Optional[bool]:
        previous_value = self.store.get(event.id)
        self.store[event.id] = event.value
        return previous_value


def _event_row(action: str, event: DidEvent) -> Dict:
    return {
        "action": action,
        "id": event.id,
        "value": event.value,
        "previous_value": event.previous_value,
    }


def demo_command(
    actions: List[str] = typer.Option(
        ["OPEN", "CLOSE"],
        "--action",
        "-a",
        help="Action to dispatch (repeatable), e.g. OPEN, CLOSE",
    ),
    modal_id: int = typer.Option(123, "--id", help="Modal id the actions apply to"),
    initial: bool = typer.Option(False, "--initial/--no-initial", help="Initial open state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Dispatch actions against the modal example store and show did-events.

    Examples:
        tdux demo
        tdux demo -a OPEN -a OPEN -a CLOSE
        tdux demo --id 7 --initial --json
    """
    store = {modal_id: initial}
    app = ModalApp(store, name="demo", teardown_policy=TeardownPolicy.ALL_SUBSCRIPTIONS)
    rows: List[Dict] = []

    for action in ACTION_VALUES:
        app.on(action).subscribe(lambda ev, action=action: rows.append(_event_row(action, ev)))

    try:
        for action in actions:
            name = action.upper()
            app.dispatch(name, ShouldEvent(id=modal_id, value=ACTION_VALUES.get(name, True)))
    except TduxError as e:
        if json_output:
            print(json.dumps({"error": str(e), "events": rows}))
        else:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    finally:
        app.destroy()

    if json_output:
        output = {
            "events": rows,
            "store": {str(k): v for k, v in store.items()},
        }
        print(json.dumps(output, indent=2))
    else:
        table = Table(title="Did Events")
        table.add_column("Action", style="green")
        table.add_column("Id", style="cyan", justify="right")
        table.add_column("Value", style="yellow")
        table.add_column("Previous", style="magenta")

        for row in rows:
            table.add_row(row["action"], str(row["id"]), str(row["value"]), str(row["previous_value"]))

        console.print(table)
        console.print(f"  Final state: [cyan]{modal_id}[/cyan] -> [yellow]{store[modal_id]}[/yellow]")

    raise typer.Exit(0)
