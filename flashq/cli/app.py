import binascii
import json

import questionary
from rich.console import Console
from rich.table import Table

from flashq.codec import decode, encode

console = Console()


def _render_snapshot(snapshot: dict[str, list[str]]) -> Table:
    table = Table(title="Mensagens Flash")
    table.add_column("Tipo", style="cyan")
    table.add_column("#", justify="right")
    table.add_column("Mensagem")
    for type_, messages in snapshot.items():
        for index, message in enumerate(messages, start=1):
            table.add_row(type_, str(index), decode(message))
    return table


def decode_snapshot_menu() -> None:
    raw = questionary.text("Cole o JSON da tabela flash:").ask()
    if not raw:
        return
    try:
        snapshot = json.loads(raw)
    except json.JSONDecodeError as exc:
        console.print(f"[red]JSON inválido:[/red] {exc}")
        return
    if not isinstance(snapshot, dict):
        console.print("[red]Esperado um objeto {tipo: [mensagens]}.[/red]")
        return
    try:
        console.print(_render_snapshot(snapshot))
    except (binascii.Error, TypeError) as exc:
        console.print(f"[red]Mensagem não decodificável:[/red] {exc}")


def encode_message_menu() -> None:
    message = questionary.text("Mensagem:").ask()
    if message is None:
        return
    console.print(encode(message), style="green")


def main_menu() -> None:
    console.print()
    console.print("[bold]Inspetor de Mensagens Flash[/bold]", style="cyan")
    console.print()

    while True:
        choice = questionary.select(
            "Menu Principal",
            choices=[
                "Decodificar Tabela",
                "Codificar Mensagem",
                "Sair",
            ],
        ).ask()

        if choice is None or choice == "Sair":
            console.print("[bold]Até logo![/bold]")
            break
        elif choice == "Decodificar Tabela":
            decode_snapshot_menu()
        elif choice == "Codificar Mensagem":
            encode_message_menu()
