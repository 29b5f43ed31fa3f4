# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from itinerary.color import CONFIRMED_COLOR, PENDING_COLOR
from itinerary.model.trip import Participant, TripLink
from itinerary.view.views.header import header


def links_table(links: list[TripLink]) -> Table:
    table = Table(title="Links importantes", box=box.SIMPLE, title_justify="left")
    table.add_column("título")
    table.add_column("url", style="cyan")
    for link in links:
        table.add_row(link["title"], link["url"])
    return table


def participants_table(participants: list[Participant]) -> Table:
    table = Table(title="Convidados", box=box.SIMPLE, title_justify="left")
    table.add_column("nome")
    table.add_column("e-mail")
    table.add_column("status")
    for index, participant in enumerate(participants):
        name = participant["name"] or f"Convidado {index}"
        status = (
            f"[{CONFIRMED_COLOR}]confirmado[/{CONFIRMED_COLOR}]"
            if participant["is_confirmed"]
            else f"[{PENDING_COLOR}]pendente[/{PENDING_COLOR}]"
        )
        table.add_row(name, participant["email"], status)
    return table


def links_view(links: list[TripLink], trip_when: str) -> None:
    header("links", trip_when)

    console = Console()
    if len(links) == 0:
        console.print("[bright_black]Nenhum link adicionado.[/bright_black]")
        return
    console.print(links_table(links))


def participants_view(participants: list[Participant], trip_when: str) -> None:
    header("convidados", trip_when)

    console = Console()
    if len(participants) == 0:
        console.print("[bright_black]Nenhum convidado.[/bright_black]")
        return
    console.print(participants_table(participants))


def trip_details_view(
    trip_when: str, links: list[TripLink], participants: list[Participant]
) -> None:
    header("viagem", trip_when)

    console = Console()
    if len(links) == 0:
        console.print("[bright_black]Nenhum link adicionado.[/bright_black]")
    else:
        console.print(links_table(links))
    if len(participants) == 0:
        console.print("[bright_black]Nenhum convidado.[/bright_black]")
    else:
        console.print(participants_table(participants))
