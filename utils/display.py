from collections.abc import Set

from rich.console import Console
from rich.table import Table
from rich.text import Text

from constants import HIGHLIGHT_COLOR
from localtypes import Clique, Party, PersonId
from party import party_ids

console = Console()


def format_clique(clique: Set[PersonId]) -> str:
    """
    The result line, e.g. "{1, 2, 3} is the celebrity clique."
    """
    if not clique:
        return "There is no celebrity clique."
    members = ", ".join(str(person_id) for person_id in sorted(clique))
    return f"{{{members}}} is the celebrity clique."


def party_to_table(party: Party, clique: Clique = frozenset()) -> Table:
    """One row per guest, celebrities highlighted."""
    present = set(party_ids(party))
    celebrities = {person.id for person in clique}

    table = Table(title="Party")
    table.add_column("Person", justify="right")
    table.add_column("Knows")
    table.add_column("Not at the party")

    for person in sorted(party, key=lambda p: p.id):
        known = sorted(person.known_people & present)
        absent = sorted(person.known_people - present)
        style = f"bold {HIGHLIGHT_COLOR}" if person.id in celebrities else ""
        table.add_row(
            Text(str(person.id), style=style),
            ", ".join(map(str, known)),
            ", ".join(map(str, absent)),
        )
    return table


def display_party(party: Party, clique: Clique = frozenset()):
    console.print(party_to_table(party, clique))


def display_clique(clique: Clique):
    console.print(format_clique({person.id for person in clique}), highlight=False)


def display_components(components: Set[Set[PersonId]]):
    console.print("Strong components:")
    for i, component in enumerate(sorted(components, key=min)):
        console.print(f"Component n°{i}: {sorted(component)}", markup=False, highlight=False)
