"""
Rich renderings of sets and relations for terminal output
"""
from typing import Union

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .hashset import HashSet
from .relation import Relation


def set_text(s: HashSet) -> Text:
    """
    Return the set's textual form with its braces highlighted
    The empty set is shown as Ø
    """
    if s.is_empty():
        return Text("Ø", 'bold')
    text = Text("{", 'bold')
    for i, element in enumerate(s):
        if i:
            text.append(", ")
        text.append(repr(element))
    text.append("}", 'bold')
    return text


def relation_table(relation: Relation) -> Table:
    """
    Return a two column table with one row per pair, in insertion order
    """
    table = Table(row_styles=['', 'bold on grey85'])
    table.add_column('first')
    table.add_column('second')
    for pair in relation:
        table.add_row(Text(repr(pair.first)), Text(repr(pair.second)))
    return table


def rich_to_str(text: Union[Text, Table, str], end='\n') -> str:
    """
    Returns directly printable string corresponding to a text
    Applies style formatting and word wrapping automatically
    """
    console = Console()
    with console.capture() as capture:
        console.print(text, end=end)
    return capture.get()
