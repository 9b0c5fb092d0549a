"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Book


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Book Search", style="bold cyan")
    subtitle = Text("Bookseller API • JSON / XML", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_books_table(books: Sequence[Book], *, title: str = "Books") -> Table:
    """Crea una tabla Rich con un libro por fila, en el orden recibido."""

    table = Table(title=title)
    table.add_column("Title", style="cyan")
    table.add_column("Author", style="white")
    table.add_column("ISBN", style="magenta", no_wrap=True)
    table.add_column("Qty", style="green", justify="right")
    table.add_column("Price", style="yellow", justify="right")
    for book in books:
        table.add_row(
            book.title,
            book.author,
            book.isbn,
            str(book.quantity),
            f"{book.price:.2f}",
        )
    return table


def build_error_panel(exc: BaseException) -> Panel:
    """Panel para mostrar un fallo de la consulta."""

    body = Text()
    body.append(f"{type(exc).__name__}: ", style="bold")
    body.append(str(exc) or repr(exc))
    return Panel(body, title=Text("Request failed", style="bold red"), border_style="red")
