"""
Interface de linha de comando
"""
import argparse
import asyncio
from typing import List, Optional

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm, Prompt
from rich.table import Table

from ..application.services import SearchForm
from ..domain.models import Error
from ..infrastructure.config import Config
from ..infrastructure.factory import SearchFormFactory
from ..infrastructure.logging import configure_logging
from .view_model import TIP, ItineraryView, SearchView, build_view


class SkyPathCLI:
    """Interface CLI para o SkyPath"""

    def __init__(self, config: Config = None, console: Console = None, form: SearchForm = None):
        self.config = config or Config()
        self.console = console or Console()
        self.form = form or SearchFormFactory.create(self.config)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Executa a interface CLI; retorna o código de saída"""
        args = self._parse_arguments(argv)
        if args.api_url or args.locale:
            self.config = Config(api_url=args.api_url, locale=args.locale)
            self.form = SearchFormFactory.create(self.config)
        configure_logging(self.config.get_log_level())

        if args.check_health:
            return self._check_health()

        self.form.update(origin=args.origin, destination=args.destination, date=args.date)

        if not args.interactive:
            return self._search_once()

        exit_code = 0
        while True:
            self._prompt_fields()
            exit_code = self._search_once()
            if not Confirm.ask("Search again?", console=self.console, default=False):
                return exit_code

    def _parse_arguments(self, argv: Optional[List[str]]) -> argparse.Namespace:
        """Configura e processa argumentos da linha de comando"""
        parser = argparse.ArgumentParser(
            prog="skypath",
            description="SkyPath Flight Search - direct, 1-stop and 2-stop itineraries",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  skypath --origin JFK --destination LAX --date 2024-03-15
  skypath --origin SFO --destination NRT --date 2024-03-15 --locale en-GB
  skypath --interactive
            """
        )

        parser.add_argument("--origin", default=self.form.origin,
                            help="Origin IATA code (e.g. JFK)")
        parser.add_argument("--destination", default=self.form.destination,
                            help="Destination IATA code (e.g. LAX)")
        parser.add_argument("--date", default=self.form.date,
                            help="Departure date YYYY-MM-DD")
        parser.add_argument("--interactive", action="store_true",
                            help="Prompt for the form fields")
        parser.add_argument("--api-url",
                            help="Search service base URL (overrides SKYPATH_API_URL)")
        parser.add_argument("--locale",
                            help="Locale for prices (e.g. en-US, de-DE)")
        parser.add_argument("--check-health", action="store_true",
                            help="Check the search service and exit")

        return parser.parse_args(argv)

    def _prompt_fields(self):
        """Pergunta os campos até o botão de busca ficar habilitado"""
        while True:
            self.form.update(
                origin=Prompt.ask("Origin", console=self.console, default=self.form.origin),
                destination=Prompt.ask("Destination", console=self.console, default=self.form.destination),
                date=Prompt.ask("Date", console=self.console, default=self.form.date),
            )
            if self.form.can_search:
                return
            self.console.print("[dim]Search is disabled: codes need 3 characters and the date YYYY-MM-DD.[/dim]")

    def _search_once(self) -> int:
        """Envia o formulário mostrando o spinner enquanto carrega"""
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            progress.add_task("Searching…", total=None)
            state = asyncio.run(self.form.submit())

        self.render(build_view(self.form, self.config.DEFAULT_LOCALE))
        return 1 if isinstance(state, Error) else 0

    def _check_health(self) -> int:
        ok = asyncio.run(self.form.check_health())
        if ok:
            self.console.print(f"[green]Search service is up[/green] ({self.config.SKYPATH_API_URL})")
            return 0
        self.console.print(f"[red]Search service is unreachable[/red] ({self.config.SKYPATH_API_URL})")
        return 1

    def render(self, view: SearchView):
        """Exibe a visão derivada do estado atual"""
        self.console.rule("SkyPath Flight Search")

        if view.error:
            self.console.print(Panel.fit(f"[red]{escape(view.error)}[/red]", title="Error", border_style="red"))

        if view.empty_message:
            self.console.print(
                Panel.fit(f"[yellow]{view.empty_message}[/yellow]", title="No Results", border_style="yellow")
            )

        if view.itineraries:
            self.console.print(f"[bold]{view.results_title}[/bold]")
            for idx, itinerary in enumerate(view.itineraries, start=1):
                self.console.print(self._itinerary_panel(idx, itinerary))

        self.console.print(f"[dim]Tip: {TIP}[/dim]")

    def _itinerary_panel(self, idx: int, itinerary: ItineraryView) -> Panel:
        head = (
            f"[bold]Total duration:[/bold] {itinerary.duration}   "
            f"[bold]Total price:[/bold] [green]{itinerary.price}[/green]   "
            f"[bold]Stops:[/bold] {itinerary.stops}"
        )

        table = Table(show_header=False, show_lines=True, expand=True)
        table.add_column("#", justify="right", width=3)
        table.add_column("Segment")
        for i, segment in enumerate(itinerary.segments, start=1):
            lines = [f"[yellow]{escape(segment.title)}[/yellow]", f"[dim]{escape(segment.details)}[/dim]"]
            if segment.layover:
                lines.append(f"[cyan]{escape(segment.layover)}[/cyan]")
            table.add_row(str(i), "\n".join(lines))

        return Panel(Group(head, table), title=f"Itinerary {idx}", border_style="blue")


def main(argv: Optional[List[str]] = None) -> int:
    """Função principal"""
    cli = SkyPathCLI()
    return cli.run(argv)


if __name__ == "__main__":
    raise SystemExit(main())
