"""Localized console messages."""

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from specment.locales import Language, translate
from specment.ui.theme import THEME, Symbols

console = Console(theme=THEME, highlight=False)


def success(message: str) -> None:
    console.print(f"[success]{Symbols.SUCCESS}[/] {escape(message)}")


def warning(message: str) -> None:
    console.print(f"[warning]{Symbols.WARNING}[/]  {escape(message)}")


def error(message: str) -> None:
    console.print(f"[error]{Symbols.ERROR}[/] {escape(message)}")


def info(message: str) -> None:
    console.print(f"[info]{Symbols.INFO}[/]  {escape(message)}")


def step(message: str) -> None:
    console.print(f"\n[step]{Symbols.STEP} {escape(message)}[/]")


def sub_step(message: str) -> None:
    console.print(f"  [text.dim]{Symbols.BULLET} {escape(message)}[/]")


def welcome(language: Language) -> None:
    console.print(Panel.fit(
        f"[title]{translate(language, 'welcome_title')}[/]",
        border_style="green",
    ))
    console.print(translate(language, "welcome_body") + "\n")


def note(title: str, lines: Iterable[str]) -> None:
    body = "\n".join(f"{Symbols.BULLET} {escape(line)}" for line in lines)
    console.print(Panel(body or "-", title=title, title_align="left", border_style="text.dim"))


def choice_table(rows: Iterable[tuple], title: Optional[str] = None) -> None:
    """Numbered table of (value, label, hint) choices."""
    table = Table(title=title, show_header=False, box=None, padding=(0, 1))
    table.add_column("#", style="accent", justify="right")
    table.add_column("Name", style="title")
    table.add_column("Description")
    for index, (value, label, hint) in enumerate(rows, start=1):
        table.add_row(str(index), escape(f"{label} ({value})"), escape(hint or ""))
    console.print(table)


def install_start(language: Language, package_manager: str) -> None:
    step(translate(language, "install_start", value=package_manager))
    console.print(f"[text.dim]{translate(language, 'install_hint')}[/]")


def install_remediation(language: Language, key: str, project_name: str, command: str) -> None:
    warning(translate(language, key))
    console.print(f"[text.dim]  cd {project_name}[/]")
    console.print(f"[text.dim]  {command}[/]")


def completion(project_name: str, language: Language, package_manager: str = "npm") -> None:
    run = "npm run" if package_manager == "npm" else package_manager
    console.print()
    console.print(f"[success]{translate(language, 'completion_title')}[/]\n")
    console.print(f"[info]{translate(language, 'next_steps')}[/]")
    console.print(f"[text.dim]  cd {project_name}[/]")
    console.print(f"[text.dim]  {package_manager} install    # {translate(language, 'next_install')}[/]")
    console.print(f"[text.dim]  {run} start    # {translate(language, 'next_start')}[/]")
    console.print(f"[text.dim]  {run} build    # {translate(language, 'next_build')}[/]")
    console.print(f"\n[accent]{translate(language, 'happy')}[/]")


def conflicts_table(conflicts, language: Language) -> None:
    table = Table(title=translate(language, "conflicts_title"))
    table.add_column("Path", style="accent")
    table.add_column("Existing")
    table.add_column("Incoming")
    table.add_column("Resolution")
    table.add_column("Reason", style="text.dim")
    for conflict in conflicts:
        table.add_row(
            escape(conflict.path),
            escape(str(conflict.existing)),
            escape(str(conflict.incoming)),
            conflict.resolution,
            escape(conflict.reason),
        )
    console.print(table)
