"""CLI commands for the question store.

Commands:
- init: Create the database file and seed question
- list: List all questions
- show: Show one question with its options
- delete: Delete a question
- serve: Run the Web API with uvicorn
"""

from pathlib import Path
from typing import NoReturn

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from quizstore.config.app_config import ConfigError, load_app_config
from quizstore.core.models import Question
from quizstore.core.question_service import QuestionService
from quizstore.db.errors import (
    NotFoundError,
    PersistenceError,
    SchemaInitializationError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="quizstore",
    help="Quiz question store backed by SQLite.",
    no_args_is_help=True,
)

console = Console()


def _load_service(db_path: Path | None) -> QuestionService:
    """Build a service from config, or exit with a readable error."""
    try:
        config = load_app_config()
    except ConfigError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    return QuestionService(db_path or config.database.path, seed=config.seed)


def _print_question(question: Question) -> None:
    console.print(f"  [bold]#{question.id}[/bold] {escape(question.body)}")
    for position, option in enumerate(question.options):
        mark = "[green]✓[/green]" if option.correct else "[dim]·[/dim]"
        console.print(f"    {position}) {mark} {escape(option.body)} [dim](option {option.id})[/dim]")


def _exit_on_store_error(e: Exception) -> NoReturn:
    if isinstance(e, (NotFoundError, ValidationError)):
        console.print(f"[yellow]⚠ {e}[/yellow]")
    else:
        console.print(f"[red]✗ {e}[/red]")
    raise typer.Exit(code=1)


@app.command()
def init(
    db_path: Path | None = typer.Option(
        None, "--db", help="Path to database file (overrides config)"
    ),
) -> None:
    """Create the database and seed question if the file is new."""
    service = _load_service(db_path)

    try:
        created = service.initialize()
    except SchemaInitializationError as e:
        logger.critical("cli.schema_failed", path=str(service.db_path), error=str(e))
        console.print(f"[red]✗ No se pudo crear el esquema: {e}[/red]")
        raise typer.Exit(code=1)
    except PersistenceError as e:
        _exit_on_store_error(e)

    if created:
        console.print(f"[green]✓ Base de datos creada:[/green] {service.db_path}")
    else:
        console.print(f"[dim]Base de datos existente:[/dim] {service.db_path}")


@app.command(name="list")
def list_questions(
    db_path: Path | None = typer.Option(
        None, "--db", help="Path to database file (overrides config)"
    ),
) -> None:
    """List all questions."""
    service = _load_service(db_path)

    try:
        service.initialize()
        questions = service.get_all_questions()
    except PersistenceError as e:
        _exit_on_store_error(e)

    if not questions:
        console.print("[yellow]No hay preguntas[/yellow]")
        return

    console.print(f"\n[bold]Preguntas ({len(questions)}):[/bold]\n")
    for question in questions:
        _print_question(question)
        console.print()


@app.command()
def show(
    question_id: str = typer.Argument(..., help="Question id"),
    db_path: Path | None = typer.Option(
        None, "--db", help="Path to database file (overrides config)"
    ),
) -> None:
    """Show one question with its options in order."""
    service = _load_service(db_path)

    try:
        service.initialize()
        question = service.get_question(question_id)
    except (NotFoundError, ValidationError, PersistenceError) as e:
        _exit_on_store_error(e)

    _print_question(question)


@app.command()
def delete(
    question_id: str = typer.Argument(..., help="Question id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    db_path: Path | None = typer.Option(
        None, "--db", help="Path to database file (overrides config)"
    ),
) -> None:
    """Delete a question and all of its options."""
    service = _load_service(db_path)

    try:
        service.initialize()
        question = service.get_question(question_id)
    except (NotFoundError, ValidationError, PersistenceError) as e:
        _exit_on_store_error(e)

    if not yes:
        _print_question(question)
        if not typer.confirm("¿Borrar esta pregunta?"):
            console.print("[dim]Cancelado[/dim]")
            return

    try:
        service.delete_question(question)
    except (NotFoundError, PersistenceError) as e:
        _exit_on_store_error(e)

    console.print(f"[green]✓ Pregunta #{question.id} borrada[/green]")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (overrides config)"),
    port: int | None = typer.Option(None, "--port", help="Port (overrides config/PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the Web API."""
    import uvicorn

    try:
        config = load_app_config()
    except ConfigError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    bind_host = host or config.server.host
    bind_port = port or config.server.port
    logger.info("cli.serve", host=bind_host, port=bind_port)

    uvicorn.run(
        "quizstore.web.api:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
    )


def main() -> None:
    """Console script entry point."""
    app()
