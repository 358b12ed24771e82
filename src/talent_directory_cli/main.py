"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession

from talent_directory_core.config.settings import Settings
from talent_directory_core.exceptions import CandidateNotFoundError
from talent_directory_core.interfaces import CandidateSource
from talent_directory_core.models.candidate import CandidateFields, CandidateRecord
from talent_directory_core.models.query import FilterQuery
from talent_directory_engine.directory import CandidateDirectory
from talent_directory_engine.observability import bind_command_context, configure_logging
from talent_directory_infra.db.repositories.candidate_repo import CandidateRepository
from talent_directory_infra.db.session import create_engine, init_db, session_scope

app = typer.Typer(
    name="talent-directory",
    help="Ranked, filterable directory of job candidates",
)
console = Console()
logger = structlog.get_logger()


def _setup(command: str, verbose: bool) -> Settings:
    settings = Settings()
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    bind_command_context(command)
    return settings


@app.command("init-db")
def init_db_command(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Create the candidate table if it does not exist."""
    settings = _setup("init-db", verbose)
    asyncio.run(_init(settings))
    console.print(f"[bold green]Database ready:[/bold green] {settings.database_url}")


@app.command()
def add(
    nombre: str = typer.Argument(..., help="Candidate full name"),
    email: str | None = typer.Option(None, "--email"),
    telefono: str | None = typer.Option(None, "--telefono"),
    categoria: str | None = typer.Option(None, "--categoria"),
    area: str | None = typer.Option(None, "--area"),
    job_title: str | None = typer.Option(None, "--job-title"),
    skills: str | None = typer.Option(None, "--skills", help="Comma-separated skills"),
    video_link: str | None = typer.Option(None, "--video-link"),
    reel_link: str | None = typer.Option(None, "--reel-link"),
    portfolio_link: str | None = typer.Option(None, "--portfolio-link"),
    linkedin_link: str | None = typer.Option(None, "--linkedin-link"),
    experiencia: str | None = typer.Option(None, "--experiencia"),
    educacion: str | None = typer.Option(None, "--educacion"),
    notas: str | None = typer.Option(None, "--notas"),
    score: str | None = typer.Option(None, "--score", help="Score 0-10"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Add a candidate to the directory."""
    settings = _setup("add", verbose)
    try:
        fields = CandidateFields(
            nombre=nombre,
            email=email,
            telefono=telefono,
            categoria=categoria,
            area=area,
            job_title=job_title,
            skills=skills,
            video_link=video_link,
            reel_link=reel_link,
            portfolio_link=portfolio_link,
            linkedin_link=linkedin_link,
            experiencia=experiencia,
            educacion=educacion,
            notas=notas,
            score=score,
        )
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        console.print(f"[red]Error:[/red] invalid candidate: {reason}", style="bold")
        raise typer.Exit(code=1) from exc
    record = asyncio.run(_create(settings, fields))
    console.print(f"[bold green]Candidate created:[/bold green] {record.id}")


@app.command("list")
def list_command(
    categoria: str | None = typer.Option(None, "--categoria", help="Exact categoria"),
    area: str | None = typer.Option(None, "--area", help="Exact area"),
    job_title: str | None = typer.Option(None, "--job-title", help="Exact job title"),
    skills: str | None = typer.Option(None, "--skills", help="Skill substring"),
    search: str | None = typer.Option(None, "--search", help="Free-text search"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """List eligible candidates in rank order, optionally filtered."""
    settings = _setup("list", verbose)
    query = FilterQuery(
        categoria=categoria, area=area, job_title=job_title, skills=skills, search=search
    )
    directory = asyncio.run(_load(settings))
    matches = directory.search(query)

    if as_json:
        console.print_json(data=[record.to_public() for record in matches])
        return

    console.print(_candidates_table(matches, title=f"Candidates ({len(matches)})"))


@app.command()
def top(
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Show the top candidates grouped by category."""
    settings = _setup("top", verbose)
    directory = asyncio.run(_load(settings))
    sections = directory.highlights()

    if as_json:
        console.print_json(data=[section.to_public() for section in sections])
        return

    if not sections:
        console.print("[yellow]No eligible candidates[/yellow]")
        return
    for section in sections:
        console.print(
            _candidates_table(section.members, title=f"{section.label} ({len(section.members)})")
        )


@app.command()
def show(
    candidate_id: int = typer.Argument(..., help="Candidate ID"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Show one candidate."""
    settings = _setup("show", verbose)
    directory = asyncio.run(_load(settings))
    try:
        record = directory.get(candidate_id)
    except CandidateNotFoundError as exc:
        console.print(f"[red]Error:[/red] {exc}", style="bold")
        raise typer.Exit(code=1) from exc

    if as_json:
        console.print_json(data=record.to_public())
        return

    table = Table(title=record.nombre, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for key, value in record.to_public().items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(key, "" if value is None else str(value))
    console.print(table)


@app.command()
def filters(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Show the distinct values available for filtering."""
    settings = _setup("filters", verbose)
    options = asyncio.run(_load(settings)).filter_options()
    console.print(f"[bold]Categorías:[/bold] {', '.join(options.categorias)}")
    console.print(f"[bold]Áreas:[/bold] {', '.join(options.areas)}")
    console.print(f"[bold]Job titles:[/bold] {', '.join(options.job_titles)}")
    console.print(f"[bold]Skills:[/bold] {', '.join(options.skills)}")


@app.command()
def version() -> None:
    """Show version."""
    console.print("talent-directory v0.1.0")


def _candidates_table(records: list[CandidateRecord], title: str) -> Table:
    """Render records as a rich table in the given order."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("ID", justify="right")
    table.add_column("Nombre")
    table.add_column("Categoría")
    table.add_column("Job title")
    table.add_column("Score", justify="right")
    table.add_column("Skills")
    for position, record in enumerate(records, start=1):
        table.add_row(
            str(position),
            str(record.id),
            record.nombre,
            record.categoria or "",
            record.job_title or "",
            "" if record.score is None else f"{record.score:g}",
            ", ".join(record.skills),
        )
    return table


def _source(session: AsyncSession) -> CandidateSource:
    """Candidate source backed by the given session."""
    return CandidateRepository(session)


async def _init(settings: Settings) -> None:
    """Create tables on the configured database."""
    engine = create_engine(settings)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()


async def _create(settings: Settings, fields: CandidateFields) -> CandidateRecord:
    """Insert one candidate and commit."""
    async with session_scope(settings) as session:
        record = await _source(session).create(fields)
        await session.commit()
    logger.info("candidate_created", candidate_id=record.id)
    return record


async def _load(settings: Settings) -> CandidateDirectory:
    """Snapshot the full candidate collection from storage."""
    async with session_scope(settings) as session:
        return await CandidateDirectory.from_source(_source(session))


if __name__ == "__main__":
    app()
