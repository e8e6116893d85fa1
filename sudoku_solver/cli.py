"""Command line entry point and small web UI for the Sudoku solver."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import typer
from aiohttp import web
from jinja2 import Environment, FileSystemLoader, select_autoescape

from . import solver
from .config import Settings, load_settings
from .errors import InvalidPuzzle
from .input_manager import read_puzzles
from .puzzle import Puzzle
from .reporter import format_stats, print_failure, print_solution

log = logging.getLogger(__name__)

app = typer.Typer(help="Solve 9x9 Sudoku puzzles by propagation and backtracking.")

BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_ENV = Environment(
    loader=FileSystemLoader(str(BASE_DIR)),
    autoescape=select_autoescape(),
)

EXIT_UNSOLVABLE = 1
EXIT_INVALID = 2


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command("solve")
def solve_command(
    path: Optional[Path] = typer.Argument(None, help="Puzzle file, or '-' for standard input."),
    puzzle: Optional[str] = typer.Option(None, "--puzzle", "-p", help="Puzzle text given inline."),
    pretty: bool = typer.Option(False, "--pretty", help="Draw separators between the boxes."),
    stats: bool = typer.Option(False, "--stats", help="Print search statistics after each solution."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every propagation pass and guess."),
) -> None:
    _configure_logging(load_settings(), verbose)

    sources: List[List[str]] = []
    if puzzle:
        sources.append([puzzle])
    if path is not None:
        try:
            sources.extend(read_puzzles(path))
        except OSError as exc:
            typer.echo(f"Cannot read {path}: {exc}", err=True)
            raise typer.Exit(code=EXIT_UNSOLVABLE)
    if not sources:
        typer.echo("Provide a puzzle file or --puzzle.", err=True)
        raise typer.Exit(code=EXIT_UNSOLVABLE)

    exit_code = 0
    for index, lines in enumerate(sources, start=1):
        if index > 1:
            typer.echo()
        try:
            grid = Puzzle(lines)
        except InvalidPuzzle as exc:
            print_failure(index, str(exc))
            exit_code = EXIT_INVALID
            continue

        result = solver.solve(grid)
        if isinstance(result, solver.NoSolution):
            print_failure(index, "no solution exists")
            exit_code = exit_code or EXIT_UNSOLVABLE
            continue
        print_solution(result.puzzle, pretty=pretty, stats=result.stats if stats else None)

    if exit_code:
        raise typer.Exit(code=exit_code)


def build_app() -> web.Application:
    """Create the web application serving the solver form."""
    template = TEMPLATE_ENV.get_template("ui_template.html")

    def render_page(puzzle_text: str = "", **context: object) -> web.Response:
        return web.Response(
            text=template.render(puzzle_text=puzzle_text, **context),
            content_type="text/html",
        )

    async def handle_index(_: web.Request) -> web.Response:
        return render_page()

    async def handle_solve(request: web.Request) -> web.Response:
        form = await request.post()
        puzzle_text = str(form.get("puzzle", ""))
        try:
            grid = Puzzle(puzzle_text)
        except InvalidPuzzle as exc:
            return render_page(puzzle_text, error=str(exc))

        result = await asyncio.to_thread(solver.solve, grid)
        if isinstance(result, solver.NoSolution):
            return render_page(puzzle_text, error="No solution exists for this puzzle.")

        log.info("Solved puzzle from web form (%s)", format_stats(result.stats))
        context: Dict[str, object] = {
            "solution_rows": result.puzzle.render().splitlines(),
            "givens": grid.givens(),
            "stats": format_stats(result.stats),
        }
        return render_page(puzzle_text, **context)

    web_app = web.Application()
    web_app.router.add_get("/", handle_index)
    web_app.router.add_post("/solve", handle_solve)
    return web_app


def bind_address(settings: Settings, host: Optional[str], port: Optional[int]) -> Tuple[str, int]:
    """Command line values win over the environment; port 0 asks the OS for one."""
    return (
        host if host is not None else settings.host,
        port if port is not None else settings.port,
    )


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Host interface for the UI."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port for the UI."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = load_settings()
    _configure_logging(settings, verbose)
    host, port = bind_address(settings, host, port)
    typer.echo(f"Open http://{host}:{port} in a browser to use the solver.")
    web.run_app(build_app(), host=host, port=port)


if __name__ == "__main__":
    app()
