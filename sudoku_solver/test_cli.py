"""Tests for the command line and web front ends."""

import asyncio

from aiohttp.test_utils import TestClient, TestServer
from typer.testing import CliRunner

from .cli import EXIT_INVALID, EXIT_UNSOLVABLE, app, bind_address, build_app
from .config import Settings
from .reporter import pretty_board
from .puzzle import Puzzle

PUZZLE = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"
SOLUTION_ROWS = "\n".join(SOLUTION[i : i + 9] for i in range(0, 81, 9))
CONTRADICTORY = "12345678." + "........9" + "." * 63

runner = CliRunner()


def test_solve_inline_puzzle():
    result = runner.invoke(app, ["solve", "--puzzle", PUZZLE])
    assert result.exit_code == 0
    assert result.stdout.strip() == SOLUTION_ROWS


def test_solve_file_with_stats_and_pretty_output(tmp_path):
    path = tmp_path / "puzzle.txt"
    path.write_text(PUZZLE + "\n", encoding="utf-8")
    result = runner.invoke(app, ["solve", str(path), "--pretty", "--stats"])
    assert result.exit_code == 0
    assert "------+-------+------" in result.stdout
    assert "guesses=" in result.stdout


def test_invalid_puzzle_exits_with_invalid_code():
    result = runner.invoke(app, ["solve", "--puzzle", PUZZLE[:80]])
    assert result.exit_code == EXIT_INVALID
    assert "wrong size" in result.output


def test_unsolvable_puzzle_exits_with_failure_code():
    result = runner.invoke(app, ["solve", "--puzzle", CONTRADICTORY])
    assert result.exit_code == EXIT_UNSOLVABLE
    assert "no solution" in result.output


def test_remaining_puzzles_are_solved_after_a_failure(tmp_path):
    path = tmp_path / "puzzles.txt"
    path.write_text(CONTRADICTORY + "\n" + PUZZLE + "\n", encoding="utf-8")
    result = runner.invoke(app, ["solve", str(path)])
    assert result.exit_code == EXIT_UNSOLVABLE
    assert SOLUTION_ROWS in result.stdout


def test_missing_input_is_reported():
    result = runner.invoke(app, ["solve"])
    assert result.exit_code == EXIT_UNSOLVABLE


def test_pretty_board_formatting_contains_grid_lines():
    pretty = pretty_board(Puzzle(PUZZLE))
    assert pretty.splitlines()[0] == "5 3 . | . 7 . | . . ."
    assert pretty.count("\n") == 10


def _post_form(data):
    async def run():
        async with TestClient(TestServer(build_app())) as client:
            index = await client.get("/")
            assert index.status == 200
            response = await client.post("/solve", data=data)
            return response.status, await response.text()

    return asyncio.run(run())


def test_web_form_shows_solution():
    status, body = _post_form({"puzzle": PUZZLE})
    assert status == 200
    assert 'id="solution"' in body
    assert "guesses=" in body


def test_web_form_reports_invalid_puzzle():
    status, body = _post_form({"puzzle": "11" + "." * 79})
    assert status == 200
    assert "Initial puzzle has duplicates" in body
    assert 'id="solution"' not in body


def test_bind_address_prefers_command_line_values():
    settings = Settings(host="0.0.0.0", port=9000)
    assert bind_address(settings, None, None) == ("0.0.0.0", 9000)
    assert bind_address(settings, "127.0.0.1", 0) == ("127.0.0.1", 0)
    assert bind_address(settings, "", 8081) == ("", 8081)


def test_web_form_reports_unsolvable_puzzle():
    status, body = _post_form({"puzzle": "234567..." + "........1" + "." * 63})
    assert status == 200
    assert "No solution exists" in body
