"""
Typer CLI for the SkillQuest engine.

Commands:
    skillquest games                     - List the game catalog
    skillquest play GAME_ID ANSWERS      - Grade a submission and update progress
    skillquest path                      - Show skill gaps, recommendations and weekly plan
    skillquest stats                     - Show skill heatmap and score trends

Usage:
    skillquest --help
    skillquest games --dir data/games
    skillquest play quiz-dsa-basics '["O(log n)", true, "stack"]' --time 45
    skillquest path --json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config import get_settings
from skillquest.adaptive import build_learning_path_report
from skillquest.adaptive.gap_analyzer import GapThresholds
from skillquest.adaptive.path_generator import PathConfig
from skillquest.adaptive.recommender import RecommenderConfig
from skillquest.analytics import learner_summary
from skillquest.core.errors import ValidationError
from skillquest.games.catalog import find_game, load_catalog
from skillquest.games.engine import process_result
from skillquest.learning import LearnerProgress, apply_result

app = typer.Typer(
    help="SkillQuest: gamified skill assessment and adaptive learning paths",
    no_args_is_help=True,
)

console = Console()

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}"


@app.callback()
def main_callback(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the configured log level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """Grade games, track skills and plan what to play next."""
    settings = get_settings()
    level = (log_level or settings.log_level).upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if settings.log_file:
        logger.add(settings.log_file, level=level, rotation="10 MB", retention=5)


# ========================================
# File helpers
# ========================================


def _games_dir(directory: Path | None) -> Path:
    return directory or Path(get_settings().games_dir)


def _progress_path(path: Path | None) -> Path:
    return path or Path(get_settings().progress_file)


def _load_progress(path: Path) -> LearnerProgress:
    """Read learner progress, starting a fresh profile if the file doesn't exist yet."""
    if not path.exists():
        logger.info(f"No progress file at {path}, starting a new profile")
        return LearnerProgress.create()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        rprint(f"[red]✗[/red] Could not read progress file {path}: {e}")
        raise typer.Exit(code=1)

    try:
        return LearnerProgress.from_dict(data)
    except ValidationError as e:
        rprint(f"[red]✗[/red] Invalid progress file {path}: {e}")
        raise typer.Exit(code=1)


def _save_progress(path: Path, progress: LearnerProgress) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(progress.to_dict(), indent=2), encoding="utf-8")
    logger.debug(f"Saved progress to {path}")


def _parse_answers(raw: str) -> Any:
    """Answers are given inline as JSON, or as @path to a JSON file."""
    try:
        if raw.startswith("@"):
            return json.loads(Path(raw[1:]).read_text(encoding="utf-8"))
        return json.loads(raw)
    except (OSError, json.JSONDecodeError) as e:
        rprint(f"[red]✗[/red] Could not parse answers: {e}")
        raise typer.Exit(code=1)


def _print_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, default=str))


# ========================================
# GAME COMMANDS
# ========================================


@app.command("games")
def list_games(
    directory: Path | None = typer.Option(None, "--dir", "-d", help="Game template directory"),
) -> None:
    """List the games in the catalog."""
    games_dir = _games_dir(directory)
    catalog = load_catalog(games_dir)

    if not catalog:
        rprint(f"[yellow]No games found in {games_dir}[/yellow]")
        return

    table = Table(title=f"Game Catalog ({len(catalog)} games)")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Type")
    table.add_column("Difficulty")
    table.add_column("Skills")
    table.add_column("Items", justify="right")
    table.add_column("XP", justify="right")

    for game in catalog:
        table.add_row(
            game.game_id,
            game.title or "-",
            game.type.value,
            game.difficulty.value,
            ", ".join(game.skills_tagged) or "-",
            str(len(game.items)),
            str(game.xp_reward),
        )

    console.print(table)


@app.command("play")
def play(
    game_id: str = typer.Argument(..., help="Game id from the catalog"),
    answers: str = typer.Argument(..., help="Answers as a JSON list, or @file.json"),
    time_spent: float = typer.Option(0.0, "--time", "-t", help="Seconds taken"),
    progress_file: Path | None = typer.Option(None, "--progress", "-p", help="Learner progress JSON file"),
    directory: Path | None = typer.Option(None, "--dir", "-d", help="Game template directory"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Grade a submission and fold it into the learner's progress."""
    catalog = load_catalog(_games_dir(directory))
    game = find_game(catalog, game_id)
    if game is None:
        rprint(f"[red]✗[/red] Game not found: {game_id}")
        raise typer.Exit(code=1)

    submitted = _parse_answers(answers)
    try:
        result = process_result(game, submitted, time_spent)
    except ValidationError as e:
        rprint(f"[red]✗[/red] Invalid submission: {e}")
        raise typer.Exit(code=1)

    path = _progress_path(progress_file)
    progress = apply_result(_load_progress(path), game, result)
    _save_progress(path, progress)

    if as_json:
        _print_json({"result": result.to_dict(), "progress": progress.to_dict()})
        return

    table = Table(title=f"{game.title or game.game_id}")
    table.add_column("#", justify="right")
    table.add_column("Item", style="cyan")
    table.add_column("Answer")
    table.add_column("Expected")
    table.add_column("Result")

    for index, outcome in enumerate(result.items, start=1):
        table.add_row(
            str(index),
            str(outcome.item_id),
            escape(str(outcome.user_answer)),
            escape(str(outcome.expected)),
            "[green]✓[/green]" if outcome.is_correct else "[red]✗[/red]",
        )

    console.print(table)
    rprint(
        f"Score [bold]{result.score}[/bold]  Accuracy [bold]{result.accuracy}%[/bold]  "
        f"XP [bold]+{result.xp_earned}[/bold]  Time bonus {result.time_bonus}"
    )
    rprint(f"[italic]{result.feedback}[/italic]")
    rprint(
        f"Level {progress.level}  Total XP {progress.xp}  Streak {progress.streak}  "
        f"Employability {progress.employability_score}"
    )


# ========================================
# LEARNING COMMANDS
# ========================================


@app.command("path")
def learning_path(
    progress_file: Path | None = typer.Option(None, "--progress", "-p", help="Learner progress JSON file"),
    directory: Path | None = typer.Option(None, "--dir", "-d", help="Game template directory"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Show skill gaps, recommended games and a weekly plan."""
    settings = get_settings()
    progress = _load_progress(_progress_path(progress_file))
    catalog = load_catalog(_games_dir(directory))

    report = build_learning_path_report(
        progress,
        catalog,
        thresholds=GapThresholds.from_settings(settings),
        recommender_config=RecommenderConfig.from_settings(settings),
        path_config=PathConfig.from_settings(settings),
    )

    if as_json:
        _print_json(report.to_dict())
        return

    rprint(
        f"Level [bold]{report.current_level}[/bold] -> target [bold]{report.target_level}[/bold] "
        f"in about {report.estimated_weeks} weeks"
    )

    if report.skill_gaps:
        gaps_table = Table(title="Skill Gaps")
        gaps_table.add_column("Skill", style="cyan")
        gaps_table.add_column("Accuracy", justify="right")
        gaps_table.add_column("Attempts", justify="right")
        gaps_table.add_column("Priority", justify="right")
        for gap in report.skill_gaps:
            gaps_table.add_row(
                gap.skill,
                f"{gap.current_accuracy:.1f}%",
                str(gap.current_attempts),
                f"{gap.priority:.1f}",
            )
        console.print(gaps_table)
    else:
        rprint("[green]No skill gaps. Keep it up![/green]")

    if report.recommendations:
        recs_table = Table(title="Recommended Games")
        recs_table.add_column("Game", style="cyan")
        recs_table.add_column("Difficulty")
        recs_table.add_column("For skill")
        recs_table.add_column("Relevance", justify="right")
        for rec in report.recommendations:
            recs_table.add_row(rec.game_id, rec.game.difficulty.value, rec.skill, f"{rec.relevance_score:.1f}")
        console.print(recs_table)

    for week in report.learning_path:
        rprint(f"\n[bold]Week {week.week}[/bold]: {week.focus}")
        for game in week.games:
            rprint(f"  • {game.game_id} ({game.difficulty.value})")
        for goal in week.goals:
            rprint(f"  [dim]- {goal}[/dim]")


@app.command("stats")
def stats(
    progress_file: Path | None = typer.Option(None, "--progress", "-p", help="Learner progress JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON"),
) -> None:
    """Show skill heatmap, proficiency and recent score trends."""
    progress = _load_progress(_progress_path(progress_file))
    summary = learner_summary(progress)

    if as_json:
        _print_json(summary)
        return

    rprint(
        f"XP {summary['xp']}  Level {summary['level']}  Streak {summary['streak']}  "
        f"Employability {summary['employability_score']}  Games {summary['total_games']}"
    )

    table = Table(title="Skill Heatmap")
    table.add_column("Skill", style="cyan")
    table.add_column("XP", justify="right")
    table.add_column("Accuracy", justify="right")
    table.add_column("Attempts", justify="right")
    table.add_column("Proficiency", justify="right")
    for row in summary["skill_heatmap"]:
        table.add_row(
            row["skill"], str(row["xp"]), f"{row['accuracy']:.1f}%", str(row["attempts"]), str(row["proficiency"])
        )
    console.print(table)

    if summary["score_trends"]:
        trends = Table(title="Score Trends (7 days)")
        trends.add_column("Date")
        trends.add_column("Average score", justify="right")
        for row in summary["score_trends"]:
            trends.add_row(row["date"], f"{row['average_score']:.1f}")
        console.print(trends)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
