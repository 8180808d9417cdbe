"""ABOUTME: CLI entry point for typecoverage commands.
ABOUTME: Provides analyze and types commands via Typer."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typecoverage.analysis import AnalysisResult, analyze_team, recommendations_frame
from typecoverage.analysis.dataclasses import RecommendationTier
from typecoverage.config import load_type_chart
from typecoverage.logs import init_logging
from typecoverage.roster import RosterError, parse_roster
from typecoverage.settings import settings
from typecoverage.utils.type_chart import TypeChart

app = typer.Typer(
    name="typecoverage",
    help="Roster type coverage analysis and type recommendations.",
    no_args_is_help=True,
)

console = Console()

_TIER_STYLES = {
    RecommendationTier.PRIMARY: "green",
    RecommendationTier.COMPLEMENTARY: "green",
    RecommendationTier.SECONDARY: "yellow",
}


def _load_chart(chart_path: Path | None) -> TypeChart:
    """Load the requested chart or exit with an error."""
    try:
        return load_type_chart(chart_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


def _format_types(types: list[str]) -> str:
    return ", ".join(types) if types else "None"


def _print_recommendations(result: AnalysisResult) -> None:
    """Print recommendations as a table colored by tier."""
    console.print("[bold]Recommended Types to Cover Remaining Weaknesses:[/]")
    if not result.recommended_types:
        console.print("None")
        return

    table = Table()
    table.add_column("Type")
    table.add_column("Coverage", justify="right")
    table.add_column("Weakness change", justify="right")
    table.add_column("Tier")
    for entry in result.recommended_types:
        style = _TIER_STYLES[entry.tier]
        table.add_row(entry.type, str(entry.coverage), f"{entry.weakness_change:+d}", str(entry.tier), style=style)
    console.print(table)


def _print_result(result: AnalysisResult) -> None:
    """Print the analysis section by section."""
    sections = [
        ("Your Team's Types:", result.team_types),
        ("Weaknesses (Defensive):", result.adjusted_weaknesses_defensive),
        ("Offensive Strengths:", result.team_offensive_strengths),
        ("Adjusted Weaknesses (After Offensive Coverage):", result.adjusted_weaknesses),
    ]
    for heading, types in sections:
        console.print(f"[bold]{heading}[/]")
        console.print(_format_types(types))

    if result.recommend:
        _print_recommendations(result)

    if result.grade is not None:
        console.print("[bold]Team Grade:[/]")
        console.print(str(result.grade))

    if result.shared_weaknesses:
        console.print("[bold]Warning:[/]")
        console.print(
            f"[red]Two or more of your Pokemon are weak to the following types: "
            f"{', '.join(result.shared_weaknesses)}[/]"
        )


@app.command()
def analyze(
    members: list[str] = typer.Argument(..., help='Up to three members, each like "fire, flying"'),
    combos: bool = typer.Option(settings.INCLUDE_COMBOS, "--combos", "-c", help="Also recommend type pairs"),
    strict: bool = typer.Option(
        settings.STRICT_SHARED_WEAKNESSES,
        "--strict",
        "-s",
        help="Reject recommendations sharing any weakness with a member",
    ),
    chart_path: Path | None = typer.Option(None, "--chart", help="YAML type chart replacing the built-in one"),
    as_json: bool = typer.Option(False, "--json", help="Print the result record as JSON"),
    csv_path: Path | None = typer.Option(None, "--csv", help="Write recommendations to a CSV file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
) -> None:
    """Analyze a roster's type coverage and recommend additions."""
    if settings.logging_config_path.exists():
        init_logging(settings.logging_config_path, level="DEBUG" if verbose else None)

    chart = _load_chart(chart_path)

    try:
        roster = parse_roster(members, chart)
    except RosterError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None

    result = analyze_team(roster, chart, include_combos=combos, strict_shared_weaknesses=strict)

    if csv_path is not None:
        try:
            recommendations_frame(result.recommended_types).write_csv(csv_path)
        except OSError as e:
            console.print(f"[red]Error:[/] Could not write {escape(str(csv_path))}: {escape(str(e))}")
            raise typer.Exit(1) from None
        if verbose:
            console.print(f"[blue]Wrote {len(result.recommended_types)} recommendations to {csv_path}[/]")

    if as_json:
        typer.echo(result.model_dump_json(by_alias=True, indent=2))
    else:
        _print_result(result)


@app.command()
def types(
    chart_path: Path | None = typer.Option(None, "--chart", help="YAML type chart replacing the built-in one"),
) -> None:
    """List the valid type names."""
    chart = _load_chart(chart_path)
    console.print(f"Valid types are: {', '.join(sorted(chart.types))}")


if __name__ == "__main__":
    app()
