"""CLI entry point for airline route connectivity analysis."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from airnet.config import AnalysisConfig
from airnet.data.reports import write_degree_ranking
from airnet.service import ConnectivityResult, ConnectivityService
from airnet.stats.degree_statistics import DegreeStatistics

logger = logging.getLogger(__name__)

DEFAULT_AIRPORTS = "full_airports.csv"
DEFAULT_ROUTES = "full_routes.csv"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML file with input paths, hub threshold and percentile thresholds.",
    )
    parser.add_argument("--airports", default=None, help=f"Airports CSV (default: {DEFAULT_AIRPORTS}).")
    parser.add_argument("--routes", default=None, help=f"Routes CSV (default: {DEFAULT_ROUTES}).")
    parser.add_argument(
        "--ranking-output",
        default=None,
        help="Destination CSV for airports ranked by degree.",
    )
    parser.add_argument(
        "--hub-threshold",
        type=int,
        default=None,
        help="Degree at which an airport is reported as a hub.",
    )
    parser.add_argument("--departure", default=None, help="Departure airport id for the hop query.")
    parser.add_argument("--destination", default=None, help="Destination airport id for the hop query.")
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Skip the hop query instead of prompting when ids are not given.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity for the CLI logger.",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


def load_config(args: argparse.Namespace) -> AnalysisConfig:
    config = AnalysisConfig.from_yaml(args.config) if args.config else AnalysisConfig()
    config = config.with_overrides(
        airports_csv=args.airports,
        routes_csv=args.routes,
        ranking_csv=args.ranking_output,
        hub_threshold=args.hub_threshold,
    )
    return config.with_overrides(
        airports_csv=config.airports_csv or DEFAULT_AIRPORTS,
        routes_csv=config.routes_csv or DEFAULT_ROUTES,
    )


def main(argv: Sequence[str] | None = None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    console = console or Console()

    try:
        config = load_config(args)
        service = ConnectivityService.from_config(config)
    except (FileNotFoundError, TypeError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    result = service.run()
    write_degree_ranking(result.airports, config.ranking_csv)

    print_statistics(console, result.degree_stats, distance=1, source=config.routes_csv)
    print_statistics(console, result.degree2_stats, distance=2, source=config.routes_csv)
    console.print(
        f"{len(result.hubs):,} airports reached a degree of {config.hub_threshold} "
        f"(ranking written to {config.ranking_csv})"
    )

    departure, destination = args.departure, args.destination
    if departure is None or destination is None:
        if args.no_prompt:
            return 0
        console.print("Calculate the shortest path from input departure airport to destination airport")
        if departure is None:
            departure = Prompt.ask("Please enter departure airport ID", console=console)
        if destination is None:
            destination = Prompt.ask("Please enter destination airport ID", console=console)
    report_hops(console, result, departure.strip(), destination.strip())
    return 0


def print_statistics(
    console: Console, stats: DegreeStatistics, *, distance: int, source: str
) -> None:
    """Print the summary and percentile tables for one degree map."""
    summary = Table(
        title=f"Statistics of Airports for neighbors of distance {distance} from {source}",
        show_header=True,
        header_style="bold cyan",
    )
    summary.add_column("Metric", style="bold")
    summary.add_column("Value", justify="right", style="green")
    summary.add_row("Airports", f"{stats.count:,}")
    summary.add_row("Minimum Degree", f"{stats.minimum}")
    summary.add_row("Maximum Degree", f"{stats.maximum}")
    summary.add_row("Mean Degree", f"{stats.mean:.2f}")
    summary.add_row("Median Degree", f"{stats.median}")
    console.print(summary)
    if stats.is_empty:
        console.print("[yellow]No airports loaded; statistics default to zero.[/yellow]")

    buckets = Table(
        title=f"Percentiles of Airports for neighbors of distance {distance} from {source}",
        show_header=True,
        header_style="bold cyan",
    )
    buckets.add_column("Degree band", style="bold")
    buckets.add_column("Percent of airports", justify="right", style="green")
    for threshold, percent in stats.percentiles:
        buckets.add_row(f"<= {threshold}", f"{percent:.2f}%")
    console.print(buckets)


def report_hops(
    console: Console, result: ConnectivityResult, departure: str, destination: str
) -> None:
    query = result.shortest_hops(departure, destination)
    if not query.reachable:
        logger.info("No route from %s to %s", departure, destination)
    console.print(query.describe())


if __name__ == "__main__":
    raise SystemExit(main())
