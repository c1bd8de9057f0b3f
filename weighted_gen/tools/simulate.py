from __future__ import annotations

import hashlib
import json
from collections import Counter
from pathlib import Path
from typing import Callable, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from weighted_gen.app.services.logger import configure_logging, tool_logger
from weighted_gen.app.services.settings_store import SettingsStore
from weighted_gen.core.errors import InvalidInputError
from weighted_gen.core.loader import DistributionFileError, DistributionSpec, load_distribution
from weighted_gen.core.sampler import RandomGenerator
from weighted_gen.core.settings import SimulationSettings, default_settings

T = TypeVar("T")

app = typer.Typer(add_completion=False, help="Draw from a weighted distribution and compare observed frequencies.")
console = Console()
logger = tool_logger("simulate")


def _normalize_seed(raw_seed: str) -> int | str:
    try:
        return int(raw_seed)
    except ValueError:
        return raw_seed


def _parse_csv(raw: str, cast: Callable[[str], T], option: str) -> list[T]:
    parts = [part.strip() for part in raw.split(",") if part.strip()]
    try:
        return [cast(part) for part in parts]
    except ValueError as exc:
        raise typer.BadParameter(f"could not parse '{raw}'", param_hint=option) from exc


def _expected_shares(values: tuple[int, ...], normalized: tuple[float, ...]) -> dict[int, float]:
    shares: dict[int, float] = {}
    for value, share in zip(values, normalized):
        shares[value] = shares.get(value, 0.0) + share
    return shares


def _tally(generator: RandomGenerator, samples: int) -> Counter[int]:
    counts: Counter[int] = Counter()
    for _ in range(samples):
        counts[generator.next()] += 1
    return counts


def _resolve_spec(file: Path | None, values: str | None, weights: str | None) -> DistributionSpec:
    if file is not None:
        return load_distribution(file)
    if values is None or weights is None:
        raise typer.BadParameter("provide --file or both --values and --weights")
    return DistributionSpec(
        name="cli",
        values=_parse_csv(values, int, "--values"),
        weights=_parse_csv(weights, float, "--weights"),
    )


@app.command()
def main(
    values: str | None = typer.Option(None, "--values", help="Comma separated candidate integers."),
    weights: str | None = typer.Option(None, "--weights", help="Comma separated weights in [0, 1]."),
    file: Path | None = typer.Option(None, "--file", help="JSON distribution file with values/weights."),
    samples: int | None = typer.Option(None, "--samples", min=1, help="Number of draws."),
    seed: str | None = typer.Option(None, "--seed", help="Seed value (int or string)."),
    tolerance: float | None = typer.Option(None, "--tolerance", help="Allowed deviation in percentage points."),
    settings_path: Path | None = typer.Option(None, "--settings", help="Settings JSON file."),
    logs_dir: Path | None = typer.Option(None, "--logs-dir", help="Directory for latest.log."),
) -> None:
    payload = SettingsStore(settings_path).load() if settings_path is not None else default_settings()
    overrides = {"samples": samples, "seed": seed, "tolerance_pct": tolerance}
    payload.update({key: value for key, value in overrides.items() if value is not None})
    try:
        settings = SimulationSettings.model_validate(payload)
    except ValidationError as exc:
        console.print(f"[bold red]Invalid settings:[/bold red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    if logs_dir is not None:
        configure_logging(logs_dir, settings.log_level, tool="simulate")

    try:
        spec = _resolve_spec(file, values, weights)
        run_seed = _normalize_seed(settings.seed) if isinstance(settings.seed, str) else settings.seed
        sampler = spec.build_sampler(seed=run_seed)
    except DistributionFileError as exc:
        console.print(f"[bold red]Distribution load failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(1) from exc
    except InvalidInputError as exc:
        logger.error("Rejected distribution '%s': %s", spec.name, exc)
        console.print(f"[bold red]Invalid input ({exc.kind.value}):[/bold red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    logger.info("Sampling '%s' %d times (seed=%s).", spec.name, settings.samples, run_seed)
    counts = _tally(sampler, settings.samples)
    shares = _expected_shares(sampler.values, sampler.normalized)

    table = Table(title=f"Distribution '{spec.name}'")
    table.add_column("Value", style="cyan", no_wrap=True)
    table.add_column("Expected %", justify="right")
    table.add_column("Observed %", justify="right")
    table.add_column("Deviation", justify="right")

    failures = []
    for value, share in shares.items():
        expected_pct = share * 100.0
        observed_pct = counts[value] / settings.samples * 100.0
        deviation = observed_pct - expected_pct
        outside = abs(deviation) > settings.tolerance_pct
        if outside:
            failures.append(value)
        style = "bold red" if outside else "white"
        table.add_row(
            str(value),
            f"{expected_pct:.3f}",
            f"{observed_pct:.3f}",
            f"[{style}]{deviation:+.3f}[/{style}]",
        )
    console.print(table)

    signature_payload = {"seed": run_seed, "samples": settings.samples, "counts": sorted(counts.items())}
    signature = hashlib.sha256(json.dumps(signature_payload, sort_keys=True).encode("utf-8")).hexdigest()[:16]
    console.print(f"\n[bold green]Deterministic signature:[/bold green] {signature}")

    if failures:
        logger.warning("Values outside tolerance: %s", failures)
        console.print(
            f"[bold red]Observed frequency outside ±{settings.tolerance_pct}pp for:[/bold red] "
            + ", ".join(str(value) for value in failures)
        )
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
