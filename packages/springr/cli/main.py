"""Command-line interface for springr.

Derives spring curve parameters, runs the diagnostic self-test and plays
curves as terminal animations.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path
import sys
import time
from typing import TextIO

from pydantic import ValidationError
from rich.console import Console
from rich.prompt import FloatPrompt, IntPrompt
from rich.table import Table

from springr.cli.visualize import animate
from springr.core.config.loader import configure_logging, load_app_config
from springr.core.config.models import AppConfig
from springr.core.curves.derivation import derive_params, derive_params_with_trace
from springr.core.curves.diagnostics import verify_settings
from springr.core.curves.errors import SpringCurveError
from springr.core.curves.models import CurveSettings
from springr.core.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)

DEFAULT_CHECK_RUNS = 4
DEFAULT_CHECK_OVERSHOOT = 0.2
DEFAULT_ANIMATE_DURATION_MS = 2000


def _settings_from_args(args: argparse.Namespace) -> CurveSettings:
    return CurveSettings(overshoot=args.overshoot, rest_position_runs=args.runs)


def run_params(args: argparse.Namespace, config: AppConfig) -> int:
    """Print the oscillator parameters derived from the given settings."""
    settings = _settings_from_args(args)
    params, result = derive_params_with_trace(
        settings,
        precision=config.search.precision,
        max_iterations=config.search.max_iterations,
    )

    table = Table(title="Spring curve parameters")
    table.add_column("Field")
    table.add_column("Value", justify="right")
    table.add_row("rest position runs", f"{settings.rest_position_runs:g}")
    table.add_row("overshoot", f"{settings.overshoot:g}")
    table.add_row("omega", f"{params.omega:.6f}")
    table.add_row("gamma", f"{params.gamma:.6f}")
    table.add_row("seed gamma", f"{result.seed_gamma:.6f}")
    table.add_row("overshoot deviation", f"{result.deviation:.6f}")
    table.add_row("search iterations", str(result.iterations))
    console.print(table)
    return 0


def run_check(args: argparse.Namespace, config: AppConfig) -> int:
    """Run the diagnostic self-test for the given settings."""
    settings = _settings_from_args(args)
    report = verify_settings(
        settings,
        n_samples=config.diagnostics.samples,
        tolerance=config.diagnostics.tolerance,
        precision=config.search.precision,
        max_iterations=config.search.max_iterations,
    )

    console.print("[bold]Testing interpolation settings[/bold]")
    console.print(f"   rp_runs   : {settings.rest_position_runs:g}")
    console.print(f"   overshoot : {settings.overshoot:g}")
    console.print(f"   omega     : {report.params.omega:.6f}")
    console.print(f"   gamma     : {report.params.gamma:.6f}")
    console.print(
        f"   realized  : {report.analysis.realized_runs} runs, "
        f"overshoot {report.analysis.realized_overshoot:.6f}"
    )

    if report.passed:
        console.print(
            f"[green]✅ Test succeeded. Overshoot accuracy was {report.overshoot_error:.6f}[/green]"
        )
        return 0

    for message in report.failures():
        console.print(f"[red]Test failed. {message}[/red]")
    return 1


def _play(
    settings: CurveSettings,
    duration_ms: int,
    config: AppConfig,
    *,
    running_mode: bool,
    preset: str | None = None,
    stream: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    log = get_logger(__name__, preset=preset or "custom")
    params = derive_params(
        settings,
        precision=config.search.precision,
        max_iterations=config.search.max_iterations,
    )
    log.debug(f"Animating {params!r} for {duration_ms}ms")
    return animate(
        params,
        duration_ms,
        width=config.visualization.width,
        interval_ms=config.visualization.interval_ms,
        running_mode=running_mode,
        stream=stream,
        sleep=sleep,
    )


def run_animate(args: argparse.Namespace, config: AppConfig) -> int:
    """Play a preset or custom curve in the terminal."""
    if args.preset:
        preset = config.get_preset(args.preset)
        settings = preset.settings
        duration_ms = args.duration if args.duration is not None else preset.duration_ms
    else:
        if args.runs is None or args.overshoot is None:
            console.print("[red]ERROR: --runs and --overshoot are required without --preset[/red]")
            return 1
        settings = _settings_from_args(args)
        duration_ms = args.duration if args.duration is not None else DEFAULT_ANIMATE_DURATION_MS

    if duration_ms <= 0:
        console.print(f"[red]ERROR: --duration must be > 0 (got {duration_ms})[/red]")
        return 1

    running_mode = config.visualization.running_mode and not args.overwrite
    _play(settings, duration_ms, config, running_mode=running_mode, preset=args.preset)
    return 0


def run_menu(
    config: AppConfig,
    *,
    stream: TextIO | None = None,
    output: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Interactive menu for playing preset and custom curves.

    Args:
        config: Application config (presets, visualization settings).
        stream: Input stream for prompts (default: stdin).
        output: Animation output stream (default: stdout).
        sleep: Sleep function used between animation frames.
    """
    long_preset = config.get_preset("long")
    mobile_preset = config.get_preset("mobile")
    running_mode = config.visualization.running_mode

    console.print(
        "\n[bold]################ CLI MENU #################[/bold]\n"
        "Press 'l' to run the long visualization\n"
        "Press 'm' to run a typical mobile animation visualization\n"
        "Press 'c' to enter custom params for the visualization\n"
        "Press any other key to exit"
    )

    while True:
        console.print("Choice: ", end="")
        line = (stream if stream is not None else sys.stdin).readline()
        if not line:
            return 0
        choice = line.strip()
        if not choice:
            continue

        preset: str | None = None
        if choice == "l":
            preset = "long"
            settings, duration_ms = long_preset.settings, long_preset.duration_ms
        elif choice == "m":
            preset = "mobile"
            settings, duration_ms = mobile_preset.settings, mobile_preset.duration_ms
        elif choice == "c":
            runs = FloatPrompt.ask(
                "How often should the interpolator cross the rest position?",
                default=4.0,
                console=console,
                stream=stream,
            )
            overshoot = FloatPrompt.ask(
                "How far should the interpolator 'overshoot'?",
                default=0.25,
                console=console,
                stream=stream,
            )
            duration_ms = IntPrompt.ask(
                "How long should the animation run? (in ms)",
                default=2000,
                console=console,
                stream=stream,
            )
            try:
                settings = CurveSettings(overshoot=overshoot, rest_position_runs=runs)
            except ValidationError as e:
                console.print(f"[red]ERROR: Invalid settings: {e.errors()[0]['msg']}[/red]")
                continue
            if duration_ms <= 0:
                console.print("[red]ERROR: Duration must be > 0[/red]")
                continue
        else:
            return 0

        _play(
            settings,
            duration_ms,
            config,
            running_mode=running_mode,
            preset=preset,
            stream=output,
            sleep=sleep,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="springr",
        description="springr - damped spring easing curves from overshoot and crossings",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config (.json/.yaml, default: springr.yaml if present)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    params = sub.add_parser("params", help="Derive omega and gamma for settings")
    params.add_argument("--runs", type=float, required=True, help="Rest position runs")
    params.add_argument("--overshoot", type=float, required=True, help="Overshoot in (0, 1)")

    check = sub.add_parser("check", help="Run the diagnostic self-test")
    check.add_argument("--runs", type=float, default=DEFAULT_CHECK_RUNS, help="Rest position runs")
    check.add_argument(
        "--overshoot", type=float, default=DEFAULT_CHECK_OVERSHOOT, help="Overshoot in (0, 1)"
    )

    anim = sub.add_parser("animate", help="Play a curve as a terminal animation")
    anim.add_argument("--preset", default=None, help="Preset name from config (e.g. long, mobile)")
    anim.add_argument("--runs", type=float, default=None, help="Rest position runs")
    anim.add_argument("--overshoot", type=float, default=None, help="Overshoot in (0, 1)")
    anim.add_argument("--duration", type=int, default=None, help="Duration in ms")
    anim.add_argument(
        "--overwrite", action="store_true", help="Redraw a single line instead of appending"
    )

    sub.add_parser("menu", help="Interactive visualization menu")

    return p


_COMMANDS: dict[str, Callable[[argparse.Namespace, AppConfig], int]] = {
    "params": run_params,
    "check": run_check,
    "animate": run_animate,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_app_config(Path(args.config) if args.config else None)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    configure_logging(config)
    logger.debug(f"Running command {args.cmd!r}")

    try:
        if args.cmd == "menu":
            return run_menu(config)
        return _COMMANDS[args.cmd](args, config)
    except ValidationError as e:
        console.print(f"[red]ERROR: Invalid settings: {e.errors()[0]['msg']}[/red]")
        return 1
    except (SpringCurveError, KeyError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
