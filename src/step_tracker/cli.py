"""CLI para reportes diarios, de entrenamiento y por lotes."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from step_tracker.batch import activity_totals, read_records, reports_frame
from step_tracker.errors import TrackerError
from step_tracker.model import PhysicalProfile
from step_tracker.report import daily_step_report, training_report

DEFAULT_WEIGHT_KG = 70.0
DEFAULT_HEIGHT_M = 1.75
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class CliConfig:
    """Options shared by every subcommand."""

    weight_kg: float
    height_m: float
    log_level: str


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        prog="step-tracker",
        description="Distancia, velocidad y calorías a partir de registros de pasos.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Nivel de log en stderr (default: WARNING).",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--weight",
        type=float,
        default=DEFAULT_WEIGHT_KG,
        help=f"Peso en kg (default: {DEFAULT_WEIGHT_KG}).",
    )
    common.add_argument(
        "--height",
        type=float,
        default=DEFAULT_HEIGHT_M,
        help=f"Altura en metros (default: {DEFAULT_HEIGHT_M}).",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    day = sub.add_parser("day", parents=[common], help="Registro 'pasos,duración'.")
    day.add_argument("record")
    training = sub.add_parser(
        "training", parents=[common], help="Registro 'pasos,actividad,duración'."
    )
    training.add_argument("record")
    batch = sub.add_parser(
        "batch", parents=[common], help="Archivo con un registro por línea."
    )
    batch.add_argument("file")
    batch.add_argument("--out", default=None, help="CSV de salida opcional.")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def main(argv: list[str] | None = None) -> int:
    """Run the step tracker CLI.

    Returns:
        Exit code (0 on success, 1 if the record could not be processed).
    """
    ns = parse_args(argv)
    config = CliConfig(weight_kg=ns.weight, height_m=ns.height, log_level=ns.log_level)
    configure_logging(config.log_level)

    if ns.command == "day":
        text = daily_step_report(ns.record, config.weight_kg, config.height_m)
        if not text:
            return 1
        print(text, end="")
        return 0

    if ns.command == "training":
        try:
            text = training_report(ns.record, config.weight_kg, config.height_m)
        except TrackerError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(text, end="")
        return 0

    profile = PhysicalProfile(weight_kg=config.weight_kg, height_m=config.height_m)
    frame = reports_frame(read_records(Path(ns.file)), profile)
    print(frame.to_string(index=False))
    print()
    print(activity_totals(frame).to_string(index=False))
    if ns.out:
        out_path = Path(ns.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(out_path, index=False)
        print(f"OK: Output: {out_path}")
    return 0
