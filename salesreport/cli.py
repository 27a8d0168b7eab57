"""
Sales Report CLI
Runs the demo scenarios and prints their summaries.
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from salesreport.__version__ import __version__
from salesreport.config.loader import load_config
from salesreport.core.errors import ConfigValidationError
from salesreport.core.presets import list_presets
from salesreport.demo import SCENARIOS, build_scenario
from salesreport.reporting.summary import print_summary
from salesreport.utils.logger import get_logger

logger = logging.getLogger(__name__)


# -------------------------------------------------
# PROGRAMMATIC ENTRY
# -------------------------------------------------
def run_scenarios(names: List[str], config: dict) -> int:
    year = config["demo"]["year"]

    for name in names:
        try:
            report = build_scenario(name, year)
        except ConfigValidationError as exc:
            logger.error("Scenario '%s' failed validation: %s", name, exc)
            return 1

        print_summary(report, config)

    return 0


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Sales Report Builder v{__version__}"
    )

    parser.add_argument(
        "--scenario",
        choices=sorted(SCENARIOS) + ["all"],
        default="all",
        help="Demo scenario to build",
    )
    parser.add_argument("--config", required=False, help="Path to settings YAML")
    parser.add_argument("--list-presets", action="store_true")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"Sales Report Builder v{__version__}")
        return 0

    # ---- LOGGING ----
    get_logger("salesreport", "DEBUG" if args.verbose else "INFO")

    # ---- CONFIG ----
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        logger.error("Invalid settings: %s", exc)
        return 1

    if not args.verbose:
        get_logger("salesreport", config["logging"]["level"])

    # ---- PRESETS ----
    if args.list_presets:
        for name in list_presets():
            print(name)
        return 0

    # ---- SCENARIOS ----
    print("=== Sales Report System (Builder) ===")
    names = list(SCENARIOS) if args.scenario == "all" else [args.scenario]
    return run_scenarios(names, config)


if __name__ == "__main__":
    sys.exit(main())
