"""Interactive development shell for the pathfinder."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from .config import CONFIG, Config, load_config
from .utils.cli.command_parser import parse_command
from .utils.cli.commands import execute, load, new_state


def configure_logging(cfg: Config) -> None:
    """Apply the root and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


logger = logging.getLogger(__name__)
configure_logging(CONFIG)


def run(stream: TextIO, state: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Read slash commands from ``stream`` until ``/quit`` or end of input."""

    state = state if state is not None else new_state()
    for line in stream:
        line = line.strip()
        if not line:
            continue
        cmd = parse_command(line)
        if cmd is None:
            logger.warning("Commands start with '/'. Type /help for available commands.")
            continue
        execute(cmd.name, cmd.args, state)
        if not state.get("running", True):
            break
    return state


def main(argv: list[str] | None = None) -> int:
    """Entry point: ``python -m grid_pathfinder.main [map.yaml] [config.yaml]``."""

    argv = sys.argv[1:] if argv is None else argv
    cfg = CONFIG
    if len(argv) > 1:
        cfg = load_config(Path(argv[1]))
        configure_logging(cfg)
    state = new_state(cfg)
    if argv:
        load(state, argv[0])
    logger.info("Pathfinder shell started. Type /help for commands.")
    run(sys.stdin, state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
