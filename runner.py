"""Corridor Runner - Entry Point.

Steer the P down a scrolling corridor; touching a wall ends the run.

Controls:
    Arrow keys / W A S D: Move
    Q: Quit
"""

import sys

from config import load_config
from utils.clock import format_timestamp
from utils.crash import configure as configure_crash, install_crash_handler
from utils.ksuid import generate_ksuid, ksuid_epoch

EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def main():
    config = load_config()
    session = generate_ksuid()
    configure_crash(config.logging.crash_file, session)
    install_crash_handler()

    from core.errors import BaseGameError
    from corridor.engine import Game
    from corridor.world import create_world
    from display import terminal
    from internal.logging import StructuredLogger, open_log_file, parse_level

    # The terminal belongs to the renderer, so logs go to a file.
    log_file = open_log_file(config.logging.file)
    try:
        log = StructuredLogger.configure(parse_level(config.logging.level), stream=log_file, session=session)
        log.info("session start", started=format_timestamp(ksuid_epoch(session) * 1_000_000))
        try:
            with terminal.terminal_session() as term:
                columns, rows = terminal.screen_size(term)
                world = create_world(columns, rows, seed=config.game.seed)
                game = Game(world, terminal.TerminalSurface(term), terminal.TerminalInput(term), config.game)
                game.run()
        except BaseGameError as exc:
            log.error("fatal terminal error", error=exc, error_id=exc.error_id, **exc.context)
            print(f"corridor-runner: {exc}", file=sys.stderr)
            return EXIT_FATAL
        except KeyboardInterrupt:
            log.info("interrupted")
            return EXIT_INTERRUPTED
    finally:
        log_file.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
