import argparse
import logging

from config import GRID_HEIGHT, GRID_WIDTH, HIGHSCORE_FILE, MIN_GRID_CELLS, TICK_MS


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid snake game")
    parser.add_argument("--width", type=int, default=GRID_WIDTH, help="board width in cells")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT, help="board height in cells")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="milliseconds per move")
    parser.add_argument("--highscore-file", default=HIGHSCORE_FILE, help="where the best score is kept")
    parser.add_argument("--mute", action="store_true", help="start with sound off")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.width < MIN_GRID_CELLS or args.height < MIN_GRID_CELLS:
        parser.error(f"board must be at least {MIN_GRID_CELLS}x{MIN_GRID_CELLS} cells")
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    # Import after logging is configured so pygame start-up is covered
    from game import SnakeApp

    game = SnakeApp(
        width=args.width,
        height=args.height,
        tick_ms=args.tick_ms,
        highscore_file=args.highscore_file,
        muted=args.mute,
    )
    game.run()


if __name__ == "__main__":
    main()
