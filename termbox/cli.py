# cli.py

import argparse
from typing import List, Optional

from .config import TermboxConfig
from .interface import Interface

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='termbox',
        description='Multi-line input frame pinned to the bottom of the terminal')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (default: logs/termbox_debug.log)')
    parser.add_argument('--tick-interval',
        type=float,
        help='Seconds between animation ticks')
    parser.add_argument('--ascii',
        action='store_true',
        help='Draw the frame with plain ASCII characters')
    parser.add_argument('--banner',
        help='Text shown in a panel above the frame at startup')
    return parser

def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    config = TermboxConfig.from_env(
        tick_interval=args.tick_interval,
        glyphs='ascii' if args.ascii else None,
        logging_enabled=True if (args.enable_logging or args.log_file) else None,
        log_file=args.log_file,
        banner=args.banner
    )

    Interface(config).start()

if __name__ == "__main__":
    main()
