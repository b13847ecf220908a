"""Entry point for dirhist."""

import argparse
import logging

from dirhist import __version__
from dirhist.app import DirHistApp
from dirhist.config import get_config


def main() -> None:
    """Run the dirhist application."""
    p = argparse.ArgumentParser(description="Directory history navigator")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-n", "--max-size", type=int, default=None,
                   help="Maximum number of history entries (0 = unbounded)")
    p.add_argument("-C", "--directory", default=None,
                   help="Start in this directory instead of the current one")
    p.add_argument("--log-file", default=None,
                   help="Write log records to this file")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Debug logging (to dirhist.log unless --log-file is given)")
    args = p.parse_args()

    # The terminal belongs to the UI, so logs only ever go to a file
    if args.log_file or args.debug:
        logging.basicConfig(
            filename=args.log_file or "dirhist.log",
            level=logging.DEBUG if args.debug else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    config = get_config()
    if args.max_size is not None:
        if args.max_size < 0:
            p.error("--max-size must be >= 0")
        config.max_stack_size = args.max_size
    if args.directory is not None:
        config.start_dir = args.directory

    try:
        app = DirHistApp(config)
    except OSError as e:
        p.error(f"cannot start in {config.start_dir}: {e.strerror or e}")
    app.run()


if __name__ == "__main__":
    main()
