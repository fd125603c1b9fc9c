import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from statwatch.config import DEFAULT_CONFIG
from statwatch.monitor.poller import StatsPoller


def _setup_logging() -> None:
    # Diagnostics go to stderr; stdout carries only alert lines
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.WARNING, format="%(message)s", handlers=[handler], force=True
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main() -> int:
    _setup_logging()

    poller = StatsPoller(DEFAULT_CONFIG)
    try:
        poller.run()
    except KeyboardInterrupt:
        print("\n❌ Operation cancelled", file=sys.stderr)
        return 130
    finally:
        poller.fetcher.close()

    # Giving up after repeated failures is a normal exit
    return 0


if __name__ == "__main__":
    sys.exit(main())
