"""Fetch every page listed in a site's page index and prepare it for Pagefind.

Usage: python run.py [path/to/fetch-config.json]
"""
import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from pagefetch import config as env
from pagefetch.container import Container
from pagefetch.exceptions import ConfigError, HttpFetchError, HttpStatusError, IndexFormatError

logger = logging.getLogger("pagefetch")

CONFIG_FILE_NAME = "fetch-config.json"
DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), CONFIG_FILE_NAME)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagefetch",
        description="Fetch pages from a site's page index and annotate them for Pagefind.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help=f"Path to the JSON/YAML config file (default: $PAGEFETCH_CONFIG, then {CONFIG_FILE_NAME} next to run.py or in the working directory)",
    )
    return parser.parse_args(argv)


def resolve_config_path(cli_value: Optional[str]) -> str:
    explicit = cli_value or env.default_config_path()
    if explicit:
        return explicit
    # installed as a console script, run.py sits in site-packages with no config beside it
    if os.path.isfile(DEFAULT_CONFIG_FILE):
        return DEFAULT_CONFIG_FILE
    return os.path.abspath(CONFIG_FILE_NAME)


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    """Run a full fetch pass. Returns 0 on a completed run, 1 on a fatal error.

    Per-page errors do not change the exit code.
    """
    args = _parse_args(argv)
    logging.basicConfig(level=env.log_level(), format="%(message)s")

    if container is None:
        container = Container()

    config_path = resolve_config_path(args.config)
    try:
        fetch_config = container.config_loader().load(config_path)
        container.crawl_executor().run(fetch_config)
    except (ConfigError, IndexFormatError, HttpFetchError, HttpStatusError) as e:
        logger.error("Error: %s", e)
        return 1
    except Exception as e:
        logger.exception("Error: %s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
