"""
Geo-6 POI geocoder - search Belgian points of interest from the command line.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

import httpx

from internal.config.manager import ConfigManager
from internal.services.geocoder import createGeo6Provider
from lib.geo6_poi import GeocodeQuery, Geo6Error, POIAddress
from lib.logging_utils import initLogging
from lib.utils import jsonDumps

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


class Geo6PoiApp:
    """Wires configuration, logging and the provider together."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        """Initialize application with all components."""
        self.configManager = ConfigManager(configPath, configDirs)

        initLogging(self.configManager.getLoggingConfig())

        self.provider = createGeo6Provider(self.configManager.getGeo6PoiConfig())

    async def search(
        self,
        text: str,
        locale: Optional[str] = None,
        source: Optional[str] = None,
        locality: Optional[str] = None,
    ) -> List[POIAddress]:
        """Run one geocoding query."""
        query = GeocodeQuery.create(text).withLocale(locale)
        if source is not None:
            query = query.withData("source", source)
        if locality is not None:
            query = query.withData("locality", locality)

        return await self.provider.geocodeQuery(query)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Geo-6 POI geocoder - search points of interest, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times), dood!",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit, dood!",
    )
    parser.add_argument("-l", "--locale", help="Preferred language: fr or nl (default: both)")
    parser.add_argument("-s", "--source", help="Restrict search to one data source (e.g. urbis)")
    parser.add_argument("--locality", help="Restrict search to one locality (requires --source)")
    parser.add_argument("query", nargs="?", help="Text to search for")
    args = parser.parse_args(argv)

    args.config = os.path.abspath(args.config)
    if args.config_dir:
        args.config_dir = [os.path.abspath(dirPath) for dirPath in args.config_dir]

    if not args.print_config and args.query is None:
        parser.error("the following arguments are required: query")

    return args


def prettyPrintConfig(configManager: ConfigManager):
    """Pretty-print the loaded configuration, dood!"""
    print("=== Geo-6 POI Configuration ===")
    print()
    print(jsonDumps(configManager.config, indent=2))
    print()
    print("=== Configuration loaded successfully, dood! ===")


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_arguments(argv)

    if args.print_config:
        prettyPrintConfig(ConfigManager(configPath=args.config, configDirs=args.config_dir))
        sys.exit(0)

    try:
        app = Geo6PoiApp(configPath=args.config, configDirs=args.config_dir)
        results = asyncio.run(app.search(args.query, locale=args.locale, source=args.source, locality=args.locality))
    except KeyboardInterrupt:
        logger.info("Search interrupted by user")
        sys.exit(130)
    except Geo6Error as e:
        logger.error(f"Geocoding failed: {e}")
        sys.exit(1)
    except httpx.HTTPError as e:
        logger.error(f"Request to Geo-6 API failed: {e}")
        sys.exit(1)

    print(jsonDumps([poi.toDict() for poi in results], indent=2))


if __name__ == "__main__":
    main()
