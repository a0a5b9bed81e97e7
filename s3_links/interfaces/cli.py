"""Command line interface for browsing an S3 links repository."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ..config import ProxySettings, RepositoryConfig, validate_options
from ..domain.exceptions import RepositoryError
from ..infrastructure.adapters import S3LinksRepository

logger = logging.getLogger(__name__)


def _get_repository() -> S3LinksRepository:
    """Build the repository from environment configuration."""
    config = RepositoryConfig.from_env()
    proxy = ProxySettings.from_env()
    return S3LinksRepository(config, proxy=proxy)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, default=str))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s3-links",
        description="Browse S3 buckets and print direct object links",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration is read from S3_LINKS_ACCESS_KEY, S3_LINKS_SECRET_KEY,
S3_LINKS_ENDPOINT, S3_LINKS_NAME and S3_LINKS_PROXY_* variables.

Examples:
  s3-links ls                          # List buckets
  s3-links ls mybucket/docs/           # List one folder
  s3-links get mybucket/docs/a.pdf     # Direct URL, filename and size
  s3-links link mybucket/docs/a.pdf    # Direct URL only
        """
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    ls_parser = subparsers.add_parser("ls", help="List buckets or a folder")
    ls_parser.add_argument("path", nargs="?", default="", help="bucket or bucket/prefix")

    get_parser = subparsers.add_parser("get", help="Resolve a file")
    get_parser.add_argument("path", help="bucket/key")

    link_parser = subparsers.add_parser("link", help="Print the direct link of a file")
    link_parser.add_argument("path", help="bucket/key")

    info_parser = subparsers.add_parser("info", help="Print the source description of a file")
    info_parser.add_argument("path", help="bucket/key")

    subparsers.add_parser("check-config", help="Validate the configured options")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI interface."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.command == "check-config":
        config = RepositoryConfig.from_env()
        errors = validate_options({
            "access_key": config.access_key,
            "secret_key": config.secret_key,
            "endpoint": config.endpoint
        })
        if errors:
            for field_name, message in errors.items():
                print(f"❌ {field_name}: {message}", file=sys.stderr)
            return 2
        _print_json({"endpoint": config.endpoint, "region": config.region, "name": config.display_name})
        return 0

    repository = _get_repository()
    try:
        if args.command == "ls":
            _print_json(repository.list(args.path).to_dict())
        elif args.command == "get":
            _print_json(repository.resolve_file(args.path).to_dict())
        elif args.command == "link":
            print(repository.get_link(args.path))
        elif args.command == "info":
            print(repository.get_source_info(args.path))
    except RepositoryError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
