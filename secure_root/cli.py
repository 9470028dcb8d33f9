"""Command line entry point for looking up a node's secure root."""

import argparse
import json
import logging
import sys

from secure_root.config_provider import (
    EnvironmentConfigProvider,
    LayeredConfigProvider,
    MappingConfigProvider,
)
from secure_root.errors import SecureRootError
from secure_root.identity import Identity
from secure_root.load_config import config_file_values, load_config
from secure_root.resolve_secure_root import resolve_secure_root


def run_lookup(args: argparse.Namespace) -> int:
    """Resolve the requested identity and print the outcome."""
    identity = Identity(args.name, args.namespace)
    try:
        file_values = config_file_values(load_config(args.config))
        provider = LayeredConfigProvider(
            EnvironmentConfigProvider(),
            MappingConfigProvider(file_values),
        )
        result = resolve_secure_root(identity, provider.read())
    except SecureRootError as e:
        raise SystemExit(str(e)) from e

    if args.json:
        print(
            json.dumps(
                {
                    "name": identity.name,
                    "namespace": identity.namespace,
                    "found": result.is_found,
                    "path": result.path,
                    "error": result.error.value if result.error else None,
                    "diagnostic": result.diagnostic,
                },
                indent=2,
            )
        )
    elif result.is_found:
        print(result.path)

    if not result.is_found:
        if not args.json:
            print(result.diagnostic, file=sys.stderr)
        return 1
    return 0


def main() -> int:
    """Parse arguments and run the lookup."""
    ap = argparse.ArgumentParser(
        description="Find the directory holding a node's security material.",
    )
    ap.add_argument("name", help="Node name, e.g. talker")
    ap.add_argument(
        "namespace",
        nargs="?",
        default="/",
        help="Node namespace, e.g. /robot1 (default: /)",
    )
    ap.add_argument(
        "--config",
        help="YAML config file; environment variables take precedence over it",
    )
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print the full lookup result as JSON",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log each lookup step to stderr",
    )
    args = ap.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return run_lookup(args)


if __name__ == "__main__":
    raise SystemExit(main())
