# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command line front end for the enum designer."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import EnumDesignerConfig
from .engine import CreateResult, EnumDesigner
from .exceptions import EnumDesignerError
from .file_io.record_repository import normalize_extension

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2


def _build_parser(config: EnumDesignerConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enum-designer",
        description="Generate, list and delete enum declaration files",
    )
    parser.add_argument(
        "--dir",
        dest="output_dir",
        default=config.output_dir,
        help=f"Directory holding generated enums (default: {config.output_dir})",
    )
    parser.add_argument(
        "--extension",
        type=normalize_extension,
        default=config.file_extension,
        help=f"Generated file extension (default: {config.file_extension})",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )
    parser.add_argument(
        "--no-empty",
        action="store_true",
        help="Reject enums that declare no values",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create or overwrite an enum")
    create.add_argument("name", help="Enum type name (also the file name)")
    create.add_argument("values", nargs="*", help="Enum value names, in order")
    create.add_argument(
        "--namespace",
        default=None,
        help=f"Dot-separated namespace (default: {config.default_namespace})",
    )

    delete = subparsers.add_parser("delete", help="Delete an enum")
    delete.add_argument("name", help="Enum type name")

    listing = subparsers.add_parser("list", help="List generated enums")
    listing.add_argument("--sort", action="store_true", help="Sort names alphabetically")

    show = subparsers.add_parser("show", help="Print the values of an enum")
    show.add_argument("name", help="Enum type name")

    apply = subparsers.add_parser("apply", help="Create every enum in a YAML definition file")
    apply.add_argument("file", help="Path to the YAML definition file")

    return parser


def _report(result: CreateResult) -> None:
    if result.ok:
        print(f"{result.outcome}: {result.name} -> {result.path}")
    else:
        logger.error(f"{result.name}: [{result.validation.reason}] {result.validation.message}")


def main(argv: Optional[List[str]] = None) -> int:
    config = EnumDesignerConfig.from_env()
    args = _build_parser(config).parse_args(argv)

    config.output_dir = args.output_dir
    config.file_extension = args.extension
    config.log_level = args.log_level
    if args.no_empty:
        config.allow_empty_values = False
    config.set_logging()

    try:
        designer = EnumDesigner(config)

        if args.command == "create":
            result = designer.create(args.name, args.values, args.namespace)
            _report(result)
            if not result.ok:
                return EXIT_INVALID
        elif args.command == "delete":
            path = designer.delete(args.name)
            print(f"deleted: {args.name} -> {path}")
        elif args.command == "list":
            for name in designer.list_definitions(sort=args.sort):
                print(name)
        elif args.command == "show":
            definition = designer.read_definition(args.name)
            print(f"{definition.namespace_str}.{definition.name}")
            for value in definition.values:
                print(f"  {value}")
        elif args.command == "apply":
            results = designer.apply_file(args.file)
            for result in results:
                _report(result)
            if not all(result.ok for result in results):
                return EXIT_INVALID
    except (EnumDesignerError, OSError) as exc:
        logger.error(str(exc))
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
