import argparse
import json
import logging
import sys
from typing import Any

from fileprobe.adapters.files.factory import FileFactory
from fileprobe.container import container
from fileprobe.exceptions import BaseAppError
from fileprobe.use_cases.files.inspect_file import InspectFileUseCase


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fileprobe-inspect",
        description="Inspect a file on the configured target and print its attributes as JSON.",
    )
    parser.add_argument("path", help="Path of the file on the target")
    parser.add_argument(
        "--no-follow",
        dest="follow_symlink",
        action="store_false",
        help="Describe a symlink itself instead of its target",
    )
    parser.add_argument(
        "--checksums", action="store_true", help="Include md5 and sha256 digests"
    )
    parser.add_argument(
        "--os-family",
        default=None,
        help="linux, unix, bsd, windows, qnx, local or auto (default: FILEPROBE_OS_FAMILY)",
    )
    parser.add_argument(
        "--pretty", action="store_true", help="Pretty print output with colors"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every command that is run"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.os_family:
            factory = FileFactory(container.get_command_runner(), args.os_family)
            use_case = InspectFileUseCase(factory)
        else:
            use_case = container.get_inspect_file_use_case()

        result: dict[str, Any] = use_case.execute(
            args.path,
            follow_symlink=args.follow_symlink,
            include_checksums=args.checksums,
        )
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        container.reset()

    if args.pretty:
        from rich.console import Console

        Console().print_json(data=result)
    else:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
