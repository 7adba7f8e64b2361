"""CLI entry point for the HTTP stress test tool."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Literal, NoReturn

from pydantic import ValidationError

from stress_test.dispatcher import LoadDispatcher
from stress_test.models.config import RunConfig
from stress_test.models.report import RunReport
from stress_test.requester import AiohttpRequester
from stress_test.summary import format_output, render_summary

OutputFormat = Literal["text", "json"]


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        """Print usage and exit with status 1."""
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    """Build the command line parser."""
    parser = ArgumentParser(
        prog="stress-test",
        description="stress-test is a simple CLI tool to test the performance "
        "of a web server",
    )
    parser.add_argument("-u", "--url", default="", help="URL to test")
    parser.add_argument(
        "-r",
        "--requests",
        type=int,
        default=10,
        help="Number of requests to perform",
    )
    parser.add_argument(
        "-c",
        "--concurrency",
        type=int,
        default=1,
        help="Number of multiple requests to make at a time",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: wait forever)",
    )
    parser.add_argument(
        "--verify-ssl",
        action="store_true",
        help="Validate server TLS certificates (disabled by default)",
    )
    parser.add_argument(
        "-o",
        "--output-format",
        choices=("text", "json"),
        default="text",
        help="Report format written to stdout",
    )
    return parser


def describe_validation_error(exc: ValidationError) -> Sequence[str]:
    """Turn pydantic errors into one readable message per problem."""
    messages: list[str] = []
    for error in exc.errors():
        if (cause := error.get("ctx", {}).get("error")) is not None:
            messages.append(str(cause))
        elif error["loc"]:
            field_name = ".".join(str(part) for part in error["loc"])
            messages.append(f"{field_name}: {error['msg']}")
        else:
            messages.append(error["msg"])
    return messages


def parse_config(
    parser: ArgumentParser, argv: Sequence[str] | None = None
) -> tuple[RunConfig, OutputFormat]:
    """Parse and validate flags, exiting with status 1 on invalid input."""
    args = parser.parse_args(argv)
    try:
        config = RunConfig(
            url=args.url,
            requests=args.requests,
            concurrency=args.concurrency,
            timeout=args.timeout,
            verify_ssl=args.verify_ssl,
        )
    except ValidationError as exc:
        for message in describe_validation_error(exc):
            print(message)
        parser.print_help()
        sys.exit(1)
    return config, args.output_format


async def run(config: RunConfig) -> RunReport:
    """Run the stress test described by the config."""
    async with AiohttpRequester.from_config(config) as requester:
        dispatcher = LoadDispatcher(requester=requester)
        return await dispatcher.run(config)


def write_report(report: RunReport, output_format: OutputFormat) -> None:
    """Print the report to stdout in the requested format."""
    if output_format == "json":
        print(json.dumps(format_output(report), indent=2))
    else:
        print()
        print(render_summary(report))


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    config, output_format = parse_config(build_parser(), argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    report = asyncio.run(run(config))
    write_report(report, output_format)
    sys.exit(0)


if __name__ == "__main__":  # pragma: no cover
    main()
