#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/html_simple/cli.py
"""Command-line interface for html_simple.

The CLI is a small inspection tool around the library: it renders a sample
document, lists the known tags, and shows how the sanitizer treats URLs and
attributes.

Examples
--------
Render the sample document::

    $ html-simple demo

List void tags in a table::

    $ html-simple tags --void-only --rich

Check how URLs are sanitized::

    $ html-simple check-url "javascript:alert(1)" "/a/b" "https://example.com?a=1&b=2"

Check how an attribute would be emitted::

    $ html-simple check-attr onclick "alert('hi')"
    data-onclick="alert(&#x27;hi&#x27;)"

"""

import argparse
import logging
import sys
from typing import Any, TextIO

from html_simple.exceptions import DependencyError, HtmlSimpleError, ValidationError
from html_simple.generator import Generator
from html_simple.logging_utils import configure_logging
from html_simple.options import GeneratorOptions
from html_simple.security import sanitize_url
from html_simple.tags import TAG_TABLE, method_name_for

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3


def check_rich_available() -> bool:
    """Check if the Rich library is available."""
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used.

    Rich output is used when ``--rich`` is set and either ``--force-rich`` is
    set or the output stream is a TTY.

    Raises
    ------
    DependencyError
        If ``--rich`` is set but Rich is not installed

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        raise DependencyError(
            feature_name="Rich output",
            missing_packages=[("rich", "")],
            message="Rich output requires the optional 'rich' dependency. Install with: pip install html-simple[rich]",
        )

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def build_demo_document(generator: Generator) -> Generator:
    """Populate ``generator`` with a sample document exercising the sanitizer."""
    outer = generator.root.div().with_attrs(
        ("class", "container"),
        ("id", "main"),
        ("style", "color: red; background-color: #f0f0f0;"),
        ("onclick", "alert('Hello!')"),
    )

    inner = outer.div().with_attrs(("class", "content"), ("data-id", "inner"))
    inner.br().attr("class", "clearfix").attr("class", "secondclass")
    inner.div().add_text("I AM THE CHILD CHILD")

    inner.a().with_attrs(
        ("href", "https://example.com?param=value&another=test"),
        ("style", "color: blue; font-weight: bold;"),
    ).add_text("Click me")

    inner.img().with_attrs(("src", "https://example.com/image.jpg"), ("alt", "Example Image"))
    inner.a().attr("href", "javascript:alert('XSS')").add_text("Don't click me")
    return generator


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rich", action="store_true", help="Use rich terminal output with formatting")
    parser.add_argument("--force-rich", action="store_true", help="Use rich output even when stdout is not a TTY")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``html-simple`` command."""
    parser = argparse.ArgumentParser(
        prog="html-simple",
        description="Build and inspect sanitized HTML.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Enable debug logging with timestamps")
    parser.add_argument("--strict", action="store_true", help="Raise on builder misuse instead of warning")

    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Render a sample document")
    _add_output_flags(demo)

    tags = subparsers.add_parser("tags", help="List known HTML tags")
    tags.add_argument("--void-only", action="store_true", help="Only list void elements")
    _add_output_flags(tags)

    check_url = subparsers.add_parser("check-url", help="Show the sanitized form of URLs")
    check_url.add_argument("urls", nargs="+", metavar="URL")

    check_attr = subparsers.add_parser("check-attr", help="Show how an attribute assignment is emitted")
    check_attr.add_argument("name", help="Attribute name")
    check_attr.add_argument("value", help="Attribute value")
    check_attr.add_argument(
        "--custom",
        action="append",
        default=[],
        metavar="NAME",
        help="Allow a custom attribute name (repeatable)",
    )

    return parser


def _print_html(markup: str, use_rich: bool) -> None:
    if use_rich:
        from rich.console import Console
        from rich.syntax import Syntax

        Console().print(Syntax(markup, "html", word_wrap=True))
    else:
        print(markup)


def _handle_demo(args: argparse.Namespace, options: GeneratorOptions) -> int:
    generator = build_demo_document(Generator(options=options))
    _print_html(generator.generate(), should_use_rich_output(args))
    return EXIT_SUCCESS


def _handle_tags(args: argparse.Namespace, options: GeneratorOptions) -> int:
    tags = [tag for tag in TAG_TABLE.values() if tag.is_void or not args.void_only]

    if should_use_rich_output(args):
        from rich.console import Console
        from rich.table import Table

        table = Table(title=f"HTML Tags ({len(tags)} tags)")
        table.add_column("Tag", style="cyan", no_wrap=True)
        table.add_column("Kind", style="yellow")
        table.add_column("Method", style="green")
        for tag in tags:
            table.add_row(tag.name, tag.kind.value, f"{method_name_for(tag.name)}()")
        Console().print(table)
        return EXIT_SUCCESS

    for tag in tags:
        print(f"{tag.name}\t{tag.kind.value}")
    return EXIT_SUCCESS


def _handle_check_url(args: argparse.Namespace, options: GeneratorOptions) -> int:
    for url in args.urls:
        sanitized = sanitize_url(url, fallback=options.url_fallback, blocked_schemes=options.blocked_url_schemes)
        print(f"{url}\t{sanitized}")
    return EXIT_SUCCESS


def _handle_check_attr(args: argparse.Namespace, options: GeneratorOptions) -> int:
    generator = Generator(custom_attributes=args.custom, options=options)
    element = generator.root.span().attr(args.name, args.value)
    for name, value in element.iter_attributes():
        print(f'{name}="{value}"')
    return EXIT_SUCCESS


_HANDLERS: dict[str, Any] = {
    "demo": _handle_demo,
    "tags": _handle_tags,
    "check-url": _handle_check_url,
    "check-attr": _handle_check_attr,
}


def main(args: list[str] | None = None) -> int:
    """Execute the ``html-simple`` command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    options = GeneratorOptions(strict=parsed_args.strict)
    try:
        return _HANDLERS[parsed_args.command](parsed_args, options)
    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except HtmlSimpleError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
