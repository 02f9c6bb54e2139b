"""Command-line entry point for the todo example."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tiny_ioc.core import (
    AppSettings,
    Container,
    ContainerError,
    configure_logging,
    load_app_settings,
)
from tiny_ioc.todo import AddTodoController, build_container


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(description="tiny-ioc todo example")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file containing configuration overrides.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="info",
        choices=["info", "add"],
        help="Operation to execute.",
    )
    parser.add_argument(
        "names",
        nargs="*",
        help="Todo names for the add command.",
    )
    return parser


def execute(args: argparse.Namespace, settings: AppSettings) -> int:
    """Execute the requested CLI command and return an exit code."""
    container = build_container(settings)
    try:
        if args.command == "info":
            _run_info(container, settings)
        elif args.command == "add":
            if not args.names:
                print("Nothing to add: pass at least one todo name.")
                return 2
            _run_add(container, args.names)
    except (ContainerError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1
    return 0


def main() -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    settings = load_app_settings(env_file=args.env_file)
    configure_logging(settings.logging)
    sys.exit(execute(args, settings))


def _run_info(container: Container, settings: AppSettings) -> None:
    print("Registered providers:")
    for name in container.registered_tokens():
        print(f"  {name}")
    print(f"Cycle detection: {'on' if settings.container.detect_cycles else 'off'}")
    print(f"Type keys: {settings.container.type_keys}")


def _run_add(container: Container, names: list[str]) -> None:
    """Add each todo through the controller and print the result."""
    controller: AddTodoController = container.resolve(AddTodoController)
    for name in names:
        todo = controller.handle(name)
        print(f"{todo.id}  {todo.name}")


if __name__ == "__main__":
    main()
