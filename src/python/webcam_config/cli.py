"""CLI entrypoint for saving and restoring webcam settings."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .backend import DirectShowBackend
from .constants import LOG_FORMAT
from .controller import WebcamConfigController
from .errors import ArgumentError, WebcamConfigError


@dataclass(frozen=True)
class Command:
    keyword: str
    description: str
    handler: Callable[[WebcamConfigController, argparse.Namespace], None]


def _file(ctrl: WebcamConfigController, args: argparse.Namespace) -> str:
    path = args.file or ctrl.config.settings_file
    if not path:
        raise ArgumentError(f"A file name (-f) is required for '{args.command[0]}'.")
    return path


def _camera_and_property(
    ctrl: WebcamConfigController, args: argparse.Namespace
) -> tuple[str, str]:
    # the configured camera only stands in for -c on single-property commands
    camera = args.camera or ctrl.config.camera
    if not camera or not args.property:
        raise ArgumentError(
            f"Camera (-c) and property (-p) are required for '{args.command[0]}'."
        )
    return camera, args.property


def run_names(ctrl: WebcamConfigController, args: argparse.Namespace) -> None:
    for name in ctrl.camera_names():
        print(f"Cam found: {name}")


def run_describe(ctrl: WebcamConfigController, args: argparse.Namespace) -> None:
    for line in ctrl.describe(args.camera):
        print(line)


def run_save(ctrl: WebcamConfigController, args: argparse.Namespace) -> None:
    path = _file(ctrl, args)
    snapshots = ctrl.save(path, args.camera)
    print(f"Saved settings of {len(snapshots)} camera(s) to {path}")


def run_load(ctrl: WebcamConfigController, args: argparse.Namespace) -> None:
    path = _file(ctrl, args)
    snapshots = ctrl.load(path, args.camera)
    print(f"Restored settings of {len(snapshots)} camera(s) from {path}")


def run_increment(ctrl: WebcamConfigController, args: argparse.Namespace) -> None:
    camera, prop = _camera_and_property(ctrl, args)
    value = ctrl.increment(camera, prop, args.step)
    print(f"{prop} of {camera} set to {value}")


def run_decrement(ctrl: WebcamConfigController, args: argparse.Namespace) -> None:
    camera, prop = _camera_and_property(ctrl, args)
    value = ctrl.decrement(camera, prop, args.step)
    print(f"{prop} of {camera} set to {value}")


COMMANDS: dict[str, Command] = {
    c.keyword: c
    for c in (
        Command("names", "print out the names of connected cameras.", run_names),
        Command(
            "describe",
            "print out the available properties of connected cameras. "
            "May be restricted to the camera identified by -c.",
            run_describe,
        ),
        Command(
            "save",
            "dump the settings of connected cameras into the file referred by -f. "
            "May be restricted to the camera identified by -c.",
            run_save,
        ),
        Command(
            "load",
            "set the cameras to the settings provided in the file referred by -f. "
            "May be restricted to the camera identified by -c.",
            run_load,
        ),
        Command(
            "increment",
            "raise property -p of camera -c by one step (or by -s, rounded up "
            "to the property's step size).",
            run_increment,
        ),
        Command(
            "decrement",
            "lower property -p of camera -c by one step (or by -s, rounded up "
            "to the property's step size).",
            run_decrement,
        ),
    )
}


def build_parser() -> argparse.ArgumentParser:
    epilog = "commands:\n" + "\n".join(
        f"  {c.keyword:<10} {c.description}" for c in COMMANDS.values()
    )
    parser = argparse.ArgumentParser(
        prog="webcam-config",
        description="Save and restore DirectShow webcam settings",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("-c", "--camera", help="name of the camera device to work with")
    parser.add_argument("-f", "--file", help="name of the settings file to work with")
    parser.add_argument("-p", "--property", help="name of the camera property to change")
    parser.add_argument(
        "-s",
        "--step",
        type=int,
        default=None,
        help="amount to change the property by (default: its step size)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("command", nargs="*", help="one of: " + ", ".join(COMMANDS))

    return parser


def resolve_command(commands: list[str]) -> Command:
    """Pick the single command of a run."""
    if not commands:
        raise ArgumentError("At least one command is required. Found none.")
    if len(commands) > 1:
        raise ArgumentError(
            f"Only one command per run is possible. Found {', '.join(commands)}."
        )
    try:
        return COMMANDS[commands[0]]
    except KeyError:
        raise ArgumentError(f"Command '{commands[0]}' is not known.") from None


def configure_logging(verbose: bool, level_name: str) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(
    argv: list[str] | None = None,
    backend: DirectShowBackend | None = None,
    config_path: Path | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    try:
        command = resolve_command(args.command)
        ctrl = WebcamConfigController(backend=backend, config_path=config_path)
        configure_logging(args.verbose, ctrl.config.log_level)
        command.handler(ctrl, args)
    except (WebcamConfigError, FileNotFoundError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
