"""Sweep CLI: sweep explain / sweep stage-url / sweep fields.

Entry point for the ``sweep`` command-line interface.  Every command is a
dry run: nothing is sent to a CDN.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sweep.config import SweepConfig
    from sweep.rules.classifier import ChangeSet
    from sweep.rules.purge_set import PurgeDecision, PurgeTarget


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the sweep CLI."""
    parser = argparse.ArgumentParser(
        prog="sweep",
        description="Decide which CDN URLs to purge when content changes.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument("--root", default=".", help="Directory holding sweep.yaml / sweep.toml")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sweep explain
    explain_parser = subparsers.add_parser(
        "explain",
        help="Show the purge decision for a lifecycle event",
    )
    explain_parser.add_argument(
        "event",
        choices=["pre-publish", "post-write", "post-delete"],
        help="Lifecycle moment",
    )
    explain_parser.add_argument(
        "--versioned", action="store_true", help="Object has draft and live versions",
    )
    explain_parser.add_argument(
        "--show-in-menu", action="store_true", help="Object's ShowInMenu flag is set",
    )
    explain_parser.add_argument(
        "--changed", action="append", default=[], metavar="FIELD",
        help="Changed field name (repeatable)",
    )
    explain_parser.add_argument(
        "--no-baseline", action="store_true",
        help="No previous version to compare against",
    )
    explain_parser.add_argument(
        "--link", action="append", default=[], metavar="URL",
        help="Relative URL of the object (repeatable)",
    )

    # sweep stage-url
    stage_parser = subparsers.add_parser(
        "stage-url",
        help="Print the draft variant of URLs",
    )
    stage_parser.add_argument("urls", nargs="+", metavar="URL", help="Relative URLs")

    # sweep fields
    subparsers.add_parser(
        "fields",
        help="List navigation-sensitive fields",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from sweep import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from sweep._errors import ConfigError
    from sweep.config_loader import load_config

    try:
        config = load_config(Path(args.root))
    except ConfigError as exc:
        print(f"  Config error: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.command == "explain":
        _explain(args, config)
    elif args.command == "stage-url":
        _stage_urls(args.urls, config)
    elif args.command == "fields":
        for name in sorted(config.nav_sensitive_fields):
            print(name)


def _explain(args: argparse.Namespace, config: SweepConfig) -> None:
    from sweep.lifecycle.decision import decide
    from sweep.rules.classifier import ChangeSet
    from sweep.rules.purge_set import compute

    changes = ChangeSet.unknown() if args.no_baseline else ChangeSet.of(args.changed)
    decision = decide(
        args.event,
        versioned=args.versioned,
        show_in_menu=args.show_in_menu,
        changes=changes,
        sensitive_fields=config.nav_sensitive_fields,
    )
    target = compute(
        decision,
        tuple(args.link),
        stage_param=config.stage_param,
        stage_value=config.stage_value,
    )
    print("\n".join(_explain_lines(args.event, decision, changes, target, config)))


def _explain_lines(
    event: str,
    decision: PurgeDecision,
    changes: ChangeSet,
    target: PurgeTarget,
    config: SweepConfig,
) -> list[str]:
    from sweep.rules.purge_set import PurgeEverything

    lines = [f"event:    {event}"]
    if decision.full:
        lines.append("decision: full purge")
    else:
        lines.append(f"decision: scoped purge ({decision.scope.name})")

    if event == "post-delete":
        if decision.full:
            lines.append("reason:   ShowInMenu flag set")
    elif not changes.known and decision.full:
        lines.append("reason:   no baseline to compare against")
    else:
        matched = sorted(changes.fields & config.nav_sensitive_fields)
        if matched and decision.full:
            lines.append(f"reason:   navigation fields changed: {', '.join(matched)}")

    if isinstance(target, PurgeEverything):
        lines.append("urls:     (entire site)")
    elif not target:
        lines.append("urls:     (none)")
    else:
        lines.append("urls:")
        lines.extend(f"  {url}" for url in target)
    return lines


def _stage_urls(urls: list[str], config: SweepConfig) -> None:
    from sweep.rules.variants import to_stage_variant

    for url in urls:
        print(to_stage_variant(url, param=config.stage_param, value=config.stage_value))


if __name__ == "__main__":
    main()
