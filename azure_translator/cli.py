"""CLI for azure-translator - Microsoft / Azure Translator connector."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from typing import Any

from .i18n import I18nDiagnostics, diagnose as diagnose_i18n
from .preferences import (
    ENV_KEY,
    PROPERTY_NEURAL,
    PROPERTY_REGION,
    PROPERTY_SUBSCRIPTION_KEY,
    PROPERTY_V2,
    MemoryPreferenceStore,
    get_region,
    is_neural_enabled,
    validate_preferences,
)
from .translation import (
    ProtocolMetadata,
    TranslationConfigError,
    TranslationNetworkError,
    TranslationService,
)

__all__ = ["DiagnosticReport", "diagnose", "main"]


@dataclass
class DiagnosticReport:
    """Diagnostic payload for the info command."""

    key_configured: bool
    region: str | None
    selected_protocol: str
    neural_enabled: bool
    available_protocols: list[str]
    endpoints: dict[str, str]
    cache: dict[str, Any]
    warnings: list[str]
    i18n: I18nDiagnostics

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False, indent=2)


def diagnose(environ: dict[str, str] | None = None) -> DiagnosticReport:
    """Programmatic entry point for diagnostics."""
    store = MemoryPreferenceStore.from_env(environ)
    service = TranslationService(store)
    try:
        config = service.config
        return DiagnosticReport(
            key_configured=bool(store.get_credential(PROPERTY_SUBSCRIPTION_KEY).strip()),
            region=get_region(store) or None,
            selected_protocol=service.selected_protocol().value,
            neural_enabled=is_neural_enabled(store),
            available_protocols=ProtocolMetadata.list_protocol_ids(),
            endpoints=dict(config["endpoints"]),
            cache=dict(config["cache"]),
            warnings=validate_preferences(store),
            i18n=diagnose_i18n(),
        )
    finally:
        service.close()


# =============================================================================
# Subcommand: info
# =============================================================================

def cmd_info(args: argparse.Namespace) -> int:
    """Show connector diagnostics."""
    report = diagnose()

    if args.as_json:
        print(report.to_json())
        return 0

    print("azure-translator diagnostics:")
    print(f"  Subscription key: {'configured' if report.key_configured else f'not set ({ENV_KEY})'}")
    print(f"  Region: {report.region or 'not set'}")
    print(f"  Protocol: {report.selected_protocol}")
    print(f"  Neural: {'yes' if report.neural_enabled else 'no'}")
    for name, url in report.endpoints.items():
        print(f"  {name}: {url}")
    print(f"  Cache: {report.cache['max_entries']} entries, ttl {report.cache['ttl_seconds']}s")

    for warning in report.warnings:
        print(f"  Warning: {warning}")

    if report.i18n.translator_registered:
        print(f"  Messages: {report.i18n.translator_name or 'translator'}")
    else:
        print(f"  Messages: built-in ({report.i18n.message_count} entries)")

    return 0


# =============================================================================
# Subcommand: protocols
# =============================================================================

def cmd_protocols(args: argparse.Namespace) -> int:
    """List available protocols."""
    protocols = ProtocolMetadata.get_all()
    for protocol_id, info in protocols.items():
        neural = " (neural)" if info.supports_neural else ""
        print(f"{protocol_id}: {info.display_name}{neural}")
    return 0


# =============================================================================
# Subcommand: translate
# =============================================================================

def _build_store(args: argparse.Namespace) -> MemoryPreferenceStore:
    store = MemoryPreferenceStore.from_env()
    if args.v2:
        store.set_preference(PROPERTY_V2, True)
    if args.neural:
        store.set_preference(PROPERTY_NEURAL, True)
    if args.region:
        store.set_preference(PROPERTY_REGION, args.region)
    return store


def cmd_translate(args: argparse.Namespace) -> int:
    """Translate text given on the command line or stdin."""
    text = " ".join(args.text) if args.text else sys.stdin.read()
    if not text.strip():
        print("Error: No text to translate", file=sys.stderr)
        return 1

    store = _build_store(args)
    for warning in validate_preferences(store):
        print(f"Warning: {warning}", file=sys.stderr)

    try:
        with TranslationService(store) as service:
            result = service.translate_result(args.source_lang, args.target_lang, text)
    except TranslationConfigError as e:
        print(f"Error: {e} (set {ENV_KEY})", file=sys.stderr)
        return 1
    except TranslationNetworkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not result.is_ok:
        print(f"Error: {result.reason}", file=sys.stderr)
        return 1

    print(result.text)
    return 0


# =============================================================================
# Main entry point
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="azure-translator",
        description="Microsoft / Azure Translator connector CLI.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # info command
    info_parser = subparsers.add_parser("info", help="Show connector diagnostics")
    info_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output as JSON",
    )
    info_parser.set_defaults(func=cmd_info)

    # protocols command
    protocols_parser = subparsers.add_parser("protocols", help="List available protocols")
    protocols_parser.set_defaults(func=cmd_protocols)

    # translate command
    translate_parser = subparsers.add_parser("translate", help="Translate text")
    translate_parser.add_argument(
        "text",
        nargs="*",
        help="Text to translate (reads stdin when omitted)",
    )
    translate_parser.add_argument(
        "--from",
        dest="source_lang",
        default="en",
        help="Source language tag (default: en)",
    )
    translate_parser.add_argument(
        "--to",
        dest="target_lang",
        required=True,
        help="Target language tag (e.g., de, zh-TW)",
    )
    translate_parser.add_argument(
        "--v2",
        action="store_true",
        help="Use the legacy V2 API",
    )
    translate_parser.add_argument(
        "--neural",
        action="store_true",
        help="Request the neural category (V2 only)",
    )
    translate_parser.add_argument(
        "--region",
        help="Azure resource region for the V3 API",
    )
    translate_parser.set_defaults(func=cmd_translate)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # No command specified - show help
    if args.command is None:
        parser.print_help()
        return 0

    # Execute the command
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
