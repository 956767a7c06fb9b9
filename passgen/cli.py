"""CLI for passgen: generate, score, demo and config (show/set)."""

import argparse
import logging
import sys
from typing import List, Optional

from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import DEFAULTS, MODES, build_generator, config_path, load_config, save_config
from .evaluator import score_password
from .generator import Passgen
from .lang import Language, parse_language

logger = logging.getLogger(__name__)

DEMO_LENGTH = 8
DEMO_CHARSET = "bla@321."


def cmd_generate(args) -> int:
    cfg = load_config()
    if args.language:
        cfg["language"] = args.language
    if args.charset:
        cfg["custom_charset"] = args.charset
    gen = build_generator(cfg)
    if args.strong:
        gen.set_enabled_strong_usab(True)
    if args.no_lower:
        gen.set_enabled_letters(False)
    if args.no_upper:
        gen.set_enabled_uppercase_letters(False)
    if args.no_digits:
        gen.set_enabled_numbers(False)
    if args.no_symbols:
        gen.set_enabled_spec_symbols(False)

    length = args.length if args.length is not None else int(cfg["length"])
    for i in range(args.copies):
        pw = gen.generate(length)
        if not pw:
            print("[yellow]Nothing to generate: no rules are enabled.[/yellow]")
            return 1
        print(
            f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}  "
            f"[dim]({gen.password_strength_score()}/100, {gen.password_strength_level()})[/dim]"
        )
    return 0


def cmd_score(args) -> int:
    language = parse_language(args.language or load_config()["language"])
    result = score_password(args.password, language)
    header = f"Score: {result['score']} / 100 — {result['label']}"
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Component")
    table.add_column("Points", justify="right")
    table.add_row("Length", str(result["length_score"]))
    table.add_row("Variety", str(result["variety_score"]))
    table.add_row("Uniqueness", str(result["uniqueness_score"]))
    table.add_row("Penalty", f"-{result['penalty']}")
    table.add_row("Entropy bonus", str(result["entropy_bonus"]))
    print(Panel(table, title=header))
    print("[bold]Detections:[/bold]")
    for e in result["explanations"]:
        print(f" • {escape(e)}")
    return 0


def cmd_demo(args) -> int:
    """Show one password per built-in preset."""
    examples = [
        ("Strong & usability", Passgen.default_strong_and_usab()),
        ("Default", Passgen.default()),
        (f"Custom charset {DEMO_CHARSET!r}", Passgen.default().set_custom_charset(DEMO_CHARSET)),
    ]
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Preset")
    table.add_column("Password")
    for name, gen in examples:
        table.add_row(escape(name), escape(gen.generate(DEMO_LENGTH)))
    print(table)
    return 0


def cmd_config_show(args) -> int:
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan", title=config_path())
    table.add_column("Key")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, escape(str(cfg.get(key))))
    print(table)
    return 0


def cmd_config_set(args) -> int:
    key, value = args.key, args.value
    if key not in DEFAULTS:
        raise ValueError(f"unknown setting {key!r} (expected one of: {', '.join(DEFAULTS)})")
    if key == "length":
        value = int(value)
    elif key == "language":
        value = parse_language(value).value
    elif key == "mode" and value not in MODES:
        raise ValueError(f"unknown mode {value!r} (expected one of: {', '.join(MODES)})")
    cfg = load_config()
    cfg[key] = value
    path = save_config(cfg)
    print(f"[green]Saved[/green] {key} = {escape(repr(value))} to {escape(path)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    languages = [lang.value for lang in Language]

    parser = argparse.ArgumentParser(prog="passgen")
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length (minimum 4)")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--strong", action="store_true", help="Strong & usability mode")
    gen.add_argument("--charset", type=str, help="Custom character set (overrides every other rule)")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase letters")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase letters")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--language", choices=languages, help="Language of the strength label")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.add_argument("--language", choices=languages, help="Language of the strength label")
    sc.set_defaults(func=cmd_score)

    demo = sub.add_parser("demo", help="Generate one password per preset")
    demo.set_defaults(func=cmd_demo)

    c = sub.add_parser("config", help="Saved settings")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show saved settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Update a saved setting")
    c_set.add_argument("key", choices=list(DEFAULTS), help="Setting name")
    c_set.add_argument("value", type=str, help="New value")
    c_set.set_defaults(func=cmd_config_set)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return args.func(args)
    except ValueError as e:
        logger.debug("command failed", exc_info=True)
        print(f"[red]Error: {escape(str(e))}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())
