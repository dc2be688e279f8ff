"""CLI for IntentPass - analyze, attack, benchmark, breach, config."""

import argparse
import logging
import sys
from typing import List, Optional

from rich import print, print_json
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .adversarial import analyze_adversarial, attack_vulnerabilities
from .benchmark import create_benchmark
from .config import breach_checker_from_config, config_path, load_config, policy_from_config
from .models import DiagnosticType
from .policy import get_policy
from .report import TIER_DESCRIPTIONS, build_report
from .scorer import analyze_password

_DIAGNOSTIC_STYLE = {
    DiagnosticType.STRENGTH: "[green]+[/green]",
    DiagnosticType.WARNING: "[yellow]![/yellow]",
    DiagnosticType.NEUTRAL: "[dim]-[/dim]",
}


def cmd_analyze(args):
    cfg = load_config()
    policy = get_policy(args.policy) if args.policy else policy_from_config(cfg)
    breach = None
    if args.breach or cfg.get("breach_check_enabled"):
        breach = breach_checker_from_config(cfg).check(args.password)
    report = build_report(args.password, policy=policy, breach=breach)

    if args.json:
        print_json(data=report.model_dump(mode="json", by_alias=True))
        return

    analysis = report.analysis
    header = f"Score: {analysis.overall_score} / 100 - {analysis.intentionality_category.value}"
    body = (
        f"Intentionality index: {analysis.intentionality_index:+.2f}\n"
        f"Tier: {report.tier.value} ({TIER_DESCRIPTIONS[report.tier]})\n"
        f"Entropy value: {analysis.entropy.entropy_value:.2f}\n"
        f"Segments: {escape(' | '.join(s.text for s in analysis.segmentation.segments))}"
    )
    print(Panel(body, title=header))

    if analysis.diagnostics:
        print("[bold]Diagnostics:[/bold]")
        for d in analysis.diagnostics:
            print(f" {_DIAGNOSTIC_STYLE[d.type]} {escape(d.message)}")

    if report.classification:
        c = report.classification
        print(f"\n[bold]Behavior:[/bold] {c.classification.value} ({c.confidence}% confidence)")
        print(f" {c.explanation}")

    if report.suggestions:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Impact")
        table.add_column("Suggestion")
        table.add_column("Example")
        for s in report.suggestions:
            table.add_row(s.impact.value, s.title, escape(s.example))
        print("\n")
        print(table)

    if report.policy:
        if report.policy.passes:
            print(f"\n[green]Meets the {policy.mode.value.lower()} policy.[/green]")
        else:
            print(f"\n[red]Violates the {policy.mode.value.lower()} policy:[/red]")
            for v in report.policy.violations:
                print(f" • {escape(v)}")

    if report.breach:
        if report.breach.error:
            print(f"\n[yellow]Breach check unavailable: {escape(report.breach.error)}[/yellow]")
        elif report.breach.is_breached:
            print(f"\n[red]Seen {report.breach.breach_count} times in known breaches.[/red]")
        else:
            print("\n[green]Not found in known breaches.[/green]")


def cmd_attack(args):
    analysis = analyze_password(args.password)
    adversarial = analyze_adversarial(args.password, analysis)
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Attack")
    table.add_column("Resistance", justify="right")
    table.add_column("Estimated time")
    for scenario in adversarial.scenarios():
        table.add_row(scenario.name, f"{scenario.resistance_percentage}%", scenario.estimated_time)
    print(table)
    print(f"[bold]Overall resistance:[/bold] {adversarial.overall_resistance}%")
    for v in attack_vulnerabilities(adversarial):
        print(f" • {escape(v)}")


def cmd_benchmark(args):
    analysis = analyze_password(args.password)
    bench = create_benchmark(args.password, analysis, analysis.overall_score)
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("System")
    table.add_column("Score", justify="right")
    table.add_column("Category")
    for result in (bench.intentpass, bench.rule_based, bench.zxcvbn):
        table.add_row(result.system, str(result.score), result.category.value)
    print(table)
    print(f"[bold]{bench.comparison.intentpass_advantage}[/bold]")
    for diff in bench.comparison.key_differences:
        print(f" • {diff}")


def cmd_breach(args):
    result = breach_checker_from_config(load_config()).check(args.password)
    if result.error:
        print(f"[yellow]Breach check failed: {escape(result.error)}[/yellow]")
    elif result.is_breached:
        print(f"[red]Password found in breaches ({result.breach_count} times).[/red]")
    else:
        print("[green]Password not found in known breaches.[/green]")


def cmd_config(args):
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan", title=config_path())
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(key, str(value))
    print(table)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(prog="intentpass")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    an = sub.add_parser("analyze", help="Analyze a password and show suggestions")
    an.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    an.add_argument("--policy", choices=["consumer", "enterprise"], help="Policy preset to check against")
    an.add_argument("--breach", action="store_true", help="Also query the breach database")
    an.add_argument("--json", action="store_true", help="Print the full report as JSON")
    an.set_defaults(func=cmd_analyze)

    at = sub.add_parser("attack", help="Estimate resistance to common attacks")
    at.add_argument("password", type=str)
    at.set_defaults(func=cmd_attack)

    bm = sub.add_parser("benchmark", help="Compare with rule-based and zxcvbn-like scoring")
    bm.add_argument("password", type=str)
    bm.set_defaults(func=cmd_benchmark)

    br = sub.add_parser("breach", help="Check the password against known breaches")
    br.add_argument("password", type=str)
    br.set_defaults(func=cmd_breach)

    cf = sub.add_parser("config", help="Show current settings")
    cf.set_defaults(func=cmd_config)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args.func(args)


if __name__ == "__main__":
    main()
