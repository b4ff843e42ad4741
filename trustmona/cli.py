import argparse
import json
import logging

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from trustmona.analyzers.text_analyzer import analyze_text
from trustmona.analyzers.url_analyzer import analyze_url
from trustmona.config import LOG_LEVEL
from trustmona.errors import InvalidRequest
from trustmona.providers.registry import build_providers
from trustmona.types import StatusLabel

console = Console()

STATUS_STYLE = {
    StatusLabel.HIGH_RISK.value: "bold red",
    StatusLabel.MEDIUM_RISK.value: "bold yellow",
    StatusLabel.LOW_RISK.value: "bold green",
}


def detect_type(target: str) -> str:
    """Anything with whitespace reads as a message, the rest as a link."""
    return "text" if len(target.split()) > 1 else "url"


def display_result(data: dict, target: str) -> None:
    style = STATUS_STYLE.get(data.get("statusLabel"), "bold")

    if data.get("type") == "message_scan":
        header = f"[bold yellow]MESSAGE:[/bold yellow] {target[:80]}"
    else:
        header = f"[bold yellow]DOMAIN:[/bold yellow] {data.get('domain', '?')}"

    console.print(Panel(header, title=data.get("brand", "TrustMona"), expand=False))
    console.print(f"[bold]Mona score:[/bold] {data['monaScore']}")
    console.print(f"[{style}]{data['status']}[/{style}]")
    console.print(f"[bold]AI risk level:[/bold] {data['aiRiskLevel']}\n")

    reasons = data.get("reasons", [])
    if not reasons:
        console.print("[dim]No reasons given.[/dim]")
        return

    table = Table(title="Reasons", show_lines=True)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Reason", style="magenta")

    for i, reason in enumerate(reasons, 1):
        table.add_row(str(i), reason)

    console.print(table)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="TrustMona scam scoring CLI (link/message)",
    )
    parser.add_argument(
        "target",
        help="Link or message text to score",
    )
    parser.add_argument(
        "-t",
        "--type",
        choices=["auto", "url", "text"],
        default="auto",
        help="Force interpretation as link/message or auto-detect (default: auto)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON instead of pretty tables",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)

    providers = build_providers()
    scan_type = detect_type(args.target) if args.type == "auto" else args.type

    try:
        if scan_type == "text":
            result = analyze_text(args.target, providers)
        else:
            result = analyze_url(args.target, providers)
    except InvalidRequest as e:
        console.print(f"[bold red]Error:[/bold red] {e.message}")
        return 2

    if args.json:
        console.print_json(json.dumps(result))
    else:
        display_result(result, args.target)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
