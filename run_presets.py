#!/usr/bin/env python3
"""
🎯 Preset Flash Sale Scenarios
==============================
Pre-configured flash sale runs from a quick smoke check to a full stampede.

Usage:
    python run_presets.py http://localhost:3000 smoke
    python run_presets.py http://localhost:3000 drip --report json
    python run_presets.py http://localhost:3000 stampede --i-know-what-im-doing
"""

import asyncio
import sys

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from flash_sale_load_test import (
    DispatchMode,
    LoadTestConfig,
    LoadTestError,
    LoadTester,
    ReportFormat,
    ReportGenerator,
)

console = Console()

# =============================================================================
# PRESET CONFIGURATIONS
# =============================================================================

PRESETS = {
    # -------------------------------------------------------------------------
    # BURST PRESETS
    # -------------------------------------------------------------------------
    "smoke": {
        "name": "🌱 Smoke Check",
        "description": "10 simultaneous buyers, verifies setup end to end",
        "mode": "concurrent",
        "params": {
            "user_count": 10,
        },
        "inventory": 5,
    },
    "rush": {
        "name": "🏃 Checkout Rush",
        "description": "100 simultaneous buyers for 50 items",
        "mode": "concurrent",
        "params": {
            "user_count": 100,
        },
        "inventory": 50,
    },
    "oversell": {
        "name": "🔥 Oversell Hunt",
        "description": "200 simultaneous buyers for only 10 items",
        "mode": "concurrent",
        "params": {
            "user_count": 200,
        },
        "inventory": 10,
    },

    # -------------------------------------------------------------------------
    # STAGGERED PRESETS
    # -------------------------------------------------------------------------
    "drip": {
        "name": "💧 Drip Feed",
        "description": "100 buyers, one every 50ms",
        "mode": "staggered",
        "params": {
            "user_count": 100,
            "stagger_ms": 50,
        },
        "inventory": 50,
    },
    "trickle": {
        "name": "🐢 Slow Trickle",
        "description": "50 buyers, one every 200ms",
        "mode": "staggered",
        "params": {
            "user_count": 50,
            "stagger_ms": 200,
        },
        "inventory": 25,
    },

    # -------------------------------------------------------------------------
    # EXTREME PRESETS (USE WITH CAUTION!)
    # -------------------------------------------------------------------------
    "stampede": {
        "name": "☢️ STAMPEDE",
        "description": "2000 simultaneous buyers for 50 items",
        "mode": "concurrent",
        "params": {
            "user_count": 2000,
        },
        "inventory": 50,
        "dangerous": True,
    },
}


def print_presets():
    """Print all available presets."""
    console.print("\n[bold]Available Presets:[/bold]\n")

    categories = [
        ("Burst", ["smoke", "rush", "oversell"]),
        ("Staggered", ["drip", "trickle"]),
        ("☢️ EXTREME", ["stampede"]),
    ]

    for category, preset_names in categories:
        console.print(f"[bold cyan]{category}:[/bold cyan]")
        for name in preset_names:
            preset = PRESETS[name]
            danger_flag = "[red]⚠️ DANGEROUS[/red] " if preset.get("dangerous") else ""
            console.print(f"  {name:<10} {preset['name']:<22} {danger_flag}- {preset['description']}")
        console.print("")


async def run_preset(
    url: str,
    preset_name: str,
    dangerous_confirmed: bool = False,
    report_format: str = "console",
    show_live: bool = True,
) -> int:
    """Run a preset scenario. Returns the process exit code."""
    if preset_name not in PRESETS:
        console.print(f"[red]Unknown preset: {preset_name}[/red]")
        print_presets()
        return 1

    preset = PRESETS[preset_name]

    # Safety check for dangerous presets
    if preset.get("dangerous") and not dangerous_confirmed:
        console.print(Panel(
            f"[bold red]⚠️  WARNING: {preset['name']} is DANGEROUS![/bold red]\n\n"
            f"{preset['description']}\n\n"
            f"This registers thousands of accounts and can overwhelm the target:\n"
            f"  • Service outages\n"
            f"  • Rate limiting/IP bans\n"
            f"  • Database bloat from synthetic users\n\n"
            f"[yellow]Only use on systems you own or have permission to test![/yellow]",
            title="⚠️ Dangerous Preset",
            border_style="red"
        ))
        if not Confirm.ask("Do you want to proceed?"):
            console.print("[dim]Cancelled.[/dim]")
            return 1

    console.print(Panel(
        f"[bold]{preset['name']}[/bold]\n\n{preset['description']}",
        title=f"Running Preset: {preset_name}",
        border_style="blue"
    ))

    config = LoadTestConfig(base_url=url, inventory_quantity=preset["inventory"])
    tester = LoadTester(config, show_live=show_live)

    try:
        report = await tester.run(DispatchMode(preset["mode"]), **preset["params"])
    except LoadTestError as e:
        console.print(Panel(f"[bold red]💥 Load test failed:[/bold red] {e}", border_style="red"))
        return 1

    ReportGenerator(report, url, config.displayed_errors).generate(format=ReportFormat(report_format))
    return 0


def main():
    if len(sys.argv) < 2:
        console.print("[bold]Usage:[/bold] python run_presets.py <URL> [PRESET] [--i-know-what-im-doing] [--report json|markdown]")
        print_presets()
        return

    if len(sys.argv) == 2:
        if sys.argv[1] in ["--help", "-h", "help"]:
            print_presets()
            return
        console.print("[red]Please provide both URL and preset name[/red]")
        print_presets()
        sys.exit(1)

    url = sys.argv[1]
    preset = sys.argv[2]
    dangerous_confirmed = "--i-know-what-im-doing" in sys.argv

    # Parse report format
    report_format = "console"
    for i, arg in enumerate(sys.argv):
        if arg == "--report" and i + 1 < len(sys.argv):
            report_format = sys.argv[i + 1]

    if report_format not in [f.value for f in ReportFormat]:
        console.print(f"[red]Unknown report format: {report_format}[/red]")
        sys.exit(1)

    sys.exit(asyncio.run(run_preset(url, preset, dangerous_confirmed, report_format)))


if __name__ == "__main__":
    main()
