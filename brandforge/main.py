"""
BrandForge — Brand Identity Wizard

Usage:
  python -m brandforge.main
  python -m brandforge.main --name Luminary --industry Technology --values Trust,Quality \\
      --sliders 50,70,60,40,55,30 --no-input
  python -m brandforge.main --open "https://brandforge.app/?name=Luminary&..."
  python -m brandforge.main --list-flags
  python -m brandforge.main --enable-flag export-kit
"""

from __future__ import annotations

import argparse
import logging
import math
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.rule import Rule
from rich.table import Table

from .accessibility import check_palette
from .assembler import assemble_brand
from .logo_client import LogoGenerationError, generate_logo_images
from .models import AUDIENCES, CORE_VALUES, INDUSTRIES, LOGO_STYLES, SLIDER_AXES, BrandInputs, BrandKit
from .palette_renderer import export_style_tile
from .share_link import ShareLinkError, decode_share_link, encode_share_link
from .store import FLAG_DEFINITIONS, BrandHistory, FeatureFlags, JsonFileStore, default_store_path
from .voice import brand_voice

load_dotenv()

console = Console()
logger = logging.getLogger(__name__)

OUTPUTS_ROOT = Path("outputs")


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="BrandForge — generate a brand identity in seconds"
    )
    parser.add_argument("--name", help="Brand name")
    parser.add_argument("--industry", help=f"One of: {', '.join(INDUSTRIES)}")
    parser.add_argument("--values", help="Comma-separated core values (max 3)")
    parser.add_argument("--audiences", help="Comma-separated audiences (max 3)")
    parser.add_argument("--sliders", help="Six comma-separated 0–100 values: "
                        + ", ".join(f"{a}↔{b}" for a, b in SLIDER_AXES))
    parser.add_argument("--logo-style", help=f"One of: {', '.join(LOGO_STYLES)}")
    parser.add_argument("--description", default="", help="One-sentence description")
    parser.add_argument("--open", dest="share_url", help="Load inputs from a shareable link")
    parser.add_argument("--no-input", action="store_true",
                        help="Generate once from arguments and exit (no prompts)")
    parser.add_argument("--logos", type=int, default=0,
                        help="Generate N logo images (max 4) via the image API")
    parser.add_argument("--output", default=None,
                        help="Output directory (default: outputs/<brand>)")
    parser.add_argument("--list-flags", action="store_true", help="Show feature flags and exit")
    parser.add_argument("--enable-flag", action="append", default=[], metavar="FLAG")
    parser.add_argument("--disable-flag", action="append", default=[], metavar="FLAG")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def _split(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _parse_sliders(raw: Optional[str]) -> List[float]:
    sliders: List[float] = []
    for item in _split(raw):
        try:
            value = float(item)
        except ValueError:
            value = math.nan
        if math.isfinite(value):
            sliders.append(value)
        else:
            console.print(f"  [yellow]⚠ Ignoring slider value '{escape(item)}'[/yellow]")
    return sliders


def inputs_from_args(args: argparse.Namespace) -> Optional[BrandInputs]:
    """BrandInputs from CLI arguments, or None if no name was given."""
    if not args.name:
        return None
    fields = {
        "name": args.name,
        "industry": args.industry or "Other",
        "values": _split(args.values),
        "audiences": _split(args.audiences),
        "sliders": _parse_sliders(args.sliders),
        "description": args.description,
    }
    if args.logo_style:
        fields["logo_style"] = args.logo_style
    return BrandInputs(**fields)


# ── Wizard ────────────────────────────────────────────────────────────────────

def _choose_one(label: str, options: List[str], default: str) -> str:
    for i, opt in enumerate(options, 1):
        console.print(f"    [cyan]{i:>2}[/cyan] {opt}")
    raw = Prompt.ask(f"  {label}", default=default).strip()
    if raw.isdigit() and 1 <= int(raw) <= len(options):
        return options[int(raw) - 1]
    return raw or default


def _choose_many(label: str, options: List[str], default: List[str]) -> List[str]:
    for i, opt in enumerate(options, 1):
        console.print(f"    [cyan]{i:>2}[/cyan] {opt}")
    raw = Prompt.ask(f"  {label} (comma-separated, up to 3)", default=", ".join(default))
    chosen: List[str] = []
    for item in _split(raw):
        if item.isdigit() and 1 <= int(item) <= len(options):
            item = options[int(item) - 1]
        if item not in chosen:
            chosen.append(item)
    return chosen[:3]


def _ask_slider(left: str, right: str, default: float) -> float:
    while True:
        raw = Prompt.ask(f"  {left} (0) ↔ {right} (100)", default=f"{default:g}")
        try:
            value = float(raw)
        except ValueError:
            value = math.nan
        if math.isfinite(value):
            return value
        console.print("  [yellow]⚠ Enter a number between 0 and 100[/yellow]")


def run_wizard(previous: Optional[BrandInputs] = None) -> BrandInputs:
    """Step through the wizard; answers from `previous` are offered as defaults."""
    prev = previous or BrandInputs(name="Untitled")

    console.print(Rule("[bold]Step 1/6 — Name[/bold]"))
    while True:
        name = Prompt.ask("  What's your brand name?",
                          default=previous.name if previous else None)
        if name and name.strip():
            break

    console.print(Rule("[bold]Step 2/6 — Industry[/bold]"))
    industry = _choose_one("Industry", INDUSTRIES, prev.industry)

    console.print(Rule("[bold]Step 3/6 — Values & audience[/bold]"))
    values = _choose_many("Core values", CORE_VALUES, prev.values)
    audiences = _choose_many("Audiences", AUDIENCES, prev.audiences)

    console.print(Rule("[bold]Step 4/6 — Personality[/bold]"))
    sliders = [
        _ask_slider(left, right, prev.sliders[i])
        for i, (left, right) in enumerate(SLIDER_AXES)
    ]

    console.print(Rule("[bold]Step 5/6 — Logo style[/bold]"))
    logo_style = _choose_one("Logo style", LOGO_STYLES, prev.logo_style)

    console.print(Rule("[bold]Step 6/6 — Description[/bold]"))
    description = Prompt.ask("  Describe your brand in a sentence (optional)",
                             default=prev.description)

    return BrandInputs(
        name=name,
        industry=industry,
        values=values,
        audiences=audiences,
        sliders=sliders,
        logo_style=logo_style,
        description=description,
    )


# ── Output helpers ────────────────────────────────────────────────────────────

def display_kit(kit: BrandKit) -> None:
    console.print(
        Panel(
            f"[bold]{kit.logo_icon}  {escape(kit.logo_text)}[/bold]\n[italic]{escape(kit.tagline)}[/italic]",
            title=f"[bold magenta]{escape(kit.name)}[/bold magenta] — {kit.vibe}",
            border_style="magenta",
        )
    )

    table = Table(title="Color Palette", show_lines=False)
    table.add_column("Role")
    table.add_column("Swatch")
    table.add_column("Name")
    table.add_column("Hex", style="dim")
    for c in kit.colors:
        table.add_row(c.role, f"[on {c.hex}]      [/]", c.name, c.hex)
    console.print(table)

    console.print(f"  [bold]Typography:[/bold] {kit.fonts.heading} / {kit.fonts.body}")
    console.print(f"  [bold]Personality:[/bold] {' · '.join(kit.personality)}")


def display_extras(kit: BrandKit, inputs: BrandInputs, flags: FeatureFlags) -> None:
    """Flag-gated sections below the kit."""
    if flags.get("brand-voice"):
        voice = brand_voice(kit, inputs.normalized_sliders())
        console.print(Panel(escape("\n".join(voice.as_lines())), title="Brand Voice", border_style="cyan"))

    if flags.get("a11y-checker"):
        table = Table(title="Contrast vs Background")
        table.add_column("Role")
        table.add_column("Ratio", justify="right")
        table.add_column("WCAG")
        for check in check_palette(kit.colors):
            style = "green" if check.passes_aa else "yellow" if check.passes_aa_large else "red"
            table.add_row(check.foreground.role, f"{check.ratio:.2f}:1", f"[{style}]{check.grade}[/{style}]")
        console.print(table)

    if flags.get("shareable-link"):
        console.print(f"  [bold]Share:[/bold] {encode_share_link(inputs)}")

    if flags.get("prompt-editor"):
        console.print(Panel(escape(kit.logo_prompt), title="Logo Prompt", border_style="dim"))


def _slug(text: str) -> str:
    return re.sub(r"[^a-zA-Z0-9_-]", "_", text.lower().strip())[:30] or "brand"


def output_dir_for(inputs: BrandInputs, override: Optional[str] = None) -> Path:
    """--output if given, else outputs/<brand slug>."""
    return Path(override) if override else OUTPUTS_ROOT / _slug(inputs.name)


def export_kit(kit: BrandKit, output_dir: Path) -> Path:
    path = export_style_tile(kit, output_dir / f"{_slug(kit.name)}_style_tile.png")
    console.print(f"  [green]✓ Style tile saved → {escape(str(path))}[/green]")
    return path


def generate_logos(kit: BrandKit, n: int, output_dir: Path, flags: FeatureFlags) -> List[Path]:
    prompt = kit.logo_prompt
    if flags.get("prompt-editor") and sys.stdin.isatty():
        prompt = Prompt.ask("  Logo prompt", default=prompt)

    console.print(f"  [dim]→ Generating {min(n, 4)} logo image(s)...[/dim]")
    try:
        images = generate_logo_images(prompt, n=n)
    except (ValueError, LogoGenerationError) as e:
        console.print(f"  [yellow]⚠ Logo generation failed: {escape(str(e))}[/yellow]")
        return []

    paths = []
    for i, image in enumerate(images, 1):
        try:
            paths.append(image.save(output_dir / f"{_slug(kit.name)}_logo_{i}.png"))
        except (OSError, LogoGenerationError) as e:
            console.print(f"  [yellow]⚠ Could not save logo {i}: {escape(str(e))}[/yellow]")
    for p in paths:
        console.print(f"  [green]✓ Logo → {escape(str(p))}[/green]")
    return paths


# ── Flags ─────────────────────────────────────────────────────────────────────

def manage_flags(args: argparse.Namespace, flags: FeatureFlags) -> bool:
    """Apply --enable/--disable/--list-flags. Returns True if the CLI should exit."""
    for name in args.enable_flag:
        flags.set(name, True)
    for name in args.disable_flag:
        flags.set(name, False)

    if args.list_flags or args.enable_flag or args.disable_flag:
        table = Table(title="Feature Flags")
        table.add_column("Flag")
        table.add_column("State")
        table.add_column("Description", style="dim")
        state = flags.all()
        for f in FLAG_DEFINITIONS:
            on = state[f["name"]]
            table.add_row(f["name"], "[green]on[/green]" if on else "off", f["description"])
        console.print(table)
        return not (args.name or args.share_url)
    return False


# ── Generate / regenerate loop ────────────────────────────────────────────────

def generate_once(inputs: BrandInputs, history: BrandHistory, flags: FeatureFlags) -> BrandKit:
    kit = assemble_brand(inputs)
    history.save(kit)
    history.save_session(inputs)
    display_kit(kit)
    display_extras(kit, inputs, flags)
    return kit


def review_loop(
    inputs: BrandInputs,
    history: BrandHistory,
    flags: FeatureFlags,
    output: Optional[str] = None,
    logos: int = 0,
) -> None:
    """Regenerate / New / Logo / Export / Quit, until the user quits."""
    output_dir = output_dir_for(inputs, output)
    kit = generate_once(inputs, history, flags)
    if logos > 0:
        generate_logos(kit, logos, output_dir, flags)

    while True:
        choices = ["r", "n", "l", "q"]
        hint = "[r]egenerate  [n]ew brand  [l]ogo images"
        if flags.get("export-kit"):
            choices.insert(3, "e")
            hint += "  [e]xport tile"
        hint += "  [q]uit"
        console.print(f"\n  [dim]{hint}[/dim]")

        action = Prompt.ask("  Next", choices=choices, default="r")
        if action == "q":
            break
        elif action == "r":
            console.print(Rule("[bold]Regenerating[/bold]"))
            kit = generate_once(inputs, history, flags)
        elif action == "n":
            inputs = run_wizard(previous=None)
            output_dir = output_dir_for(inputs, output)
            kit = generate_once(inputs, history, flags)
        elif action == "l":
            raw = Prompt.ask("  How many variations?", choices=["1", "2", "3", "4"], default="1")
            generate_logos(kit, int(raw), output_dir, flags)
        elif action == "e":
            export_kit(kit, output_dir)

    console.print(f"[dim]{len(history.list())} brand(s) in history.[/dim]")


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    store = JsonFileStore(default_store_path())
    flags = FeatureFlags(store)
    history = BrandHistory(store)

    try:
        if manage_flags(args, flags):
            return
    except KeyError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e.args[0]))}")
        sys.exit(2)

    console.print(Rule("[bold magenta]BrandForge[/bold magenta]"))

    try:
        if args.share_url:
            inputs = decode_share_link(args.share_url)
        else:
            inputs = inputs_from_args(args)
    except (ShareLinkError, ValidationError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(2)

    if inputs is None:
        if args.no_input:
            console.print("[bold red]Error:[/bold red] --no-input needs --name or --open")
            sys.exit(2)
        inputs = run_wizard(previous=history.load_session())

    output_dir = output_dir_for(inputs, args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    if args.no_input:
        kit = generate_once(inputs, history, flags)
        if flags.get("export-kit"):
            export_kit(kit, output_dir)
        if args.logos > 0:
            generate_logos(kit, args.logos, output_dir, flags)
        return

    review_loop(inputs, history, flags, args.output, logos=args.logos)


if __name__ == "__main__":
    main()
