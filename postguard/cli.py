"""postguard CLI — check posts against compliance rules from the terminal."""

import json
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from postguard import __version__

console = Console()

_RISK_STYLES = {"Low": "green", "Medium": "yellow", "High": "red"}


def _build_engine(config_path: str | None):
    from postguard.config import ConfigError, config_from_env, load_config
    from postguard.engine import ComplianceEngine

    try:
        config = load_config(config_path) if config_path else config_from_env()
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="--config")
    return ComplianceEngine.from_config(config)


def _read_content(content: str | None, file: str | None) -> str:
    if file:
        with open(file) as f:
            return f.read()
    if content is None:
        raise click.UsageError("Provide CONTENT or --file.")
    return content


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """postguard — compliance checks for social and marketing posts.

    Flags banned phrases, pressure and income-claim wording, platform
    length and hashtag limits, and formatting or link red flags.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("content", required=False)
@click.option("--platform", "-p", required=True, help="Target platform id (e.g. twitter)")
@click.option("--file", "-f", "file", default=None, type=click.Path(exists=True, dir_okay=False), help="Read content from a file")
@click.option("--config", "-c", "config_path", default=None, help="YAML engine config")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--highlight/--no-highlight", default=True, help="Show the annotated content")
def check(content: str | None, platform: str, file: str | None, config_path: str | None, as_json: bool, highlight: bool):
    """Check CONTENT for publication on a platform.

    Exits with status 1 when the content is not compliant.
    """
    text = _read_content(content, file)
    engine = _build_engine(config_path)
    result = engine.check(text, platform)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        status = "[green]Compliant[/]" if result.is_compliant else "[red]Non-Compliant[/]"
        risk = result.risk_level.value
        console.print(
            Panel(
                f"{status}\nRisk level: [{_RISK_STYLES[risk]}]{risk}[/]\n{escape(result.summary)}",
                title=f"Compliance Result ({escape(platform)})",
            )
        )

        if result.violations:
            table = Table(title=f"Violations ({len(result.violations)} found)")
            table.add_column("#", style="dim", width=3)
            table.add_column("Type", style="cyan")
            table.add_column("Issue")
            table.add_column("Location", justify="right")

            for i, v in enumerate(result.violations):
                location = v.word_position or f"Character {v.position}"
                table.add_row(str(i + 1), v.label, escape(v.phrase[:60]), location)

            console.print(table)

            if highlight:
                console.print("\n[bold]Highlighted content:[/]")
                console.print(escape(engine.highlight(text, result.violations)))

    if not result.is_compliant:
        raise SystemExit(1)


# ── Highlight ────────────────────────────────────────────────────────


@main.command(name="highlight")
@click.argument("content")
@click.option("--platform", "-p", required=True, help="Target platform id")
@click.option("--config", "-c", "config_path", default=None, help="YAML engine config")
def highlight_cmd(content: str, platform: str, config_path: str | None):
    """Print CONTENT with violating phrases wrapped in <span> markers."""
    engine = _build_engine(config_path)
    result = engine.check(content, platform)
    click.echo(engine.highlight(content, result.violations))


# ── Platforms ────────────────────────────────────────────────────────


@main.command()
def platforms():
    """List supported platforms and their constraints."""
    from postguard.engine import PlatformRules

    table = Table(title="Platforms")
    table.add_column("Platform", style="cyan")
    table.add_column("Max length", justify="right")
    table.add_column("Hashtags", justify="center")
    table.add_column("Content kinds")

    for profile in PlatformRules().platforms():
        hashtags = "[green]required[/]" if profile.hashtags_required else "-"
        table.add_row(profile.platform, str(profile.max_length), hashtags, ", ".join(profile.content_kinds))

    console.print(table)


# ── Rules ────────────────────────────────────────────────────────────


@main.command()
@click.option("--config", "-c", "config_path", default=None, help="YAML engine config")
@click.option("--type", "-t", "type_filter", default=None, help="Only show phrases of this violation type")
def rules(config_path: str | None, type_filter: str | None):
    """List banned phrases and pattern rules."""
    engine = _build_engine(config_path)

    table = Table(title=f"Banned phrases ({len(engine.trie)})")
    table.add_column("Phrase", style="cyan")
    table.add_column("Type")
    for entry in sorted(engine.trie.phrases(), key=lambda e: (e.violation_type.value, e.phrase)):
        if type_filter and entry.violation_type.value != type_filter:
            continue
        table.add_row(entry.phrase, entry.violation_type.value)
    console.print(table)

    table = Table(title=f"Pattern rules ({len(engine.patterns.rules)})")
    table.add_column("Pattern", style="cyan")
    table.add_column("Type")
    for rule in engine.patterns.rules:
        if type_filter and rule.violation_type.value != type_filter:
            continue
        table.add_row(escape(rule.pattern.pattern), rule.violation_type.value)
    console.print(table)


if __name__ == "__main__":
    main()
