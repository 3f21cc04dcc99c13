"""CLI for site-intel: synthesize / research commands."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from site_intel.core.config import AppSettings, ObservabilityConfig, ResearchConfig
from site_intel.core.logging_config import setup_logging
from site_intel.core.startup_checks import validate_settings
from site_intel.exceptions import ResearchTimeoutError, SiteIntelError
from site_intel.formatters.json_formatter import JSONFormatter
from site_intel.research.client import ResearchClient
from site_intel.research.prompts import EXAMPLE_ADDRESS
from site_intel.services.report_service import ReportService
from site_intel.synthesis.models import TOPICAL_SECTIONS, RiskLevel, SiteReport, SynthesisResult
from site_intel.synthesis.pipeline import synthesize as synthesize_markdown
from site_intel.synthesis.section_patterns import SECTION_LABELS

app = typer.Typer(name="site-intel", help="Site intelligence reports from AI research")
console = Console()

_RISK_STYLES = {
    RiskLevel.LOW: "green",
    RiskLevel.MODERATE: "yellow",
    RiskLevel.HIGH: "bold red",
}


def _configure_logging(verbose: bool) -> None:
    setup_logging(ObservabilityConfig(log_level="DEBUG" if verbose else "WARNING", json_logs=False))


def _build_settings(api_key: Optional[str], model: Optional[str]) -> AppSettings:
    """Build settings, overriding env defaults with CLI flags."""
    overrides: dict = {}
    if api_key:
        overrides["api_key"] = api_key
    if model:
        overrides["model"] = model
    return AppSettings(research=ResearchConfig(**overrides))


def render_result(result: SynthesisResult, title: str = "Intelligence Report") -> None:
    """Print summary, findings per section, sources and risk level."""
    console.print(f"\n[bold]{title}[/bold]")
    style = _RISK_STYLES[result.risk_level]
    console.print(f"Community risk: [{style}]{result.risk_level.value}[/{style}]")

    if result.summary:
        console.print(f"\n[bold]Executive Summary[/bold]\n{result.summary}")

    for name in TOPICAL_SECTIONS:
        findings = result.findings(name)
        label = SECTION_LABELS[name]
        if not findings:
            console.print(f"\n[bold]{label}[/bold] [dim]No results[/dim]")
            continue

        table = Table(title=label, title_justify="left", show_lines=False)
        table.add_column("Date", style="cyan", no_wrap=True)
        table.add_column("Finding", max_width=100)
        for finding in findings:
            table.add_row(finding.date or "", finding.text)
        console.print(table)

    if result.sources:
        table = Table(title="Sources", title_justify="left")
        table.add_column("Title", style="green")
        table.add_column("URL", style="blue")
        for source in result.sources:
            table.add_row(source.title, source.url)
        console.print(table)


class _RecordingClient:
    """Keeps the raw markdown so ``--save-markdown`` can write it."""

    def __init__(self, inner: ResearchClient) -> None:
        self._inner = inner
        self.markdown = ""

    async def research(self, address: str) -> str:
        self.markdown = await self._inner.research(address)
        return self.markdown


def _emit(report: SynthesisResult | SiteReport, as_json: bool, output: Optional[Path]) -> None:
    formatter = JSONFormatter()
    if output:
        formatter.format_to_file(report, output)
        console.print(f"[green]Report saved to {output}[/green]")
    if as_json:
        console.print_json(formatter.format(report).decode())


@app.command()
def synthesize(
    markdown_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Markdown research report"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
    output: Optional[Path] = typer.Option(None, help="Write the JSON result to this path"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Synthesize a markdown research report into structured findings."""
    _configure_logging(verbose)

    result = synthesize_markdown(markdown_file.read_text(encoding="utf-8"))

    _emit(result, as_json, output)
    if not as_json:
        render_result(result, title=markdown_file.name)


@app.command()
def research(
    address: Optional[str] = typer.Argument(None, help="Property address to research"),
    example: bool = typer.Option(False, "--example", help=f"Use {EXAMPLE_ADDRESS!r}"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
    output: Optional[Path] = typer.Option(None, help="Write the JSON report to this path"),
    save_markdown: Optional[Path] = typer.Option(None, "--save-markdown", help="Keep the raw markdown"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Research API key"),
    model: Optional[str] = typer.Option(None, "--model", help="Research model name"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Research an address and render the intelligence report."""
    _configure_logging(verbose)

    if example:
        address = EXAMPLE_ADDRESS
    if not address or not address.strip():
        raise typer.BadParameter("Provide an address or use --example", param_hint="ADDRESS")

    settings = _build_settings(api_key, model)
    try:
        validate_settings(settings)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2) from e

    async def _run() -> tuple[SiteReport, str]:
        async with ResearchClient(settings.research) as client:
            recorder = _RecordingClient(client)
            report = await ReportService(recorder).generate(address)
            return report, recorder.markdown

    console.print(f"[bold]Researching {address}[/bold] (this can take several minutes)")
    try:
        report, markdown = asyncio.run(_run())
    except ResearchTimeoutError as e:
        console.print("[red]Research is taking longer than expected. Please try again.[/red]")
        raise typer.Exit(code=1) from e
    except SiteIntelError as e:
        console.print(f"[red]Unable to generate report:[/red] {e}")
        raise typer.Exit(code=1) from e

    if save_markdown:
        save_markdown.write_text(markdown, encoding="utf-8")
        console.print(f"[green]Markdown saved to {save_markdown}[/green]")

    _emit(report, as_json, output)
    if not as_json:
        render_result(report.result, title=report.address)


if __name__ == "__main__":
    app()
