"""CLI entry-point: local generation runs and developer helpers."""

import asyncio
import re
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from siteforge.config import get_settings
from siteforge.generation import get_variant_plan
from siteforge.payments import expected_signature
from siteforge.state import build_state

app = typer.Typer(help="SiteForge: AI website mockups for small businesses")


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


@app.command()
def variants():
    """Show the design variants in generation order."""
    console = Console()
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#")
    table.add_column("Style")
    table.add_column("Palette")
    table.add_column("Description")
    for i, v in enumerate(get_variant_plan()):
        table.add_row(str(i), v.style, v.color_theme, v.description)
    console.print(table)


async def _generate(business_name: str, business_type: str, out_dir: Path, console: Console) -> int:
    state = build_state(get_settings())
    try:
        job = state.jobs.take(state.jobs.create(business_name, business_type).job_id)
        written = 0
        async for event in state.driver.run(job):
            if event.event == "error":
                console.print(f"[red]Error: {event.data['error']}[/red]")
                return 1
            if event.event == "done":
                console.print(f"[green]Done.[/green] {written} designs in {out_dir}")
                return 0
            index = event.data["index"]
            style = event.data["design"]["style"]
            path = out_dir / f"{index:02d}-{_slug(style)}.html"
            path.write_text(event.data["html"], encoding="utf-8")
            written += 1
            console.print(f"Wrote {path.name} ({style})")
        return 1
    finally:
        await state.aclose()


@app.command()
def generate(
    business_name: str = typer.Argument(..., help="Business name"),
    business_type: str = typer.Argument(..., help="Business type, e.g. 'Organic Restaurant'"),
    out: str = typer.Option(None, "--out", help="Output directory (default from SITEFORGE_OUTPUT_DIR or ./output)"),
):
    """Generate all design variants for a business and write them as HTML files."""
    console = Console()
    if not business_name.strip() or not business_type.strip():
        console.print("[red]Error: Business Name and Type are required.[/red]")
        raise typer.Exit(1)
    out_dir = Path(out) if out else get_settings().output_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    code = asyncio.run(_generate(business_name.strip(), business_type.strip(), out_dir, console))
    if code:
        raise typer.Exit(code)


@app.command()
def sign(
    order_id: str = typer.Argument(..., help="Razorpay order id"),
    payment_id: str = typer.Argument(..., help="Razorpay payment id"),
    secret: str = typer.Option(None, "--secret", help="Key secret (default RAZORPAY_KEY_SECRET)"),
):
    """Print the signature Razorpay would send for this order/payment pair."""
    console = Console()
    secret = secret or get_settings().razorpay_key_secret
    if not secret:
        console.print("[red]Error: no key secret given and RAZORPAY_KEY_SECRET is not set.[/red]")
        raise typer.Exit(1)
    console.print(expected_signature(order_id, payment_id, secret))


@app.command()
def serve(
    port: int = typer.Option(None, "--port", help="Port (default from PORT or 3001)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
):
    """Run the API server."""
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=port or get_settings().port, reload=reload)


if __name__ == "__main__":
    app()
