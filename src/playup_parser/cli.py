#!/usr/bin/env python3
"""
Play UP Invoice Parser CLI
Converts Play UP invoice and color palette PDFs to import CSV.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .color_palette import ColorPaletteParser, render_color_csv
from .csv_renderer import format_price
from .invoice_parser import PlayUpInvoiceParser
from .models import ParseResult
from .pdf_extractor import PDFExtractionError
from .quantity_line import DEFAULT_LOOKAHEAD, DEFAULT_MAX_SIZE_QUANTITY

logger = logging.getLogger(__name__)

# Summaries go to stderr so stdout stays clean for CSV/JSON
console = Console(stderr=True)


def configure_logging(verbose: bool = False):
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def read_text_file(path: str) -> str:
    return Path(path).read_text(encoding='utf-8')


def write_output(content: str, output: Optional[str]):
    """Write content to a file, or to stdout when no file is given."""
    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(content)
        console.print(f"[green]💾 Results saved to: {output}[/green]")
    else:
        click.echo(content, nl=False)


def show_summary(result: ParseResult):
    table = Table(title=f"Play UP invoice: {result.product_count} products, {result.variant_count} variants")
    table.add_column("Article", style="cyan")
    table.add_column("Color")
    table.add_column("Description")
    table.add_column("Sizes")
    table.add_column("Price", justify="right")

    for product in result.products:
        sizes = ", ".join(f"{size}: {quantity}" for size, quantity in product.sizes.items())
        table.add_row(product.article, product.color_code, product.description,
                      sizes, f"€{format_price(product.price)}")
    console.print(table)


def show_colors(mappings: Dict[str, str]):
    table = Table(title=f"{len(mappings)} color mappings")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    for code, name in mappings.items():
        table.add_row(code, name)
    console.print(table)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose: bool):
    """Play UP PDF to CSV converter."""
    configure_logging(verbose)


@cli.command()
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(), help='Output file path (default: stdout)')
@click.option('--format', 'output_format', type=click.Choice(['csv', 'json']), default='csv',
              show_default=True, help='Output format')
@click.option('--raw-sizes', is_flag=True, help='Keep size labels as printed (3M) instead of Dutch (3 maand)')
@click.option('--lookahead', type=click.IntRange(min=1), default=DEFAULT_LOOKAHEAD, show_default=True,
              help='Lines after a product header searched for its quantities')
@click.option('--max-size-quantity', type=click.IntRange(min=1), default=DEFAULT_MAX_SIZE_QUANTITY,
              show_default=True, help='Largest number read as a per-size quantity')
@click.option('--text', 'is_text', is_flag=True, help='Input is already-extracted UTF-8 text, not a PDF')
@click.pass_context
def parse(ctx, input_path: str, output: Optional[str], output_format: str, raw_sizes: bool,
          lookahead: int, max_size_quantity: int, is_text: bool):
    """Parse a Play UP invoice into product import CSV."""
    parser = PlayUpInvoiceParser(
        lookahead=lookahead,
        max_size_quantity=max_size_quantity,
        dutch_sizes=not raw_sizes,
    )

    try:
        if is_text:
            result = parser.parse_text(read_text_file(input_path))
        else:
            result = parser.parse_pdf(input_path)
    except PDFExtractionError as e:
        logger.error(f"❌ {e}")
        raise click.ClickException(str(e))

    if not result.success:
        console.print(Panel(result.debug_text or "", title="Extracted text (first 2000 characters)",
                            border_style="red"))
        console.print("[red]❌ No products found in PDF. Check the debug output above.[/red]")
        ctx.exit(1)

    show_summary(result)

    if output_format == 'json':
        content = json.dumps(result.to_dict(), indent=2, ensure_ascii=False) + "\n"
    else:
        content = result.csv
    write_output(content, output)


@cli.command()
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(), help='Output file path (default: stdout)')
@click.option('--text', 'is_text', is_flag=True, help='Input is already-extracted UTF-8 text, not a PDF')
@click.pass_context
def colors(ctx, input_path: str, output: Optional[str], is_text: bool):
    """Extract color code mappings from a Play UP color palette."""
    parser = ColorPaletteParser()

    try:
        if is_text:
            mappings = parser.parse_text(read_text_file(input_path))
        else:
            mappings = parser.parse_pdf(input_path)
    except PDFExtractionError as e:
        logger.error(f"❌ {e}")
        raise click.ClickException(str(e))

    if not mappings:
        console.print("[red]❌ No color mappings found. The PDF may be image-based; consider manual entry.[/red]")
        ctx.exit(1)

    show_colors(mappings)
    write_output(render_color_csv(mappings), output)


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
