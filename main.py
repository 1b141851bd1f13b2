"""
MDX API reference generator.
Turns one Python module into a documentation page with parameter tables,
docstrings and reconstructed source.
"""
import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from config import load_config
from documentation.doc_generator import DocGenerator
from utils.errors import DocGenError

# Initialize the Typer application and console
app = typer.Typer(help="Generate MDX API reference pages from Python modules")
console = Console()

# Global state
config = None


@app.callback()
def main(config_path: str = typer.Option("config.json", help="Path to a JSON config file"),
         verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output")):
    """
    MDX API reference generator.
    """
    global config

    config = load_config(config_path)

    log_level = getattr(logging, str(config.get('log_level', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(
        level=log_level if not verbose else logging.DEBUG,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


@app.command("generate")
def generate(
    file: str = typer.Option(..., "--file", "-f", help="Path to the Python file"),
    output_path: str = typer.Option(..., "--output-path", "-o", help="Output directory for the MDX file"),
    namespace: Optional[str] = typer.Option(None, help="Namespace used in the page heading")
):
    """
    Generate the MDX page of a Python file.
    """
    settings = dict(config or load_config())
    if namespace:
        settings['namespace'] = namespace

    try:
        result = DocGenerator(settings).generate_docs_for_file(file, output_path)
    except DocGenError as e:
        logging.error(str(e))
        console.print(f"[bold red]Error:[/] {e}")
        raise typer.Exit(code=1)

    console.print(f"Markdown file generated: {os.path.abspath(result['output_file'])}")

    stats_table = Table(title="Documentation statistics")
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Count", style="green")
    stats_table.add_row("Classes", str(result['classes_documented']))
    stats_table.add_row("Methods", str(result['methods_documented']))
    stats_table.add_row("Functions", str(result['functions_documented']))
    stats_table.add_row("Missing docstrings", str(len(result['missing_docstrings'])))
    console.print(stats_table)

    if result['missing_docstrings']:
        console.print("\n[yellow]Missing docstrings:[/]")
        for element in result['missing_docstrings'][:10]:
            console.print(f"- {element}")
        if len(result['missing_docstrings']) > 10:
            console.print(f"... and {len(result['missing_docstrings']) - 10} more")


@app.command("preview")
def preview(
    file: str = typer.Option(..., "--file", "-f", help="Path to the Python file")
):
    """
    Render the page of a Python file in the terminal without writing it.
    """
    try:
        content = DocGenerator(config or load_config()).render_file(file)
    except DocGenError as e:
        logging.error(str(e))
        console.print(f"[bold red]Error:[/] {e}")
        raise typer.Exit(code=1)

    console.print(Markdown(content))


if __name__ == "__main__":
    app()
