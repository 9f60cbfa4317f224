#!/usr/bin/env python3
"""
Image Format Benchmark - CLI Entry Point

Usage:
    python main.py
"""

import sys
import logging
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from imgbench import __version__
from imgbench.config import Config
from imgbench.codecs import get_codec
from imgbench.data.loader import ImageLoader
from imgbench.benchmark.runner import BenchmarkRunner
from imgbench.benchmark.metrics import aggregate
from imgbench.benchmark.reporter import Reporter

logger = logging.getLogger(__name__)

console = Console()


def setup_logging(level_name: str = "WARNING"):
    """Configure logging level."""
    level = getattr(logging, level_name.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    logging.getLogger("imgbench").setLevel(level)


@click.command()
def cli():
    """
    Image Format Benchmark

    Re-encodes the sample images into WebP, PNG, JPEG, AVIF and HEIF at
    maximum quality and reports size and encode time against the originals.
    """
    setup_logging(Config.LOG_LEVEL)

    console.print(f"\n[bold blue]Image Format Benchmark[/bold blue] v{__version__}")
    console.print(f"Assets: [cyan]{Config.ASSETS_DIR}[/cyan]")
    console.print("")

    images = ImageLoader(Config.ASSETS_DIR).load(Config.SAMPLE_IMAGES)
    codec = get_codec(Config.CODEC)
    logger.info(f"Using codec: {codec.display_name}")

    runner = BenchmarkRunner(codec)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Encoding...", total=None)

        runner.on_progress(
            lambda completed, total: progress.update(
                task, description=f"Encoding... {completed}/{total}"
            )
        )
        run = runner.run(images)

    stats = aggregate(run.results, run.original_total_size)

    reporter = Reporter(console)
    reporter.print_report(run, stats)


if __name__ == "__main__":
    cli()
