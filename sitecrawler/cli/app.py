#!/usr/bin/env python3
"""
CLI Application for the site crawler
"""

import asyncio
import json
import signal
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from sitecrawler.api.models import to_operation_result
from sitecrawler.cli.display import Display
from sitecrawler.cli.logger import Logger
from sitecrawler.crawl import (
    CancellationToken,
    CrawlConfig,
    FetchFailure,
    InvalidInput,
    OrchestrationFault,
    PageScraper,
    WebCrawler,
    create_job,
)

app = typer.Typer(
    name="sitecrawler",
    help="🕷️ Site Crawler - breadth-first crawl and page extraction",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()


@app.command()
def crawl(
    url: str = typer.Argument(..., help="Seed URL to start crawling from"),
    max_depth: int = typer.Option(2, "--max-depth", help="Maximum link depth from the seed"),
    max_pages: int = typer.Option(20, "--max-pages", help="Maximum number of pages to record"),
    all_origins: bool = typer.Option(False, "--all-origins", help="Follow links to other hosts"),
    delay: float = typer.Option(0.5, "--delay", help="Pause between requests in seconds"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the JSON report here"),
    log_level: str = typer.Option("INFO", "--log-level"),
):
    """Crawl a site and print a summary of every page"""
    Logger.setup_logging(log_level)
    config = CrawlConfig(request_delay=delay)

    try:
        job = create_job(url, max_depth=max_depth, max_pages=max_pages,
                         same_origin_only=not all_origins, config=config)
    except InvalidInput as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(2)

    Display.show_job(job.seed_url, job.max_depth, job.max_pages, job.same_origin_only)

    token = CancellationToken()
    previous_handler = signal.signal(signal.SIGINT, lambda signum, frame: token.cancel())
    crawler = WebCrawler(job, config)
    try:
        report = asyncio.run(crawler.crawl(token))
    except OrchestrationFault as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)
    finally:
        signal.signal(signal.SIGINT, previous_handler)
        crawler.fetcher.close()

    Display.show_pages(report)
    Display.show_statistics(report)

    if output is not None:
        result = to_operation_result("crawl", report.to_dict())
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False),
                          encoding="utf-8")
        console.print(f"✅ Report written to {output}", style="green")


@app.command()
def scrape(
    url: str = typer.Argument(..., help="Page URL to scrape"),
    log_level: str = typer.Option("WARNING", "--log-level"),
):
    """Fetch a single page and print its extracted content as JSON"""
    Logger.setup_logging(log_level)
    scraper = PageScraper(CrawlConfig())

    try:
        page = asyncio.run(scraper.scrape(url))
    except InvalidInput as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(2)
    except FetchFailure as failure:
        console.print(f"❌ {failure.message}", style="red")
        raise typer.Exit(1)
    finally:
        scraper.fetcher.close()

    result = to_operation_result("scrape", page.to_dict())
    typer.echo(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
