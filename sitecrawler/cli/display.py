from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from sitecrawler.crawl.models import CrawlReport

console = Console()


class Display:
    @staticmethod
    def show_job(url: str, max_depth: int, max_pages: int, same_origin_only: bool):
        table = Table(title="⚙️ Crawl settings", show_header=False)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Start URL", url)
        table.add_row("Max depth", str(max_depth))
        table.add_row("Max pages", str(max_pages))
        table.add_row("Same origin only", "✅" if same_origin_only else "❌")

        console.print(table)
        console.print()

    @staticmethod
    def show_pages(report: CrawlReport):
        table = Table(title="🕷️ Crawled pages", show_header=True, header_style="bold magenta")
        table.add_column("Depth", justify="right", style="cyan")
        table.add_column("Status", justify="right")
        table.add_column("URL", overflow="fold")
        table.add_column("Title", overflow="ellipsis", max_width=40)

        for page in report.pages:
            status_style = "green" if page.ok else "red"
            table.add_row(
                str(page.depth),
                f"[{status_style}]{page.status_code or 'ERR'}[/{status_style}]",
                page.url,
                page.title if page.ok else (page.error or ""),
            )

        console.print(table)

    @staticmethod
    def show_statistics(report: CrawlReport):
        stats = report.statistics
        table = Table(title="📊 Crawl Summary", show_header=True, header_style="bold magenta")
        table.add_column("Metric", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("Pages crawled", str(stats.total_pages_crawled))
        table.add_row("✅ Successful", str(stats.successful_pages))
        table.add_row("❌ Failed", str(stats.failed_pages))
        table.add_row("Images", str(stats.total_images))
        table.add_row("Links", str(stats.total_links))
        table.add_row("Unique URLs", str(stats.unique_urls))
        table.add_row("Avg content length", str(stats.average_content_length))
        table.add_row("Depth reached", str(stats.crawl_depth_reached))

        for depth, count in report.summary.pages_by_depth:
            table.add_row(f"Pages at depth {depth}", str(count))
        for status_code, count in sorted(report.summary.status_codes.items()):
            table.add_row(f"Status {status_code}", str(count))

        console.print()
        console.print(table)

        if report.cancelled:
            console.print(Panel("Crawl was cancelled; report is partial.", border_style="yellow"))
