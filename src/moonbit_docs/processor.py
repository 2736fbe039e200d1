"""Fetch MoonBit documentation pages and turn them into a skill bundle."""

from dataclasses import dataclass

import httpx
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from moonbit_docs.bundle import SPLIT_PATH, build_bundle, reset_output_dir, write_bundle
from moonbit_docs.sections import Section, parse_sections

console = Console()


@dataclass
class ProcessorConfig:
    """Configuration for the documentation processor."""

    output_dir: str = "./skills/moonbit-docs"
    split_path: str = SPLIT_PATH
    heading_level: int = 3
    verbose: bool = False
    timeout: float = 30.0


@dataclass
class ProcessorStats:
    """Statistics for one processing run."""

    fetched: int = 0
    sections: int = 0
    written: int = 0


class FetchError(Exception):
    """Raised when a documentation page answers with a non-success status."""

    def __init__(self, url: str, status_code: int, reason: str):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {status_code} {reason}")


class DocsProcessor:
    """Fetch pages one by one, split them and write the bundle."""

    def __init__(self, config: ProcessorConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.transport = transport
        self.stats = ProcessorStats()

    async def _fetch(self, client: httpx.AsyncClient, url: str) -> str:
        """Download one page, raising FetchError on a non-success status."""
        response = await client.get(url, timeout=self.config.timeout)
        if not response.is_success:
            raise FetchError(url, response.status_code, response.reason_phrase)
        return response.text

    async def fetch_sections(self, urls: list[str]) -> list[Section]:
        """Fetch every URL in order and concatenate their sections."""
        sections: list[Section] = []

        async with httpx.AsyncClient(follow_redirects=True, transport=self.transport) as client:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
                disable=not console.is_terminal,
            ) as progress:
                task_id = progress.add_task("[cyan]Fetching pages...", total=len(urls))

                for url in urls:
                    text = await self._fetch(client, url)
                    page_sections = parse_sections(text)
                    sections.extend(page_sections)
                    self.stats.fetched += 1
                    if self.config.verbose:
                        console.print(
                            f"[dim]Fetched {escape(url)} ({len(page_sections)} sections)[/dim]"
                        )
                    progress.update(task_id, advance=1)

        return sections

    async def run(self, urls: list[str]) -> ProcessorStats:
        """Reset the output directory, fetch all pages and write the bundle."""
        reset_output_dir(self.config.output_dir)

        sections = await self.fetch_sections(urls)
        self.stats.sections = len(sections)

        bundle = build_bundle(sections, self.config.split_path, self.config.heading_level)
        written = write_bundle(bundle, self.config.output_dir, verbose=self.config.verbose)
        self.stats.written = len(written)

        console.print(
            f"Generated {self.stats.written} files in {escape(self.config.output_dir)}",
            soft_wrap=True,
        )
        return self.stats
