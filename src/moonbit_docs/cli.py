"""Command-line interface for the MoonBit docs processor."""

import asyncio

import click
from rich.console import Console
from rich.markup import escape

from moonbit_docs.bundle import SPLIT_PATH
from moonbit_docs.processor import DocsProcessor, FetchError, ProcessorConfig

console = Console()
err_console = Console(stderr=True)


@click.command()
@click.argument("urls", nargs=-1)
@click.option(
    "--output",
    "-o",
    default="./skills/moonbit-docs",
    help="Output directory, relative to the working directory; removed and recreated on every run",
)
@click.option(
    "--split-section",
    default=SPLIT_PATH,
    help="Path of the section split into one file per heading",
)
@click.option(
    "--heading-level",
    default=3,
    type=click.IntRange(min=1, max=6),
    help="Number of '#' characters of the headings used for splitting",
)
@click.option(
    "--timeout",
    default=30.0,
    type=float,
    help="Timeout in seconds for each request",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def main(
    ctx: click.Context,
    urls: tuple[str, ...],
    output: str,
    split_section: str,
    heading_level: int,
    timeout: float,
    verbose: bool,
) -> None:
    """Build the MoonBit docs skill from one or more documentation URLs.

    URLS: Pages containing `<!-- path: ... -->` section markers.

    Examples:

        moonbit-docs https://docs.moonbitlang.com/en/latest/llms.txt

        moonbit-docs URL1 URL2 -o ./skills/moonbit-docs
    """
    if not urls:
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(1)

    config = ProcessorConfig(
        output_dir=output,
        split_path=split_section,
        heading_level=heading_level,
        verbose=verbose,
        timeout=timeout,
    )

    processor = DocsProcessor(config)

    try:
        asyncio.run(processor.run(list(urls)))
    except FetchError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        ctx.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise click.Abort()


if __name__ == "__main__":
    main()
