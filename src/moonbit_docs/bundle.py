"""Assemble and write the documentation bundle."""

import os
import shutil
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from moonbit_docs.sections import OutputFile, Section, split_by_heading, to_filename

console = Console()

INDEX_PATH = "language/index.md"
INTRODUCTION_PATH = "language/introduction.md"
SPLIT_PATH = "language/fundamentals.md"
SKILL_FILENAME = "SKILL.md"

LICENSE_HEADER = "\n".join(
    [
        "<!-- Derived from MoonBit documentation by moonbitlang -->",
        "<!-- https://github.com/moonbitlang/moonbit-docs -->",
        "<!-- Prose content (post July 4, 2024): CC BY-SA 4.0 -->",
        "<!-- Code examples: Apache 2.0 -->",
        "<!-- Modifications: Extracted and reformatted as Claude Code skill files -->",
    ]
)

FRONT_MATTER = "\n".join(
    [
        "---",
        "name: moonbit-docs",
        "description: MoonBit language reference covering syntax, types, functions, methods, "
        "and deriving. Use when writing MoonBit code, debugging MoonBit programs, or answering "
        "questions about MoonBit syntax and features.",
        "---",
    ]
)


@dataclass(frozen=True)
class Bundle:
    """Files planned for one run plus the introduction used by SKILL.md."""

    files: list[OutputFile]
    introduction: str | None = None


def build_bundle(
    sections: list[Section],
    split_path: str = SPLIT_PATH,
    heading_level: int = 3,
) -> Bundle:
    """Apply skip rules and sub-splitting to the parsed sections."""
    files: list[OutputFile] = []
    for section in sections:
        if section.path in (INDEX_PATH, INTRODUCTION_PATH):
            continue

        base_filename = to_filename(section.path)
        if section.path == split_path:
            files.extend(split_by_heading(section.content, base_filename, heading_level))
        else:
            files.append(OutputFile(filename=base_filename, content=section.content))

    introduction = next(
        (s.content for s in sections if s.path == INTRODUCTION_PATH),
        None,
    )
    return Bundle(files=files, introduction=introduction)


def render_file(content: str) -> str:
    """Prefix content with the license header."""
    return f"{LICENSE_HEADER}\n\n{content}\n"


def render_skill(bundle: Bundle) -> str:
    """Render SKILL.md: front matter, license, introduction and links."""
    links = "\n".join(f"- [{f.filename}](./{f.filename})" for f in bundle.files)
    introduction = bundle.introduction if bundle.introduction is not None else ""
    return (
        f"{FRONT_MATTER}\n\n"
        f"{LICENSE_HEADER}\n\n"
        f"{introduction}\n\n"
        "## Related Documentation\n\n"
        f"{links}\n"
    )


def reset_output_dir(output_dir: str) -> None:
    """Remove output_dir if present and create it again, empty."""
    try:
        shutil.rmtree(output_dir)
    except FileNotFoundError:
        pass
    os.makedirs(output_dir, exist_ok=True)


def write_bundle(bundle: Bundle, output_dir: str, verbose: bool = False) -> list[str]:
    """Write every planned file and SKILL.md. Returns the written paths."""
    written: list[str] = []

    for output_file in bundle.files:
        local_path = os.path.join(output_dir, output_file.filename)
        with open(local_path, "w", encoding="utf-8") as f:
            f.write(render_file(output_file.content))
        written.append(local_path)
        if verbose:
            console.print(f"[green]Wrote: {escape(local_path)}[/green]")

    skill_path = os.path.join(output_dir, SKILL_FILENAME)
    with open(skill_path, "w", encoding="utf-8") as f:
        f.write(render_skill(bundle))
    written.append(skill_path)
    if verbose:
        console.print(f"[green]Wrote: {escape(skill_path)}[/green]")

    return written
