"""Split fetched documentation text into sections and sub-sections."""

import re
from dataclasses import dataclass

MARKER_PATTERN = re.compile(r"<!-- path: (.+?) -->")
MARKER_TOKEN = "<!-- path:"


@dataclass(frozen=True)
class Section:
    """A block of documentation introduced by a path marker."""

    path: str
    content: str


@dataclass(frozen=True)
class Heading:
    """A heading line found inside a section."""

    title: str
    position: int


@dataclass(frozen=True)
class OutputFile:
    """A file ready to be written into the bundle."""

    filename: str
    content: str


def parse_sections(text: str) -> list[Section]:
    """Split text into sections delimited by `<!-- path: ... -->` markers.

    Content runs from just after a marker up to the last marker token found
    before the next marker ends, or to the end of the text for the final one.
    Text before the first marker is ignored.
    """
    matches = [(m.group(1), m.end()) for m in MARKER_PATTERN.finditer(text)]

    sections: list[Section] = []
    for i, (path, start) in enumerate(matches):
        if i + 1 < len(matches):
            next_end = matches[i + 1][1]
            end = text.rfind(MARKER_TOKEN, 0, next_end + len(MARKER_TOKEN))
        else:
            end = len(text)
        sections.append(Section(path=path, content=text[start:end].strip()))

    return sections


def to_filename(path: str) -> str:
    """Map a section path like `language/foo_bar.md` to `language-foo-bar.md`."""
    stem = re.sub(r"\.md$", "", path)
    return stem.replace("/", "-").replace("_", "-") + ".md"


def to_kebab(heading: str) -> str:
    """Turn a heading title into a lowercase, hyphen-separated slug."""
    slug = re.sub(r"[^a-z0-9\s-]", "", heading.lower()).strip()
    return re.sub(r"\s+", "-", slug)


def find_headings(content: str, level: int = 3) -> list[Heading]:
    """Find every heading line with exactly `level` leading `#` characters."""
    pattern = re.compile(rf"^{'#' * level} (.+)$", re.MULTILINE)
    return [Heading(title=m.group(1), position=m.start()) for m in pattern.finditer(content)]


def split_by_heading(content: str, base_filename: str, level: int = 3) -> list[OutputFile]:
    """Split a section into one file per heading of the given level.

    With fewer than two headings the section is returned whole under
    `base_filename`.
    """
    headings = find_headings(content, level)
    if len(headings) <= 1:
        return [OutputFile(filename=base_filename, content=content)]

    result: list[OutputFile] = []
    for i, heading in enumerate(headings):
        start = heading.position
        end = headings[i + 1].position if i + 1 < len(headings) else len(content)
        slug = to_kebab(heading.title)
        filename = re.sub(r"\.md$", f"-{slug}.md", base_filename)
        result.append(OutputFile(filename=filename, content=content[start:end].strip()))

    return result
