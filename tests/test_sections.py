from moonbit_docs.sections import (
    OutputFile,
    Section,
    find_headings,
    parse_sections,
    split_by_heading,
    to_filename,
    to_kebab,
)


def test_parse_sections_two_markers():
    text = "<!-- path: a.md -->X<!-- path: b.md -->Y"

    assert parse_sections(text) == [
        Section(path="a.md", content="X"),
        Section(path="b.md", content="Y"),
    ]


def test_parse_sections_trims_and_ignores_preamble():
    text = "preamble\n<!-- path: a.md -->\n\n  body a  \n\n<!-- path: b.md -->\nbody b\n"

    sections = parse_sections(text)

    assert [s.path for s in sections] == ["a.md", "b.md"]
    assert sections[0].content == "body a"
    assert sections[1].content == "body b"


def test_parse_sections_without_markers():
    assert parse_sections("# Just a heading\n\nNo markers here.") == []


def test_parse_sections_marker_spanning_stray_token():
    text = "<!-- path: a.md -->keep<!-- path: dropped --X<!-- path: b.md -->Y"

    sections = parse_sections(text)

    assert [s.path for s in sections] == ["a.md", "dropped --X<!-- path: b.md"]
    assert sections[0].content == "keep<!-- path: dropped --X"
    assert sections[1].content == "Y"


def test_parse_sections_token_inside_next_marker_path():
    text = "<!-- path: a.md -->X<!-- path: <!-- path: b.md -->Y"

    sections = parse_sections(text)

    assert sections[0] == Section(path="a.md", content="X<!-- path:")
    assert sections[1] == Section(path="<!-- path: b.md", content="Y")


def test_to_filename():
    assert to_filename("foo/bar_baz.md") == "foo-bar-baz.md"
    assert to_filename("language/error_handling.md") == "language-error-handling.md"
    assert to_filename("toolchain/moon/package") == "toolchain-moon-package.md"


def test_to_kebab():
    assert to_kebab("Hello, World! 2.0") == "hello-world-20"
    assert to_kebab("  Built-in   Data Structures ") == "built-in-data-structures"


def test_find_headings_exact_level():
    content = "## Two\n### Three\n#### Four\ntext ### not a heading\n### Again"

    headings = find_headings(content, 3)

    assert [h.title for h in headings] == ["Three", "Again"]
    assert headings[0].position == content.index("### Three")


def test_split_by_heading_three_headings():
    content = "Intro text\n\n### Numbers\n\nint\n\n### Strings!\n\nstr\n\n### Tuples\n\ntuple"

    files = split_by_heading(content, "language-fundamentals.md", 3)

    assert files == [
        OutputFile("language-fundamentals-numbers.md", "### Numbers\n\nint"),
        OutputFile("language-fundamentals-strings.md", "### Strings!\n\nstr"),
        OutputFile("language-fundamentals-tuples.md", "### Tuples\n\ntuple"),
    ]


def test_split_by_heading_single_heading_returns_whole():
    content = "Intro\n\n### Only one\n\nbody"

    assert split_by_heading(content, "x.md", 3) == [OutputFile("x.md", content)]


def test_split_by_heading_without_headings_returns_whole():
    assert split_by_heading("plain", "x.md", 3) == [OutputFile("x.md", "plain")]


def test_split_by_heading_other_level():
    content = "## One\na\n## Two\nb\n### Nested\nc"

    files = split_by_heading(content, "guide.md", 2)

    assert [f.filename for f in files] == ["guide-one.md", "guide-two.md"]
    assert files[1].content == "## Two\nb\n### Nested\nc"
