"""Tests for page rendering and regeneration of existing pages."""

from pathlib import Path

from headerdoc.access_level import AccessLevel
from headerdoc.header_slug import header_slug
from headerdoc.is_documented import is_documented
from headerdoc.keep_existing_markdown import keep_existing_markdown, strip_front_matter
from headerdoc.load_config import load_config
from headerdoc.md_codeblock import md_codeblock
from headerdoc.models import (
    Declaration,
    DeclarationKind,
    FileInfo,
    FunctionInfo,
    PropertyInfo,
)
from headerdoc.output_file_for_header import output_file_for_header
from headerdoc.render_comment_lines import render_comment_lines
from headerdoc.render_declaration import render_declaration
from headerdoc.render_file_page import render_file_page

PUBLIC = AccessLevel.PUBLIC
PRIVATE = AccessLevel.PRIVATE


def _sample_info() -> FileInfo:
    enum = Declaration(
        kind=DeclarationKind.ENUM,
        name="EColor",
        comments=("// Colors",),
        properties=(
            PropertyInfo("", "Red,", ("// Warm",), PUBLIC),
            PropertyInfo("", "Blue,", (), PUBLIC),
        ),
    )
    bare = Declaration(
        kind=DeclarationKind.STRUCT,
        name="FBare",
        properties=(PropertyInfo("", "int32 X;", (), PRIVATE),),
    )
    cls = Declaration(
        kind=DeclarationKind.CLASS,
        name="UFoo",
        parents=("UObject",),
        comments=("/**", "* Foo class.", "* Second line."),
        properties=(
            PropertyInfo("UPROPERTY()", "int32 Count;", ("// Count",), PUBLIC),
            PropertyInfo("", "int32 Hidden;", (), PUBLIC),
        ),
        functions=(
            FunctionInfo("Run", "UFUNCTION()", "void Run();", ("// Runs it",), PUBLIC),
        ),
    )
    return FileInfo(path=Path("Foo.h"), name="Foo.h", declarations=(bare, cls, enum))


EXPECTED_PAGE = "\n".join(
    [
        "---",
        "title: Foo.h",
        "description: Reference page for Foo.h",
        "---",
        "",
        "## File Info",
        "",
        "__FileName:__ `Foo.h`",
        "",
        "- __Enum List:__",
        "[ [`EColor`](#ecolor) ]",
        "- __Class List:__",
        "[ [`UFoo`](#ufoo) ]",
        "",
        "## `EColor`",
        "",
        "Colors",
        "",
        "### Values",
        "",
        "```cpp",
        "// Warm",
        "Red,",
        "Blue,",
        "```",
        "",
        "## `UFoo`",
        "",
        "__Parent Classes:__",
        "[ `UObject` ]",
        "",
        "Foo class. \\",
        "Second line.",
        "",
        "### Properties",
        "",
        "```cpp",
        "// Count",
        "UPROPERTY()",
        "int32 Count;",
        "```",
        "",
        "### Functions",
        "",
        "#### `Run`",
        "> Runs it",
        "```cpp",
        "UFUNCTION()",
        "void Run();",
        "```",
    ]
) + "\n"


def test_render_file_page_new() -> None:
    """Verify the full layout of a freshly generated page."""
    assert render_file_page(_sample_info(), load_config()) == EXPECTED_PAGE


def test_undocumented_struct_is_omitted() -> None:
    """Verify structs without comments are neither listed nor rendered."""
    page = render_file_page(_sample_info(), load_config())
    assert "FBare" not in page
    assert "Struct List" not in page


def test_enums_always_listed() -> None:
    """Verify an enum without any comment still gets a section."""
    enum = Declaration(
        kind=DeclarationKind.ENUM,
        name="EBare",
        properties=(PropertyInfo("", "A,", (), PUBLIC),),
    )
    info = FileInfo(path=Path("E.h"), name="E.h", declarations=(enum,))
    page = render_file_page(info, load_config())
    assert "[ [`EBare`](#ebare) ]" in page
    assert "## `EBare`" in page


def test_access_levels_filter_members() -> None:
    """Verify members outside the configured access levels are not rendered."""
    cls = Declaration(
        kind=DeclarationKind.CLASS,
        name="UFoo",
        functions=(
            FunctionInfo("Visible", "", "void Visible();", ("// Shown",), PUBLIC),
            FunctionInfo("Secret", "", "void Secret();", ("// Hidden",), PRIVATE),
        ),
    )
    rendered = "\n".join(render_declaration(cls, ["public"]))
    assert "Visible" in rendered
    assert "Secret" not in rendered

    assert is_documented(cls, ["public"])
    only_private = Declaration(
        kind=DeclarationKind.CLASS,
        name="UHidden",
        functions=(cls.functions[1],),
    )
    assert not is_documented(only_private, ["public", "protected"])
    assert is_documented(only_private, ["private"])


def test_function_without_macro() -> None:
    """Verify a function without a macro renders only its declaration."""
    cls = Declaration(
        kind=DeclarationKind.CLASS,
        name="UFoo",
        functions=(FunctionInfo("Tick", "", "void Tick();", ("// Ticks",), PUBLIC),),
    )
    lines = render_declaration(cls, ["public"])
    idx = lines.index("#### `Tick`")
    assert lines[idx : idx + 5] == ["#### `Tick`", "> Ticks", "```cpp", "void Tick();", "```"]


def test_render_comment_lines() -> None:
    """Verify delimiters are dropped and lines joined with hard breaks."""
    assert render_comment_lines(["/**", "* One", "* Two", "*/"]) == ["One \\", "Two"]
    assert render_comment_lines(["// Only"], prefix="> ") == ["> Only"]
    assert render_comment_lines([]) == []


def test_header_slug() -> None:
    """Verify anchors match the rendered ``## `Name` `` headers."""
    assert header_slug("UFlowPilotTask") == "uflowpilottask"
    assert header_slug("EFP_TaskResult") == "efp_taskresult"
    assert header_slug("Engine::UObject") == "engine-uobject"
    assert header_slug("") == "section"


def test_md_codeblock() -> None:
    """Verify fencing and trailing blank removal."""
    assert md_codeblock(["int32 A;", "", ""]) == ["```cpp", "int32 A;", "```"]
    assert md_codeblock([], lang="text") == ["```text", "```"]


def test_strip_front_matter() -> None:
    """Verify front matter is removed only when properly delimited."""
    assert strip_front_matter(["---", "title: x", "---", "Body"]) == ["Body"]
    assert strip_front_matter(["Body"]) == ["Body"]
    assert strip_front_matter(["---", "unterminated"]) == ["---", "unterminated"]


def test_keep_existing_markdown_missing(tmp_path: Path) -> None:
    """Verify a missing page keeps nothing."""
    assert keep_existing_markdown(tmp_path / "none.mdx", "## File Info") == ([], False)


def test_keep_existing_markdown_with_marker(tmp_path: Path) -> None:
    """Verify hand-written text up to and including the marker is kept."""
    page = tmp_path / "Foo.mdx"
    page.write_text(
        "---\ntitle: Foo.h\n---\nIntro text.\n\n## File Info\nstale output\n",
        encoding="utf-8",
    )
    assert keep_existing_markdown(page, "## File Info") == (
        ["Intro text.", "", "## File Info"],
        True,
    )


def test_keep_existing_markdown_without_marker(tmp_path: Path) -> None:
    """Verify the whole body is kept when the marker is absent."""
    page = tmp_path / "Foo.mdx"
    page.write_text("---\ntitle: Foo.h\n---\nHand notes\n\n", encoding="utf-8")
    assert keep_existing_markdown(page, "## File Info") == (["Hand notes"], False)


def test_regeneration_is_idempotent(tmp_path: Path) -> None:
    """Verify regenerating over a previous page reproduces it exactly."""
    config = load_config()
    page = tmp_path / "Foo.mdx"
    page.write_text("---\ntitle: old\n---\nHand notes\n", encoding="utf-8")

    kept, has_marker = keep_existing_markdown(page, "## File Info")
    first = render_file_page(_sample_info(), config, kept, has_marker=has_marker)
    page.write_text(first, encoding="utf-8")

    kept, has_marker = keep_existing_markdown(page, "## File Info")
    assert has_marker
    second = render_file_page(_sample_info(), config, kept, has_marker=has_marker)
    assert second == first
    assert "Hand notes\n\n## File Info\n" in second


def test_output_file_for_header(tmp_path: Path) -> None:
    """Verify relative subdirectories are mirrored with the new extension."""
    src = tmp_path / "Source"
    out = tmp_path / "docs"
    assert output_file_for_header(src, src / "Tasks" / "Task.h", out) == (
        out / "Tasks" / "Task.mdx"
    )
    assert output_file_for_header(src, tmp_path / "Other.hpp", out, ".md") == (
        out / "Other.md"
    )
