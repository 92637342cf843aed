from concurrent.futures import ThreadPoolExecutor

import pytest

from md2smol import (
    ConfigError,
    RenderOptions,
    Target,
    extract_text,
    parse_markdown,
    render,
    render_finger,
    render_gemini,
    render_gopher,
    render_markdown,
)


def test_wrappers_match_dispatcher(rich_document):
    assert render_gopher(rich_document) == render(rich_document, "gopher")
    assert render_gemini(rich_document) == render(rich_document, Target.GEMINI)
    assert render_finger(rich_document) == render(rich_document, "Finger")


def test_rendering_is_deterministic(rich_document):
    for target in Target:
        first = render(rich_document, target)
        assert all(render(rich_document, target) == first for _ in range(5))


def test_explicit_options_replace_defaults(link_document):
    output = render(link_document, "gopher", RenderOptions(width=0, preserve_links=False))
    assert "Links:" not in output


def test_negative_width_is_rejected_before_rendering(link_document):
    with pytest.raises(ConfigError):
        render(link_document, "gopher", RenderOptions(width=-1))


def test_unknown_target(link_document):
    with pytest.raises(ConfigError):
        render(link_document, "telnet")


def test_options_must_be_render_options(link_document):
    with pytest.raises(ConfigError):
        render(link_document, "gopher", {"width": 10})


def test_markdown_source_may_be_bytes(sample_markdown):
    from_bytes = render_markdown(sample_markdown.encode("utf-8"), "gemini")
    assert from_bytes == render_markdown(sample_markdown, "gemini")


def test_unknown_parser(sample_markdown):
    with pytest.raises(ConfigError):
        render_markdown(sample_markdown, "gopher", parser="asciidoc")


def test_extract_text_entry_point(sample_markdown):
    text = extract_text(parse_markdown(sample_markdown))
    assert text.split("\n")[0] == "Main Heading"


def test_concurrent_renders_share_one_document(rich_document):
    expected = {target: render(rich_document, target) for target in Target}
    jobs = [target for target in Target for _ in range(20)]
    with ThreadPoolExecutor(max_workers=6) as pool:
        results = list(pool.map(lambda target: (target, render(rich_document, target)), jobs))
    for target, output in results:
        assert output == expected[target]
