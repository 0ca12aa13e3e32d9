from iris_news.ingestion.cascades import (
    CONTENT_SELECTORS,
    LINK_SELECTORS,
    first_match,
)
from iris_news.ingestion.parser import parse_html


def test_link_cascade_order():
    assert LINK_SELECTORS[0] == 'a[href*="/news/"]'
    assert LINK_SELECTORS[-2:] == ("h2 a", "h3 a")


def test_content_cascade_order():
    assert CONTENT_SELECTORS == (
        "article",
        ".article-content",
        ".post-content",
        ".entry-content",
        "main",
        ".content",
        "#content",
    )


def test_first_match_prefers_earlier_pattern():
    document = parse_html(
        "<h2><a href='/blog/1'>Blog heading</a></h2>"
        "<div class='news-item'><a href='/items/1'>Item</a></div>"
    )
    match = first_match(document, LINK_SELECTORS)
    assert match.selector == ".news-item a"
    assert len(match.nodes) == 1


def test_first_match_does_not_merge_patterns():
    document = parse_html(
        "<a href='/news/1'>News one</a>"
        "<h3><a href='/other/2'>Other two</a></h3>"
    )
    match = first_match(document, LINK_SELECTORS)
    assert match.selector == 'a[href*="/news/"]'
    assert [n.attrib["href"] for n in match.nodes] == ["/news/1"]


def test_first_match_none():
    document = parse_html("<p>nothing to see</p>")
    assert first_match(document, LINK_SELECTORS) is None


def test_content_cascade_id_pattern():
    document = parse_html("<div id='content'>Body text</div>")
    match = first_match(document, CONTENT_SELECTORS)
    assert match.selector == "#content"
