"""Tests for the BeautifulSoup-backed DOM query adapter."""

import textwrap

import pytest
from bs4.builder import ParserRejectedMarkup

from collins_dict import dom
from collins_dict.dom import SoupQuery, by_class, by_tag, parse_document
from collins_dict.exceptions import ParseError


HTML = textwrap.dedent(
    """
    <html><body>
      <div class="hom" id="outer">
        <span class="gramGrp pos">verb</span>
        <ul><li>one</li><li>two</li></ul>
        <div class="hom" id="inner"><span class="pos">noun</span></div>
      </div>
    </body></html>
    """
)


def test_parse_document_returns_body():
    body = parse_document(HTML)
    assert body.name == "body"


def test_parse_document_without_body_returns_root():
    root = parse_document("<span class='pos'>x</span>")
    assert SoupQuery().find_first(root, by_class("pos")) is not None


def test_rejected_markup_is_parse_error(monkeypatch):
    def reject(markup, features):
        raise ParserRejectedMarkup("unreadable markup")

    monkeypatch.setattr(dom, "BeautifulSoup", reject)
    with pytest.raises(ParseError):
        parse_document("<html></html>")


def test_programming_errors_are_not_parse_errors(monkeypatch):
    def broken(markup, features):
        raise AttributeError("bug")

    monkeypatch.setattr(dom, "BeautifulSoup", broken)
    with pytest.raises(AttributeError):
        parse_document("<html></html>")


def test_find_first_searches_descendants_only():
    query = SoupQuery()
    body = parse_document(HTML)
    outer = query.find_first(body, by_class("hom"))
    assert outer["id"] == "outer"
    inner = query.find_first(outer, by_class("hom"))
    assert inner["id"] == "inner"
    assert query.find_first(inner, by_class("hom")) is None


def test_class_match_is_per_token_and_in_document_order():
    query = SoupQuery()
    body = parse_document(HTML)
    matches = query.find_all(body, by_class("pos"))
    assert [query.text(m) for m in matches] == ["verb", "noun"]
    assert query.find_first(body, by_class("gramGrp")) is matches[0]


def test_find_all_by_tag():
    query = SoupQuery()
    items = query.find_all(parse_document(HTML), by_tag("li"))
    assert [query.text(li) for li in items] == ["one", "two"]


def test_class_attribute_joins_tokens():
    query = SoupQuery()
    body = parse_document(HTML)
    first_pos = query.find_first(body, by_class("pos"))
    assert query.class_attribute(first_pos) == "gramGrp pos"
    assert query.class_attribute(query.find_first(body, by_tag("ul"))) == ""


def test_selector_str():
    assert str(by_class("hom")) == ".hom"
    assert str(by_tag("li")) == "li"
