"""Tests for the lookup driver with a stubbed HTTP session."""

import pytest
import requests

from collins_dict.config import LookupConfig
from collins_dict.exceptions import NetworkError, StructuralExtractionError
from collins_dict.lookup import DictionaryLookup
from fakes import APPLE_PAGE, BROKEN_ARTICLE_PAGE, EMPTY_PAGE, SUGGESTION_PAGE, FakeSession


def _lookup(session):
    return DictionaryLookup(LookupConfig.defaults(), session=session)


def test_request_uses_search_endpoint_and_user_agent():
    session = FakeSession(html=APPLE_PAGE)
    _lookup(session).lookup("apple")

    (call,) = session.calls
    assert call["url"] == LookupConfig.SEARCH_URL
    assert call["params"] == {"dictCode": "english", "q": "apple"}
    assert call["timeout"] == LookupConfig.REQUEST_TIMEOUT
    assert session.headers["User-Agent"] == LookupConfig.USER_AGENT


def test_found_result():
    result = _lookup(FakeSession(html=APPLE_PAGE)).lookup("apple")
    assert result.found
    assert result.entries[0].headword == "apple"
    assert result.entries[0].pronunciation == "ˈæp.əl"
    assert result.suggestions == ()


def test_not_found_with_suggestions():
    result = _lookup(FakeSession(html=SUGGESTION_PAGE)).lookup("zat")
    assert not result.found
    assert result.suggestions == ("cat", "bat", "rat")


def test_not_found_without_suggestions():
    result = _lookup(FakeSession(html=EMPTY_PAGE)).lookup("term")
    assert not result.found
    assert result.suggestions == ()


def test_non_200_status_is_network_error():
    with pytest.raises(NetworkError) as excinfo:
        _lookup(FakeSession(status_code=503)).lookup("apple")
    assert excinfo.value.status_code == 503


def test_connection_failure_is_network_error():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(NetworkError):
        _lookup(session).lookup("apple")


def test_structural_error_propagates():
    with pytest.raises(StructuralExtractionError):
        _lookup(FakeSession(html=BROKEN_ARTICLE_PAGE)).lookup("apple")


def test_context_manager_closes_session():
    session = FakeSession(html=EMPTY_PAGE)
    with _lookup(session) as client:
        client.lookup("term")
    assert session.closed
