"""Tests for drape.http.partial — AJAX / htmx request detection."""

from drape.http.partial import is_ajax_request, is_partial_request


class TestIsAjaxRequest:
    def test_xml_http_request(self) -> None:
        assert is_ajax_request("XMLHttpRequest") is True

    def test_other_values(self) -> None:
        assert is_ajax_request(None) is False
        assert is_ajax_request("") is False
        assert is_ajax_request("fetch") is False


class TestIsPartialRequest:
    def test_requested_with_header(self) -> None:
        assert is_partial_request({"X-Requested-With": "XMLHttpRequest"}) is True

    def test_htmx_header(self) -> None:
        assert is_partial_request({"HX-Request": "true"}) is True

    def test_header_names_case_insensitive(self) -> None:
        assert is_partial_request({"x-requested-with": "XMLHttpRequest"}) is True
        assert is_partial_request({"hx-request": "true"}) is True

    def test_full_page_request(self) -> None:
        assert is_partial_request({}) is False
        assert is_partial_request({"Accept": "text/html", "HX-Request": "false"}) is False
