"""Tests for the travel example."""


class TestTravelApp:
    """Every handler in the travel example, rendered through kida."""

    def test_standard_layout(self, example_module) -> None:
        html = example_module.show_hotel(1)
        assert "<title>Hotel Details</title>" in html
        assert 'class="standard"' in html
        assert "<h1>Westin Diplomat</h1>" in html

    def test_layout_none_renders_partial(self, example_module) -> None:
        html = example_module.show_hotel(1, "layout=none")
        assert "<html>" not in html
        assert "<h1>Westin Diplomat</h1>" in html
        assert 'id="hotel"' in html

    def test_dynamic_layout(self, example_module) -> None:
        html = example_module.show_hotel(2, "layout=common/wide")
        assert 'class="wide"' in html
        assert "<h1>Jameson Inn</h1>" in html

    def test_pattern_mapped_layout(self, example_module) -> None:
        html = example_module.show_account("ann")
        assert 'class="account"' in html
        assert "<title>Your Account</title>" in html
        assert "Signed in as ann" in html

    def test_inline_template(self, example_module) -> None:
        html = example_module.print_hotel(3)
        assert 'class="print"' in html
        assert "<h1>Chilworth Manor</h1>" in html

    def test_content_variant_is_undecorated(self, example_module) -> None:
        html = example_module.show_hotel(1, "htmlFormat=nolayout")
        assert "<html>" not in html
        assert 'id="hotel"' not in html
        assert "<h1>Westin Diplomat</h1>" in html

    def test_list(self, example_module) -> None:
        html = example_module.list_hotels()
        assert "<title>Hotels</title>" in html
        assert html.index("Chilworth Manor") < html.index("Jameson Inn")

    def test_mapped_names_cached(self, example_module) -> None:
        example_module.show_account("ann")
        cache = example_module.views.resolver.name_cache
        assert cache.get("account/show") == "common/account-layout"

    def test_htmx_request_gets_fragment(self, example_module) -> None:
        html = example_module.show_hotel(1, headers={"HX-Request": "true"})
        assert "<html>" not in html
        assert 'id="hotel"' in html
        assert "<h1>Westin Diplomat</h1>" in html

    def test_non_partial_headers_keep_layout(self, example_module) -> None:
        html = example_module.show_hotel(1, headers={"Accept": "text/html"})
        assert 'class="standard"' in html

    def test_ajax_update_returns_fragment(self, example_module) -> None:
        html = example_module.update_hotel(
            2, "Jameson Suites", headers={"x-requested-with": "XMLHttpRequest"}
        )
        assert "<html>" not in html
        assert "<h1>Jameson Suites</h1>" in html

    def test_full_page_update_redirects(self, example_module) -> None:
        assert example_module.update_hotel(2, "Jameson Suites") == "redirect:/hotels/2"
        assert example_module.HOTELS[2].name == "Jameson Suites"
        assert "<h1>Jameson Suites</h1>" in example_module.show_hotel(2)
