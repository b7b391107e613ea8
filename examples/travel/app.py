"""Travel — hotel pages decorated with shared layouts.

Demonstrates default and pattern-mapped layouts, ``?layout=none`` for
AJAX partials, ``?layout=<name>`` with dynamic templates, inline
``template+view`` identifiers, content variants via
``?htmlFormat=nolayout``, and localized titles from title keys.

Handlers that take request headers answer AJAX and htmx requests
(``X-Requested-With: XMLHttpRequest`` or ``HX-Request: true``) with the
bare page fragment.

Handlers return rendered HTML; wire them into any web framework.

Run:
    python app.py
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from drape import ContentVariantInterceptor, DecorationConfig, QueryParams, ViewResolver
from drape.http import is_partial_request
from drape.templating import KidaRenderer, create_environment

TEMPLATES = Path(__file__).parent / "templates"

# Message catalog for title keys
TITLES = {
    "view.title.hotels.list": "Hotels",
    "view.title.hotels.show": "Hotel Details",
    "view.title.account.show": "Your Account",
}


@dataclass(frozen=True, slots=True)
class Hotel:
    id: int
    name: str
    city: str


HOTELS = {
    1: Hotel(1, "Westin Diplomat", "Hollywood"),
    2: Hotel(2, "Jameson Inn", "Tampa"),
    3: Hotel(3, "Chilworth Manor", "Southampton"),
}

config = DecorationConfig(
    template_dir=TEMPLATES,
    default_template_name="common/standard",
    template_mapping={
        "account/.*": "common/account-layout",
        ".*Content": "",  # content variants are never decorated
    },
    use_patterns=True,
    dynamic_templates=True,
)

views = ViewResolver(
    config,
    KidaRenderer(create_environment(config, globals_={"t": lambda key: TITLES.get(key, key)})),
    interceptors=[ContentVariantInterceptor()],
)


def _params(query: str, headers: Mapping[str, str] | None) -> Mapping[str, str]:
    """Request parameters, with the layout cancelled for partial requests."""
    params = QueryParams(query)
    if headers and is_partial_request(headers):
        return {**params, "layout": "none"}
    return params


def list_hotels(query: str = "") -> str:
    hotels = sorted(HOTELS.values(), key=lambda h: h.name)
    return views.render("hotels/list", {"hotels": hotels}, QueryParams(query))


def show_hotel(hotel_id: int, query: str = "", headers: Mapping[str, str] | None = None) -> str:
    return views.render("hotels/show", {"hotel": HOTELS[hotel_id]}, _params(query, headers))


def update_hotel(hotel_id: int, name: str, headers: Mapping[str, str] | None = None) -> str:
    """Rename a hotel.

    Partial requests get the refreshed hotel fragment; full-page
    requests are sent back to the hotel page.
    """
    HOTELS[hotel_id] = replace(HOTELS[hotel_id], name=name)
    if headers and is_partial_request(headers):
        return views.render("hotels/show", {"hotel": HOTELS[hotel_id]}, _params("", headers))
    return f"redirect:/hotels/{hotel_id}"


def print_hotel(hotel_id: int) -> str:
    return views.render("common/print+hotels/show", {"hotel": HOTELS[hotel_id]})


def show_account(username: str, query: str = "") -> str:
    return views.render("account/show", {"username": username}, QueryParams(query))


if __name__ == "__main__":
    print(show_hotel(1))
