"""Scrape the green coffee inventory and coffee details from Sweet Maria's."""

from __future__ import annotations

import json
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import requests
from bs4 import BeautifulSoup

ALL_URL = "https://www.sweetmarias.com/green-coffee.html?product_list_limit=all&sm_status=1"

_TIMEOUT = 30
_MAGENTO_SCRIPT = 'script[type="text/x-magento-init"]'
_SKU_PREFIX = "catalog_product_view_sku_"
_T = TypeVar("_T")


@dataclass
class Coffee:
    """The details of one coffee."""

    title: str = ""
    overview: str = ""
    score: float = 0.0
    url: str = ""
    sku: str = ""
    farm_notes: str = ""
    cupping_notes: str = ""
    images: list[str] = field(default_factory=list)
    additional_attributes: dict[str, str] = field(default_factory=dict)


def _soup(html: str | bytes) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _text(soup: BeautifulSoup, selector: str) -> str:
    return "".join(element.get_text() for element in soup.select(selector))


def _fetch(url: str) -> bytes:
    response = requests.get(url, timeout=_TIMEOUT)
    if response.status_code != 200:
        raise requests.HTTPError(
            f"status code error: {response.status_code} {response.reason}",
            response=response,
        )
    return response.content


def _member(obj: Any, key: str) -> Any:
    """Look up ``key`` in a JSON object, matching case-insensitively as a fallback."""
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise ValueError(f"cannot read {key!r} from {type(obj).__name__}")
    if key in obj:
        return obj[key]
    folded = key.casefold()
    return next((value for name, value in obj.items() if name.casefold() == folded), None)


def _list(obj: Any, what: str) -> list[Any]:
    if obj is None:
        return []
    if not isinstance(obj, list):
        raise ValueError(f"{what} is not a list")
    return obj


def _string(obj: Any, what: str) -> str:
    if obj is None:
        return ""
    if not isinstance(obj, str):
        raise ValueError(f"{what} is not a string")
    return obj


def _from_scripts(
    soup: BeautifulSoup,
    marker: str,
    extract: Callable[[Any], _T | None],
    what: str,
    default: _T,
) -> _T:
    """Apply ``extract`` to the JSON of every Magento script mentioning ``marker``.

    The last script decides: a later success clears an earlier failure.
    """
    result = default
    error: Exception | None = None
    for script in soup.select(_MAGENTO_SCRIPT):
        text = script.get_text()
        if marker not in text:
            continue
        try:
            candidate = extract(json.loads(text))
        except (ValueError, TypeError) as exc:
            error = exc
            continue
        error = None
        if candidate is not None:
            result = candidate
    if error is not None:
        raise ValueError(f"parsing {what} json: {error}") from error
    return result


def _extract_images(document: Any) -> list[str]:
    gallery = _member(
        _member(document, "[data-gallery-role=gallery-placeholder]"),
        "mage/gallery/gallery-ext",
    )
    return [
        _string(_member(item, "full"), "full")
        for item in _list(_member(gallery, "Data"), "data")
    ]


def _extract_sku(document: Any) -> str | None:
    handles = _list(_member(_member(_member(document, "body"), "pageCache"), "handles"), "handles")
    for handle in handles:
        handle = _string(handle, "handle")
        if handle.startswith(_SKU_PREFIX):
            return handle.removeprefix(_SKU_PREFIX)
    return None


def _parse_score(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid score {text!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"invalid score {text!r}") from exc


def parse_all_coffees(html: str | bytes) -> list[str]:
    """Return the product links of an inventory page, in random order."""
    soup = _soup(html)
    links = []
    for anchor in soup.select("table#table-products-list tr.product a.product-item-link"):
        row = anchor.find_parent("tr")
        # Only body rows count; header and footer rows are not products.
        if row is None or (row.parent is not None and row.parent.name in ("thead", "tfoot")):
            continue
        href = anchor.get("href")
        if href is None:
            continue
        links.append(href)
    random.shuffle(links)
    return links


def all_coffees() -> list[str]:
    """Return the URL of every coffee in the current inventory, shuffled."""
    return parse_all_coffees(_fetch(ALL_URL))


def parse_coffee(html: str | bytes, url: str) -> Coffee:
    """Extract a Coffee from a product page fetched from ``url``."""
    soup = _soup(html)

    score_text = _text(soup, "h5.score-value")
    attributes = {
        td.get("data-th", ""): td.get_text().strip(" \n\t")
        for td in soup.select("table.additional-attributes-table td")
    }

    return Coffee(
        title=_text(soup, "h1.page-title span"),
        overview=_text(soup, "div.overview p") or _text(soup, "div.overview div.value"),
        score=_parse_score(score_text) if score_text else 0.0,
        url=url,
        sku=_from_scripts(soup, "view_sku", _extract_sku, "sku", ""),
        farm_notes=_text(soup, "div.origin-notes span") or _text(soup, "div.origin-notes p"),
        cupping_notes=_text(soup, "div.cupping-notes span")
        or _text(soup, "div.cupping-notes p"),
        images=_from_scripts(soup, "mage/gallery/gallery-ext", _extract_images, "images", []),
        additional_attributes=attributes,
    )


def load_coffee(url: str) -> Coffee:
    """Fetch and parse the coffee at ``url``."""
    return parse_coffee(_fetch(url), url)