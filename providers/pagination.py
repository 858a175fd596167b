"""Link-header pagination for Okta list endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Type, TypeVar
from urllib.parse import urljoin

from pydantic import RootModel

from observability.logger import get_logger
from providers.exceptions import OktaPaginationError

if TYPE_CHECKING:
    from providers.okta_client import OktaClient

log = get_logger(__name__)
P = TypeVar("P", bound=RootModel)


def resolve_next_link(link: str, base_url: str) -> str:
    """Turn a raw ``Link`` header value into an endpoint relative to ``base_url``.

    ``<https://acme.okta.com/api/v1/users/x/groups?after=g2>; rel="next"``
    resolves to ``users/x/groups?after=g2``. An empty link resolves to ``""``.
    """
    target = link.split(";", 1)[0].strip()
    if target.startswith("<") and target.endswith(">"):
        target = target[1:-1].strip()
    if not target:
        return ""

    absolute = urljoin(base_url, target)
    if not absolute.startswith(base_url):
        raise OktaPaginationError(f"next link {target!r} is outside {base_url}")
    return absolute[len(base_url):]


def follow_pages(client: OktaClient, endpoint: str, page_model: Type[P]) -> list[Any]:
    """GET ``endpoint`` and every page after it, returning all items in order.

    Any failure aborts the walk and propagates; items from earlier pages are
    not returned.
    """
    items: list[Any] = []
    pages = 0

    while endpoint:
        page, link = client.call(endpoint, "GET", None, page_model)
        items.extend(page.root)
        pages += 1
        endpoint = resolve_next_link(link, client.base_url)
        if endpoint:
            log.debug("okta.pagination.next", page=pages, endpoint=endpoint)

    log.info("okta.pagination.done", pages=pages, items=len(items))
    return items
