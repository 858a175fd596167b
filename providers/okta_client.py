"""Synchronous Okta REST API client. Implements IdentityProvider protocol."""

from __future__ import annotations

import json
import time
from typing import Any, Type, TypeVar
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel, RootModel, ValidationError

from config.settings import Settings
from observability.logger import get_logger
from observability.metrics import CallMetrics
from providers.exceptions import (
    OktaAPIError,
    OktaDecodeError,
    OktaSerializationError,
    OktaTransportError,
)
from providers.pagination import follow_pages
from schemas.observability import CallRecord
from schemas.okta import (
    AppLink,
    AppLinks,
    AuthnRequest,
    AuthnResponse,
    ErrorResponse,
    Group,
    GroupPage,
    SessionCookie,
    SessionRequest,
    SessionResponse,
    User,
)

log = get_logger(__name__)
T = TypeVar("T", bound=BaseModel)


class OktaClient:
    """Blocking client for one Okta org.

    An instance is single-owner: ``session()`` stores the session cookie on
    the instance and every later request replays it, so sharing one client
    between threads without a lock races on that cookie.
    """

    provider_name: str = "okta"

    def __init__(
        self,
        org: str,
        *,
        domain: str = "okta.com",
        api_token: str = "",
        page_limit: int = 200,
        timeout: float | None = None,
        metrics_max_records: int = 1000,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.org = org
        self.domain = domain
        self.api_token = api_token
        self.page_limit = page_limit
        self.session_cookie: SessionCookie | None = None
        self.metrics = CallMetrics(max_records=metrics_max_records)
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: Settings, *, http_client: httpx.Client | None = None
    ) -> OktaClient:
        return cls(
            settings.okta_org,
            domain=settings.okta_domain,
            api_token=settings.okta_api_token,
            page_limit=settings.okta_page_limit,
            timeout=settings.okta_timeout_seconds,
            metrics_max_records=settings.okta_metrics_max_records,
            http_client=http_client,
        )

    @property
    def host(self) -> str:
        return f"{self.org}.{self.domain}"

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/api/v1/"

    # --- Operations ---

    def authenticate(self, username: str, password: str) -> AuthnResponse:
        """Exchange a username/password pair for an authentication transaction."""
        request = AuthnRequest(username=username, password=password)
        response, _ = self.call("authn", "POST", request, AuthnResponse)
        return response

    def session(self, session_token: str) -> SessionResponse:
        """Create a session from a session token and keep its id as the ``sid`` cookie."""
        request = SessionRequest(sessionToken=session_token)
        response, _ = self.call("sessions", "POST", request, SessionResponse)
        self.session_cookie = SessionCookie(value=response.id, domain=self.host)
        log.info("okta.session.established", org=self.org, user_id=response.userId)
        return response

    def user(self, user_id: str) -> User:
        response, _ = self.call(f"users/{_path(user_id)}", "GET", None, User)
        return response

    def groups(self, user_id: str) -> list[Group]:
        """Return every group the user belongs to, following pagination."""
        endpoint = f"users/{_path(user_id)}/groups?limit={self.page_limit}"
        return follow_pages(self, endpoint, GroupPage)

    def app_links(self, user_id: str, app_name: str = "") -> list[AppLink]:
        """Return the user's app links, optionally only those of one app."""
        endpoint = f"users/{_path(user_id)}/appLinks"
        if app_name:
            endpoint += "?" + urlencode({"filter": f'appName eq "{app_name}"'})
        response, _ = self.call(endpoint, "GET", None, AppLinks)
        return response.root

    # --- Transport ---

    def call(
        self,
        endpoint: str,
        method: str,
        request: BaseModel | dict | None = None,
        response_model: Type[T] | None = None,
    ) -> tuple[T | None, str]:
        """Execute one request and return the decoded body with the raw next-page link.

        ``endpoint`` is relative to ``base_url`` and may carry a query string.
        """
        content = _encode(request)
        url = self.base_url + endpoint
        start = time.perf_counter()

        # Only the sid cookie is replayed; drop anything the provider set.
        self._http.cookies.clear()
        try:
            resp = self._http.request(method, url, content=content, headers=self._headers())
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._record(method, endpoint, url, start, error=str(exc))
            raise OktaTransportError(f"{method} {url} failed: {exc}") from exc

        if resp.status_code != httpx.codes.OK:
            try:
                error = ErrorResponse.model_validate_json(resp.content)
            except ValidationError:
                error = ErrorResponse()
            self._record(
                method, endpoint, url, start, status_code=resp.status_code, error=error.errorCode
            )
            raise OktaAPIError(resp.status_code, error, url)

        result = None
        if response_model is not None:
            try:
                if resp.content.strip() == b"null":
                    result = response_model.model_validate(_empty_value(response_model))
                else:
                    result = response_model.model_validate_json(resp.content)
            except ValidationError as exc:
                self._record(
                    method, endpoint, url, start, status_code=resp.status_code, error="decode"
                )
                raise OktaDecodeError(
                    f"{method} {url}: body does not match {response_model.__name__}"
                ) from exc

        self._record(method, endpoint, url, start, status_code=resp.status_code)

        links = resp.headers.get_list("link")
        next_link = links[1] if len(links) == 2 else ""
        return result, next_link

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.api_token:
            headers["Authorization"] = f"SSWS {self.api_token}"
        if self.session_cookie is not None:
            headers["Cookie"] = self.session_cookie.header_value()
        return headers

    def _record(
        self,
        method: str,
        endpoint: str,
        url: str,
        start: float,
        *,
        status_code: int | None = None,
        error: str = "",
    ) -> None:
        latency_ms = round((time.perf_counter() - start) * 1000, 2)
        success = status_code == httpx.codes.OK and not error
        self.metrics.record(
            CallRecord(
                method=method,
                endpoint=endpoint,
                url=url,
                status_code=status_code,
                latency_ms=latency_ms,
                success=success,
                error_message=error,
            )
        )
        if success:
            log.info(
                "okta.call.success",
                method=method,
                endpoint=endpoint,
                status_code=status_code,
                latency_ms=latency_ms,
            )
        else:
            log.warning(
                "okta.call.failed",
                method=method,
                endpoint=endpoint,
                status_code=status_code,
                error=error,
                latency_ms=latency_ms,
            )

    # --- Lifecycle ---

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> OktaClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _path(segment: str) -> str:
    return quote(segment, safe="@")


def _empty_value(model: Type[BaseModel]) -> list | dict:
    """What a JSON ``null`` body decodes to: an empty list or an all-defaults record."""
    return [] if issubclass(model, RootModel) else {}


def _encode(request: BaseModel | dict | None) -> bytes | None:
    if request is None:
        return None
    try:
        if isinstance(request, BaseModel):
            return request.model_dump_json(by_alias=True, exclude_none=True).encode()
        return json.dumps(request).encode()
    except (TypeError, ValueError) as exc:
        raise OktaSerializationError(f"cannot encode {type(request).__name__}: {exc}") from exc
