"""Identity provider protocol, structural subtyping with no ABC."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from schemas.okta import AppLink, AuthnResponse, Group, SessionResponse, User


@runtime_checkable
class IdentityProvider(Protocol):
    """Any class that can authenticate users and look up their memberships."""

    def authenticate(self, username: str, password: str) -> AuthnResponse: ...

    def session(self, session_token: str) -> SessionResponse: ...

    def user(self, user_id: str) -> User: ...

    def groups(self, user_id: str) -> list[Group]: ...

    def app_links(self, user_id: str, app_name: str = "") -> list[AppLink]: ...
