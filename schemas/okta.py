"""Okta API request/response records.

Field names follow the provider's camelCase wire format. Every record keeps
fields it does not declare (``extra="allow"``) so a decode/encode cycle does
not lose data the provider adds.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel


class OktaModel(BaseModel):
    """Base for provider-defined records."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Authentication ---


class AuthnRequest(OktaModel):
    username: str
    password: str


class AuthnResponse(OktaModel):
    status: str = ""
    stateToken: str | None = None
    sessionToken: str | None = None
    expiresAt: datetime | None = None
    embedded: dict[str, Any] | None = Field(default=None, alias="_embedded")
    links: dict[str, Any] | None = Field(default=None, alias="_links")


# --- Sessions ---


class SessionRequest(OktaModel):
    sessionToken: str


class SessionResponse(OktaModel):
    id: str = ""
    userId: str | None = None
    login: str | None = None
    status: str | None = None
    createdAt: datetime | None = None
    expiresAt: datetime | None = None
    lastPasswordVerification: datetime | None = None
    lastFactorVerification: datetime | None = None
    amr: list[str] = Field(default_factory=list)
    links: dict[str, Any] | None = Field(default=None, alias="_links")


class SessionCookie(BaseModel):
    """Cookie built from a session id, replayed on every later request."""

    name: str = "sid"
    value: str
    path: str = "/"
    domain: str
    secure: bool = True
    http_only: bool = True

    def header_value(self) -> str:
        return f"{self.name}={self.value}"


# --- Users & groups ---


class UserProfile(OktaModel):
    login: str = ""
    email: str | None = None
    firstName: str | None = None
    lastName: str | None = None
    mobilePhone: str | None = None


class User(OktaModel):
    id: str = ""
    status: str | None = None
    created: datetime | None = None
    activated: datetime | None = None
    statusChanged: datetime | None = None
    lastLogin: datetime | None = None
    lastUpdated: datetime | None = None
    passwordChanged: datetime | None = None
    profile: UserProfile = Field(default_factory=UserProfile)
    links: dict[str, Any] | None = Field(default=None, alias="_links")


class GroupProfile(OktaModel):
    name: str = ""
    description: str | None = None


class Group(OktaModel):
    id: str = ""
    type: str | None = None
    created: datetime | None = None
    lastUpdated: datetime | None = None
    lastMembershipUpdated: datetime | None = None
    objectClass: list[str] = Field(default_factory=list)
    profile: GroupProfile = Field(default_factory=GroupProfile)
    links: dict[str, Any] | None = Field(default=None, alias="_links")


class GroupPage(RootModel[list[Group]]):
    """One page of a group listing."""


# --- App links ---


class AppLink(OktaModel):
    id: str = ""
    label: str = ""
    linkUrl: str = ""
    logoUrl: str | None = None
    appName: str = ""
    appInstanceId: str | None = None
    appAssignmentId: str | None = None
    credentialsSetup: bool | None = None
    hidden: bool | None = None
    sortOrder: int | None = None


class AppLinks(RootModel[list[AppLink]]):
    """The app links assigned to a user."""


# --- Errors ---


class ErrorCause(OktaModel):
    errorSummary: str = ""


class ErrorResponse(OktaModel):
    """Error payload the provider returns with a non-200 status."""

    errorCode: str = ""
    errorSummary: str = ""
    errorLink: str | None = None
    errorId: str | None = None
    errorCauses: list[ErrorCause] = Field(default_factory=list)
