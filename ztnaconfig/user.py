"""Users: the request body model and the calls that manage users."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Collection, Mapping, Optional, Protocol, Union

USERS_ENDPOINT = "v1/users"


class Transport(Protocol):
    """Sends one HTTP request and returns the response body.

    Implementations raise on transport failures and on error responses.
    """

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> Union[bytes, str]:
        ...


@dataclass
class User:
    """A user as exchanged with the users endpoint."""

    id: str = ""
    given_name: str = ""
    family_name: str = ""
    description: str = ""
    email: str = ""
    enabled: Optional[bool] = None
    phone: Optional[str] = None
    name: str = ""
    tags: list[dict[str, Any]] = field(default_factory=list)
    roles: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out empty optional fields."""
        body: dict[str, Any] = {}
        if self.id:
            body["id"] = self.id
        if self.given_name:
            body["given_name"] = self.given_name
        if self.family_name:
            body["family_name"] = self.family_name
        body["description"] = self.description
        if self.email:
            body["email"] = self.email
        if self.enabled is not None:
            body["enabled"] = self.enabled
        body["phone"] = self.phone
        if self.name:
            body["name"] = self.name
        if self.tags:
            body["tags"] = list(self.tags)
        if self.roles:
            body["roles"] = list(self.roles)
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Build a user from a decoded JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError("could not parse user response: expected a JSON object")
        return cls(
            id=data.get("id") or "",
            given_name=data.get("given_name") or "",
            family_name=data.get("family_name") or "",
            description=data.get("description") or "",
            email=data.get("email") or "",
            enabled=data.get("enabled"),
            phone=data.get("phone"),
            name=data.get("name") or "",
            tags=list(data.get("tags") or []),
            roles=list(data.get("roles") or []),
        )


def new_user(values: Mapping[str, Any], changed: Collection[str]) -> User:
    """Build a request body from attribute values.

    Names, and the e-mail address, are sent only when listed in ``changed``.
    """
    user = User(description=values.get("description") or "")
    if "given_name" in changed:
        user.given_name = values.get("given_name") or ""
    if "family_name" in changed:
        user.family_name = values.get("family_name") or ""
    if "email" in changed:
        user.email = values.get("email") or ""
    user.enabled = bool(values.get("enabled", False))
    user.phone = values.get("phone") or None
    return user


def _decode(raw: Union[bytes, str]) -> Any:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValueError(f"could not parse user response: {exc}") from None


def _parse_user(raw: Union[bytes, str]) -> User:
    return User.from_dict(_decode(raw))


class UsersApi:
    """Create, read, update and delete users through a transport."""

    def __init__(self, transport: Transport, base_url: str) -> None:
        self.transport = transport
        self.base_url = base_url

    @property
    def _collection_url(self) -> str:
        return f"{self.base_url}/{USERS_ENDPOINT}"

    def _item_url(self, user_id: str) -> str:
        return f"{self._collection_url}/{user_id}"

    def create(self, user: User) -> User:
        body = json.dumps(user.to_dict()).encode()
        return _parse_user(self.transport.request("POST", self._collection_url, body=body))

    def update(self, user_id: str, user: User) -> User:
        body = json.dumps(user.to_dict()).encode()
        return _parse_user(self.transport.request("PATCH", self._item_url(user_id), body=body))

    def get_by_id(self, user_id: str) -> User:
        raw = self.transport.request("GET", self._item_url(user_id), params={"expand": "true"})
        return _parse_user(raw)

    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user with exactly this e-mail address, or None."""
        raw = self.transport.request(
            "GET", self._collection_url, params={"expand": "true", "email": email}
        )
        data = _decode(raw)
        if not isinstance(data, Mapping):
            raise ValueError("could not parse user response: expected a JSON object")
        for item in data.get("items") or []:
            user = User.from_dict(item)
            if user.email == email:
                return user
        return None

    def delete(self, user_id: str) -> User:
        return _parse_user(self.transport.request("DELETE", self._item_url(user_id)))

    def assign_roles(self, user_id: str, roles: list[str]) -> list[str]:
        """Replace the user's roles and return the roles now assigned."""
        body = json.dumps(list(roles)).encode()
        raw = self.transport.request("PUT", f"{self._item_url(user_id)}/roles", body=body)
        return _parse_user(raw).roles