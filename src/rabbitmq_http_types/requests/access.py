"""User and permission parameters."""

from __future__ import annotations

__all__ = [
    "PermissionParams",
    "TopicPermissionParams",
    "UserParams",
]

from rabbitmq_http_types.requests.base import ParamsModel


class UserParams(ParamsModel):
    """Properties of a user to be created or updated.

    Attributes:
        name: Username.
        password_hash: Salted password hash, computed by the caller.
        tags: Comma-separated user tags (e.g. "administrator,monitoring").
    """

    name: str
    password_hash: str
    tags: str = ""


class PermissionParams(ParamsModel):
    """A user's permissions in a particular virtual host.

    The three permissions are regular expressions matched against resource
    names; "" grants nothing and ".*" grants everything.
    """

    user: str
    vhost: str
    configure: str
    read: str
    write: str

    @classmethod
    def full_access(cls, user: str, vhost: str) -> PermissionParams:
        return cls(user=user, vhost=vhost, configure=".*", read=".*", write=".*")


class TopicPermissionParams(ParamsModel):
    """A user's topic permissions on one topic exchange in a virtual host."""

    user: str
    vhost: str
    exchange: str
    read: str
    write: str
