"""
Domain entities for user data.

Core business objects exchanged between the backend, the repository
and the update channel. Framework-agnostic, no I/O.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict

from .exceptions import MalformedRecordException

# Record key -> expected type, in serialization order
USER_RECORD_FIELDS = {"id": int, "name": str, "email": str}


def _is_valid(value: Any, expected: type) -> bool:
    # bool is a subclass of int but never a valid identifier
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


def is_valid_user_id(value: Any) -> bool:
    """Return True if value can be a backend-assigned user id."""
    return _is_valid(value, int)


@dataclass(frozen=True)
class User:
    """
    User record.

    Immutable once constructed. The id is assigned by the backend
    and never generated client-side.
    """

    id: int
    name: str
    email: str

    def __post_init__(self):
        """Validate field types on creation."""
        for key, expected in USER_RECORD_FIELDS.items():
            value = getattr(self, key)
            if not _is_valid(value, expected):
                raise ValueError(
                    f"Invalid {key}: expected {expected.__name__}, "
                    f"got {type(value).__name__}"
                )

    @classmethod
    def from_dict(cls, data: Any) -> "User":
        """
        Build a user from a backend record.

        Args:
            data: Mapping with 'id' (int), 'name' (str) and 'email' (str).
                Extra keys are ignored.

        Returns:
            User entity

        Raises:
            MalformedRecordException: If the record is not a mapping, or a
                required key is missing or has the wrong type
        """
        if not isinstance(data, Mapping):
            raise MalformedRecordException(
                "<record>", f"expected an object, got {type(data).__name__}", data
            )

        for key, expected in USER_RECORD_FIELDS.items():
            if key not in data:
                raise MalformedRecordException(key, "missing required key", data)
            if not _is_valid(data[key], expected):
                raise MalformedRecordException(
                    key,
                    f"expected {expected.__name__}, got {type(data[key]).__name__}",
                    data,
                )

        return cls(id=data["id"], name=data["name"], email=data["email"])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the backend record shape."""
        return {"id": self.id, "name": self.name, "email": self.email}

    def render(self) -> str:
        """Human-readable debug form, not used for comparisons."""
        return f"User(id: {self.id}, name: {self.name}, email: {self.email})"

    def __str__(self) -> str:
        return self.render()
