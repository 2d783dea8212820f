from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Union


class UserRole(Enum):
    """Library member roles."""
    STUDENT = "Student"
    FACULTY = "Faculty"

    @property
    def label(self) -> str:
        return self.value


class InvalidUserTypeError(ValueError):
    """Raised when a user type selector names no known role."""

    def __init__(self, selector: Any) -> None:
        super().__init__("Invalid user type!")
        self.selector = selector


class User:
    """Base class for library members."""

    role: UserRole

    def __init__(self, user_id: int, name: str) -> None:
        self._user_id = user_id
        self._name = name

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        return f"[{self.role.label}] Name: {self._name}, UserID: {self._user_id}"

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"{type(self).__name__}(user_id={self._user_id}, name={self._name!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {"user_id": self._user_id, "name": self._name, "role": self.role.value}


class Student(User):
    role = UserRole.STUDENT


class Faculty(User):
    role = UserRole.FACULTY


class UserFactory:
    """Builds the User variant that a menu selector (1 or 2) stands for."""

    _SELECTORS = {1: Student, 2: Faculty}

    @staticmethod
    def _normalize(selector: Union[int, str]) -> Any:
        if isinstance(selector, bool):
            return selector
        if isinstance(selector, str):
            s = selector.strip()
            return int(s) if s.isdecimal() and s.isascii() else s
        return selector

    @classmethod
    def user_class(cls, selector: Union[int, str]) -> type:
        key = cls._normalize(selector)
        try:
            if isinstance(key, bool) or key not in cls._SELECTORS:
                raise InvalidUserTypeError(selector)
        except TypeError:
            raise InvalidUserTypeError(selector) from None
        return cls._SELECTORS[key]

    @classmethod
    def role_for(cls, selector: Union[int, str]) -> UserRole:
        return cls.user_class(selector).role

    @classmethod
    def create_user(cls, selector: Union[int, str], name: str, user_id: int) -> User:
        return cls.user_class(selector)(user_id, name)
