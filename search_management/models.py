"""Item record and response envelope."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from pydantic import RootModel


class Item(RootModel[dict[str, Any]]):
    """One record stored in an index.

    The field set is defined by the caller, so the record wraps the raw JSON
    object and only offers mapping-style access to it.
    """

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Item":
        return cls.model_validate(raw)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.root)

    def get(self, key: str, default: Any = None) -> Any:
        return self.root.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.root[key]

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


@dataclass
class HttpResponse:
    """Status, decoded JSON body and headers of one API response."""

    status_code: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
