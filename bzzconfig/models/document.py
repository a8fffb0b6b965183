"""Base model for sections of the persisted ``config.json`` document.

The document keeps the historical key names (``ChunkDbPath``, ``BzzKey``,
...) through field aliases.  Sections listed in ``embedded`` are flattened
into their parent's keys instead of being nested under their own key.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict

_ADDRESS_RE = re.compile(r"^0x[0-9a-f]{40}$")

ZERO_ADDRESS = "0x" + "0" * 40


def _normalize_address(value: str) -> str:
    value = value.strip().lower()
    if not value.startswith("0x"):
        value = "0x" + value
    if not _ADDRESS_RE.match(value):
        raise ValueError(f"invalid address: {value!r}")
    return value


Address = Annotated[str, AfterValidator(_normalize_address)]
"""A 20-byte address rendered as lowercase ``0x``-prefixed hex."""


def is_zero_address(value: str | None) -> bool:
    """True for a missing, empty or all-zero address."""
    if not value:
        return True
    return int(value, 16) == 0


class DocumentSection(BaseModel):
    """A model that reads from and writes to a flat document mapping.

    Unknown keys are ignored so documents written by newer versions stay
    loadable.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
    )

    embedded: ClassVar[tuple[str, ...]] = ()

    def to_document(self) -> dict[str, Any]:
        """Serialize to document keys, flattening embedded sections in place."""
        dumped = self.model_dump(mode="json", by_alias=True)
        doc: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            if name in self.embedded:
                doc.update(getattr(self, name).to_document())
            else:
                key = field.alias or name
                doc[key] = dumped[key]
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]):
        """Build from a document mapping, picking embedded sections out of it."""
        values = dict(doc)
        for name in cls.embedded:
            section_cls = cls.model_fields[name].annotation
            values[name] = section_cls.from_document(doc)
        return cls.model_validate(values)
