"""Partial updates.

A patch carries only the whitelisted fields a PUT may change. Fields left as
``None`` are absent; ``merge_patch`` never mutates its inputs, so services
validate the patch, merge it against a snapshot of the record and write the
result back.
"""
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Mapping, Optional


@dataclass(frozen=True)
class Patch:
    # camelCase request key -> attribute name, for keys that differ
    ALIASES: ClassVar[Dict[str, str]] = {}

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]):
        """Build a patch from a request body, dropping keys that are not whitelisted."""
        payload = payload or {}
        known = set(cls.field_names())
        values = {}
        for key, value in payload.items():
            name = cls.ALIASES.get(key, key)
            if name in known:
                values[name] = value
        return cls(**values)

    def changes(self) -> Dict[str, Any]:
        result = {}
        for name in self.field_names():
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        return result

    def is_empty(self) -> bool:
        return not self.changes()


def merge_patch(current: Mapping[str, Any], patch: Patch) -> Dict[str, Any]:
    merged = dict(current)
    merged.update(patch.changes())
    return merged


def snapshot(record, patch_cls) -> Dict[str, Any]:
    """Current values of the fields ``patch_cls`` may change."""
    return {name: getattr(record, name) for name in patch_cls.field_names()}


@dataclass(frozen=True)
class UserPatch(Patch):
    name: Optional[str] = None
    contact: Optional[str] = None
    role: Optional[str] = None


@dataclass(frozen=True)
class PetPatch(Patch):
    name: Optional[str] = None
    species: Optional[str] = None
    breed: Optional[str] = None
    age: Optional[int] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class PetCareEventPatch(Patch):
    ALIASES: ClassVar[Dict[str, str]] = {'dateTime': 'date_time'}

    title: Optional[str] = None
    description: Optional[str] = None
    date_time: Optional[Any] = None
    location: Optional[str] = None


@dataclass(frozen=True)
class FeedbackPatch(Patch):
    feedback: Optional[str] = None
    rating: Optional[int] = None


@dataclass(frozen=True)
class DonationPatch(Patch):
    amount: Optional[float] = None
