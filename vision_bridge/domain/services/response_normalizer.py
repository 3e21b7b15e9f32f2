"""
Projection of upstream analysis responses onto client-facing shapes.

The two API versions answer with differently shaped bodies. Each shape is
read into its own small value type first; the projections then only deal
with those types and never with raw dictionaries.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..constants import CurrentVersionFields, LegacyVersionFields, TagFields
from ..models.analysis import (
    ApiVersion,
    NormalizedCaption,
    NormalizedTagSet,
    Tag,
    UpstreamOutcome,
)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _read_tags(entries: List[Any]) -> List[Tag]:
    tags = []
    for entry in entries:
        entry = _as_dict(entry)
        tags.append(Tag(name=entry.get(TagFields.NAME), confidence=entry.get(TagFields.CONFIDENCE)))
    return tags


@dataclass(frozen=True)
class CurrentVersionBody:
    caption_text: Optional[str] = None
    caption_confidence: Optional[float] = None
    tags: List[Tag] = field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: Any) -> "CurrentVersionBody":
        body = _as_dict(raw)
        caption = _as_dict(body.get(CurrentVersionFields.CAPTION_RESULT))
        tags_result = _as_dict(body.get(CurrentVersionFields.TAGS_RESULT))
        return cls(
            caption_text=caption.get(CurrentVersionFields.TEXT),
            caption_confidence=caption.get(CurrentVersionFields.CONFIDENCE),
            tags=_read_tags(_as_list(tags_result.get(CurrentVersionFields.VALUES))),
        )


@dataclass(frozen=True)
class LegacyVersionBody:
    captions: List[Dict[str, Any]] = field(default_factory=list)
    tags: List[Tag] = field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: Any) -> "LegacyVersionBody":
        body = _as_dict(raw)
        description = _as_dict(body.get(LegacyVersionFields.DESCRIPTION))
        return cls(
            captions=[_as_dict(c) for c in _as_list(description.get(LegacyVersionFields.CAPTIONS))],
            tags=_read_tags(_as_list(body.get(LegacyVersionFields.TAGS))),
        )


VersionBody = Union[CurrentVersionBody, LegacyVersionBody]


def read_body(outcome: UpstreamOutcome) -> VersionBody:
    if outcome.version_used is ApiVersion.CURRENT:
        return CurrentVersionBody.from_raw(outcome.raw_body)
    return LegacyVersionBody.from_raw(outcome.raw_body)


def project_analysis(outcome: UpstreamOutcome) -> Dict[str, Any]:
    return {"version": outcome.version_used.value, "data": outcome.raw_body}


def project_caption(outcome: UpstreamOutcome) -> NormalizedCaption:
    body = read_body(outcome)
    if isinstance(body, CurrentVersionBody):
        text, confidence = body.caption_text, body.caption_confidence
    else:
        first = body.captions[0] if body.captions else {}
        text = first.get(LegacyVersionFields.TEXT)
        confidence = first.get(LegacyVersionFields.CONFIDENCE)
    return NormalizedCaption(
        version_used=outcome.version_used,
        caption=text,
        confidence=confidence,
        raw=outcome.raw_body,
    )


def project_tags(outcome: UpstreamOutcome) -> NormalizedTagSet:
    body = read_body(outcome)
    return NormalizedTagSet(version_used=outcome.version_used, tags=list(body.tags), raw=outcome.raw_body)
