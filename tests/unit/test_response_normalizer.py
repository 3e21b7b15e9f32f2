"""
Unit tests for projecting upstream bodies onto client-facing shapes.
"""
from vision_bridge.domain.models.analysis import ApiVersion, Tag, UpstreamOutcome
from vision_bridge.domain.services.response_normalizer import (
    CurrentVersionBody,
    LegacyVersionBody,
    project_analysis,
    project_caption,
    project_tags,
    read_body,
)


def _current(body) -> UpstreamOutcome:
    return UpstreamOutcome(version_used=ApiVersion.CURRENT, raw_body=body)


def _legacy(body) -> UpstreamOutcome:
    return UpstreamOutcome(version_used=ApiVersion.LEGACY, raw_body=body)


class TestReadBody:
    """Tests for read_body"""

    def test_current_variant(self):
        assert isinstance(read_body(_current({})), CurrentVersionBody)

    def test_legacy_variant(self):
        assert isinstance(read_body(_legacy({})), LegacyVersionBody)

    def test_non_object_body_reads_as_empty(self):
        body = read_body(_current(["unexpected"]))
        assert body == CurrentVersionBody()


class TestProjectAnalysis:
    """Tests for project_analysis"""

    def test_passthrough(self):
        raw = {"modelVersion": "2023-10-01", "objectsResult": {"values": []}}
        assert project_analysis(_current(raw)) == {"version": "v4", "data": raw}

    def test_legacy_version_label(self):
        assert project_analysis(_legacy({}))["version"] == "v3.2"


class TestProjectCaption:
    """Tests for project_caption"""

    def test_current_caption(self):
        raw = {"captionResult": {"text": "a dog on a beach", "confidence": 0.87}}
        caption = project_caption(_current(raw))
        assert caption.caption == "a dog on a beach"
        assert caption.confidence == 0.87
        assert caption.raw is raw
        assert caption.version_used is ApiVersion.CURRENT

    def test_current_zero_confidence_preserved(self):
        caption = project_caption(_current({"captionResult": {"text": "A dog", "confidence": 0}}))
        assert caption.caption == "A dog"
        assert caption.confidence == 0
        assert caption.confidence is not None

    def test_current_missing_caption_result(self):
        caption = project_caption(_current({"tagsResult": {"values": []}}))
        assert caption.caption is None
        assert caption.confidence is None

    def test_legacy_first_caption(self):
        raw = {
            "description": {
                "captions": [
                    {"text": "a tower at night", "confidence": 0.61},
                    {"text": "a building", "confidence": 0.4},
                ]
            }
        }
        caption = project_caption(_legacy(raw))
        assert caption.caption == "a tower at night"
        assert caption.confidence == 0.61
        assert caption.version_used is ApiVersion.LEGACY

    def test_legacy_empty_captions(self):
        caption = project_caption(_legacy({"description": {"captions": []}}))
        assert caption.caption is None
        assert caption.confidence is None

    def test_legacy_zero_confidence_preserved(self):
        caption = project_caption(_legacy({"description": {"captions": [{"text": "x", "confidence": 0}]}}))
        assert caption.confidence == 0

    def test_legacy_missing_confidence(self):
        caption = project_caption(_legacy({"description": {"captions": [{"text": "x"}]}}))
        assert caption.caption == "x"
        assert caption.confidence is None


class TestProjectTags:
    """Tests for project_tags"""

    def test_current_tags_preserve_order(self):
        raw = {
            "tagsResult": {
                "values": [
                    {"name": "outdoor", "confidence": 0.99},
                    {"name": "dog", "confidence": 0.95},
                ]
            }
        }
        tag_set = project_tags(_current(raw))
        assert tag_set.count == 2
        assert tag_set.tags == [Tag("outdoor", 0.99), Tag("dog", 0.95)]
        assert tag_set.raw is raw

    def test_legacy_tags(self):
        raw = {"tags": [{"name": "sky", "confidence": 0.9, "hint": "x"}]}
        tag_set = project_tags(_legacy(raw))
        assert tag_set.count == 1
        assert tag_set.tags == [Tag("sky", 0.9)]
        assert tag_set.version_used is ApiVersion.LEGACY

    def test_missing_tags_gives_empty_set(self):
        assert project_tags(_current({})).count == 0
        assert project_tags(_legacy({"tags": None})).count == 0

    def test_current_version_ignores_legacy_shape(self):
        assert project_tags(_current({"tags": [{"name": "sky", "confidence": 0.9}]})).count == 0
