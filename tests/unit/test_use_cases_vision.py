"""
Unit tests for the vision use cases (analyze, caption, tags).
"""
from unittest.mock import AsyncMock

import pytest

from vision_bridge.application.use_cases.vision.analyze_image import AnalyzeImageUseCase
from vision_bridge.application.use_cases.vision.caption_image import CaptionImageUseCase
from vision_bridge.application.use_cases.vision.tag_image import TagImageUseCase
from vision_bridge.domain.models.analysis import AnalysisRequest, ApiVersion, UpstreamOutcome
from vision_bridge.domain.services.version_negotiator import VersionNegotiator

IMAGE_URL = "https://images.example.com/landmark.jpg"


def _negotiator(version: ApiVersion, body) -> AsyncMock:
    negotiator = AsyncMock(spec=VersionNegotiator)
    negotiator.resolve.return_value = UpstreamOutcome(version_used=version, raw_body=body)
    return negotiator


class TestAnalyzeImageUseCase:
    """Tests for AnalyzeImageUseCase"""

    @pytest.mark.asyncio
    async def test_returns_version_and_raw_body(self):
        body = {"objectsResult": {"values": [{"tags": [{"name": "tower"}]}]}}
        negotiator = _negotiator(ApiVersion.CURRENT, body)
        request = AnalysisRequest(image_url=IMAGE_URL, features=("Objects",))

        result = await AnalyzeImageUseCase(negotiator).execute(request)

        assert result.version == "v4"
        assert result.data == body
        negotiator.resolve.assert_awaited_once_with(request)


class TestCaptionImageUseCase:
    """Tests for CaptionImageUseCase"""

    @pytest.mark.asyncio
    async def test_requests_caption_feature_only(self):
        negotiator = _negotiator(ApiVersion.CURRENT, {"captionResult": {"text": "A dog", "confidence": 0}})

        result = await CaptionImageUseCase(negotiator).execute(IMAGE_URL)

        negotiator.resolve.assert_awaited_once_with(AnalysisRequest(image_url=IMAGE_URL, features=("Caption",)))
        assert result.version == "v4"
        assert result.caption == "A dog"
        assert result.confidence == 0

    @pytest.mark.asyncio
    async def test_legacy_without_captions(self):
        raw = {"description": {"captions": []}}
        negotiator = _negotiator(ApiVersion.LEGACY, raw)

        result = await CaptionImageUseCase(negotiator).execute(IMAGE_URL)

        assert result.version == "v3.2"
        assert result.caption is None
        assert result.confidence is None
        assert result.raw == raw


class TestTagImageUseCase:
    """Tests for TagImageUseCase"""

    @pytest.mark.asyncio
    async def test_requests_tags_feature_only(self):
        raw = {"tagsResult": {"values": [{"name": "b", "confidence": 0.5}, {"name": "a", "confidence": 0.9}]}}
        negotiator = _negotiator(ApiVersion.CURRENT, raw)

        result = await TagImageUseCase(negotiator).execute(IMAGE_URL)

        negotiator.resolve.assert_awaited_once_with(AnalysisRequest(image_url=IMAGE_URL, features=("Tags",)))
        assert result.count == 2
        assert [t.name for t in result.tags] == ["b", "a"]
        assert result.raw == raw
