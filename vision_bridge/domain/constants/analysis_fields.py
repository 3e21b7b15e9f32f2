"""Constants for upstream Computer Vision response field names"""


class CurrentVersionFields:
    """Field name constants for the v4 (Image Analysis 4.0) response body"""
    CAPTION_RESULT = "captionResult"
    TAGS_RESULT = "tagsResult"
    VALUES = "values"
    TEXT = "text"
    CONFIDENCE = "confidence"


class LegacyVersionFields:
    """Field name constants for the v3.2 analyze response body"""
    DESCRIPTION = "description"
    CAPTIONS = "captions"
    TAGS = "tags"
    TEXT = "text"
    CONFIDENCE = "confidence"


class TagFields:
    """Field name constants shared by tag entries of both versions"""
    NAME = "name"
    CONFIDENCE = "confidence"
