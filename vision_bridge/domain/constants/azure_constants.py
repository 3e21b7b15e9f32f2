"""Constants for the Azure Face and Computer Vision REST APIs"""


class AzureHeaders:
    """Request headers understood by Azure Cognitive Services"""
    SUBSCRIPTION_KEY = "Ocp-Apim-Subscription-Key"


class FaceApi:
    """Face detection endpoint, parameters and supported values"""
    DETECT_PATH = "/face/v1.0/detect"

    # Query parameter names
    RETURN_FACE_ID = "returnFaceId"
    DETECTION_MODEL = "detectionModel"
    RETURN_FACE_LANDMARKS = "returnFaceLandmarks"
    RETURN_FACE_ATTRIBUTES = "returnFaceAttributes"
    RECOGNITION_MODEL = "recognitionModel"

    # Fixed values
    DETECTION_MODEL_ID = "detection_03"
    RECOGNITION_MODEL_ID = "recognition_04"

    # Only attribute Azure still serves for detection
    ALLOWED_ATTRIBUTES = ("qualityForRecognition",)


class VisionApi:
    """Computer Vision endpoints and parameters for both API versions"""
    # v4 (current)
    CURRENT_PATH = "/computervision/imageanalysis:analyze"
    CURRENT_API_VERSION = "2023-10-01"
    API_VERSION_PARAM = "api-version"
    FEATURES_PARAM = "features"
    DEFAULT_FEATURES = ("Caption", "Tags", "Objects")
    CAPTION_FEATURES = ("Caption",)
    TAGS_FEATURES = ("Tags",)

    # v3.2 (legacy)
    LEGACY_PATH = "/vision/v3.2/analyze"
    VISUAL_FEATURES_PARAM = "visualFeatures"
    LANGUAGE_PARAM = "language"
    LEGACY_VISUAL_FEATURES = ("Description", "Tags", "Objects")
    LEGACY_LANGUAGE = "en"

    # Statuses a region/tier without v4 answers with
    VERSION_UNSUPPORTED_STATUSES = frozenset({400, 404, 415})
