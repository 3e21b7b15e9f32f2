from pydantic import BaseModel, ConfigDict, Field, HttpUrl, StrictStr, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

_HTTP_URL = TypeAdapter(HttpUrl)


class ImageUrlRequest(BaseModel):
    """DTO for requests that carry a remote image URL"""
    model_config = ConfigDict(populate_by_name=True)

    image_url: StrictStr = Field(
        ...,
        alias="imageUrl",
        json_schema_extra={"format": "uri"},
        examples=[
            "https://raw.githubusercontent.com/Azure-Samples/cognitive-services-sample-data-files/"
            "master/ComputerVision/Images/landmark.jpg"
        ],
    )

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, value: str) -> str:
        # Checked as an http(s) URL but forwarded exactly as sent
        try:
            _HTTP_URL.validate_python(value)
        except PydanticValidationError:
            raise PydanticCustomError("url_type", "imageUrl must be a valid http(s) URL") from None
        return value
