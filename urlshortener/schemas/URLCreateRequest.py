from pydantic import BaseModel, Field, field_validator

from urlshortener.utils.urls import parse_url

# Request DTOs
class URLCreateRequest(BaseModel):
    # original_url is the Python field, 'url' is the JSON key
    original_url: str = Field(..., alias="url", min_length=1)

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator('original_url')
    def validate_url(cls, v):
        parse_url(v)
        return v
