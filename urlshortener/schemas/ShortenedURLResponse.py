from pydantic import BaseModel, Field

# Response DTOs
class ShortenedURLResponse(BaseModel):
    shortened_url: str = Field(..., alias="shortenedUrl")

    model_config = {"populate_by_name": True}
