from pydantic import BaseModel, Field

class OriginalURLResponse(BaseModel):
    original_url: str = Field(..., alias="originalUrl")

    model_config = {"populate_by_name": True}
