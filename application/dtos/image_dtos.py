from pydantic import BaseModel, ConfigDict, Field


class ImageBlob(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Storage key the image was read from")
    content: bytes = Field(..., description="Raw image bytes")
    content_type: str = Field(..., description="Content type derived from the key extension")
