from pydantic import BaseModel, ConfigDict, Field

from diffusion_to.models.parameters import ImageModel, ImageSize, ImageSteps

class ImageToken(BaseModel):
    """
    Opaque job token issued by the API. It serializes to the exact body
    both endpoints use, ``{"token": "..."}``.
    """

    model_config = ConfigDict(frozen=True)

    token: str

    def __str__(self) -> str:
        return self.token

class DiffusionImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    steps: ImageSteps
    size: ImageSize
    model: ImageModel
    credits_used: int
    created_at: str
    updated_at: str
    raw: str = Field(repr=False)

class StatusResponse(BaseModel):
    data: DiffusionImage
