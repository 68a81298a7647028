from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from typing import Optional

from diffusion_to.models.parameters import (
    DEFAULT_MODEL,
    DEFAULT_ORIENTATION,
    DEFAULT_SIZE,
    DEFAULT_STEPS,
    ImageModel,
    ImageOrientation,
    ImageSize,
    ImageSteps,
)

class ImageRequest(BaseModel):
    """
    The parameters of the image to create.

    Requests are immutable. Each ``update_*`` call validates and returns
    a new request, so a chain such as

        ImageRequest.new("a lighthouse").update_steps(ImageSteps.two_hundred)

    never changes the request it started from.
    """

    model_config = ConfigDict(frozen=True)

    prompt: str
    negative: Optional[str] = None
    steps: ImageSteps = DEFAULT_STEPS
    model: ImageModel = DEFAULT_MODEL
    size: ImageSize = DEFAULT_SIZE
    orientation: ImageOrientation = DEFAULT_ORIENTATION

    @classmethod
    def new(cls, prompt: str) -> ImageRequest:
        return cls(prompt=prompt)

    def update_negative_prompt(self, prompt: str) -> ImageRequest:
        return self.__replace(negative=prompt)

    def update_steps(self, steps: ImageSteps) -> ImageRequest:
        return self.__replace(steps=steps)

    def update_model(self, model: ImageModel) -> ImageRequest:
        return self.__replace(model=model)

    def update_size(self, size: ImageSize) -> ImageRequest:
        return self.__replace(size=size)

    def update_orientation(self, orientation: ImageOrientation) -> ImageRequest:
        return self.__replace(orientation=orientation)

    def to_payload(self) -> dict:
        # An absent negative prompt is left out of the body, never sent as null.

        return self.model_dump(mode="json", exclude_none=True)

    def __replace(self, **changes) -> ImageRequest:
        # model_copy() skips validation; rebuilding keeps the enum fields checked.

        fields = self.model_dump()
        fields.update(changes)

        return type(self)(**fields)
