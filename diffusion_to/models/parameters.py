from enum import Enum

from diffusion_to.errors import (
    InvalidModel,
    InvalidOrientation,
    InvalidSize,
    InvalidStepAmount,
)

class WireValue:
    """
    Shared behaviour for the API's closed parameter sets: the display form
    is the wire form, and ``choices()`` lists every wire value in order.
    """

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def choices(cls) -> list:
        return [member.value for member in cls]

class ImageSteps(WireValue, int, Enum):
    fifty = 50
    one_hundred = 100
    one_hundred_fifty = 150
    two_hundred = 200

    @classmethod
    def parse(cls, value: int) -> "ImageSteps":
        if isinstance(value, bool):
            raise InvalidStepAmount(value)

        try:
            return cls(value)
        except ValueError:
            raise InvalidStepAmount(value) from None

class ImageModel(WireValue, str, Enum):
    beauty_realism = "beauty_realism"
    aesthetic_realism = "aesthetic_realism"
    anime_realism = "anime_realism"
    analog_realism = "analog_realism"
    dream_reality = "dream_reality"
    stable_diffusion = "stable_diffusion"
    toon_animated = "toon_animated"
    fantasy_animated = "fantasy_animated"

    @classmethod
    def parse(cls, value: str) -> "ImageModel":
        try:
            return cls(value)
        except ValueError:
            raise InvalidModel(value) from None

class ImageSize(WireValue, str, Enum):
    small = "small"
    medium = "medium"
    large = "large"

    @classmethod
    def parse(cls, value: str) -> "ImageSize":
        try:
            return cls(value)
        except ValueError:
            raise InvalidSize(value) from None

class ImageOrientation(WireValue, str, Enum):
    square = "square"
    landscape = "landscape"
    portrait = "portrait"

    @classmethod
    def parse(cls, value: str) -> "ImageOrientation":
        try:
            return cls(value)
        except ValueError:
            raise InvalidOrientation(value) from None

DEFAULT_STEPS = ImageSteps.fifty
DEFAULT_MODEL = ImageModel.beauty_realism
DEFAULT_SIZE = ImageSize.small
DEFAULT_ORIENTATION = ImageOrientation.landscape
