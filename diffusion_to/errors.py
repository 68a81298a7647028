class DiffusionError(Exception):
    """Base class for every error raised by this package.

    Transport failures are not wrapped: they surface as the
    ``requests.RequestException`` raised by the session.
    """

class InvalidHeader(DiffusionError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"invalid value for header {name}")

        self.name = name

class ImageNotReady(DiffusionError):
    def __init__(self):
        super().__init__("the image is not complete")

class UnexpectedStatusCode(DiffusionError):
    def __init__(self, status_code: int):
        super().__init__(f"unknown http error {status_code}")

        self.status_code = status_code

class TimeExpired(DiffusionError):
    def __init__(self):
        super().__init__("time expired without image finishing")

class InvalidParameter(DiffusionError, ValueError):
    description = "invalid parameter"

    def __init__(self, value):
        super().__init__(f"{self.description}: {value!r}")

        self.value = value

class InvalidStepAmount(InvalidParameter):
    description = "invalid step amount"

class InvalidModel(InvalidParameter):
    description = "invalid model"

class InvalidSize(InvalidParameter):
    description = "invalid size"

class InvalidOrientation(InvalidParameter):
    description = "invalid orientation"

class InvalidImageData(DiffusionError, ValueError):
    def __init__(self):
        super().__init__("invalid raw image data")

class ImageDecodeError(DiffusionError, ValueError):
    pass
