from __future__ import annotations

import datetime
import logging
import requests
import time

from typing import Optional, Union

from diffusion_to.context import DEFAULT_ENDPOINT, DiffusionContext
from diffusion_to.errors import (
    ImageNotReady,
    InvalidHeader,
    TimeExpired,
    UnexpectedStatusCode,
)
from diffusion_to.models.image import DiffusionImage, ImageToken, StatusResponse
from diffusion_to.models.request import ImageRequest

# The API suggests polling the status endpoint every five seconds.

POLL_INTERVAL = 5

logger = logging.getLogger("diffusion_to")

class DiffusionClient:
    """
    The client used to talk to the diffusion.to API.

    The bearer and accept headers are built once at construction and sent
    with every call. They are passed per request, so a session handed in
    by the caller is never modified. A session created by the client is
    closed by ``close()``; a caller's session is left for the caller to close.
    """

    @classmethod
    def from_context(cls, context: DiffusionContext, api_key: Optional[str] = None) -> DiffusionClient:
        api_key = api_key or context.api_key

        if not api_key:
            raise ValueError("An API key is required to create a client.")

        return cls(api_key, endpoint=context.endpoint)

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINT,
        session: Optional[requests.Session] = None,
    ):
        bearer = f"Bearer {api_key}"

        self.__validate_header("Authorization", bearer)

        self.endpoint = endpoint.rstrip("/")
        self.image_url = f"{self.endpoint}/api/image"
        self.status_url = f"{self.endpoint}/api/image/status"

        self.headers = {
            "Authorization": bearer,
            "Accept": "application/json",
        }

        self.__owns_session = session is None

        if session is None:
            session = requests.Session()

        self.session = session

    def __enter__(self) -> DiffusionClient:
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self.__owns_session:
            self.session.close()

    def request_image(self, request: ImageRequest) -> ImageToken:
        """
        Ask the API to create an image from the given request. The returned
        token is used to check the status of the image and to receive it
        once it is complete.
        """

        logger.info(
            f"Requesting image: steps={request.steps}, model={request.model}, "
            f"size={request.size}, orientation={request.orientation}"
        )

        r = self.session.post(self.image_url, headers=self.headers, json=request.to_payload())

        r.raise_for_status()

        token = ImageToken.model_validate(r.json())

        logger.debug(f"Received token={token}")

        return token

    def check_status(self, token: ImageToken) -> DiffusionImage:
        """
        Check on an image once. Raises ``ImageNotReady`` while the API is
        still working on it and ``UnexpectedStatusCode`` for any answer
        other than 201 or 204.
        """

        r = self.session.post(self.status_url, headers=self.headers, json=token.model_dump())

        if r.status_code == 204:
            raise ImageNotReady()
        elif r.status_code == 201:
            response = StatusResponse.model_validate(r.json())

            return response.data
        else:
            raise UnexpectedStatusCode(r.status_code)

    def check_and_wait(
        self,
        token: ImageToken,
        max_wait_time: Union[float, datetime.timedelta, None] = None,
    ) -> DiffusionImage:
        """
        Poll every ``POLL_INTERVAL`` seconds until the image is complete.

        Not-ready answers, unexpected status codes and transport errors all
        keep the loop polling. If ``max_wait_time`` is given and runs out
        before the image is complete, ``TimeExpired`` is raised. With ``None``
        the loop polls until the image is complete. A 201 whose data does not
        match the image model is raised immediately.
        """

        if isinstance(max_wait_time, datetime.timedelta):
            max_wait_time = max_wait_time.total_seconds()

        deadline = None

        if max_wait_time is not None:
            deadline = time.monotonic() + max_wait_time

        polls = 0

        while True:
            polls += 1

            try:
                image = self.check_status(token)
            except ImageNotReady:
                logger.debug(f"token={token}, poll={polls}, status=pending")
            except UnexpectedStatusCode as e:
                logger.warning(f"token={token}, poll={polls}, status_code={e.status_code}")
            except requests.RequestException as e:
                logger.warning(f"token={token}, poll={polls}, error={e}")
            else:
                logger.info(f"token={token}, poll={polls}, status=complete, image_id={image.id}, credits_used={image.credits_used}")

                return image

            if deadline is not None and time.monotonic() >= deadline:
                logger.error(f"token={token} did not complete after {polls} polls")

                raise TimeExpired()

            time.sleep(POLL_INTERVAL)

    @staticmethod
    def __validate_header(name: str, value: str):
        try:
            value.encode("latin-1")
            requests.utils.check_header_validity((name, value))
        except (UnicodeEncodeError, requests.exceptions.InvalidHeader):
            raise InvalidHeader(name) from None
