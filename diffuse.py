"""
CLI for requesting and downloading AI-created images via diffusion.to.

    diffuse --api-key $KEY --prompt "a lighthouse at dusk" --steps 100 --size large

The API key may also come from DIFFUSION_API_KEY. The image is written to
--out, or to <sha256 of the image>.png when no name is given.
"""

import argparse
import logging
import sys

from importlib.metadata import PackageNotFoundError, version
from typing import Optional

from diffusion_to.client import DiffusionClient
from diffusion_to.context import DiffusionContext
from diffusion_to.image import save_image
from diffusion_to.models.parameters import (
    ImageModel,
    ImageOrientation,
    ImageSize,
    ImageSteps,
)
from diffusion_to.models.request import ImageRequest

# Wait for up to five minutes.

MAX_WAIT_TIME = 300

def get_version() -> str:
    try:
        return version("diffusion-to")
    except PackageNotFoundError:
        return "unknown"

def parse_args(context: DiffusionContext, argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="diffuse",
        description="Request and download AI-created images via diffusion.to",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument("-a", "--api-key", default=context.api_key, help="The token for the API (default: $DIFFUSION_API_KEY)")
    parser.add_argument("-p", "--prompt", required=True, help="The prompt for the image")
    parser.add_argument("-n", "--negative", help="The negative prompt for the image")
    parser.add_argument("-s", "--steps", type=int, choices=ImageSteps.choices(), default=ImageSteps.fifty.value, help="The number of steps for the generation to use")
    parser.add_argument("-m", "--model", choices=ImageModel.choices(), default=ImageModel.beauty_realism.value, help="The image model to use")
    parser.add_argument("--size", choices=ImageSize.choices(), default=ImageSize.small.value, help="The size of the image")
    parser.add_argument("-o", "--orientation", choices=ImageOrientation.choices(), default=ImageOrientation.square.value, help="The orientation of the image")
    parser.add_argument("--out", help="The file to output the image to")

    args = parser.parse_args(argv)

    if not args.api_key:
        parser.error("an API key is required: pass --api-key or set DIFFUSION_API_KEY")

    return args

def build_request(args: argparse.Namespace) -> ImageRequest:
    request = (
        ImageRequest.new(args.prompt)
        .update_steps(ImageSteps.parse(args.steps))
        .update_model(ImageModel.parse(args.model))
        .update_size(ImageSize.parse(args.size))
        .update_orientation(ImageOrientation.parse(args.orientation))
    )

    if args.negative is not None:
        request = request.update_negative_prompt(args.negative)

    return request

def run(context: DiffusionContext, args: argparse.Namespace) -> str:
    request = build_request(args)

    with DiffusionClient.from_context(context, api_key=args.api_key) as client:
        token = client.request_image(request)

        context.logger.info(f"Waiting for token={token}")

        image = client.check_and_wait(token, MAX_WAIT_TIME)

    return save_image(image, filename=args.out, directory=context.download_path)

def main(argv: Optional[list[str]] = None) -> int:
    context = DiffusionContext()
    args = parse_args(context, argv)

    try:
        filename = run(context, args)
    except Exception as e:
        context.logger.error(f"Failed to create image: {e}", exc_info=context.logger.isEnabledFor(logging.DEBUG))

        return 1

    print(f"image written to {filename}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
