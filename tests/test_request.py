import pytest

from pydantic import ValidationError

from diffusion_to.models.parameters import (
    ImageModel,
    ImageOrientation,
    ImageSize,
    ImageSteps,
)
from diffusion_to.models.request import ImageRequest

def test_new_request_has_defaults():
    request = ImageRequest.new("a lighthouse at dusk")

    assert request.prompt == "a lighthouse at dusk"
    assert request.negative is None
    assert request.steps is ImageSteps.fifty
    assert request.model is ImageModel.beauty_realism
    assert request.size is ImageSize.small
    assert request.orientation is ImageOrientation.landscape

def test_payload_without_negative_prompt():
    payload = ImageRequest.new("a lighthouse").to_payload()

    assert "negative" not in payload
    assert payload == {
        "prompt": "a lighthouse",
        "steps": 50,
        "model": "beauty_realism",
        "size": "small",
        "orientation": "landscape",
    }

def test_payload_with_negative_prompt():
    payload = ImageRequest.new("a lighthouse").update_negative_prompt("fog").to_payload()

    assert payload["negative"] == "fog"

def test_updates_replace_one_field_each():
    request = (
        ImageRequest.new("a lighthouse")
        .update_steps(ImageSteps.two_hundred)
        .update_model(ImageModel.toon_animated)
        .update_size(ImageSize.large)
        .update_orientation(ImageOrientation.portrait)
    )

    assert request.to_payload() == {
        "prompt": "a lighthouse",
        "steps": 200,
        "model": "toon_animated",
        "size": "large",
        "orientation": "portrait",
    }

def test_updates_do_not_mutate_the_original():
    original = ImageRequest.new("a lighthouse")
    updated = original.update_size(ImageSize.medium).update_negative_prompt("fog")

    assert original.size is ImageSize.small
    assert original.negative is None
    assert updated.size is ImageSize.medium
    assert updated.negative == "fog"

def test_request_is_frozen():
    request = ImageRequest.new("a lighthouse")

    with pytest.raises(ValidationError):
        request.steps = ImageSteps.one_hundred

def test_invalid_values_never_reach_the_payload():
    request = ImageRequest.new("a lighthouse")

    with pytest.raises(ValidationError):
        request.update_size("huge")

    with pytest.raises(ValidationError):
        ImageRequest(prompt="a lighthouse", steps=75)
