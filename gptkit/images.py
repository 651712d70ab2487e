"""Requests and responses of the image generation, edit and variation endpoints."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from gptkit.forms import FormBuilder

CREATE_IMAGE_SIZE_256X256 = "256x256"
CREATE_IMAGE_SIZE_512X512 = "512x512"
CREATE_IMAGE_SIZE_1024X1024 = "1024x1024"
# Supported by dall-e-3 only.
CREATE_IMAGE_SIZE_1792X1024 = "1792x1024"
CREATE_IMAGE_SIZE_1024X1792 = "1024x1792"

CREATE_IMAGE_RESPONSE_FORMAT_URL = "url"
CREATE_IMAGE_RESPONSE_FORMAT_B64_JSON = "b64_json"

CREATE_IMAGE_MODEL_DALL_E_2 = "dall-e-2"
CREATE_IMAGE_MODEL_DALL_E_3 = "dall-e-3"

CREATE_IMAGE_QUALITY_HD = "hd"
CREATE_IMAGE_QUALITY_STANDARD = "standard"

CREATE_IMAGE_STYLE_VIVID = "vivid"
CREATE_IMAGE_STYLE_NATURAL = "natural"

IMAGES_GENERATIONS_SUFFIX = "/images/generations"
IMAGES_EDITS_SUFFIX = "/images/edits"
IMAGES_VARIATIONS_SUFFIX = "/images/variations"

BuilderFactory = Callable[[Any], Any]


@dataclass
class ImageRequest:
    """A request to generate images from a prompt."""

    prompt: str = ""
    model: str = ""
    n: int = 0
    quality: str = ""
    size: str = ""
    style: str = ""
    response_format: str = ""
    user: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out fields that are unset."""
        fields = [
            ("prompt", self.prompt),
            ("model", self.model),
            ("n", self.n),
            ("quality", self.quality),
            ("size", self.size),
            ("style", self.style),
            ("response_format", self.response_format),
            ("user", self.user),
        ]
        return {key: value for key, value in fields if value}


@dataclass
class ImageResponseDataInner:
    """One generated image, as a URL or base64 JSON."""

    url: str = ""
    b64_json: str = ""
    revised_prompt: str = ""


@dataclass
class ImageResponse:
    """A response from the image endpoints."""

    created: int = 0
    data: list[ImageResponseDataInner] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageResponse":
        return cls(
            created=data.get("created") or 0,
            data=[
                ImageResponseDataInner(
                    url=(item or {}).get("url") or "",
                    b64_json=(item or {}).get("b64_json") or "",
                    revised_prompt=(item or {}).get("revised_prompt") or "",
                )
                for item in data.get("data") or []
            ],
        )


@dataclass
class ImageEditRequest:
    """A request to edit an image; ``image`` and ``mask`` are open binary files."""

    image: Any = None
    mask: Any = None
    prompt: str = ""
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""


@dataclass
class ImageVariRequest:
    """A request for variations of an image; ``image`` is an open binary file."""

    image: Any = None
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""


def _factory(builder_factory: Optional[BuilderFactory]) -> BuilderFactory:
    return FormBuilder if builder_factory is None else builder_factory


def build_edit_image_form(
    request: ImageEditRequest, builder_factory: Optional[BuilderFactory] = None
) -> tuple[bytes, str]:
    """Encode an image edit request; return the form body and its content type."""
    body = io.BytesIO()
    builder = _factory(builder_factory)(body)
    builder.create_form_file("image", request.image)
    if request.mask is not None:
        builder.create_form_file("mask", request.mask)
    builder.write_field("prompt", request.prompt)
    builder.write_field("n", str(int(request.n)))
    builder.write_field("size", request.size)
    builder.write_field("response_format", request.response_format)
    builder.close()
    return body.getvalue(), builder.content_type()


def build_variation_image_form(
    request: ImageVariRequest, builder_factory: Optional[BuilderFactory] = None
) -> tuple[bytes, str]:
    """Encode an image variation request; return the form body and its content type."""
    body = io.BytesIO()
    builder = _factory(builder_factory)(body)
    builder.create_form_file("image", request.image)
    builder.write_field("n", str(int(request.n)))
    builder.write_field("size", request.size)
    builder.write_field("response_format", request.response_format)
    builder.close()
    return body.getvalue(), builder.content_type()