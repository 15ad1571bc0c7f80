# Test fixtures and configuration
import base64
import json
import pytest
import sys
from pathlib import Path

import httpx

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fitting_room.config import ProxyConfig
from fitting_room.pipeline import TryOnPipeline


GENERATED_IMAGE = "data:image/png;base64,R0VORVJBVEVE"


@pytest.fixture
def minimal_png_bytes():
    """Minimal valid PNG image bytes."""
    return bytes([
        0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A,  # PNG signature
        0x00, 0x00, 0x00, 0x0D, 0x49, 0x48, 0x44, 0x52,  # IHDR chunk
        0x00, 0x00, 0x00, 0x01, 0x00, 0x00, 0x00, 0x01,  # 1x1 dimensions
        0x08, 0x02, 0x00, 0x00, 0x00, 0x90, 0x77, 0x53,
        0xDE, 0x00, 0x00, 0x00, 0x0C, 0x49, 0x44, 0x41,  # IDAT chunk
        0x54, 0x08, 0xD7, 0x63, 0xF8, 0xCF, 0xC0, 0x00,
        0x00, 0x00, 0x03, 0x00, 0x01, 0x00, 0x05, 0xFE,
        0xD4, 0xAA, 0x00, 0x00, 0x00, 0x00, 0x49, 0x45,  # IEND chunk
        0x4E, 0x44, 0xAE, 0x42, 0x60, 0x82
    ])


@pytest.fixture
def person_image(minimal_png_bytes):
    """Person photo as a data URL."""
    return f"data:image/png;base64,{base64.b64encode(minimal_png_bytes).decode()}"


@pytest.fixture
def clothing_image(minimal_png_bytes):
    """Garment photo as a data URL (distinct from the person photo)."""
    return f"data:image/jpeg;base64,{base64.b64encode(minimal_png_bytes[::-1]).decode()}"


@pytest.fixture
def temp_image_file(tmp_path, minimal_png_bytes):
    """Create a temporary PNG file."""
    img_path = tmp_path / "test_image.png"
    img_path.write_bytes(minimal_png_bytes)
    return img_path


@pytest.fixture(autouse=True)
def no_gateway_key_in_env(monkeypatch):
    """Keep the developer's own credentials out of the tests."""
    monkeypatch.delenv("LOVABLE_API_KEY", raising=False)
    monkeypatch.delenv("GATEWAY_API_KEY", raising=False)


class FakeGateway:
    """Records gateway calls and answers with a canned response."""

    def __init__(self, status_code: int = 200, body=None):
        self.status_code = status_code
        self.body = body if body is not None else gateway_reply(GENERATED_IMAGE)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


def gateway_reply(image_url: str | None) -> dict:
    """A chat-completions reply, with or without a generated image."""
    message = {"role": "assistant", "content": "Here is your look."}
    if image_url is not None:
        message["images"] = [{"type": "image_url", "image_url": {"url": image_url}}]
    return {"choices": [{"message": message}]}


def make_config(api_key: str | None = "test-key") -> ProxyConfig:
    config = ProxyConfig(_env_file=None)
    config.gateway_api_key = api_key
    return config


def make_pipeline(gateway, api_key: str | None = "test-key") -> TryOnPipeline:
    """Pipeline whose gateway client talks to ``gateway`` instead of the network."""
    pipeline = TryOnPipeline(make_config(api_key))
    pipeline.gateway._client = httpx.AsyncClient(transport=httpx.MockTransport(gateway))
    return pipeline


@pytest.fixture
def fake_gateway():
    return FakeGateway()
