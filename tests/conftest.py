import json
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from content_negotiator import Registry, Representation  # noqa: E402


def pytest_configure(config):
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Keep settings deterministic regardless of the developer's shell.

    Settings instances built inside tests read these variables; the
    module-level instance was created at import time with the defaults.
    """
    monkeypatch.delenv("NEGOTIATOR_DEFAULT_ACCEPT", raising=False)
    monkeypatch.delenv("NEGOTIATOR_FREEZE_REGISTRY", raising=False)
    monkeypatch.setenv("NEGOTIATOR_LOG_LEVEL", "INFO")
    yield


class Widget(Representation):
    """JSON representation used throughout the tests."""

    media_type = "application/json"

    def __init__(self, name="", tags=None):
        self.name = name
        self.tags = tags if tags is not None else []

    def content_type(self, accept):
        return self.media_type

    def marshal(self, accept):
        if accept.media_range not in (self.media_type, "*/*"):
            raise ValueError(f"cannot render {accept.media_range}")
        return json.dumps({"name": self.name, "tags": self.tags}).encode("utf-8")

    def unmarshal(self, media_type, params, body):
        data = json.loads(body.decode(params.get("charset", "utf-8")))
        self.name = data["name"]
        self.tags = data.get("tags", [])


class VendorWidget(Widget):
    media_type = "application/vnd.widget.v2+json"


@pytest.fixture
def widget():
    return Widget("default", ["a"])


@pytest.fixture
def vendor_widget():
    return VendorWidget("vendor")


@pytest.fixture
def registry(widget, vendor_widget):
    reg = Registry()
    reg.register("application/json", widget)
    reg.register("application/vnd.widget.v2+json", vendor_widget)
    reg.register("*/*", widget)
    return reg
