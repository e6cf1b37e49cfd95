"""Unit tests for the representation registry."""

import pytest

from content_negotiator import (
    InvalidAcceptParamError,
    MediaTypeError,
    NoAcceptableContentTypeError,
    QualityParseError,
    Registry,
    RegistryFrozenError,
    UnsupportedMediaTypeError,
    build_registry,
)
from content_negotiator.config import Settings


def test_negotiate_exact_match(registry):
    rep, accept = registry.negotiate("application/json")
    assert rep.media_type == "application/json"
    assert accept.media_range == "application/json"
    assert accept.quality == 0.9


def test_negotiate_wildcard_key_is_literal(widget):
    reg = Registry()
    reg.register("application/json", widget)
    reg.register("*/*", widget)

    rep, accept = reg.negotiate(
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
    )
    assert rep.name == "default"
    assert accept.media_range == "*/*"
    assert accept.quality == 0.8


def test_wildcard_key_does_not_match_concrete_types(widget):
    reg = Registry()
    reg.register("*/*", widget)
    with pytest.raises(NoAcceptableContentTypeError):
        reg.negotiate("application/xml")


def test_negotiate_follows_rank_order(registry, vendor_widget):
    header = "*/*,application/json,application/vnd.widget.v2+json;format=foo,application/*"
    rep, accept = registry.negotiate(header)
    assert isinstance(rep, type(vendor_widget))
    assert accept.params == {"format": "foo"}


def test_negotiate_first_value_among_ties(registry):
    rep, accept = registry.negotiate("image/jpeg, image/webp, */*")
    assert accept.media_range == "*/*"
    assert rep.media_type == "application/json"


def test_negotiate_no_match(registry):
    with pytest.raises(NoAcceptableContentTypeError) as exc_info:
        registry.negotiate("application/xml")
    assert exc_info.value.code == "NO_ACCEPTABLE_CONTENT_TYPE"
    assert exc_info.value.details == {"header": "application/xml"}


@pytest.mark.parametrize("header", ["application/json", "*/*", "text/html;q=0.1"])
def test_empty_registry_never_matches(header):
    with pytest.raises(NoAcceptableContentTypeError):
        Registry().negotiate(header)


@pytest.mark.parametrize(
    "header, error",
    [
        ("application/json;foo", InvalidAcceptParamError),
        ("application/json;q=x", QualityParseError),
    ],
)
def test_negotiate_propagates_parse_errors(registry, header, error):
    with pytest.raises(error):
        registry.negotiate(header)


def test_register_isolates_prototype_from_caller(widget):
    reg = Registry()
    reg.register("application/json", widget)

    widget.name = "mutated"
    widget.tags.append("b")

    rep, _ = reg.negotiate("application/json")
    assert rep.name == "default"
    assert rep.tags == ["a"]


def test_negotiate_returns_fresh_copies(registry):
    first, _ = registry.negotiate("application/json")
    first.name = "changed"
    first.tags.append("z")

    second, _ = registry.negotiate("application/json")
    assert second is not first
    assert second.name == "default"
    assert second.tags == ["a"]


def test_register_replaces_existing_key(registry, vendor_widget):
    registry.register("application/json", vendor_widget)
    rep, _ = registry.negotiate("application/json")
    assert rep.name == "vendor"


def test_resolve_content_type(registry):
    rep, params = registry.resolve_content_type("application/json; charset=utf-8")
    assert rep.media_type == "application/json"
    assert params == {"charset": "utf-8"}


def test_resolve_content_type_is_case_insensitive_on_type(registry):
    rep, params = registry.resolve_content_type("Application/JSON")
    assert rep.media_type == "application/json"
    assert params == {}


def test_resolve_content_type_unregistered(registry):
    with pytest.raises(NoAcceptableContentTypeError) as exc_info:
        registry.resolve_content_type("application/xml")
    assert isinstance(exc_info.value, UnsupportedMediaTypeError)
    assert exc_info.value.code == "UNSUPPORTED_MEDIA_TYPE"
    assert exc_info.value.details == {"header": "application/xml"}


def test_resolve_content_type_malformed(registry):
    with pytest.raises(MediaTypeError) as exc_info:
        registry.resolve_content_type("application/xml/json/ foobar")
    assert exc_info.value.header == "application/xml/json/ foobar"
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_freeze_rejects_registration(registry, widget):
    registry.freeze()
    assert registry.frozen
    with pytest.raises(RegistryFrozenError) as exc_info:
        registry.register("text/html", widget)
    assert exc_info.value.details == {"media_range": "text/html"}
    assert "text/html" not in registry

    rep, _ = registry.negotiate("application/json")
    assert rep.name == "default"


def test_container_protocol(registry):
    assert len(registry) == 3
    assert "*/*" in registry
    assert "text/*" not in registry
    assert registry.media_ranges() == [
        "application/json",
        "application/vnd.widget.v2+json",
        "*/*",
    ]


def test_build_registry_freezes_by_default(widget, vendor_widget):
    reg = build_registry(
        {"application/json": widget, "application/vnd.widget.v2+json": vendor_widget},
        Settings(),
    )
    assert reg.frozen
    assert reg.media_ranges() == ["application/json", "application/vnd.widget.v2+json"]


def test_build_registry_can_stay_open(monkeypatch, widget):
    monkeypatch.setenv("NEGOTIATOR_FREEZE_REGISTRY", "false")
    reg = build_registry({"application/json": widget}, Settings())
    assert not reg.frozen
    reg.register("*/*", widget)
    assert "*/*" in reg
