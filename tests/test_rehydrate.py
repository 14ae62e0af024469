"""Tests for playbind.options.rehydrate — response maps back onto records."""

from dataclasses import dataclass
from typing import Optional

import pytest

from playbind.errors import SchemaMismatchError
from playbind.options.fields import option
from playbind.options.normalize import normalize
from playbind.options.rehydrate import rehydrate, rehydrate_new


@dataclass
class ResponseInfo:
    url: str = option("url", default="")
    status: int = option("status", default=0)
    ok: bool = option("ok", default=False)
    status_text: str = option("statusText", default="")


@dataclass(frozen=True, slots=True)
class FrozenInfo:
    name: str = option("name", default="")
    count: int | None = option("count", default=None)


@dataclass
class Legacy:
    retries: Optional[int] = option("retries", default=None)
    ratio: float = option("ratio", default=0.0)


class TestRehydrate:
    def test_assigns_by_external_name(self) -> None:
        info = rehydrate(
            {"url": "https://x.test/", "status": 200, "ok": True, "statusText": "OK"},
            ResponseInfo(),
        )
        assert info == ResponseInfo(url="https://x.test/", status=200, ok=True, status_text="OK")

    def test_returns_destination(self) -> None:
        dest = ResponseInfo()
        assert rehydrate({}, dest) is dest

    def test_missing_keys_left_alone(self) -> None:
        info = rehydrate({"status": 404}, ResponseInfo(url="keep"))
        assert info.url == "keep"
        assert info.status == 404
        assert info.ok is False

    def test_none_value_treated_as_absent(self) -> None:
        info = rehydrate({"status": None}, ResponseInfo(status=3))
        assert info.status == 3

    def test_unknown_keys_ignored(self) -> None:
        info = rehydrate({"headers": {"a": "b"}}, ResponseInfo())
        assert info == ResponseInfo()

    def test_integral_float_coerced(self) -> None:
        info = rehydrate({"status": 201.0}, ResponseInfo())
        assert info.status == 201
        assert isinstance(info.status, int)

    def test_optional_field_unwrapped(self) -> None:
        assert rehydrate({"count": 3}, FrozenInfo()).count == 3
        assert rehydrate({"retries": 2}, Legacy()).retries == 2

    def test_frozen_record_updated(self) -> None:
        info = FrozenInfo()
        rehydrate({"name": "main"}, info)
        assert info.name == "main"

    def test_rehydrate_new(self) -> None:
        info = rehydrate_new(ResponseInfo, {"ok": True})
        assert info == ResponseInfo(ok=True)

    def test_requires_record_instance(self) -> None:
        with pytest.raises(TypeError):
            rehydrate({}, ResponseInfo)


class TestRoundTrip:
    def test_normalize_then_rehydrate(self) -> None:
        original = ResponseInfo(url="https://x.test/a", status=302, ok=False, status_text="")
        assert rehydrate(normalize(original), ResponseInfo(status=1, ok=True)) == original


class TestSchemaMismatch:
    def test_nested_map_for_scalar(self) -> None:
        with pytest.raises(SchemaMismatchError) as exc_info:
            rehydrate({"url": {"href": "https://x.test/"}}, ResponseInfo())
        err = exc_info.value
        assert err.field == "url"
        assert err.key == "url"
        assert err.expected == "str"
        assert "url" in str(err)

    def test_no_partial_population(self) -> None:
        info = ResponseInfo()
        with pytest.raises(SchemaMismatchError):
            rehydrate({"url": "https://x.test/", "status": [200]}, info)
        assert info == ResponseInfo()

    def test_bool_not_accepted_for_int(self) -> None:
        with pytest.raises(SchemaMismatchError):
            rehydrate({"status": True}, ResponseInfo())

    def test_int_not_accepted_for_bool(self) -> None:
        with pytest.raises(SchemaMismatchError):
            rehydrate({"ok": 1}, ResponseInfo())

    def test_str_not_accepted_for_int(self) -> None:
        with pytest.raises(SchemaMismatchError):
            rehydrate({"status": "200"}, ResponseInfo())

    def test_fractional_float_rejected(self) -> None:
        with pytest.raises(SchemaMismatchError):
            rehydrate({"status": 200.5}, ResponseInfo())

    def test_unsupported_field_type(self) -> None:
        with pytest.raises(SchemaMismatchError) as exc_info:
            rehydrate({"ratio": 1}, Legacy())
        assert exc_info.value.expected == "unsupported field type"


@dataclass
class CheckedOnly:
    # "Transport" exists only for type checkers; the hints cannot be evaluated
    transport: "Transport | None" = option("transport", default=None)  # noqa: F821
    port: "int" = option("port", default=0)
    label: "str | None" = option("label", default=None)
    retries: "Optional[int]" = option("retries", default=None)


class TestUnresolvableAnnotations:
    def test_coercible_fields_still_assigned(self) -> None:
        info = rehydrate({"port": 8080, "label": "main", "retries": 2}, CheckedOnly())
        assert info.port == 8080
        assert info.label == "main"
        assert info.retries == 2

    def test_unknown_type_still_mismatches(self) -> None:
        with pytest.raises(SchemaMismatchError):
            rehydrate({"transport": "ws"}, CheckedOnly())

    def test_wrong_kind_still_mismatches(self) -> None:
        with pytest.raises(SchemaMismatchError):
            rehydrate({"port": "8080"}, CheckedOnly())
