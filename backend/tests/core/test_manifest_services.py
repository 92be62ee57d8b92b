"""Manifest Advanced Services tests — pure enable/disable transform.

Tests cover:
    - Enable adds the known declaration
    - Enable twice keeps a single entry
    - Disable removes the entry, leaves others
    - Missing / null dependencies created
    - Unknown service on enable writes nothing for it
    - Other manifest keys untouched; input dict not mutated
"""

import copy

from scriptops.core.manifest_services import (
    enabled_service_ids,
    find_advanced_service,
    set_advanced_service,
)


def _manifest(*entries: dict) -> dict:
    return {
        "timeZone": "Europe/Madrid",
        "runtimeVersion": "V8",
        "dependencies": {"enabledAdvancedServices": list(entries)},
    }


_DRIVE = {"userSymbol": "Drive", "serviceId": "drive", "version": "v2"}


def test_enable_adds_known_declaration():
    result = set_advanced_service(_manifest(), "sheets", True)
    assert result["dependencies"]["enabledAdvancedServices"] == [
        {"userSymbol": "Sheets", "serviceId": "sheets", "version": "v4"},
    ]


def test_enable_twice_keeps_single_entry():
    once = set_advanced_service(_manifest(), "gmail", True)
    twice = set_advanced_service(once, "gmail", True)
    assert enabled_service_ids(twice) == ["gmail"]


def test_disable_removes_only_that_service():
    manifest = set_advanced_service(_manifest(_DRIVE), "sheets", True)
    result = set_advanced_service(manifest, "sheets", False)
    assert enabled_service_ids(result) == ["drive"]


def test_disable_absent_service_is_noop():
    result = set_advanced_service(_manifest(_DRIVE), "sheets", False)
    assert result["dependencies"]["enabledAdvancedServices"] == [_DRIVE]


def test_missing_dependencies_created():
    result = set_advanced_service({"timeZone": "UTC"}, "drive", True)
    assert enabled_service_ids(result) == ["drive"]
    assert result["timeZone"] == "UTC"


def test_null_dependencies_handled():
    result = set_advanced_service({"dependencies": None}, "drive", False)
    assert result["dependencies"] == {"enabledAdvancedServices": []}


def test_unknown_service_on_enable_writes_nothing():
    assert find_advanced_service("fakeApi") is None
    result = set_advanced_service(_manifest(_DRIVE), "fakeApi", True)
    assert enabled_service_ids(result) == ["drive"]


def test_other_keys_untouched_and_input_not_mutated():
    manifest = _manifest(_DRIVE)
    manifest["dependencies"]["libraries"] = [{"libraryId": "x"}]
    snapshot = copy.deepcopy(manifest)
    result = set_advanced_service(manifest, "sheets", True)
    assert manifest == snapshot
    assert result["dependencies"]["libraries"] == [{"libraryId": "x"}]
    assert result["runtimeVersion"] == "V8"
