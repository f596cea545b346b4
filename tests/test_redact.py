from __future__ import annotations

from pycarryover._redact import redact_for_log


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "id": "22ebbd4b-062f-4321-81b8-03f74ab161bc",
        "Authorization": "bearer abc",
        "SteamId": "76561190000000000",
        "LinkedAccounts": {"steam": "76561190000000000"},
        "nested": {"access_token": "tok"},
    }

    redacted = redact_for_log(payload)
    assert redacted["id"] == "22ebbd4b-062f-4321-81b8-03f74ab161bc"
    assert redacted["Authorization"] == "<redacted>"
    assert redacted["SteamId"] == "<redacted>"
    assert redacted["LinkedAccounts"] == "<redacted>"
    assert redacted["nested"]["access_token"] == "<redacted>"


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_caps_long_lists() -> None:
    redacted = redact_for_log({"extensions": list(range(8))}, max_items=3)
    assert redacted["extensions"] == [0, 1, 2, "<5 more>"]


def test_redact_for_log_passes_none_through() -> None:
    assert redact_for_log(None) is None


def test_redact_for_log_hides_profile_identity_block() -> None:
    profile = {"Id": "p-1", "StadiaId": "s", "PSNOnlineId": "psn", "NintendoId": "n", "Gamertag": "Agent47"}

    redacted = redact_for_log(profile)

    assert redacted == {
        "Id": "p-1",
        "StadiaId": "<redacted>",
        "PSNOnlineId": "<redacted>",
        "NintendoId": "<redacted>",
        "Gamertag": "Agent47",
    }


def test_redact_for_log_summarises_bytes_and_unknown_objects() -> None:
    redacted = redact_for_log({"raw": b"abc", "when": object})
    assert redacted["raw"] == "<bytes:3b>"
    assert redacted["when"] == repr(object)
