from datetime import timedelta

import pytest

from api.errors import flatten_messages
from utils.export import to_csv
from utils.security import hash_password, verify_password, parse_duration, hash_reset_token
from utils.text import generate_slug, generate_unique_slug, strip_html, calculate_read_time


def test_password_hash_roundtrip():
    hashed = hash_password("Password123!")
    assert hashed != "Password123!"
    assert verify_password("Password123!", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("Password123!", "not-a-hash")


@pytest.mark.parametrize("value, expected", [
    ("7d", timedelta(days=7)),
    ("12h", timedelta(hours=12)),
    ("30m", timedelta(minutes=30)),
    ("1500", timedelta(milliseconds=1500)),
    (3600000, timedelta(hours=1)),
])
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


def test_parse_duration_rejects_garbage():
    with pytest.raises(ValueError):
        parse_duration("soon")


def test_reset_token_hash_is_stable_sha256():
    assert hash_reset_token("abc") == hash_reset_token("abc")
    assert len(hash_reset_token("abc")) == 64


def test_generate_slug():
    assert generate_slug("  Hello, World! ") == "hello-world"
    assert generate_slug("Revenue -- Ops & CRM") == "revenue-ops-crm"
    assert generate_slug("Café Growth Ünïcode") == "caf-growth-ncode"
    assert generate_slug("Ünïcödé") == ""


def test_generate_unique_slug_appends_counter():
    taken = {"post", "post-1"}
    assert generate_unique_slug("post", taken.__contains__) == "post-2"
    assert generate_unique_slug("fresh", taken.__contains__) == "fresh"


def test_strip_html_and_read_time():
    assert strip_html("<p>Hello <b>there</b></p>").strip() == "Hello there"
    assert calculate_read_time("") == 1
    assert calculate_read_time(" ".join(["word"] * 401)) == 3



def test_to_csv_quotes_every_cell():
    rows = [{"name": "Ann", "note": None}, {"name": 'Bob "B"', "note": "x,y"}]
    out = to_csv(rows, [("Name", lambda r: r["name"]), ("Note", lambda r: r["note"])])
    lines = out.splitlines()
    assert lines[0] == '"Name","Note"'
    assert lines[1] == '"Ann",""'
    assert lines[2] == '"Bob ""B""","x,y"'


def test_flatten_messages_nests_field_paths():
    flat = flatten_messages({"seo": {"metaTitle": ["Too long."]}, "title": ["Required."]})
    assert {"field": "seo.metaTitle", "message": "Too long."} in flat
    assert {"field": "title", "message": "Required."} in flat


def test_rate_limit_keys(app):
    from api.limits import contact_key, login_key, ip_and_agent_key

    with app.test_request_context("/api/contact", method="POST", json={"email": " Jane@Example.com "},
                                  environ_base={"REMOTE_ADDR": "10.0.0.1"},
                                  headers={"User-Agent": "pytest"}):
        assert contact_key() == "contact:10.0.0.1:jane@example.com"
        assert login_key() == "login:10.0.0.1:jane@example.com"
        assert ip_and_agent_key() == "10.0.0.1:pytest"
