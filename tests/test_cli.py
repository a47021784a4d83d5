from __future__ import annotations

import json

import pytest

from conftest import FakeSession, make_response
from nexmo_rest import cli


@pytest.fixture
def fake_session(monkeypatch: pytest.MonkeyPatch) -> FakeSession:
    session = FakeSession()
    monkeypatch.setattr("nexmo_rest.client.build_session", lambda: session)
    return session


def test_sms_command_prints_response(
    fake_session: FakeSession, capsys: pytest.CaptureFixture[str]
) -> None:
    fake_session.responses.append(
        make_response(200, '{"message-count":"1","messages":[{"status":"0","message-id":"abc"}]}')
    )

    code = cli.main(
        ["--api-key", "k", "--api-secret", "s", "sms", "--to", "521", "--from", "me", "--text", "hi"]
    )

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["messages"][0]["message-id"] == "abc"
    assert fake_session.calls[0]["params"]["text"] == "hi"
    assert fake_session.closed is True


def test_credentials_default_to_environment(
    monkeypatch: pytest.MonkeyPatch, fake_session: FakeSession
) -> None:
    monkeypatch.setenv("NEXMO_API_KEY", "env-key")
    monkeypatch.setenv("NEXMO_API_SECRET", "env-secret")
    fake_session.responses.append(make_response(200, '{"call-id":"c","status":0}'))

    code = cli.main(["call", "--to", "521", "--answer", "http://localhost/a.xml"])

    assert code == 0
    assert fake_session.calls[0]["params"]["api_key"] == "env-key"


def test_text2speech_repeat(fake_session: FakeSession) -> None:
    fake_session.responses.append(make_response(200, '{"call_id":"t","status":"0"}'))

    code = cli.main(
        ["--api-key", "k", "--api-secret", "s", "text2speech", "--to", "521", "--text", "hi", "--repeat", "2"]
    )

    assert code == 0
    params = fake_session.calls[0]["params"]
    assert params["repeat"] == 2
    assert "lg" not in params


def test_missing_credentials_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["sms", "--to", "521", "--from", "me", "--text", "hi"])

    assert code == 1
    assert "invalid key" in capsys.readouterr().err


def test_bad_request_exit_code(fake_session: FakeSession) -> None:
    fake_session.responses.append(make_response(500))

    code = cli.main(
        ["--api-key", "k", "--api-secret", "s", "sms", "--to", "521", "--from", "me", "--text", "hi"]
    )

    assert code == 1


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", "DEBUG"), (" Warning ", "WARNING"), ("verbose", "INFO"), ("", "INFO")],
)
def test_resolve_log_level(raw: str, expected: str) -> None:
    assert cli.resolve_log_level(raw) == expected


def test_invalid_log_level_does_not_crash(
    monkeypatch: pytest.MonkeyPatch, fake_session: FakeSession
) -> None:
    monkeypatch.setenv("NEXMO_LOG_LEVEL", "verbose")
    fake_session.responses.append(make_response(200, '{"call-id":"c","status":0}'))

    code = cli.main(
        ["--api-key", "k", "--api-secret", "s", "call", "--to", "521", "--answer", "http://localhost/a.xml"]
    )

    assert code == 0
