import pytest

import main


@pytest.fixture
def answers(monkeypatch, files_dir):
    """Feed main.ask() from a list instead of the terminal."""
    queue = []
    monkeypatch.setattr(main, "ask", lambda message, default=None: queue.pop(0))
    return queue


def choose(monkeypatch, action):
    monkeypatch.setattr(main.inquirer, "prompt", lambda questions, theme=None: {"action": action})


def test_exit(monkeypatch):
    choose(monkeypatch, "Exit")
    assert main.choose_action() is False


def test_prompt_cancelled_exits(monkeypatch):
    monkeypatch.setattr(main.inquirer, "prompt", lambda questions, theme=None: None)
    assert main.choose_action() is False


def test_encode_payload(monkeypatch, answers, capsys):
    choose(monkeypatch, "1. Encode payload")
    answers.extend(["test", "00" * 20, "160"])
    assert main.choose_action() is True
    assert "test1qqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqql6aptf" in capsys.readouterr().out


def test_decode_error_is_reported(monkeypatch, answers, capsys):
    choose(monkeypatch, "2. Decode string")
    answers.append("x1b4n0q5v")
    assert main.choose_action() is True
    assert "illegal character" in capsys.readouterr().out


def test_derive_address(monkeypatch, answers, capsys):
    choose(monkeypatch, "3. Derive address from ed25519 seed")
    answers.extend(["set", "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"])
    assert main.choose_action() is True
    assert "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a" in capsys.readouterr().out
