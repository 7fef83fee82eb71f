import pytest

from stronghold.chat import ChatNetwork


@pytest.fixture
def chat(tmp_path):
    return ChatNetwork(tmp_path / "chat_history.txt")


def test_send_delivers_formatted(chat):
    assert chat.send(0, 1, "hello") is True
    assert chat.messages(1) == "[Player1 -> Player2] : hello\n"
    assert chat.messages(0) == ""


def test_history_for_receiver(chat):
    chat.send(0, 1, "hello")
    chat.send(2, 0, "hi")
    assert chat.history(1) == ["[Player1 -> Player2] : hello"]
    assert chat.history(0) == ["[Player3 -> Player1] : hi"]
    assert chat.history(3) == []


def test_invalid_receiver(chat):
    assert chat.send(0, 4, "lost") is False
    assert chat.send(0, -1, "lost") is False
    assert chat.path.exists() is False
    assert chat.messages(9) == ""


def test_clear_session_keeps_log(chat):
    chat.send(1, 2, "one")
    chat.send(1, 2, "two")
    assert chat.messages(2).count("\n") == 2
    chat.clear_session()
    assert chat.messages(2) == ""
    assert len(chat.history(2)) == 2


def test_history_without_log(chat):
    assert chat.history(0) == []