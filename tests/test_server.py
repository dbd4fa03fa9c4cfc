import pytest

from flipgame.protocol import MessageType
from flipgame.server import (
    END_TEMPLATE,
    INVALID_CHOICE,
    INVALID_PLAY_AGAIN,
    MENU,
    PLAY_AGAIN_QUESTION,
    GameSession,
    main,
)


class FakeConn:
    def __init__(self, replies):
        self._replies = [r.encode("utf-8") + b"\0" for r in replies]
        self.sent = []

    def sendall(self, data):
        self.sent.append(data)

    def recv(self, size):
        if not self._replies:
            return b""
        return self._replies.pop(0)[:size]

    def texts(self):
        return [d.rstrip(b"\0").decode("utf-8") for d in self.sent]


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return self.value


def test_first_message_is_menu_with_nul_terminator():
    conn = FakeConn(["0\n", "0\n"])
    GameSession(FixedRng(2)).play(conn)
    assert conn.sent[0] == MENU.encode("utf-8") + b"\0"


def test_win_then_quit_reports_score():
    conn = FakeConn(["0\n", "0\n"])
    state = GameSession(FixedRng(2)).play(conn)
    assert state.client_wins == 1
    assert state.server_wins == 0
    assert state.type is MessageType.END
    texts = conn.texts()
    assert "Resultado: Vitória!" in texts[1]
    assert texts[1].endswith(PLAY_AGAIN_QUESTION)
    assert texts[-1] == END_TEMPLATE.format(client=1, server=0)


def test_server_only_picks_among_four():
    rng = FixedRng(1)
    GameSession(rng).play(FakeConn(["3", "0"]))
    assert rng.calls == [4]


def test_equal_choices_count_for_server():
    conn = FakeConn(["2", "0"])
    state = GameSession(FixedRng(2)).play(conn)
    assert state.server_wins == 1
    assert state.client_wins == 0
    assert "Resultado: Derrota!" in conn.texts()[1]


def test_round_message_names_both_attacks():
    conn = FakeConn(["1", "0"])
    state = GameSession(FixedRng(3)).play(conn)
    assert "Você escolheu: Intercept Attack" in conn.texts()[1]
    assert "Servidor escolheu: Drone Attack" in conn.texts()[1]
    assert state.client_action == 1
    assert state.server_action == 3


def test_invalid_choice_asks_again():
    conn = FakeConn(["7", "1", "0"])
    state = GameSession(FixedRng(3)).play(conn)
    texts = conn.texts()
    assert texts[1] == INVALID_CHOICE + MENU
    assert state.client_wins + state.server_wins == 1


def test_non_numeric_choice_is_zero():
    conn = FakeConn(["abc", "0"])
    state = GameSession(FixedRng(2)).play(conn)
    assert state.client_action == 0
    assert state.client_wins == 1


def test_invalid_play_again_answer():
    conn = FakeConn(["0", "5", "0"])
    GameSession(FixedRng(2)).play(conn)
    texts = conn.texts()
    assert texts[2] == INVALID_PLAY_AGAIN + PLAY_AGAIN_QUESTION
    assert len(texts) == 4


def test_play_again_starts_fresh_menu():
    conn = FakeConn(["0", "1", "0", "0"])
    state = GameSession(FixedRng(2)).play(conn)
    texts = conn.texts()
    assert texts[2] == MENU
    assert state.client_wins == 2
    assert texts[-1] == END_TEMPLATE.format(client=2, server=0)


def test_closed_connection_raises():
    with pytest.raises(ConnectionError):
        GameSession(FixedRng(0)).play(FakeConn([]))


def test_main_missing_arguments_prints_usage(capsys):
    assert main(["server"]) == 1
    assert "Usage: server <v4|v6> <Server PORT>" in capsys.readouterr().out


def test_main_bad_protocol_prints_usage(capsys):
    assert main(["server", "v5", "51511"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_bad_port_prints_usage(capsys):
    assert main(["server", "v4", "zero"]) == 1
    assert "Example:" in capsys.readouterr().out