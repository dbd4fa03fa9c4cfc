"""Game server: accepts clients and plays rounds of the attack game with each."""

from __future__ import annotations

import random
import re
import socket
import sys

from flipgame.protocol import (
    ATTACK_TYPES,
    MSG_SIZE,
    AddressError,
    GameMessage,
    MessageType,
    play_processor,
    server_address,
)

MENU = (
    "\nEscolha a sua jogada:\n\n"
    "0 - Nuclear Attack\n"
    "1 - Intercept Attack\n"
    "2 - Cyber Attack\n"
    "3 - Drone Attack\n"
    "4 - Bio Attack\n"
)
PLAY_AGAIN_QUESTION = "Deseja jogar novamente?\n1 - Sim\n0 - Não\n"
INVALID_PLAY_AGAIN = "\nPor favor, digite 1 para jogar novamente ou 0 para encerrar.\n"
INVALID_CHOICE = "\nPor favor, selecione um valor de 0 a 4.\n"
END_TEMPLATE = (
    "\nFim de jogo!\nPlacar final: Você {client} x {server} Servidor\n"
    "Obrigado por jogar!\n"
)

# The server only ever picks among the first four attacks.
_SERVER_CHOICES = 4
_LISTEN_BACKLOG = 10

_RESULT_LABELS = {1: "Vitória", -1: "Empate", 0: "Derrota"}
_LEADING_INT = re.compile(r"[ \t\n\r\v\f]*([+-]?[0-9]+)")


def _send(conn, text: str) -> None:
    conn.sendall(text.encode("utf-8") + b"\0")


def _receive_int(conn) -> int:
    data = conn.recv(MSG_SIZE - 1)
    if not data:
        raise ConnectionError("client closed the connection")
    text = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class GameSession:
    """Runs the game dialogue with one connected client."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()

    def _play_round(self, state: GameMessage, choice: int) -> None:
        server_choice = self._rng.randrange(_SERVER_CHOICES)
        print(f"Servidor escolheu aleatoriamente {server_choice}.")
        state.client_action = choice
        state.server_action = server_choice
        result = play_processor(choice, server_choice)
        state.result = result
        label = _RESULT_LABELS.get(result)
        if label is None:
            state.message = "Erro ao processar partida\n"
            return
        if result == 1:
            state.client_wins += 1
        elif result == 0:
            state.server_wins += 1
        state.message = (
            f"\nVocê escolheu: {ATTACK_TYPES[choice]}\n"
            f"Servidor escolheu: {ATTACK_TYPES[server_choice]}\n"
            f"Resultado: {label}!\n\n"
        )

    def play(self, conn) -> GameMessage:
        """Play until the client quits; return the final game state."""
        state = GameMessage()
        next_action = MessageType.REQUEST
        error_origin = MessageType.REQUEST

        while True:
            action = next_action
            state.type = action

            if action is MessageType.REQUEST:
                print("Apresentando as opções para o cliente.")
                state.message += MENU
                _send(conn, state.message)
                choice = _receive_int(conn)
                print(f"Cliente escolheu {choice}.")
                if 0 <= choice < len(ATTACK_TYPES):
                    self._play_round(state, choice)
                    next_action = MessageType.RESULT
                else:
                    error_origin = MessageType.RESPONSE
                    next_action = MessageType.ERROR

            elif action is MessageType.RESULT:
                if state.result == -1:
                    next_action = MessageType.REQUEST
                else:
                    next_action = MessageType.PLAY_AGAIN_REQUEST

            elif action is MessageType.PLAY_AGAIN_REQUEST:
                print("Perguntando se o cliente deseja jogar novamente.")
                state.message += PLAY_AGAIN_QUESTION
                _send(conn, state.message)
                answer = _receive_int(conn)
                if answer == 1:
                    next_action = MessageType.REQUEST
                    state.message = ""
                elif answer == 0:
                    next_action = MessageType.END
                    print("Cliente não deseja jogar novamente.")
                else:
                    next_action = MessageType.ERROR
                    error_origin = MessageType.PLAY_AGAIN_RESPONSE

            elif action is MessageType.ERROR:
                if error_origin is MessageType.PLAY_AGAIN_RESPONSE:
                    print("Erro: resposta inválida para jogar novamente.")
                    state.message = INVALID_PLAY_AGAIN
                    next_action = MessageType.PLAY_AGAIN_REQUEST
                elif error_origin is MessageType.RESPONSE:
                    print("Erro: opção inválida de jogada.")
                    state.message = INVALID_CHOICE
                    next_action = MessageType.REQUEST
                else:
                    print(f"Erro não tratado: {int(error_origin)}")
                    next_action = MessageType.REQUEST

            elif action is MessageType.END:
                print("Enviando placar final.")
                state.message = END_TEMPLATE.format(
                    client=state.client_wins, server=state.server_wins
                )
                _send(conn, state.message)
                return state

            else:
                raise RuntimeError("Action Processor")


def serve(proto, port, rng=None):
    """Listen on all interfaces and serve clients one after another, forever."""
    family, sockaddr = server_address(proto, port)
    session = GameSession(rng)
    with socket.socket(family, socket.SOCK_STREAM) as listener:
        listener.bind(sockaddr)
        listener.listen(_LISTEN_BACKLOG)
        print(
            f"Servidor iniciado em modo IP{proto} na porta {port}. "
            "Aguardando conexão..."
        )
        while True:
            conn, _ = listener.accept()
            print("Cliente conectado.")
            with conn:
                session.play(conn)
                print("Encerrando conexão.")
            print("Cliente desconectado.")


def _usage(prog: str) -> int:
    print(f"Usage: {prog} <v4|v6> <Server PORT>")
    print(f"Example: {prog} v4 51511")
    return 1


def main(argv=None) -> int:
    """Command entry point: ``server <v4|v6> <port>``."""
    argv = list(sys.argv if argv is None else argv)
    prog = argv[0] if argv else "server"
    if len(argv) < 3:
        return _usage(prog)
    try:
        server_address(argv[1], argv[2])
    except AddressError:
        return _usage(prog)
    try:
        serve(argv[1], argv[2])
    except OSError as exc:
        print(f"Server: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())