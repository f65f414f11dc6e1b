from ..game_logic import GameStatus


def status_text(view):
    """
    human-readable status line for a board snapshot
    """
    if view.status is GameStatus.WON:
        return f"Player {view.winner.value} wins!"
    if view.status is GameStatus.DRAW:
        return "It's a draw!"
    return f"Player {view.active_player.value}'s turn"
