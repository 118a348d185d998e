import chess


def format_info(plies: int, score: int, nodes: int, elapsed: float,
                move: chess.Move, mate_in_one: bool, white_to_move: bool) -> str:
    """UCI info line for a finished search. Score is reported from the mover's side."""
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    if mate_in_one:
        score_str = "mate 1"
    else:
        # Engine scores are in pawns, White positive.
        score_str = f"cp {(score if white_to_move else -score) * 100}"
    return (f"info depth {plies} score {score_str} nodes {nodes} nps {nps} "
            f"time {int(elapsed * 1000)} pv {move.uci()}")
