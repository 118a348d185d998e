"""ChessBro: a material-counting minimax chess engine speaking UCI."""

__version__ = "1.0.0"
