"""Ten-pin bowling scoring: frames, players, a game session and a console command."""

__version__ = "0.1.0"
__all__ = ["errors", "frame", "player", "game"]