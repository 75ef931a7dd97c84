from .play_loader import load_play, parse_play

__all__ = ["load_play", "parse_play"]
