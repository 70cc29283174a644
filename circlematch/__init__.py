"""CircleMatch - compatibility scoring and ranking for community matchmaking."""

__version__ = "0.1.0"
