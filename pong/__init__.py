"""Two-paddle ball game with a scripted opponent and synthesized sound."""

__version__ = "0.1.0"
