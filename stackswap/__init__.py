"""Sort integers on two stacks with a restricted instruction set, and check instruction sequences."""

__version__ = "0.1.0"

__all__ = ["stacks", "parsing", "sorting", "checker", "cli"]