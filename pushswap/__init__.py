"""Sort integers with two stacks and a restricted instruction set."""

__version__ = "1.0.0"