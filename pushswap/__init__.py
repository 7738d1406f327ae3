"""Sort integers with two stacks and a fixed set of operations, and check such sorts."""

__version__ = "0.1.0"