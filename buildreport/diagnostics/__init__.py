from .verbosity import ExecutionContext, Verbosity

__all__ = ["Verbosity", "ExecutionContext"]
