"""A small interactive shell with echo, pwd and exit builtins."""

__version__ = "0.1.0"
__all__ = ["builtins", "chars", "executor", "models", "repl", "text"]