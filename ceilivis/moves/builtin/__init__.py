"""Built-in moves, one module per family."""
