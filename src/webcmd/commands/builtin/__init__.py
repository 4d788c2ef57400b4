"""Built-in commands: one module per command, class named after the module."""
