"""webcmd: command resolution and embedded resources for web application toolchains."""

__version__ = "0.1.0"
