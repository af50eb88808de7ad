"""gigatools-agent: a GigaChat assistant wired to a handful of demo tools."""

__version__ = "0.1.0"
