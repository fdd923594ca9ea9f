"""Client that renders server-driven layouts received over a web socket as HTML."""

__version__ = "0.1.0"
__all__ = ["__version__"]