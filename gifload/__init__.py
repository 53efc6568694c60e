"""GifLoad - paginated trending GIF feed."""

__version__ = "1.0.0"
