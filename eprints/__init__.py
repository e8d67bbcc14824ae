"""Client for the arXiv export API."""

__version__ = "0.1.0"
