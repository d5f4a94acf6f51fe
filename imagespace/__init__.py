"""Image Space - image gallery and annotation catalog."""

__version__ = "0.1.0"
