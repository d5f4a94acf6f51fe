"""HTTP API for the image gallery."""
