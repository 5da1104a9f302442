"""Scene configuration parsing, XPM image decoding, textures and player movement for a grid raycaster."""

__version__ = "0.1.0"