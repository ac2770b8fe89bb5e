"""quickscii Vision — image decoding and intensity normalization (OpenCV)."""
