"""Machine-readable encodings of analysis results."""
