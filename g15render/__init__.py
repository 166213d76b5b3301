"""Canvas and bitmap font rendering for 160x43 monochrome keyboard LCDs."""

__version__ = "1.3.0"
__all__ = ["canvas", "font", "text"]