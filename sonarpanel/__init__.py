"""Bitmap fonts, a packed 1-bit framebuffer and an ultrasonic distance display."""

__version__ = "0.1.0"
__all__ = ["framebuffer", "fonts", "monitor"]