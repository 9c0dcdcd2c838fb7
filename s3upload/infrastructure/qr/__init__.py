"""QR code rendering."""

from .encoder import QrCodeEncoder

__all__ = ["QrCodeEncoder"]
