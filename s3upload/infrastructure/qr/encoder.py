"""
QR code rendering.

Wraps the qrcode library to produce PNG bytes of an exact pixel
width. Rendering happens in memory; nothing is written to disk.
"""

import io
import logging

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_M

logger = logging.getLogger(__name__)


class QrCodeEncoder:
    """
    Renders text as a square PNG QR code.

    The code is drawn at the largest whole number of pixels per module
    that fits, then scaled to the requested width with nearest-neighbour
    sampling so module edges stay sharp.
    """

    def __init__(self, border: int = 4, error_correction: int = ERROR_CORRECT_M) -> None:
        self._border = border
        self._error_correction = error_correction

    def render_png(self, data: str, width: int) -> bytes:
        if width < 1:
            raise ValueError("width must be positive")

        qr = qrcode.QRCode(
            error_correction=self._error_correction,
            box_size=1,
            border=self._border,
        )
        qr.add_data(data)
        qr.make(fit=True)

        modules = qr.modules_count + 2 * self._border
        qr.box_size = max(1, width // modules)

        image = qr.make_image(fill_color="black", back_color="white").get_image()
        if image.size != (width, width):
            image = image.resize((width, width), Image.Resampling.NEAREST)

        buffer = io.BytesIO()
        image.save(buffer, format="PNG")

        logger.debug(
            "Rendered QR code",
            extra={"version": qr.version, "modules": modules, "width": width},
        )

        return buffer.getvalue()
