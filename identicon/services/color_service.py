from ..errors import MalformedDigestError
from ..models.image import Image


class ColorService:
    """Picks the fill color from the first three digest bytes."""

    @staticmethod
    def pick_color(image: Image) -> Image:
        hex_ = image.require("hex")
        if len(hex_) < 3:
            raise MalformedDigestError(f"Need 3 bytes for a color, digest has {len(hex_)}")

        r, g, b = hex_[:3]
        return image.evolve(color=(r, g, b))
