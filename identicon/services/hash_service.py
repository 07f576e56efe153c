from hashlib import md5
import logging
from typing import Tuple, Union

from ..models.image import Image

logger = logging.getLogger(__name__)


class HashService:
    """
    First pipeline stage: turns the input into a fixed 16-byte digest.
    md5 is used for its length and availability, not for security.
    """

    @staticmethod
    def digest(data: Union[str, bytes]) -> Tuple[int, ...]:
        """
        Args:
            data (str | bytes): Seed for the identicon. Strings are UTF-8 encoded.

        Returns:
            (tuple[int, ...]): The 16 digest bytes as ints in 0..255.
        """
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        return tuple(md5(raw).digest())

    def hash_input(self, input: str) -> Image:
        # The input also names the output file, so it has to be text.
        if not isinstance(input, str):
            raise TypeError(f"Identicon input must be str, got {type(input).__name__}")

        hex_ = self.digest(input)
        logger.debug(f"md5({input!r}) = {bytes(hex_).hex()}")
        return Image(input=input, hex=hex_)
