import argparse
import logging
import sys

from ..config import IdenticonConfig
from ..errors import IdenticonError
from ..pipeline.generate_identicon import generate

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    parser = argparse.ArgumentParser(description="Write a <input>.png identicon for each input string.")
    parser.add_argument("inputs", nargs="+", help="seed strings")
    parser.add_argument("-o", "--output-dir", default=None, help="defaults to IDENTICON_OUTPUT_DIR or .")
    args = parser.parse_args(argv)

    try:
        config = IdenticonConfig.from_env()
    except IdenticonError as err:
        logger.error(f"Configuration error: {err}")
        return 2

    status = 0
    for value in args.inputs:
        try:
            path = generate(value, config=config, output_dir=args.output_dir)
        except OSError as err:
            logger.error(f"Could not write identicon for {value!r}: {err}")
            status = 1
            continue
        print(path)

    return status


if __name__ == "__main__":
    sys.exit(main())
