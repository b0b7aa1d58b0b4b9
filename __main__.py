"""
Run the cipher over a build directory.

Configured through environment variables:
    TUBCIPHER_BUILD_DIR  directory holding the bit files (default: build)
    TUBCIPHER_MODE       'decrypt' (default) or 'encrypt'
    TUBCIPHER_LOG_LEVEL  logging level name (default: INFO)
"""

import os
import sys
import logging

from .file_io.bit_files import process_build_dir

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=os.environ.get('TUBCIPHER_LOG_LEVEL', 'INFO').upper())

    mode = os.environ.get('TUBCIPHER_MODE', 'decrypt')
    try:
        block = process_build_dir(mode=mode)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to {mode} build directory: {e}")
        return 1

    print(block.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
