"""Output persistence — atomic JSON write of the final ResultSet."""

import logging
import os
import tempfile

from endpoint_extractor.errors import IoFailure
from endpoint_extractor.models import ResultSet

logger = logging.getLogger(__name__)


def write_output(result: ResultSet, output_dir: str = ".") -> str:
    """Write ``output_<version>.json`` into output_dir, replacing any existing file."""
    target = os.path.join(output_dir, result.output_filename())
    try:
        os.makedirs(output_dir, exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(dir=output_dir, suffix=".tmp")
        try:
            with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
                f.write(result.to_json())
            os.replace(tmp_path, target)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
    except OSError as e:
        raise IoFailure(f"Failed to write {target}: {e}") from e

    logger.info("Output written to %s", target)
    return target
