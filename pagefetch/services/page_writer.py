import logging
import os

logger = logging.getLogger(__name__)


def output_filename(page_path: str) -> str:
    """Map an index path to its output file name.

    `/` -> `index.html`, `/guides/start` -> `_guides_start.html`. Distinct paths
    can collide (`/a/b` and `/a_b`); the later page wins.
    """
    if page_path == "/":
        return "index.html"
    return page_path.replace("/", "_") + ".html"


class PageWriter:
    """Write annotated pages into the output directory."""

    def ensure_output_dir(self, output_dir: str) -> None:
        os.makedirs(output_dir, exist_ok=True)
        logger.info("Created output directory: %s", output_dir)

    def write(self, output_dir: str, page_path: str, content: str) -> str:
        file_path = os.path.join(output_dir, output_filename(page_path))
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return file_path
