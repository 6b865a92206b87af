"""
Image service for listing and locating region image files on disk.
"""
import os
import logging
from typing import Tuple

from ..models.region import ImagePage
from ..exceptions import BadRequestError, NotFoundError
from ..utils.file_helpers import is_image

logger = logging.getLogger(__name__)


class ImageService:
    """Service for the images/<region> and thumbs/<region> directory trees."""

    def __init__(self, images_dir: str = "images", thumbs_dir: str = "thumbs"):
        """
        Initialize image service.

        Args:
            images_dir: Root directory of full-size images
            thumbs_dir: Root directory of thumbnails
        """
        self.roots = {
            "images": images_dir,
            "thumbs": thumbs_dir,
        }

    def list_images(self, region: str, offset: int, limit: int) -> ImagePage:
        """
        List one page of a region's images.

        Entries are walked in filename order; only image extensions count
        towards the offset, the limit and the total.

        Args:
            region: Validated region name
            offset: Number of matching images to skip
            limit: Maximum number of images to return

        Returns:
            ImagePage: The requested names and whether more remain

        Raises:
            NotFoundError: If the region directory cannot be read
        """
        region_path = os.path.join(self.roots["images"], region)
        try:
            entries = sorted(os.listdir(region_path))
        except OSError as e:
            logger.warning(f"Region directory unavailable: {region_path} ({e})")
            raise NotFoundError("Region not found")

        matching = [name for name in entries if is_image(name)]
        total = len(matching)

        page = matching[offset:offset + limit]
        consumed = min(offset + limit, total)

        return ImagePage(images=page, has_more=consumed < total)

    def resolve_file(self, kind: str, region: str, filename: str) -> Tuple[str, str]:
        """
        Locate a file to serve from a region directory.

        Segments must already have passed traversal and allow-list checks;
        existence is left to the caller's file sender.

        Args:
            kind: "images" or "thumbs"
            region: Validated region name
            filename: Validated filename

        Returns:
            tuple: (absolute region directory, filename)

        Raises:
            BadRequestError: If kind is unknown or filename is empty
        """
        if kind not in self.roots or not filename:
            raise BadRequestError("Invalid path")

        directory = os.path.abspath(os.path.join(self.roots[kind], region))
        return directory, filename
