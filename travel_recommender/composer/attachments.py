"""
Image attachment intake for the composer.

Selected files are checked, read and encoded as base64 data URLs in
memory. Each file is decoded by its own task, and finished attachments
are appended in the order the decodes complete.
"""

import asyncio
import mimetypes
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from travel_recommender.config import MAX_IMAGE_BYTES, MAX_IMAGES
from travel_recommender.data.models import ImageAttachment
from travel_recommender.utils.error_handling import AttachmentLimitError
from travel_recommender.utils.helpers import encode_data_url
from travel_recommender.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SelectedFile:
    """A file picked by the user, backed by in-memory bytes or a path."""

    name: str
    content_type: str
    size: int
    data: bytes | None = None
    path: str | None = None

    @classmethod
    def from_bytes(cls, name: str, content_type: str, data: bytes) -> "SelectedFile":
        return cls(name=name, content_type=content_type, size=len(data), data=data)

    @classmethod
    def from_path(cls, path: str) -> "SelectedFile":
        content_type, _ = mimetypes.guess_type(path)
        return cls(
            name=os.path.basename(path),
            content_type=content_type or "application/octet-stream",
            size=os.path.getsize(path),
            path=path,
        )

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")

    async def read(self) -> bytes:
        if self.data is not None:
            return self.data
        if self.path is None:
            raise OSError(f"No content available for {self.name}")
        return await asyncio.to_thread(_read_file, self.path)


def _read_file(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


@dataclass
class IntakeResult:
    """Attachments added by one batch and the names of files that were skipped."""

    added: list[ImageAttachment] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class AttachmentList:
    """
    Ordered list of image attachments capped at ``max_images``.

    Slots for decodes still in flight count against the cap, so
    overlapping batches can never push the list past it.
    """

    def __init__(
        self, max_images: int = MAX_IMAGES, max_image_bytes: int = MAX_IMAGE_BYTES
    ):
        self.max_images = max_images
        self.max_image_bytes = max_image_bytes
        self._images: list[ImageAttachment] = []
        self._pending = 0

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[ImageAttachment]:
        return iter(list(self._images))

    def __getitem__(self, index: int) -> ImageAttachment:
        return self._images[index]

    @property
    def images(self) -> list[ImageAttachment]:
        return list(self._images)

    @property
    def pending(self) -> int:
        return self._pending

    def _accepts(self, selected: SelectedFile) -> bool:
        if not selected.is_image:
            logger.debug(f"Skipping non-image file {selected.name!r}")
            return False
        if selected.size > self.max_image_bytes:
            logger.warning(
                f"Skipping {selected.name!r}: {selected.size} bytes exceeds "
                f"the {self.max_image_bytes} byte limit"
            )
            return False
        return True

    async def _decode(
        self, selected: SelectedFile
    ) -> tuple[SelectedFile, ImageAttachment | None]:
        try:
            data = await selected.read()
        except OSError as e:
            logger.warning(f"Could not read {selected.name!r}: {e!s}")
            return selected, None

        encoded = await asyncio.to_thread(encode_data_url, data, selected.content_type)
        return selected, ImageAttachment(
            mime_type=selected.content_type, encoded_bytes=encoded
        )

    async def add_files(self, files: Iterable[SelectedFile]) -> IntakeResult:
        """
        Add a batch of selected files.

        Args:
            files: Files in selection order

        Returns:
            The attachments added, in completion order, and skipped file names

        Raises:
            AttachmentLimitError: If the batch would take the list past
                ``max_images``; nothing from the batch is added
        """
        files = list(files)
        if len(self._images) + self._pending + len(files) > self.max_images:
            raise AttachmentLimitError(self.max_images)

        result = IntakeResult()
        accepted = []
        for selected in files:
            if self._accepts(selected):
                accepted.append(selected)
            else:
                result.skipped.append(selected.name)

        tasks = [asyncio.create_task(self._decode(selected)) for selected in accepted]
        self._pending += len(tasks)
        remaining = len(tasks)
        try:
            for next_done in asyncio.as_completed(tasks):
                selected, attachment = await next_done
                remaining -= 1
                self._pending -= 1
                if attachment is None:
                    result.skipped.append(selected.name)
                    continue
                self._images.append(attachment)
                result.added.append(attachment)
        finally:
            self._pending -= remaining
            for task in tasks:
                task.cancel()

        return result

    def remove(self, index: int) -> ImageAttachment:
        """
        Remove the attachment at ``index``, keeping the order of the rest.

        Raises:
            IndexError: If no attachment exists at that position
        """
        if not 0 <= index < len(self._images):
            raise IndexError(f"No attachment at position {index}")
        return self._images.pop(index)
