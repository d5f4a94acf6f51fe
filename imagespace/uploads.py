"""Image upload pipeline.

Collects files (recursing into directories), rejects anything that is not
a PNG/JPEG within the size limit, and reads the rest concurrently. Each
completed read becomes one ``Catalog.add_image`` call on the calling
thread, so completion order across a batch is not guaranteed.
"""

import base64
import binascii
import io
import logging
import mimetypes
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from .catalog import Catalog
from .db.config import settings
from .models.image import Image

logger = logging.getLogger(__name__)

# MIME type -> Pillow format name
ACCEPTED_TYPES: Dict[str, str] = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
}


@dataclass
class Rejection:
    """A file that was not uploaded, with the reason."""

    path: str
    reason: str


@dataclass
class UploadReport:
    """Outcome of one upload batch."""

    added: List[Image] = field(default_factory=list)
    rejected: List[Rejection] = field(default_factory=list)


def guess_mime_type(path: Union[Path, str]) -> Optional[str]:
    """MIME type implied by the file name."""
    return mimetypes.guess_type(Path(path).name)[0]


def collect_files(paths: Iterable[Union[Path, str]]) -> List[Path]:
    """Expand directories recursively; plain paths are kept as given.

    Args:
        paths: Files and/or directories

    Returns:
        Candidate file paths, directory contents in sorted order
    """
    files: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob("*") if p.is_file()))
        else:
            files.append(path)
    return files


def check_file(path: Path, max_bytes: int) -> Optional[str]:
    """Validate a file before reading it.

    Returns:
        Rejection reason, or None if the file is acceptable
    """
    if not path.is_file():
        return "file not found"

    mime_type = guess_mime_type(path)
    if mime_type not in ACCEPTED_TYPES:
        return f"unsupported file type: {mime_type or 'unknown'}"

    size = path.stat().st_size
    if size > max_bytes:
        return f"file too large: {size} bytes (max {max_bytes})"
    return None


def read_as_data_url(path: Path) -> str:
    """Read an image file into a base64 data URL.

    The bytes are decoded with Pillow to make sure the content really is
    the format its name claims.

    Raises:
        ValueError: If the content is not a PNG or JPEG image
    """
    data = path.read_bytes()
    mime_type = guess_mime_type(path)
    expected = ACCEPTED_TYPES.get(mime_type or "")

    try:
        with PILImage.open(io.BytesIO(data)) as img:
            actual = img.format
            img.verify()
    except PILImage.DecompressionBombError as e:
        raise ValueError(f"image dimensions too large: {e}") from e
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ValueError(f"not a valid image: {e}") from e

    if actual != expected:
        raise ValueError(f"content is {actual}, expected {expected}")

    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def upload_paths(
    catalog: Catalog,
    paths: Iterable[Union[Path, str]],
    max_bytes: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> UploadReport:
    """Upload image files and directories into the catalog.

    Invalid files are rejected individually; the rest of the batch still
    goes through.

    Args:
        catalog: Target catalog
        paths: Files and/or directories to upload
        max_bytes: Per-file size limit (defaults to settings)
        max_workers: Concurrent readers (defaults to settings)

    Returns:
        Report of added images and rejected files
    """
    limit = max_bytes if max_bytes is not None else settings.max_upload_bytes
    workers = max_workers or settings.upload_workers
    report = UploadReport()

    accepted: List[Path] = []
    for path in collect_files(paths):
        reason = check_file(path, limit)
        if reason:
            logger.warning(f"Rejected {path}: {reason}")
            report.rejected.append(Rejection(path=str(path), reason=reason))
        else:
            accepted.append(path)

    if not accepted:
        return report

    with ThreadPoolExecutor(
        max_workers=workers, thread_name_prefix="imagespace-upload-"
    ) as executor:
        futures = {executor.submit(read_as_data_url, path): path for path in accepted}
        for future in as_completed(futures):
            path = futures[future]
            try:
                url = future.result()
            except Exception as e:
                logger.warning(f"Failed to read {path}: {e}")
                report.rejected.append(Rejection(path=str(path), reason=str(e)))
                continue
            report.added.append(catalog.add_image(path.name, url))

    logger.info(
        f"Uploaded {len(report.added)} images, rejected {len(report.rejected)}"
    )
    return report


def validate_image_url(url: str, max_bytes: Optional[int] = None) -> Optional[str]:
    """Check an image URL submitted directly (e.g. by the web client).

    Remote references pass through. Data URLs must carry a PNG or JPEG
    payload within the size limit.

    Returns:
        Rejection reason, or None if the URL is acceptable
    """
    if not url.strip():
        return "empty url"
    if not url.startswith("data:"):
        return None

    header, sep, payload = url.partition(",")
    if not sep:
        return "malformed data url"

    mime_type = header[len("data:") :].split(";")[0]
    if mime_type not in ACCEPTED_TYPES:
        return f"unsupported file type: {mime_type or 'unknown'}"

    limit = max_bytes if max_bytes is not None else settings.max_upload_bytes
    if header.endswith(";base64"):
        try:
            size = len(base64.b64decode(payload, validate=True))
        except (binascii.Error, ValueError):
            return "malformed data url"
    else:
        size = len(payload)
    if size > limit:
        return f"file too large: {size} bytes (max {limit})"
    return None
