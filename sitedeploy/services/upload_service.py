"""
Website Upload Service
Walks a local build folder and uploads every file to the bucket with a
content type and a one-year cache directive.
"""

import os
from pathlib import Path
from typing import Callable, List, Optional

from sitedeploy.exceptions import AWSServiceError, UploadError
from sitedeploy.models import FileUploadRecord
from sitedeploy.services.s3_service import S3Service, CACHE_CONTROL
from sitedeploy.utils.content_types import resolve_content_type
from sitedeploy.utils.logger import get_logger

logger = get_logger(__name__)


def _raise_walk_error(error: OSError) -> None:
    raise error


class FileUploadService:
    """
    Uploads a directory tree to S3, one file at a time.

    The target bucket is the one bound to the given S3Service, so
    upload(source_dir) covers the upload(bucket, source_dir) contract.
    Stops at the first failure; files uploaded before it stay in the bucket.
    """

    def __init__(self, s3_service: S3Service, on_upload: Optional[Callable[[FileUploadRecord], None]] = None):
        """
        Args:
            s3_service: S3Service bound to the target bucket
            on_upload:  Optional callback invoked after each successful upload
        """
        self.s3_service = s3_service
        self.on_upload = on_upload

    @staticmethod
    def resolve_source_dir(source_dir) -> Path:
        """
        Resolve the source folder to an absolute path.

        Raises:
            UploadError: If the path cannot be resolved or is not a directory
        """
        try:
            resolved = Path(source_dir).expanduser().resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise UploadError(f"Failed to resolve path {source_dir}: {e}") from e

        if not resolved.is_dir():
            raise UploadError(f"Path is not a directory: {resolved}")

        return resolved

    @staticmethod
    def iter_files(root: Path):
        """
        Yield every file below root in a stable order.

        Directories themselves are never yielded; walk errors propagate.

        Raises:
            UploadError: If a directory below root is a symbolic link
        """
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            for dirname in dirnames:
                link_path = os.path.join(dirpath, dirname)
                if os.path.islink(link_path):
                    raise UploadError(f"Refusing to follow symlinked directory: {link_path}")
            dirnames.sort()
            for filename in sorted(filenames):
                yield Path(dirpath) / filename

    @staticmethod
    def object_key(root: Path, file_path: Path) -> str:
        """Storage key for a file: its path relative to root, with forward slashes"""
        return file_path.relative_to(root).as_posix()

    def upload_file(self, root: Path, file_path: Path) -> FileUploadRecord:
        key = self.object_key(root, file_path)

        try:
            content = file_path.read_bytes()
        except OSError as e:
            raise UploadError(f"Failed to read file {file_path}: {e}", key=key) from e

        content_type = resolve_content_type(file_path)
        logger.debug(f"Uploading: {key} (Content-Type: {content_type})")

        try:
            self.s3_service.put_object(
                key=key,
                body=content,
                content_type=content_type,
                cache_control=CACHE_CONTROL,
            )
        except AWSServiceError as e:
            raise UploadError(f"Failed to upload file {key}: {e}", key=key) from e

        return FileUploadRecord(key=key, content_type=content_type, size=len(content))

    def upload(self, source_dir) -> int:
        """
        Upload every file in source_dir to the bucket.

        Args:
            source_dir: Local website folder

        Returns:
            Number of files uploaded

        Raises:
            UploadError: On the first unreadable path or failed upload
        """
        root = self.resolve_source_dir(source_dir)
        logger.info(f"Uploading website files from {root} to s3://{self.s3_service.bucket_name}")

        uploaded: List[FileUploadRecord] = []
        try:
            for file_path in self.iter_files(root):
                record = self.upload_file(root, file_path)
                uploaded.append(record)
                if self.on_upload:
                    self.on_upload(record)
        except OSError as e:
            logger.error(f"❌ Upload aborted after {len(uploaded)} files: {e}")
            raise UploadError(f"Failed to walk {root}: {e}") from e
        except UploadError as e:
            logger.error(f"❌ Upload aborted after {len(uploaded)} files: {e}")
            raise

        total_bytes = sum(record.size for record in uploaded)
        logger.info(f"✅ Total files uploaded: {len(uploaded)} ({total_bytes} bytes)")
        return len(uploaded)
