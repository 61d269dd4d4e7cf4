"""
Content type resolution for uploaded website files
"""

import mimetypes
from pathlib import PurePath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES = {
    '.html': 'text/html',
    '.htm': 'text/html',
    '.css': 'text/css',
    '.js': 'application/javascript',
    '.json': 'application/json',
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.gif': 'image/gif',
    '.svg': 'image/svg+xml',
    '.txt': 'text/plain',
    '.xml': 'application/xml',
    '.pdf': 'application/pdf',
    '.woff': 'font/woff',
    '.woff2': 'font/woff2',
    '.ttf': 'font/ttf',
    '.eot': 'application/vnd.ms-fontobject',
}


def get_extension(path) -> str:
    """
    Return the lowercased extension of a path.

    A bare extension such as ".svg" is treated as the extension itself.
    """
    name = PurePath(str(path)).name
    if name.startswith(".") and name.count(".") == 1:
        return name.lower()
    return PurePath(name).suffix.lower()


def resolve_content_type(path) -> str:
    """
    Determine the content type of a file from its extension.

    The fixed web table wins; anything else goes through the system
    mimetypes registry and finally falls back to application/octet-stream.

    Args:
        path: File path, file name or bare extension

    Returns:
        Content type string
    """
    extension = get_extension(path)
    if not extension:
        return DEFAULT_CONTENT_TYPE

    if extension in CONTENT_TYPES:
        return CONTENT_TYPES[extension]

    guessed, _ = mimetypes.guess_type(f"file{extension}", strict=False)
    return guessed or DEFAULT_CONTENT_TYPE
