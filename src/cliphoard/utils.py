from datetime import datetime
from hashlib import sha256
from pathlib import Path

from cliphoard.constants import IMAGE_SUFFIX


def get_time() -> datetime:
    """Return the current local time as a timezone-aware datetime."""
    return datetime.now().astimezone()


def hash_bytes(data: bytes) -> str:
    """
    Compute the content address of a binary payload.

    Arguments:
        data (bytes): The payload to hash (raw image pixels for clipboard images).

    Returns:
        str: The SHA256 digest as a lowercase hexadecimal string.

    Example:
        >>> hash_bytes(b"abc")
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    return sha256(data).hexdigest()


def image_payload_path(images_dir: Path, digest: str) -> Path:
    """
    Build the content-addressed location of an image payload.

    The same digest always maps to the same file, so capturing an image twice
    never writes a second copy.

    Arguments:
        images_dir (Path): Directory holding the image payloads.
        digest (str): Content address returned by hash_bytes().

    Returns:
        Path: ``<images_dir>/<digest>.png``

    Example:
        >>> image_payload_path(Path("/data/images"), "ab12")
        PosixPath('/data/images/ab12.png')
    """
    if not digest:
        raise ValueError("An image digest is required to build a payload path.")
    return images_dir / f"{digest}{IMAGE_SUFFIX}"


__all__ = ["get_time", "hash_bytes", "image_payload_path"]
