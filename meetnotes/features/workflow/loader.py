import mimetypes
from pathlib import Path
from typing import Optional

PLAIN_TEXT = "text/plain"


def declared_type(path: str | Path) -> Optional[str]:
    """
    Returns the content type a file claims through its name, like a browser file picker.
    """
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type


def is_plain_text(mime_type: Optional[str]) -> bool:
    """
    True for ``text/plain`` with or without parameters (``text/plain; charset=utf-8``).
    """
    if not mime_type:
        return False
    return mime_type.split(";", 1)[0].strip().lower() == PLAIN_TEXT


def read_transcript(path: str | Path) -> str:
    """
    Reads a transcript file as UTF-8; undecodable bytes are replaced rather than rejected.
    """
    return Path(path).expanduser().read_text(encoding="utf-8", errors="replace")
