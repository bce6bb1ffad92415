"""Posting tweets: image checks, uploads and editing in an external editor."""

from __future__ import annotations

import base64
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Sequence, Union

from .util import run_editor, trim_end_newline

MAX_IMAGES = 4
SUPPORTED_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif")


class PostError(Exception):
    """Raised when a tweet or its images cannot be posted."""


def _extension(name: str) -> str:
    for i in range(len(name) - 1, -1, -1):
        if name[i] == "/":
            break
        if name[i] == ".":
            return name[i:]
    return ""


def validate_images(images: Sequence[str]) -> None:
    """Check the number, combination and file types of images to attach."""
    images = list(images)
    contains_gif = any(image.lower().endswith(".gif") for image in images)
    if contains_gif and len(images) > 1:
        raise PostError("gif images cannot be attached with other images")
    if len(images) > MAX_IMAGES:
        raise PostError(f"you can attach up to {MAX_IMAGES} images")
    for image in images:
        if _extension(image).lower() not in SUPPORTED_EXTENSIONS:
            raise PostError(f"unsupported extensions ({image})")


def _upload_one(api, image: str) -> str:
    try:
        raw = Path(image).read_bytes()
    except OSError as exc:
        raise PostError(f"failed to load file ({image})") from exc
    encoded = base64.b64encode(raw).decode("ascii")
    try:
        response = api.upload_image(encoded)
    except Exception as exc:
        raise PostError(f"upload failed ({image}): {exc}") from exc
    return response.media_id_string


def upload_images(api, images: Sequence[str]) -> list[str]:
    """Upload ``images`` concurrently and return their media IDs in order."""
    images = list(images)
    validate_images(images)
    if not images:
        return []
    with ThreadPoolExecutor(max_workers=len(images)) as pool:
        return list(pool.map(lambda image: _upload_one(api, image), images))


def operation_type(quote_id: str, reply_id: str) -> str:
    """Name the kind of post: a reply, a quote tweet or a plain tweet."""
    if reply_id:
        return "reply"
    if quote_id:
        return "quote tweet"
    return "tweet"


def post_tweet(
    api,
    text: str,
    quote_id: str = "",
    reply_id: str = "",
    images: Optional[Sequence[str]] = None,
) -> Optional[str]:
    """Post ``text`` with optional images; return the posted text, or ``None`` when empty."""
    text = trim_end_newline(text)
    if not text and not images:
        return None
    media_ids = upload_images(api, images) if images else []
    api.post_tweet(text, quote_id, reply_id, media_ids)
    return text


def edit_with_editor(editor: str, directory: Union[str, Path]) -> str:
    """Let the user write text in ``editor`` and return what was written."""
    tmp_file = Path(directory) / ".tmp"
    tmp_file.write_text("", encoding="utf-8")
    try:
        run_editor(editor, str(tmp_file))
        return tmp_file.read_text(encoding="utf-8")
    finally:
        tmp_file.unlink(missing_ok=True)