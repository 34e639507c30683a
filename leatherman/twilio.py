"""Verification and parsing helpers for Twilio webhook requests."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Media:
    """A media attachment referenced by an incoming message."""

    content_type: str
    url: str


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def _values(value: str | Iterable[str]) -> list[str]:
    if isinstance(value, str):
        return [value]
    return list(value)


def _first(form: Mapping[str, str | Iterable[str]], key: str) -> str:
    value = form.get(key)
    if value is None:
        return ""
    values = _values(value)
    return values[0] if values else ""


def generate_mac(
    key: bytes | str,
    url: bytes | str,
    post_form: Mapping[str, str | Iterable[str]],
) -> bytes:
    """Compute the HMAC-SHA1 Twilio signs a request with."""
    payload = bytearray(_as_bytes(url))
    for name in sorted(post_form):
        payload += name.encode("utf-8")
        for value in _values(post_form[name]):
            payload += value.encode("utf-8")
    return hmac.new(_as_bytes(key), bytes(payload), hashlib.sha1).digest()


def check_mac(
    key: bytes | str,
    url: bytes | str,
    post_form: Mapping[str, str | Iterable[str]],
    signature: str,
) -> bool:
    """Check the base64 ``X-Twilio-Signature`` value against the request.

    Raises ValueError when the signature is not valid base64.
    """
    try:
        message_mac = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"base64.Decode: {exc}") from exc
    return hmac.compare_digest(message_mac, generate_mac(key, url, post_form))


def extract_media(form: Mapping[str, str | Iterable[str]]) -> list[Media]:
    """Return the media attachments described by a message form."""
    num_media = _first(form, "NumMedia")
    if num_media == "":
        return []
    if not _INTEGER.fullmatch(num_media):
        raise ValueError(f"Couldn't parse NumMedia: invalid syntax {num_media!r}")
    count = int(num_media)
    if count < 0:
        raise ValueError(f"Couldn't parse NumMedia: negative count {count}")
    return [
        Media(
            content_type=_first(form, f"MediaContentType{index}"),
            url=_first(form, f"MediaUrl{index}"),
        )
        for index in range(count)
    ]