# SPDX-License-Identifier: MIT
"""Wrapper for fetching newer versions of the emoji dataset."""

from . import VERSION, logger
from .index import EmojiIndex, build_index
from .loader import LoaderError, parse_emojis

import json
from os import PathLike
from pathlib import Path
from typing import Tuple

import requests
from pyrate_limiter import Duration, RequestRate, Limiter
from requests import Session
from requests_cache import CacheMixin
from requests_ratelimiter import LimiterSession, LimiterMixin

#: Upstream emoji-java dataset, in the format the loader reads.
DATASET_URL = (
    "https://raw.githubusercontent.com/vdurmont/emoji-java/master/"
    "src/main/resources/emojis.json"
)


class CachedLimiterSession(CacheMixin, LimiterMixin, Session):
    """Requests session that combines caching and ratelimiting."""


limiter = Limiter(RequestRate(10, Duration.SECOND * 3))

req_session = CachedLimiterSession(
    "emojilookup_cache", use_cache_dir=True, expire_after=180, limiter=limiter
)
req_nocache_session = LimiterSession(limiter=limiter)

HEADERS = {
    "User-Agent": f"emojilookup {VERSION}"
}


class RequestError(Exception):
    """Base class for request exceptions."""


def request_get(url: str, no_cache: bool = False) -> str:
    """
    GET a URL and return the response body.

    :raises RequestError: on a non-200 status or a connection failure.
    """
    session = req_session
    if no_cache:
        session = req_nocache_session

    try:
        req = session.get(
            url,
            headers=HEADERS,
        )
    except requests.exceptions.RequestException as e:
        logger.warning(f"Request failed for {url}: {e}")
        raise RequestError(e) from e

    if req.status_code != 200:
        logger.warning(f"Request error for {url}: {req.status_code}")
        logger.debug("Server response:\n" + req.text)
        raise RequestError(req.status_code)

    return req.text


def fetch_dataset(url: str = DATASET_URL, no_cache: bool = False) -> Tuple[str, EmojiIndex]:
    """
    Download an emoji dataset and check that it can be indexed.

    :returns: the raw dataset text and the index built from it.
    :raises RequestError: if the download fails.
    :raises InitializationError: if the dataset cannot be indexed.
    :raises LoaderError: if the dataset is malformed.
    """
    text = request_get(url, no_cache=no_cache)

    try:
        data = json.loads(text)
    except ValueError as e:
        raise LoaderError(f"Invalid emoji dataset from {url}: {e}") from e

    index = build_index(parse_emojis(data))
    logger.debug(f"Fetched {len(index)} emoji from {url}")
    return text, index


def save_dataset(text: str, target: PathLike):
    """Writes a dataset to the given target location."""
    target = Path(target)
    basedir = target.parent
    if basedir.is_file():
        raise ValueError("Base directory already exists and is a file")

    if not basedir.is_dir():
        basedir.mkdir(parents=True)

    target.write_text(text, encoding="utf-8")
