from __future__ import annotations

from functools import lru_cache
from typing import Any

import boto3

from .core import DEFAULT_REGION

# Shared Client Registry (Lazy-loaded and cached per region/profile)


@lru_cache(maxsize=4)
def get_session(profile: str | None = None) -> boto3.session.Session:
    return boto3.session.Session(profile_name=profile)


@lru_cache(maxsize=4)
def get_s3_client(region: str = DEFAULT_REGION, profile: str | None = None) -> Any:
    return get_session(profile).client("s3", region_name=region)


@lru_cache(maxsize=4)
def get_cloudwatch_client(
    region: str = DEFAULT_REGION, profile: str | None = None
) -> Any:
    return get_session(profile).client("cloudwatch", region_name=region)
