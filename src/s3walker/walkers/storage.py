from typing import Any

from botocore.exceptions import ClientError

from ..core import (
    DEFAULT_REGION,
    LEGACY_LOCATIONS,
    NO_BUCKET_POLICY,
    NO_PUBLIC_ACCESS_BLOCK,
)
from ..logger import logger
from ..schemas.storage import (
    AccessBlockLookup,
    LookupStatus,
    PolicyStatusLookup,
    PublicAccessBlock,
)


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


def resolve_region(location_constraint: str | None) -> str:
    """
    Maps a GetBucketLocation LocationConstraint to a region name.
    An empty constraint means us-east-1.
    """
    if not location_constraint:
        return DEFAULT_REGION
    return LEGACY_LOCATIONS.get(location_constraint, location_constraint)


def list_buckets(s3: Any) -> list[dict[str, Any]]:
    """Lists all buckets of the account (Name, CreationDate), in service order."""
    response = s3.list_buckets()
    return list(response.get("Buckets") or [])


def filter_by_region(
    s3: Any, buckets: list[dict[str, Any]], region: str = DEFAULT_REGION
) -> list[dict[str, Any]]:
    """
    Keeps the buckets located in `region`, preserving their order.

    A failing location lookup is not caught here: it aborts the whole run.
    """
    in_region = []
    for bucket in buckets:
        name = bucket["Name"]
        location = s3.get_bucket_location(Bucket=name)
        bucket_region = resolve_region(location.get("LocationConstraint"))
        logger.debug(f"{name} is located in {bucket_region}")
        if bucket_region == region:
            in_region.append(bucket)

    return in_region


def get_public_access_block(s3: Any, bucket_name: str) -> AccessBlockLookup:
    """
    Fetches the bucket's public access block.
    A bucket with no configuration yields an ABSENT lookup; other errors propagate.
    """
    try:
        response = s3.get_public_access_block(Bucket=bucket_name)
    except ClientError as e:
        if _error_code(e) == NO_PUBLIC_ACCESS_BLOCK:
            logger.debug(f"No public access block configured for {bucket_name}")
            return AccessBlockLookup(status=LookupStatus.ABSENT)
        raise

    config = response.get("PublicAccessBlockConfiguration")
    if config is None:
        return AccessBlockLookup(status=LookupStatus.ABSENT)
    return AccessBlockLookup(
        status=LookupStatus.FOUND,
        config=PublicAccessBlock.model_validate(config),
    )


def get_policy_status(s3: Any, bucket_name: str) -> PolicyStatusLookup:
    """
    Fetches whether the bucket policy makes the bucket public.
    A bucket with no policy yields an ABSENT lookup that is not public.
    """
    try:
        response = s3.get_bucket_policy_status(Bucket=bucket_name)
    except ClientError as e:
        if _error_code(e) == NO_BUCKET_POLICY:
            logger.debug(f"No bucket policy for {bucket_name}")
            return PolicyStatusLookup(status=LookupStatus.ABSENT, is_public=False)
        raise

    is_public = bool(response.get("PolicyStatus", {}).get("IsPublic", False))
    return PolicyStatusLookup(status=LookupStatus.FOUND, is_public=is_public)


def is_fully_access_blocked(config: PublicAccessBlock | None) -> bool:
    """
    True only when all four public access restrictions are enabled.
    No configuration means nothing is blocked.
    """
    if config is None:
        return False
    return all(
        flag is True
        for flag in (
            config.block_public_acls,
            config.ignore_public_acls,
            config.block_public_policy,
            config.restrict_public_buckets,
        )
    )
