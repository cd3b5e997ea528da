from .core import GB
from .schemas.storage import Classification, Importance

LARGE_BUCKET_BYTES = 100 * GB
MEDIUM_BUCKET_BYTES = 10 * GB


def _size_points(size_bytes: float | None) -> int:
    # None and NaN fall through both comparisons
    if size_bytes is None:
        return 1
    if size_bytes > LARGE_BUCKET_BYTES:
        return 3
    if size_bytes > MEDIUM_BUCKET_BYTES:
        return 2
    return 1


def score(
    *, size_bytes: float | None, is_public_access: bool, is_public_policy: bool
) -> int:
    """Importance score of a bucket, between 3 and 9."""
    return (
        _size_points(size_bytes)
        + (3 if is_public_access else 1)
        + (3 if is_public_policy else 1)
    )


def classify(
    *, size_bytes: float | None, is_public_access: bool, is_public_policy: bool
) -> Classification:
    """
    Classifies a bucket from its size and exposure.

    Large or publicly reachable buckets score higher. Only the lowest scores
    (small, private, no public policy) are flagged as removable.
    """
    total = score(
        size_bytes=size_bytes,
        is_public_access=is_public_access,
        is_public_policy=is_public_policy,
    )

    if total <= 4:
        return Classification(importance=Importance.IRRELEVANT, removable=True)
    if total <= 7:
        return Classification(importance=Importance.IMPORTANT, removable=False)
    return Classification(importance=Importance.CRITICAL, removable=False)
