from datetime import datetime, timedelta, timezone
from typing import Any

from ..core import (
    DEFAULT_METRIC_UNIT,
    METRIC_NAMESPACE,
    METRIC_PERIOD_SECONDS,
    METRIC_STATISTIC,
    METRIC_WINDOW_DAYS,
)
from ..logger import logger
from ..schemas.storage import MetricSample

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def fetch_metric(
    cloudwatch: Any,
    bucket_name: str,
    metric_name: str,
    storage_type: str,
    now: datetime | None = None,
) -> MetricSample | None:
    """
    Fetches the most recent daily average of an S3 storage metric.

    Queries the trailing 7-day window ending at `now`. Returns None when
    CloudWatch has no datapoint for the bucket in that window.
    """
    end = now or datetime.now(timezone.utc)
    start = end - timedelta(days=METRIC_WINDOW_DAYS)

    response = cloudwatch.get_metric_statistics(
        Namespace=METRIC_NAMESPACE,
        MetricName=metric_name,
        Dimensions=[
            {"Name": "BucketName", "Value": bucket_name},
            {"Name": "StorageType", "Value": storage_type},
        ],
        StartTime=start,
        EndTime=end,
        Period=METRIC_PERIOD_SECONDS,
        Statistics=[METRIC_STATISTIC],
    )

    datapoints = response.get("Datapoints") or []
    if not datapoints:
        logger.debug(f"No {metric_name} datapoints for {bucket_name}")
        return None

    # sorted() is stable, so equal timestamps keep the service order
    latest = sorted(
        datapoints, key=lambda dp: dp.get("Timestamp") or _EPOCH, reverse=True
    )[0]

    return MetricSample(
        timestamp=latest.get("Timestamp") or end,
        value=latest.get(METRIC_STATISTIC) or 0,
        unit=latest.get("Unit") or DEFAULT_METRIC_UNIT,
    )
