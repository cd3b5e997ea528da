import argparse
import json
from typing import Any

from rich.console import Console

from ..classifier import classify
from ..clients import get_cloudwatch_client, get_s3_client
from ..core import OBJECT_COUNT_METRIC, SIZE_METRIC
from ..logger import logger
from ..reporter import render_table, write_workbook
from ..schemas.storage import BucketRecord
from ..walkers import monitoring, storage


def inspect_bucket(s3: Any, cloudwatch: Any, bucket: dict[str, Any]) -> BucketRecord:
    """
    Collects access, policy and size metadata of a single bucket and
    classifies it.
    """
    name = bucket["Name"]

    access = storage.get_public_access_block(s3, name)
    policy = storage.get_policy_status(s3, name)

    size = monitoring.fetch_metric(cloudwatch, name, *SIZE_METRIC)
    objects = monitoring.fetch_metric(cloudwatch, name, *OBJECT_COUNT_METRIC)

    fully_blocked = storage.is_fully_access_blocked(access.config)
    size_bytes = int(size.value) if size else None

    return BucketRecord(
        name=name,
        creation_date=bucket["CreationDate"],
        size_bytes=size_bytes,
        object_count=int(objects.value) if objects else None,
        is_fully_access_blocked=fully_blocked,
        has_public_policy=policy.is_public,
        classification=classify(
            size_bytes=size_bytes,
            is_public_access=not fully_blocked,
            is_public_policy=policy.is_public,
        ),
    )


def collect_inventory(
    s3: Any, cloudwatch: Any, buckets: list[dict[str, Any]]
) -> list[BucketRecord]:
    """
    Inspects the given buckets one after another.

    A bucket that fails to inspect is logged and left out of the result,
    the remaining buckets are still processed.
    """
    records = []
    for bucket in buckets:
        name = bucket["Name"]
        logger.info(f"Bucket: {name}")
        try:
            records.append(inspect_bucket(s3, cloudwatch, bucket))
        except Exception as e:
            logger.error(f"Unexpected error processing bucket {name}: {e}")

    return records


def run_inventory(
    args: argparse.Namespace, log_console: Console, out_console: Console
) -> None:
    """
    Executes the S3 inventory: collect, classify, write the workbook.
    """
    s3 = get_s3_client(args.region, args.profile)
    cloudwatch = get_cloudwatch_client(args.region, args.profile)

    log_console.print(f"Listing buckets in [bold cyan]{args.region}[/bold cyan]...")

    buckets = storage.list_buckets(s3)
    if not buckets:
        log_console.print("[yellow]No buckets found.[/yellow]")
        return

    # Location lookups are not isolated: one failure aborts the run
    in_region = storage.filter_by_region(s3, buckets, args.region)
    logger.debug(f"{len(in_region)} of {len(buckets)} buckets in {args.region}")

    records = collect_inventory(s3, cloudwatch, in_region)

    rows = write_workbook(
        records, args.workbook, start_row=args.start_row, start_col=args.start_col
    )
    log_console.print(
        f"Wrote [bold]{rows}[/bold] bucket rows to [bold]{args.workbook}[/bold]"
    )

    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in records], indent=2))
    else:
        out_console.print(render_table(records, args.region, limit=args.limit))
