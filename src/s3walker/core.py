from pathlib import Path

# Region the inventory is scoped to. Buckets without a LocationConstraint
# live here as well.
DEFAULT_REGION = "us-east-1"

# Legacy LocationConstraint values returned by GetBucketLocation
LEGACY_LOCATIONS = {"EU": "eu-west-1"}

# Workbook template, relative to the working directory
DEFAULT_WORKBOOK = Path("file") / "inventarioS3CR.xlsx"

# First cell written by the report (1-based, openpyxl convention)
START_ROW = 4
START_COL = 4

GB = 1024**3

# CloudWatch storage metrics are published once a day
METRIC_NAMESPACE = "AWS/S3"
METRIC_WINDOW_DAYS = 7
METRIC_PERIOD_SECONDS = 86400
METRIC_STATISTIC = "Average"
DEFAULT_METRIC_UNIT = "Bytes"

SIZE_METRIC = ("BucketSizeBytes", "StandardStorage")
OBJECT_COUNT_METRIC = ("NumberOfObjects", "AllStorageTypes")

# Error codes that mean "not configured" rather than a failure
NO_PUBLIC_ACCESS_BLOCK = "NoSuchPublicAccessBlockConfiguration"
NO_BUCKET_POLICY = "NoSuchBucketPolicy"
