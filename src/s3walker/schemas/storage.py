from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Importance(str, Enum):
    IRRELEVANT = "irrelevant"
    IMPORTANT = "important"
    CRITICAL = "critical"


class LookupStatus(str, Enum):
    FOUND = "found"
    ABSENT = "absent"


class Classification(BaseModel):
    model_config = ConfigDict(frozen=True)

    importance: Importance
    removable: bool


class MetricSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    value: float = 0.0
    unit: str = "Bytes"


class PublicAccessBlock(BaseModel):
    """The four restriction flags of a bucket's public access block."""

    model_config = ConfigDict(populate_by_name=True)

    block_public_acls: bool | None = Field(default=None, alias="BlockPublicAcls")
    ignore_public_acls: bool | None = Field(default=None, alias="IgnorePublicAcls")
    block_public_policy: bool | None = Field(default=None, alias="BlockPublicPolicy")
    restrict_public_buckets: bool | None = Field(
        default=None, alias="RestrictPublicBuckets"
    )


class AccessBlockLookup(BaseModel):
    status: LookupStatus
    config: PublicAccessBlock | None = None


class PolicyStatusLookup(BaseModel):
    status: LookupStatus
    is_public: bool = False


class BucketRecord(BaseModel):
    name: str
    creation_date: datetime
    size_bytes: int | None = Field(
        default=None, description="Latest daily BucketSizeBytes (StandardStorage)"
    )
    object_count: int | None = Field(
        default=None, description="Latest daily NumberOfObjects (AllStorageTypes)"
    )
    is_fully_access_blocked: bool = False
    has_public_policy: bool = False
    classification: Classification

    @property
    def is_public_access(self) -> bool:
        return not self.is_fully_access_blocked
