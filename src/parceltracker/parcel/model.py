import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_timestamp(moment: datetime = None) -> str:
    """Format a moment (default: now) as an RFC 3339 UTC timestamp string."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


class ParcelStatus(str, enum.Enum):
    """
    Parcel lifecycle stage.

    Status flow:
        REGISTERED → SENT → DELIVERED
    """

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

    def next(self) -> Optional["ParcelStatus"]:
        """The following stage, or None once delivered."""
        stages = list(ParcelStatus)
        index = stages.index(self)
        if index + 1 < len(stages):
            return stages[index + 1]
        return None


@dataclass
class Parcel:
    """
    A tracked shipment.

    `number` stays None until the record is persisted by ParcelStore.add().
    """

    client: int
    address: str
    status: ParcelStatus = ParcelStatus.REGISTERED
    created_at: str = field(default_factory=utc_timestamp)
    number: Optional[int] = None

    @property
    def is_registered(self) -> bool:
        return self.status == ParcelStatus.REGISTERED

    @classmethod
    def from_row(cls, row: dict) -> "Parcel":
        return cls(
            number=row["number"],
            client=row["client"],
            status=ParcelStatus(row["status"]),
            address=row["address"],
            created_at=row["created_at"],
        )
