import logging
from typing import List, Optional

from parceltracker.parcel.model import Parcel, ParcelStatus, utc_timestamp
from parceltracker.parcel.repository import ParcelStore

logger = logging.getLogger(__name__)


class ParcelService:
    """Parcel use cases: registration, tracking, and the registered-only edits."""

    def __init__(self, store: ParcelStore = None):
        self.store = store or ParcelStore()

    def register(self, client: int, address: str) -> Parcel:
        """
        Register a new parcel for a client.

        The parcel starts in the 'registered' status, stamped with the
        current UTC time. Returns the persisted parcel with its number.
        """
        parcel = Parcel(
            client=client,
            address=address,
            status=ParcelStatus.REGISTERED,
            created_at=utc_timestamp(),
        )
        parcel.number = self.store.add(parcel)
        logger.info(
            "Registered parcel %s for client %s at %s",
            parcel.number,
            client,
            parcel.created_at,
        )
        return parcel

    def client_parcels(self, client: int) -> List[Parcel]:
        return self.store.get_by_client(client)

    def next_status(self, number: int) -> Optional[ParcelStatus]:
        """
        Advance a parcel one stage along its lifecycle.

        Returns the new status, or None when the parcel is already
        delivered (nothing is written in that case).
        """
        parcel = self.store.get(number)
        new_status = parcel.status.next()
        if new_status is None:
            logger.info("Parcel %s is already delivered", number)
            return None

        self.store.set_status(number, new_status)
        logger.info("Parcel %s moved from %s to %s", number, parcel.status.value, new_status.value)
        return new_status

    def change_address(self, number: int, address: str) -> None:
        self.store.set_address(number, address)

    def delete(self, number: int) -> None:
        self.store.delete(number)
