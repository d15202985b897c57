import logging
from typing import List, NoReturn

from parceltracker import db
from parceltracker.parcel.errors import ParcelNotFoundError, ParcelStatusError
from parceltracker.parcel.model import Parcel, ParcelStatus

logger = logging.getLogger(__name__)


class ParcelStore:
    """
    Repository for parcel data access.
    Encapsulates all SQL and queries for the parcel table.

    Address changes and deletes only touch rows still in the
    'registered' status; everything else is plain CRUD.
    """

    def add(self, parcel: Parcel) -> int:
        """Insert a new parcel and return its generated number."""
        row = db.fetch_one(
            """
            INSERT INTO parcel (client, status, address, created_at)
            VALUES (%s, %s, %s, %s)
            RETURNING number
            """,
            (parcel.client, ParcelStatus(parcel.status).value, parcel.address, parcel.created_at),
        )
        logger.info("Added parcel %s for client %s", row["number"], parcel.client)
        return row["number"]

    def get(self, number: int) -> Parcel:
        """Get a parcel by number. Raises ParcelNotFoundError if absent."""
        row = db.fetch_one(
            """
            SELECT number, client, status, address, created_at
            FROM parcel
            WHERE number = %s
            """,
            (number,),
        )
        if row is None:
            raise ParcelNotFoundError(number)
        return Parcel.from_row(row)

    def delete(self, number: int) -> None:
        """Delete a parcel, provided it is still registered."""
        deleted = db.execute(
            "DELETE FROM parcel WHERE number = %s AND status = %s",
            (number, ParcelStatus.REGISTERED.value),
        )
        if not deleted:
            self._reject(number, "delete")
        logger.info("Deleted parcel %s", number)

    def set_address(self, number: int, address: str) -> None:
        """Change the delivery address, provided the parcel is still registered."""
        updated = db.execute(
            "UPDATE parcel SET address = %s WHERE number = %s AND status = %s",
            (address, number, ParcelStatus.REGISTERED.value),
        )
        if not updated:
            self._reject(number, "change address of")
        logger.info("Changed address of parcel %s", number)

    def set_status(self, number: int, status: ParcelStatus) -> None:
        """Overwrite the status. No transition checks happen here."""
        updated = db.execute(
            "UPDATE parcel SET status = %s WHERE number = %s",
            (ParcelStatus(status).value, number),
        )
        if not updated:
            raise ParcelNotFoundError(number)
        logger.info("Set status of parcel %s to %s", number, ParcelStatus(status).value)

    def get_by_client(self, client: int) -> List[Parcel]:
        """All parcels belonging to a client, ordered by number."""
        rows = db.fetch_all(
            """
            SELECT number, client, status, address, created_at
            FROM parcel
            WHERE client = %s
            ORDER BY number
            """,
            (client,),
        )
        logger.debug("Found %d parcels for client %s", len(rows), client)
        return [Parcel.from_row(row) for row in rows]

    def _reject(self, number: int, action: str) -> NoReturn:
        # The guarded statement matched nothing: either the row is gone
        # or it has left the registered status.
        current = self.get(number)
        raise ParcelStatusError(number, current.status, action)
