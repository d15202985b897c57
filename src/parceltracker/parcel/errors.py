from parceltracker.parcel.model import ParcelStatus


class ParcelNotFoundError(LookupError):
    """No parcel row matches the requested number."""

    def __init__(self, number: int):
        super().__init__(f"Parcel {number} not found")
        self.number = number


class ParcelStatusError(ValueError):
    """The parcel's current status does not allow the requested change."""

    def __init__(self, number: int, status: ParcelStatus, action: str):
        super().__init__(
            f"Cannot {action} parcel {number}: status is '{status.value}', "
            f"expected '{ParcelStatus.REGISTERED.value}'"
        )
        self.number = number
        self.status = status
        self.action = action
