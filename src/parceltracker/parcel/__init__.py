"""
Parcel

This module provides classes for storing and tracking parcels
through their registered → sent → delivered lifecycle.
"""

from parceltracker.parcel.errors import ParcelNotFoundError, ParcelStatusError
from parceltracker.parcel.model import Parcel, ParcelStatus
from parceltracker.parcel.repository import ParcelStore
from parceltracker.parcel.service import ParcelService

__all__ = [
    "Parcel",
    "ParcelNotFoundError",
    "ParcelService",
    "ParcelStatus",
    "ParcelStatusError",
    "ParcelStore",
]
