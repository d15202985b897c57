"""Seed demo parcels into the database."""
from parceltracker.parcel import ParcelService

INITIAL_PARCELS = [
    {"client": 1000, "address": "Pskov, Voennaya 15"},
    {"client": 1000, "address": "Saratov, Vesnaya 33"},
    {"client": 2000, "address": "Kazan, Baumana 7"},
]


def main():
    service = ParcelService()

    for seed in INITIAL_PARCELS:
        existing = service.client_parcels(seed["client"])
        if any(p.address == seed["address"] for p in existing):
            print(f"Skipping {seed['address']} for client {seed['client']} - already exists")
            continue

        parcel = service.register(**seed)
        print(f"Created: parcel {parcel.number} for client {parcel.client} ({parcel.address})")


if __name__ == "__main__":
    main()
