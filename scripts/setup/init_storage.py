"""
Initialize storage: creates every missing collection file.
Run once before first launch, or point DATA_DIR at a fresh directory.
Usage: python scripts/setup/init_storage.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import create_collections, get_customer_repository, get_employee_repository, get_vehicle_repository
from app.config import settings
from app.services.exceptions import StoreError


def main():
    print("Fleet Rental storage initialization")
    print("=" * 40)
    print(f"Data directory: {os.path.abspath(settings.DATA_DIR)}")

    try:
        created = create_collections()
    except StoreError as e:
        print(f"Cannot create collections: {e}")
        sys.exit(1)

    for path in created:
        print(f"   + created {path}")
    if not created:
        print("   all collection files already exist")

    print("\nCollections:")
    for name, repo in (("customers", get_customer_repository()),
                       ("vehicles", get_vehicle_repository()),
                       ("employees", get_employee_repository())):
        try:
            print(f"   ✓ {name:<10} {len(repo.get()):>5} records  ({repo.store.path})")
        except StoreError as e:
            print(f"   ✗ {name:<10} {e}")

    print("\nStorage ready! You can now start the backend:")
    print("   uvicorn app.main:app --host 0.0.0.0 --port 8080 --reload")


if __name__ == "__main__":
    main()
