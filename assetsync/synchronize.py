"""
Catalog-level synchronization: every image set of every .xcassets catalog.
"""

import os

from .catalog import discover_catalogs, discover_image_sets
from .reconcile import ImageSetSyncResult, sync_image_set


CatalogSyncResult = dict[str, ImageSetSyncResult]


def sync_asset_catalog(catalog_path: str, source_dir: str) -> CatalogSyncResult:
    """Synchronize all image sets directly inside catalog_path.

    Returns image set directory name -> result, in directory name order.
    """
    result: CatalogSyncResult = {}
    for image_set in discover_image_sets(catalog_path):
        image_set_path = os.path.join(catalog_path, image_set)
        result[image_set] = sync_image_set(image_set_path, source_dir)
        if result[image_set].manifest_updated:
            print(f"Rewrote {image_set}/Contents.json")
    return result


def sync_destination(destination_dir: str, source_dir: str) -> dict[str, CatalogSyncResult]:
    """Synchronize every .xcassets catalog directly inside destination_dir."""
    results: dict[str, CatalogSyncResult] = {}
    for catalog in discover_catalogs(destination_dir):
        results[catalog] = sync_asset_catalog(os.path.join(destination_dir, catalog), source_dir)
        print(f"Synced {catalog}: {len(results[catalog])} image set(s)")
    return results
