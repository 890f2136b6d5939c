"""
Map helpers for provider search results.

Usage:
    from phlebo.maps import cluster_for_zoom, spiderfy_cluster

    clusters = cluster_for_zoom(providers, zoom=14, exclude_id=selected.id)
    for cluster in clusters:
        if cluster.is_cluster:
            legs = spiderfy_cluster(cluster, zoom=14)
"""

from phlebo.maps.clustering import (
    ClusterableItem,
    Coordinates,
    Cluster,
    SpiderLeg,
    cluster_items,
    cluster_for_zoom,
    get_cluster_distance,
    get_spiderfy_radius,
    is_same_location,
    spiderfy_positions,
    spiderfy_cluster,
)

__all__ = [
    # Types
    "ClusterableItem",
    "Coordinates",
    "Cluster",
    "SpiderLeg",
    # Functions
    "cluster_items",
    "cluster_for_zoom",
    "get_cluster_distance",
    "get_spiderfy_radius",
    "is_same_location",
    "spiderfy_positions",
    "spiderfy_cluster",
]
