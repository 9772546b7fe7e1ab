"""Hypermedia link builders shared by the mappers."""

from typing import List

from domain.schemas import Link


def resource_links(base_path: str, collection: str, entity_id) -> List[Link]:
    """self / update / delete links for a single resource"""
    href = f"{base_path}/{collection}/{entity_id}"
    return [
        Link(rel="self", href=href, method="GET"),
        Link(rel="update", href=href, method="PUT"),
        Link(rel="delete", href=href, method="DELETE"),
    ]
