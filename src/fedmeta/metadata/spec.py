"""Classification of raw endpoint values into a tagged variant."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fedmeta.constants.validation import EXPECTED_ARRAY_OR_STRING, EXPECTED_STRING_OR_ARRAY
from fedmeta.exceptions import MalformedEndpointSpec
from fedmeta.types.common import EndpointRecord


@dataclass(frozen=True)
class BareLocation:
    """A single address given as a plain string."""

    location: str


@dataclass(frozen=True)
class EndpointListing:
    """An ordered list of bare addresses and/or structured records.

    ``keys`` holds the mapping keys when the listing came from a mapping's
    values; it is empty for a plain list.
    """

    items: tuple[str | EndpointRecord, ...]
    keys: tuple[Any, ...] = ()

    def item_path(self, path: str, position: int) -> str:
        """Return the error path of the item at ``position``."""
        key = self.keys[position] if self.keys else position
        return f"{path}[{key!r}]"


type EndpointSpec = BareLocation | EndpointListing


def classify_endpoint_spec(raw: Any, path: str) -> EndpointSpec | None:
    """Decide the shape of ``raw`` once; ``None`` means nothing is configured.

    A mapping is walked by its values in insertion order, so each string
    value counts as a bare address. Raises MalformedEndpointSpec for any
    shape other than a string, a list or a mapping of strings and mappings.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        return BareLocation(raw)
    if isinstance(raw, Mapping):
        keys: tuple[Any, ...] = tuple(raw.keys())
        values: tuple[Any, ...] = tuple(raw.values())
    elif isinstance(raw, (list, tuple)):
        keys = ()
        values = tuple(raw)
    else:
        raise MalformedEndpointSpec(EXPECTED_ARRAY_OR_STRING, path=path)

    listing = EndpointListing(values, keys)
    for position, item in enumerate(values):
        if not isinstance(item, (str, Mapping)):
            raise MalformedEndpointSpec(EXPECTED_STRING_OR_ARRAY, path=listing.item_path(path, position))
    return listing
