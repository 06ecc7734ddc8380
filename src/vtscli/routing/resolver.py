"""Resolve a display name to an id via a listing request.

Tie-break: the listing is scanned in server order and the first record whose
name matches exactly (case-sensitive) wins. Duplicate names are not an
error.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from ..commands import Selector
from ..exceptions import AmbiguousOrMissingSelector, NameNotFound
from .context import RouterContext

__all__ = ["resolve_name", "resolve_selector"]

logger = logging.getLogger(__name__)


def resolve_name(
    name: str,
    records: Iterable[Mapping[str, Any]],
    *,
    id_key: str,
    name_key: str,
    kind: str,
) -> str:
    """Return the id of the first record named ``name``.

    Raises:
        NameNotFound: no record matched.
    """
    for record in records:
        if record.get(name_key) == name:
            return str(record.get(id_key))
    raise NameNotFound(kind, name)


async def resolve_selector(
    ctx: RouterContext,
    selector: Selector,
    *,
    kind: str,
    listing_request: str,
    listing_key: str,
    id_key: str,
    name_key: str,
    listing_data: Optional[Dict[str, Any]] = None,
) -> str:
    """Return ``selector.id`` directly, or look the name up in a listing.

    The selector is validated before any request is sent.
    """
    if selector.id is not None:
        return selector.id
    if selector.name is None:
        raise AmbiguousOrMissingSelector(kind)

    resp = await ctx.send(listing_request, listing_data or {})
    records = resp.get(listing_key) or []
    resolved = resolve_name(
        selector.name, records, id_key=id_key, name_key=name_key, kind=kind
    )
    logger.debug("Resolved %s name %r to id %s", kind, selector.name, resolved)
    return resolved
