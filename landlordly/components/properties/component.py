"""
Properties component - landlord properties and their units.

Properties and units are two separate list documents. Both are seeded
with demo data the first time they are read (unless rules.demo.seed_data
is off). Every mutation rewrites the whole list.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from landlordly.core.services.documents import load_or_seed, write_document
from landlordly.domain.entities import Property, Unit
from landlordly.domain.seed import demo_properties, demo_units
from landlordly.rules.models import Rules

from .models import AddPropertyInput, AddUnitInput, NotFoundError, UpdateUnitInput
from .ports import KeyValueStorePort, TimePort

logger = logging.getLogger(__name__)

_PROPERTIES = TypeAdapter(list[Property])
_UNITS = TypeAdapter(list[Unit])

# Fields a unit update may not touch
_IMMUTABLE_UNIT_FIELDS = frozenset({"id", "property_id"})


def run_list_properties(*, store: KeyValueStorePort, rules: Rules) -> list[Property]:
    seed = demo_properties() if rules.demo.seed_data else []
    return load_or_seed(store, rules.storage.keys.properties, _PROPERTIES, seed)


def run_list_units(*, store: KeyValueStorePort, rules: Rules) -> list[Unit]:
    seed = demo_units() if rules.demo.seed_data else []
    return load_or_seed(store, rules.storage.keys.units, _UNITS, seed)


def run_add_property(
    inp: AddPropertyInput,
    *,
    store: KeyValueStorePort,
    rules: Rules,
    clock: TimePort,
) -> Property:
    prop = Property(
        landlord_id=inp.landlord_id,
        name=inp.name,
        address=inp.address,
        image=inp.image,
        created_at=clock.now_utc(),
    )
    properties = run_list_properties(store=store, rules=rules)
    properties.append(prop)
    write_document(store, rules.storage.keys.properties, _PROPERTIES, properties)

    logger.info("Added property %s for landlord %s", prop.id, prop.landlord_id)
    return prop


def run_add_unit(inp: AddUnitInput, *, store: KeyValueStorePort, rules: Rules) -> Unit:
    unit = Unit(
        property_id=inp.property_id,
        unit_number=inp.unit_number,
        rent_amount=inp.rent_amount,
        status=inp.status,
        tenant_id=inp.tenant_id,
        lease_start=inp.lease_start,
        lease_end=inp.lease_end,
    )
    units = run_list_units(store=store, rules=rules)
    units.append(unit)
    write_document(store, rules.storage.keys.units, _UNITS, units)
    return unit


def run_update_unit(inp: UpdateUnitInput, *, store: KeyValueStorePort, rules: Rules) -> Unit:
    """Merge updates (snake_case field names) into one unit."""
    unknown = inp.updates.keys() - Unit.model_fields.keys()
    if unknown:
        raise ValueError(f"Unknown unit fields: {sorted(unknown)}")
    blocked = _IMMUTABLE_UNIT_FIELDS & inp.updates.keys()
    if blocked:
        raise ValueError(f"Cannot update unit fields: {sorted(blocked)}")

    units = run_list_units(store=store, rules=rules)
    for idx, unit in enumerate(units):
        if unit.id == inp.unit_id:
            merged = Unit.model_validate({**unit.model_dump(), **inp.updates})
            units[idx] = merged
            write_document(store, rules.storage.keys.units, _UNITS, units)
            return merged

    raise NotFoundError("Unit", inp.unit_id)


def run_delete_property(property_id: str, *, store: KeyValueStorePort, rules: Rules) -> int:
    """
    Delete a property and every unit that belongs to it.

    Returns the number of units removed. Properties and units are written
    separately; a failure between the two writes leaves orphaned units.
    """
    properties = run_list_properties(store=store, rules=rules)
    remaining = [p for p in properties if p.id != property_id]
    if len(remaining) == len(properties):
        raise NotFoundError("Property", property_id)

    units = run_list_units(store=store, rules=rules)
    kept_units = [u for u in units if u.property_id != property_id]

    write_document(store, rules.storage.keys.properties, _PROPERTIES, remaining)
    write_document(store, rules.storage.keys.units, _UNITS, kept_units)

    removed = len(units) - len(kept_units)
    logger.info("Deleted property %s and %d unit(s)", property_id, removed)
    return removed


def run_get_property_units(property_id: str, *, store: KeyValueStorePort, rules: Rules) -> list[Unit]:
    return [u for u in run_list_units(store=store, rules=rules) if u.property_id == property_id]


def run_get_tenant_unit(tenant_id: str, *, store: KeyValueStorePort, rules: Rules) -> Unit | None:
    return next(
        (u for u in run_list_units(store=store, rules=rules) if u.tenant_id == tenant_id),
        None,
    )
