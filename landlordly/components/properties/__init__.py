"""
Properties component - Landlord properties and units.
"""

from .component import (
    run_add_property,
    run_add_unit,
    run_delete_property,
    run_get_property_units,
    run_get_tenant_unit,
    run_list_properties,
    run_list_units,
    run_update_unit,
)
from .models import AddPropertyInput, AddUnitInput, NotFoundError, UpdateUnitInput
from .ports import KeyValueStorePort, TimePort

__all__ = [
    # Entry points
    "run_list_properties",
    "run_list_units",
    "run_add_property",
    "run_add_unit",
    "run_update_unit",
    "run_delete_property",
    "run_get_property_units",
    "run_get_tenant_unit",
    # Models
    "AddPropertyInput",
    "AddUnitInput",
    "UpdateUnitInput",
    "NotFoundError",
    # Ports
    "KeyValueStorePort",
    "TimePort",
]
