"""
core/translator.py

Translate one device record from the cloud into an endpoint descriptor.

Everything here is pure: no I/O, no shared mutable state. Translating the same
record twice yields equal descriptors.
"""

from typing import Iterable

from shared.models import Ability, DeviceRecord, Endpoint, EndpointCookie, EndpointKind
from shared.utils import prettify_device_type

from .capabilities import MANUFACTURER_NAME

DIMMING_ABILITY = "dimming"


def resolve_dimmable(abilities: Iterable[Ability]) -> bool:
    """
    Decide whether a device can dim.

    Only the first ability of type "dimming" counts; its enabled flag is the
    answer and later dimming entries are never looked at.
    """
    for ability in abilities:
        if ability.type == DIMMING_ABILITY:
            return ability.enabled is True
    return False


def describe_device(record: DeviceRecord) -> str:
    """
    Build the endpoint description.

    "<prettified type>", then " in <location name>" when the device sits in a
    named location, then the device's own description on a new line.
    """
    description = prettify_device_type(record.type)
    if record.location_name:
        description += " in " + record.location_name
    if record.description:
        description += "\n" + record.description
    return description


def build_endpoint(record: DeviceRecord) -> Endpoint:
    """
    Translate a validated device record into its endpoint descriptor.

    Args:
        record (DeviceRecord): One device from the cloud listing.

    Returns:
        Endpoint: LIGHT with power level and power state when the device is
        dimmable, SWITCH with power state only otherwise.
    """
    dimmable = resolve_dimmable(record.abilities)
    return Endpoint(
        endpoint_id=record.id,
        manufacturer_name=MANUFACTURER_NAME,
        description=describe_device(record),
        friendly_name=record.name,
        kind=EndpointKind.for_device(dimmable),
        cookie=EndpointCookie(
            address=record.address,
            sphere=record.sphere_id,
            dimmable=dimmable,
        ),
    )
