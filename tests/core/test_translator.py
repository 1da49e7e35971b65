"""
Unit tests for `core/translator.py` – device record to endpoint descriptor.

Covers:
- Dimmability: only the first "dimming" ability counts, missing abilities mean on/off only
- Endpoint shape: LIGHT vs SWITCH display category and capability order
- Description composition from type, location name and free text
- Cookie contents and purity (translating twice gives equal descriptors)
"""

import pytest

from core.capabilities import MANUFACTURER_NAME, POWER_LEVEL_CAPABILITY, POWER_STATE_CAPABILITY
from core.translator import build_endpoint, describe_device, resolve_dimmable
from shared.models import Ability, DeviceRecord, EndpointKind
from shared.utils import prettify_device_type


@pytest.fixture
def record_factory(device_factory):
    def _record(**overrides) -> DeviceRecord:
        return DeviceRecord.model_validate(device_factory(**overrides))
    return _record


def test_enabled_dimming_makes_a_light(record_factory):
    record = record_factory(abilities=[
        {"type": "switchcraft", "enabled": True},
        {"type": "dimming", "enabled": True},
    ])

    endpoint = build_endpoint(record).to_dict()

    assert endpoint["displayCategories"] == ["LIGHT"]
    assert endpoint["capabilities"] == [POWER_LEVEL_CAPABILITY, POWER_STATE_CAPABILITY]
    assert endpoint["cookie"]["dimmable"] is True


def test_no_dimming_ability_makes_a_switch(record_factory):
    record = record_factory(abilities=[{"type": "switchcraft", "enabled": True}])

    endpoint = build_endpoint(record).to_dict()

    assert endpoint["displayCategories"] == ["SWITCH"]
    assert endpoint["capabilities"] == [POWER_STATE_CAPABILITY]
    assert endpoint["cookie"]["dimmable"] is False


def test_first_dimming_entry_wins(record_factory):
    """A later enabled dimming entry is ignored once a disabled one has been seen."""
    record = record_factory(abilities=[
        {"type": "dimming", "enabled": False},
        {"type": "dimming", "enabled": True},
    ])

    assert build_endpoint(record).kind is EndpointKind.SWITCH


def test_first_dimming_entry_wins_when_enabled():
    abilities = [Ability(type="dimming", enabled=True), Ability(type="dimming", enabled=False)]
    assert resolve_dimmable(abilities) is True


def test_unread_ability_with_null_fields_is_accepted(record_factory):
    record = record_factory(abilities=[
        {"type": "tapToToggle", "enabled": None},
        {"enabled": True},
        {"type": "dimming", "enabled": True},
    ])

    assert build_endpoint(record).kind is EndpointKind.LIGHT


def test_only_boolean_true_enables_dimming(record_factory):
    for enabled in ("true", 1, None):
        record = record_factory(abilities=[{"type": "dimming", "enabled": enabled}])
        endpoint = build_endpoint(record).to_dict()
        assert endpoint["displayCategories"] == ["SWITCH"]
        assert endpoint["cookie"]["dimmable"] is False


def test_missing_or_null_abilities_are_not_dimmable(device_factory, record_factory):
    raw = device_factory()
    del raw["abilities"]

    assert build_endpoint(DeviceRecord.model_validate(raw)).kind is EndpointKind.SWITCH
    assert build_endpoint(record_factory(abilities=None)).kind is EndpointKind.SWITCH
    assert resolve_dimmable([]) is False


def test_description_with_location_and_text(record_factory):
    record = record_factory(type="T", location={"name": "Kitchen"}, description="Backup light")
    assert describe_device(record) == f"{prettify_device_type('T')} in Kitchen\nBackup light"


def test_description_without_location_or_text(record_factory):
    record = record_factory(type="T", location=None, description=None)
    assert describe_device(record) == prettify_device_type("T")


def test_description_with_text_only(record_factory):
    record = record_factory(type="PLUG", description="Behind the couch")
    assert describe_device(record) == "Crownstone Plug\nBehind the couch"


def test_description_location_without_name(record_factory):
    record = record_factory(type="PLUG", location={"id": "loc-1"})
    assert describe_device(record) == "Crownstone Plug"


def test_endpoint_fields_and_cookie(record_factory):
    record = record_factory(
        id="stone-42",
        name="Desk Lamp",
        address="AA:BB",
        sphereId="sphere-9",
        abilities=[{"type": "dimming", "enabled": True}],
    )

    endpoint = build_endpoint(record).to_dict()

    assert list(endpoint) == [
        "endpointId",
        "manufacturerName",
        "description",
        "friendlyName",
        "displayCategories",
        "cookie",
        "capabilities",
    ]
    assert endpoint["endpointId"] == "stone-42"
    assert endpoint["friendlyName"] == "Desk Lamp"
    assert endpoint["manufacturerName"] == MANUFACTURER_NAME
    assert endpoint["cookie"] == {"address": "AA:BB", "sphere": "sphere-9", "dimmable": True}


def test_translation_is_idempotent(record_factory):
    record = record_factory(location={"name": "Hall"}, abilities=[{"type": "dimming", "enabled": True}])
    assert build_endpoint(record).to_dict() == build_endpoint(record).to_dict()
    assert build_endpoint(record) == build_endpoint(record)


def test_capabilities_are_not_shared_with_templates(record_factory):
    record = record_factory(abilities=[{"type": "dimming", "enabled": True}])
    endpoint = build_endpoint(record).to_dict()

    endpoint["capabilities"][0]["properties"]["retrievable"] = True

    assert POWER_LEVEL_CAPABILITY["properties"]["retrievable"] is False
    assert build_endpoint(record).to_dict()["capabilities"][0]["properties"]["retrievable"] is False
