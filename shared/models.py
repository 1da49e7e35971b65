"""
shared/models.py

Data models for device records received from the remote cloud API and for the
endpoint descriptors sent back to the voice assistant.

Inbound records are validated with pydantic so that missing optional blocks
(location, description, abilities) become explicit None/empty values instead of
being discovered later through falsy checks. Outbound descriptors are plain frozen
dataclasses; `Endpoint.to_dict()` produces the exact wire shape.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.capabilities import POWER_LEVEL_CAPABILITY, POWER_STATE_CAPABILITY


class Ability(BaseModel):
    """
    A single capability flag reported by the cloud, e.g. dimming.

    Both fields are kept exactly as sent; only a literal `true` on the first dimming
    entry makes a device dimmable.
    """

    model_config = ConfigDict(extra="ignore")

    type: Any = Field(None, description="Ability tag, e.g. 'dimming'")
    enabled: Any = Field(None, description="Whether the ability is switched on for this device")


class Location(BaseModel):
    """The room a device has been placed in."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None


class DeviceRecord(BaseModel):
    """
    One device ("stone") as returned by `GET /Stones/all` with location and abilities included.

    Only the fields the discovery translation reads are declared; everything else the
    cloud sends is ignored. A missing or null `abilities` list is normalised to an
    empty list, which makes the device a plain on/off switch.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    sphere_id: Optional[str] = Field(None, alias="sphereId")
    type: Optional[str] = None
    location: Optional[Location] = None
    abilities: List[Ability] = Field(default_factory=list)

    @field_validator("abilities", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value

    @property
    def location_name(self) -> Optional[str]:
        return self.location.name if self.location is not None else None


class EndpointKind(Enum):
    """
    The two shapes a discovered endpoint can take.

    The member value is the display category. LIGHT advertises power level and
    power state (in that order); SWITCH advertises power state only.
    """

    LIGHT = "LIGHT"
    SWITCH = "SWITCH"

    @property
    def display_category(self) -> str:
        return self.value

    @property
    def capabilities(self) -> Tuple[Dict[str, Any], ...]:
        return _KIND_CAPABILITIES[self]

    @classmethod
    def for_device(cls, dimmable: bool) -> "EndpointKind":
        return cls.LIGHT if dimmable else cls.SWITCH


_KIND_CAPABILITIES = {
    EndpointKind.LIGHT: (POWER_LEVEL_CAPABILITY, POWER_STATE_CAPABILITY),
    EndpointKind.SWITCH: (POWER_STATE_CAPABILITY,),
}


@dataclass(frozen=True)
class EndpointCookie:
    """Addressing data echoed back by the assistant on later control directives."""

    address: Optional[str]
    sphere: Optional[str]
    dimmable: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "sphere": self.sphere,
            "dimmable": self.dimmable,
        }


@dataclass(frozen=True)
class Endpoint:
    """
    Endpoint descriptor for one device in a discovery response.

    Built once per device and never mutated. `to_dict()` returns fresh copies of
    the capability templates so callers may modify the result freely.
    """

    endpoint_id: str
    manufacturer_name: str
    description: str
    friendly_name: str
    kind: EndpointKind
    cookie: EndpointCookie

    @property
    def display_categories(self) -> List[str]:
        return [self.kind.display_category]

    @property
    def capabilities(self) -> List[Dict[str, Any]]:
        return [copy.deepcopy(capability) for capability in self.kind.capabilities]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "endpointId": self.endpoint_id,
            "manufacturerName": self.manufacturer_name,
            "description": self.description,
            "friendlyName": self.friendly_name,
            "displayCategories": self.display_categories,
            "cookie": self.cookie.to_dict(),
            "capabilities": self.capabilities,
        }
