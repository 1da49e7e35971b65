"""
core/capabilities.py

Fixed capability blocks advertised to the voice assistant during discovery.

These are static templates. Endpoints never hand them out by reference; see
`shared.models.Endpoint.capabilities`.
"""

MANUFACTURER_NAME = "Crownstone"

DISCOVERY_NAMESPACE = "Alexa.Discovery"
DISCOVER_DIRECTIVE = "Discover"
DISCOVER_RESPONSE = "Discover.Response"

POWER_STATE_CAPABILITY = {
    "type": "AlexaInterface",
    "interface": "Alexa.PowerController",
    "version": "3",
    "properties": {
        "supported": [{"name": "powerState"}],
        "proactivelyReported": True,
        "retrievable": False,
    },
}

POWER_LEVEL_CAPABILITY = {
    "type": "AlexaInterface",
    "interface": "Alexa.PowerLevelController",
    "version": "3",
    "properties": {
        "supported": [{"name": "powerLevel"}],
        "proactivelyReported": True,
        "retrievable": False,
    },
}
