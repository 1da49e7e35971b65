"""
Unit tests for `core/skill.py` – SkillRouter routing behavior.

The device source is mocked, so the tests cover only routing: discovery directives reach the
discovery handler, anything else is rejected through the error callback.
"""

from unittest.mock import MagicMock

from core.discovery import InvalidDirectiveError
from core.skill import SkillRouter


def test_routes_discovery_to_handler(discovery_event):
    client = MagicMock()
    client.get_devices.return_value = []
    router = SkillRouter(client)

    outcome = router.invoke(discovery_event)

    assert outcome.error is None
    assert outcome.result["event"]["header"]["name"] == "Discover.Response"
    client.get_devices.assert_called_once_with("access-token-from-skill")


def test_unsupported_directive_is_rejected(event_factory):
    client = MagicMock()
    router = SkillRouter(client)
    event = event_factory(namespace="Alexa.PowerController", name="TurnOn")

    outcome = router.invoke(event)

    assert outcome.result is None
    assert isinstance(outcome.error, InvalidDirectiveError)
    assert "Alexa.PowerController.TurnOn" in str(outcome.error)
    client.get_devices.assert_not_called()


def test_event_without_header_is_rejected():
    router = SkillRouter(MagicMock())

    outcome = router.invoke({"directive": {"payload": {}}})

    assert isinstance(outcome.error, InvalidDirectiveError)


def test_callbacks_fire_exactly_once(discovery_event):
    client = MagicMock()
    client.get_devices.return_value = []
    router = SkillRouter(client)
    context = MagicMock()

    router.dispatch(discovery_event, context)

    context.succeed.assert_called_once()
    context.fail.assert_not_called()


def test_handler_info_lists_discovery():
    router = SkillRouter(MagicMock())
    assert router.get_handler_info() == {"Alexa.Discovery.Discover": "DiscoveryHandler"}
