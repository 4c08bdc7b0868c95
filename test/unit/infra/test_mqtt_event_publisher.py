"""MqttEventPublisher 단위 테스트."""

import json
from unittest.mock import MagicMock

import pytest

from load_disposition.domain.events.disposition_events import (
    LoadAssignedEvent,
)
from load_disposition.infra.event import MqttEventPublisher


@pytest.fixture
def mqtt_client():
    client = MagicMock()
    client.is_connected = True
    return client


@pytest.fixture
def publisher(mqtt_client):
    return MqttEventPublisher(mqtt_client, "disposition/events/")


class TestMqttEventPublisher:
    def test_publishes_json_to_event_topic(self, publisher, mqtt_client):
        publisher.publish(LoadAssignedEvent(position_id=3, load_id=42))

        mqtt_client.publish.assert_called_once()
        topic, payload = mqtt_client.publish.call_args[0]
        assert topic == "disposition/events/LoadAssignedEvent"
        assert mqtt_client.publish.call_args[1]["qos"] == 1
        data = json.loads(payload)
        assert data["eventType"] == "LoadAssignedEvent"
        assert data["positionId"] == 3
        assert data["loadId"] == 42
        assert data["timestamp"].endswith("Z")

    def test_local_handlers_still_called(self, publisher):
        received = []
        publisher.subscribe(LoadAssignedEvent, received.append)

        publisher.publish(LoadAssignedEvent(position_id=3, load_id=42))

        assert len(received) == 1

    def test_disconnected_drops_without_error(self, publisher, mqtt_client):
        mqtt_client.is_connected = False
        received = []
        publisher.subscribe(LoadAssignedEvent, received.append)

        publisher.publish(LoadAssignedEvent(position_id=3, load_id=42))

        mqtt_client.publish.assert_not_called()
        assert len(received) == 1
