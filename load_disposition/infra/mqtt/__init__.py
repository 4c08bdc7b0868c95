"""MQTT 통신 인프라."""

from load_disposition.infra.mqtt.mqtt_client import MqttClient

__all__ = ["MqttClient"]
