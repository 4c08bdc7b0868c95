#!/usr/bin/env python3
"""Disposition 이벤트 토픽 모니터링 스크립트.

MqttEventPublisher가 발행하는 이벤트가 브로커에 도달하는지 확인용.

Usage:
    python3 scripts/monitor_disposition_events.py \
        --host localhost --prefix disposition/events
"""

import argparse
import json
import logging

import paho.mqtt.client as mqtt

logger = logging.getLogger('disposition_monitor')


def _on_message(client, userdata, msg) -> None:
    try:
        payload = json.loads(msg.payload)
    except json.JSONDecodeError:
        logger.warning('Non-JSON payload on %s', msg.topic)
        return

    if msg.topic.endswith('/status'):
        logger.info(
            'service %s is %s', payload.get('clientId', 'N/A'),
            'online' if payload.get('online') else 'offline',
        )
        return

    event_type = payload.get('eventType', 'N/A')
    position_id = payload.get('positionId', 'N/A')
    timestamp = payload.get('timestamp', 'N/A')

    details = {
        k: v for k, v in payload.items()
        if k not in ('eventType', 'positionId', 'timestamp')
    }
    logger.info(
        '\n'
        '  event      : %s\n'
        '  position   : %s\n'
        '  timestamp  : %s\n'
        '  details    : %s',
        event_type, position_id, timestamp, details,
    )


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--host', default='localhost')
    parser.add_argument('--port', type=int, default=1883)
    parser.add_argument('--prefix', default='disposition/events')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(message)s')

    client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2)
    client.on_message = _on_message
    client.connect(args.host, args.port)
    client.subscribe(f'{args.prefix.rstrip("/")}/#', qos=1)
    logger.info('Monitoring %s/# ...', args.prefix)
    try:
        client.loop_forever()
    except KeyboardInterrupt:
        pass
    finally:
        client.disconnect()


if __name__ == '__main__':
    main()
