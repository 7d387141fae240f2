"""Typed models for the RabbitMQ HTTP management API.

Structure:
    commons/      Vocabulary: protocols, exchange and queue types, policy
                  targets, limit targets, binding destinations
    requests/     Declaration parameters (QueueParams, ExchangeParams, ...)
    responses/    Immutable snapshots decoded from server payloads
    codec.py      decode / decode_list / decode_json / encode
    definitions.py  Definitions backup files (load_definitions, save_definitions)
    exceptions.py   DecodeError, EncodeError, DefinitionsFileError

The library logs under the "rabbitmq-http-types" logger and installs no
handlers of its own.
"""

import logging

from rabbitmq_http_types.codec import (
    decode,
    decode_health_check_failure,
    decode_json,
    decode_list,
    encode,
)
from rabbitmq_http_types.constants import APP_NAME
from rabbitmq_http_types.definitions import load_definitions, save_definitions
from rabbitmq_http_types.exceptions import (
    DecodeError,
    DefinitionsFileError,
    EncodeError,
    RabbitMQTypesError,
)

logging.getLogger(APP_NAME).addHandler(logging.NullHandler())

__all__ = [
    # Codec
    "decode",
    "decode_health_check_failure",
    "decode_json",
    "decode_list",
    "encode",
    # Definitions files
    "load_definitions",
    "save_definitions",
    # Errors
    "DecodeError",
    "DefinitionsFileError",
    "EncodeError",
    "RabbitMQTypesError",
]
