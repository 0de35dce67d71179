"""The decoder ring: typed ObjectId <-> UUID mapping.

Wraps the string transform in ``oidbridge.converter`` for callers that
hold driver types: ``bson.ObjectId`` on the MongoDB side and
``uuid.UUID`` on the other. Strings are accepted on both sides too.
"""

from __future__ import annotations

import logging
from uuid import UUID

from bson import ObjectId

from oidbridge.config import OidBridgeConfig
from oidbridge.converter import object_id_to_uuid, uuid_to_object_id

logger = logging.getLogger("oidbridge")


class DecoderRing:
    """ObjectId/UUID mapper. Holds nothing but its config."""

    def __init__(self, config: OidBridgeConfig | None = None) -> None:
        self.config = config or OidBridgeConfig()

    def encode_str(self, object_id: ObjectId | str) -> str:
        """Map an ObjectId to its hyphenated UUID string."""
        if isinstance(object_id, ObjectId):
            object_id = str(object_id)
        elif not isinstance(object_id, str):
            raise TypeError(
                f"Cannot encode {type(object_id).__name__}; expected ObjectId or str"
            )
        result = object_id_to_uuid(object_id, filler=self.config.filler)
        logger.debug("Encoded ObjectId %s -> UUID %s", object_id, result)
        return result

    def decode_str(self, value: UUID | str) -> str:
        """Map a UUID back to its 24-char ObjectId string."""
        if isinstance(value, UUID):
            value = str(value)
        elif not isinstance(value, str):
            raise TypeError(
                f"Cannot decode {type(value).__name__}; expected UUID or str"
            )
        result = uuid_to_object_id(value)
        logger.debug("Decoded UUID %s -> ObjectId %s", value, result)
        return result

    def encode(self, object_id: ObjectId | str) -> UUID:
        """Map an ObjectId to a ``uuid.UUID``."""
        return UUID(self.encode_str(object_id))

    def decode(self, value: UUID | str) -> ObjectId:
        """Map a UUID to a ``bson.ObjectId``."""
        return ObjectId(self.decode_str(value))
