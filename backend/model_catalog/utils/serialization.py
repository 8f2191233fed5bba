import json
import logging
from enum import Enum

from pydantic import BaseModel

from ..schemas import LogitBias

logger = logging.getLogger(__name__)


class CatalogObjectEncoder(json.JSONEncoder):
    """
    JSON encoder for catalogue types, ensuring models, roles and bias maps
    are written in the form the API expects.
    """
    def default(self, obj):
        if isinstance(obj, LogitBias):
            # Request payloads carry the bias map flat, keyed by token id
            return obj.to_payload()
        elif isinstance(obj, Enum):
            return obj.value
        elif isinstance(obj, BaseModel):
            return obj.model_dump(mode="json")

        # Let the base class default method raise the TypeError for other types
        return super().default(obj)


def safe_serialize(data: object) -> str:
    """
    Serializes data to a JSON string using the CatalogObjectEncoder,
    returning a JSON error object instead of raising on failure.
    """
    try:
        return json.dumps(data, cls=CatalogObjectEncoder)
    except (TypeError, ValueError) as e:
        logger.error(f"Could not serialize data: {e}", exc_info=True)
        return json.dumps({
            "error": "Data serialization failed",
            "exception_type": type(e).__name__,
            "exception_message": str(e)
        })
