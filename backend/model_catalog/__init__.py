"""Catalogue of hosted chat models and the request types used alongside them."""

from .errors import CatalogError, UnsupportedModel, UnsupportedRole
from .models.model_registry import (
    MODEL_SPECS,
    Model,
    ModelName,
    ModelSpec,
    get_model_spec,
    max_tokens,
    parse,
    supported_models,
    to_canonical_string,
)
from .schemas import LogitBias, Role, RoleName, parse_role

__all__ = [
    "CatalogError",
    "UnsupportedModel",
    "UnsupportedRole",
    "MODEL_SPECS",
    "Model",
    "ModelName",
    "ModelSpec",
    "get_model_spec",
    "max_tokens",
    "parse",
    "supported_models",
    "to_canonical_string",
    "LogitBias",
    "Role",
    "RoleName",
    "parse_role",
]
