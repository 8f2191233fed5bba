# backend/model_catalog/models/model_registry.py
import logging
from enum import Enum
from typing import Annotated, Any, Dict, List, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict

from ..errors import UnsupportedModel

logger = logging.getLogger(__name__)


class Model(str, Enum):
    """Chat models supported by the hosted API.

    Each member's value is the exact identifier the API expects, so a member
    can be dropped straight into a request payload.
    """

    GPT_3_5_TURBO = "gpt-3.5-turbo"
    GPT_3_5_TURBO_16K = "gpt-3.5-turbo-16k"
    GPT_4 = "gpt-4"
    GPT_4_32K = "gpt-4-32k"
    GPT_4_1106_PREVIEW = "gpt-4-1106-preview"
    GPT_4_VISION_PREVIEW = "gpt-4-vision-preview"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: Any) -> "Model":
        return parse(name)


# Context window (in tokens) for every supported model.
# Maintained by hand: update alongside the provider's model documentation.
MODEL_SPECS: Dict[Model, Dict[str, Any]] = {
    Model.GPT_3_5_TURBO: {
        "context_length": 4096,
    },
    Model.GPT_3_5_TURBO_16K: {
        "context_length": 16384,
    },
    Model.GPT_4: {
        "context_length": 8192,
    },
    Model.GPT_4_32K: {
        "context_length": 32768,
    },
    Model.GPT_4_1106_PREVIEW: {
        "context_length": 128000,
    },
    Model.GPT_4_VISION_PREVIEW: {
        "context_length": 128000,
    },
}

if set(MODEL_SPECS) != set(Model):
    raise RuntimeError(
        f"MODEL_SPECS is out of sync with Model: "
        f"missing={sorted(m.value for m in set(Model) - set(MODEL_SPECS))}"
    )

_MODELS_BY_NAME: Dict[str, Model] = {model.value: model for model in Model}


class ModelSpec(BaseModel):
    """Static metadata for one model."""

    model_config = ConfigDict(frozen=True)

    model: Model
    context_length: int


def supported_models() -> List[str]:
    """Returns the wire names of all supported models, in declaration order."""
    return [model.value for model in Model]


def parse(name: Any) -> Model:
    """
    Resolves a wire name such as 'gpt-4' to its Model member.

    The match is exact: no case folding, no trimming, no aliases.

    Raises:
        UnsupportedModel: If `name` is not one of the supported wire names.
    """
    model = _MODELS_BY_NAME.get(name) if isinstance(name, str) else None
    if model is None:
        logger.debug(f"Rejected unsupported model name: {name!r}")
        raise UnsupportedModel(name, supported_models())
    return model


def to_canonical_string(model: Model) -> str:
    """Returns the exact identifier the API expects for `model`."""
    return model.value


def max_tokens(model: Union[Model, str]) -> int:
    """Returns the context length (in tokens) for a model member or wire name."""
    if not isinstance(model, Model):
        model = parse(model)
    return MODEL_SPECS[model]["context_length"]


def get_model_spec(model: Union[Model, str]) -> ModelSpec:
    """Retrieves the specification for a model member or wire name."""
    if not isinstance(model, Model):
        model = parse(model)
    return ModelSpec(model=model, **MODEL_SPECS[model])


def _validate_model_name(value: Any) -> Model:
    if isinstance(value, Model):
        return value
    return parse(value)


# Field type for pydantic schemas: decodes only exact wire names and encodes
# back to the wire name in JSON mode.
ModelName = Annotated[Model, BeforeValidator(_validate_model_name)]
