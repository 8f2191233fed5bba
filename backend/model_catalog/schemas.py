import logging
from enum import Enum
from typing import Annotated, Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, Field, NonNegativeInt, TypeAdapter

from .errors import UnsupportedRole

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: Any) -> "Role":
        return parse_role(name)


def parse_role(name: Any) -> Role:
    """
    Resolves a lowercase role name to its Role member.

    Raises:
        UnsupportedRole: If `name` is not exactly 'system', 'user' or 'assistant'.
    """
    if isinstance(name, str):
        for role in Role:
            if name == role.value:
                return role
    logger.debug(f"Rejected unsupported role: {name!r}")
    raise UnsupportedRole(name, [role.value for role in Role])


def _validate_role_name(value: Any) -> Role:
    if isinstance(value, Role):
        return value
    return parse_role(value)


RoleName = Annotated[Role, BeforeValidator(_validate_role_name)]

_TOKEN_ID = TypeAdapter(NonNegativeInt)
_BIAS = TypeAdapter(float)


class LogitBias(BaseModel):
    """Per-token bias adjustments for a completion request.

    Keys are token ids, values are the bias to apply. A token that is absent
    has no bias at all, which is not the same as a bias of 0.0.
    """

    biases: Dict[NonNegativeInt, float] = Field(default_factory=dict)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, float]]) -> "LogitBias":
        """Builds a map from (token_id, bias) pairs; the last pair for an id wins."""
        logit_bias = cls()
        for token_id, bias in pairs:
            logit_bias.set(token_id, bias)
        return logit_bias

    def set(self, token_id: int, bias: float) -> None:
        """Inserts or overwrites one entry, validated like the constructor.

        Raises:
            ValidationError: If `token_id` is not a non-negative integer or
                `bias` is not a number.
        """
        self.biases[_TOKEN_ID.validate_python(token_id)] = _BIAS.validate_python(bias)

    def get(self, token_id: int) -> Optional[float]:
        return self.biases.get(token_id)

    def to_payload(self) -> Dict[str, float]:
        """Flat mapping in the shape the API expects for `logit_bias`."""
        return {str(token_id): bias for token_id, bias in self.biases.items()}
