"""Tests for LogitBias and Role."""

import pytest
from pydantic import BaseModel, ValidationError

from model_catalog import LogitBias, Role, RoleName, UnsupportedRole, parse_role


class Message(BaseModel):
    role: RoleName
    content: str


class TestLogitBias:

    def test_lookup(self):
        bias = LogitBias.from_pairs([(42, 2.5), (123, -1.3)])
        assert bias.get(42) == 2.5
        assert bias.get(123) == -1.3
        assert bias.get(999) is None
        assert len(bias.biases) == 2

    def test_empty(self):
        bias = LogitBias()
        assert len(bias.biases) == 0
        assert bias.get(0) is None
        assert bias.to_payload() == {}

    def test_zero_bias_is_not_absence(self):
        bias = LogitBias()
        bias.set(7, 0.0)
        assert 7 in bias.biases
        assert bias.get(7) == 0.0
        assert bias.get(7) is not None
        assert 8 not in bias.biases

    def test_set_overwrites(self):
        bias = LogitBias()
        bias.set(5, 1.0)
        bias.set(5, -2.0)
        assert bias.get(5) == -2.0
        assert len(bias.biases) == 1

    def test_last_pair_wins(self):
        bias = LogitBias.from_pairs([(5, 1.0), (6, 0.5), (5, 3.0)])
        assert bias.get(5) == 3.0
        assert len(bias.biases) == 2

    def test_negative_token_id_rejected(self):
        with pytest.raises(ValidationError):
            LogitBias(biases={-1: 1.0})

    def test_from_pairs_rejects_negative_token_id(self):
        with pytest.raises(ValidationError):
            LogitBias.from_pairs([(-1, 1.0)])

    def test_set_rejects_non_numeric_bias(self):
        bias = LogitBias()
        with pytest.raises(ValidationError):
            bias.set(1, "oops")
        assert bias.get(1) is None

    def test_from_pairs_coerces_like_constructor(self):
        bias = LogitBias.from_pairs([("42", 2.5)])
        assert bias.get(42) == 2.5
        assert LogitBias.model_validate(bias.model_dump()) == bias

    def test_empty_map_is_truthy(self):
        bias = LogitBias()
        assert bias

    def test_no_magnitude_validation(self):
        bias = LogitBias(biases={1: 1000.0, 2: -1000.0})
        assert bias.get(1) == 1000.0

    def test_json_round_trip(self):
        bias = LogitBias.from_pairs([(42, 2.5), (123, -1.3)])
        restored = LogitBias.model_validate_json(bias.model_dump_json())
        assert restored == bias
        assert restored.get(42) == 2.5

    def test_to_payload_is_flat(self):
        bias = LogitBias.from_pairs([(42, 2.5)])
        assert bias.to_payload() == {"42": 2.5}


class TestRole:

    @pytest.mark.parametrize(
        "name,role",
        [("system", Role.SYSTEM), ("user", Role.USER), ("assistant", Role.ASSISTANT)],
    )
    def test_parse(self, name, role):
        assert parse_role(name) is role
        assert Role.parse(name) is role
        assert str(role) == name

    @pytest.mark.parametrize("name", ["System", "USER", " user", "bot", "", None])
    def test_parse_rejects(self, name):
        with pytest.raises(UnsupportedRole) as exc_info:
            parse_role(name)
        assert exc_info.value.role == name

    def test_message_codec(self):
        message = Message(role=Role.ASSISTANT, content="hi")
        assert message.model_dump(mode="json") == {"role": "assistant", "content": "hi"}
        restored = Message.model_validate_json(message.model_dump_json())
        assert restored.role is Role.ASSISTANT

    def test_message_codec_rejects_unknown_role(self):
        with pytest.raises(ValidationError) as exc_info:
            Message.model_validate({"role": "tool", "content": "x"})
        assert "tool" in str(exc_info.value)
