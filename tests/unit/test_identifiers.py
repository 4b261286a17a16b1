"""Tests for opaque identifier types."""

from dataclasses import dataclass
from uuid import UUID, uuid4

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.clientdesk.domain import ClientId, OrganizationId, ProjectId
from src.clientdesk.domain.identifiers import _Identifier

pytestmark = pytest.mark.unit


class TestUUIDIdentifiers:
    """ClientId and ProjectId parsing and equality."""

    def test_parse_from_text(self):
        raw = uuid4()
        assert ClientId.parse(str(raw)).value == raw

    def test_parse_from_uuid(self):
        raw = uuid4()
        assert ProjectId.parse(raw) == ProjectId(raw)

    def test_parse_returns_same_instance(self):
        client_id = ClientId.new()
        assert ClientId.parse(client_id) is client_id

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234", 42, None])
    def test_parse_rejects_garbage(self, raw):
        with pytest.raises(ValueError):
            ClientId.parse(raw)

    def test_different_types_never_equal(self):
        raw = uuid4()
        assert ClientId(raw) != ProjectId(raw)

    def test_cannot_parse_one_id_type_as_another(self):
        with pytest.raises(ValueError):
            ClientId.parse(ProjectId.new())

    def test_constructor_requires_uuid(self):
        with pytest.raises(TypeError):
            ClientId("3f2c1c56-7b55-4bd2-9b1d-5f0f3a7c1d11")  # type: ignore[arg-type]

    def test_new_ids_are_unique(self):
        assert ProjectId.new() != ProjectId.new()

    def test_str_is_canonical_uuid(self):
        raw = uuid4()
        assert str(ClientId(raw)) == str(raw)

    def test_hashable(self):
        raw = uuid4()
        assert {ClientId(raw), ClientId(raw)} == {ClientId(raw)}


class TestOrganizationId:
    def test_accepts_any_non_empty_string(self):
        assert OrganizationId("org_1").value == "org_1"

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_rejects_blank(self, raw):
        with pytest.raises(ValueError):
            OrganizationId(raw)

    def test_parse_rejects_other_id_types(self):
        with pytest.raises(ValueError):
            OrganizationId.parse(ClientId.new())


class _Holder(BaseModel):
    client_id: ClientId | None = None


class TestPydanticIntegration:
    """Identifiers validate from text and serialize back to text."""

    def test_validates_from_text(self):
        raw = uuid4()
        holder = _Holder.model_validate({"client_id": str(raw)})
        assert holder.client_id == ClientId(raw)

    def test_invalid_text_is_a_validation_error(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            _Holder.model_validate({"client_id": "nope"})
        assert exc_info.value.errors()[0]["loc"] == ("client_id",)

    def test_rejects_wrong_identifier_type(self):
        with pytest.raises(PydanticValidationError):
            _Holder(client_id=ProjectId.new())  # type: ignore[arg-type]

    def test_serializes_as_string(self):
        raw = UUID("3f2c1c56-7b55-4bd2-9b1d-5f0f3a7c1d11")
        dumped = _Holder(client_id=ClientId(raw)).model_dump(mode="json")
        assert dumped == {"client_id": "3f2c1c56-7b55-4bd2-9b1d-5f0f3a7c1d11"}


def test_identifier_without_parse_cannot_be_built():
    @dataclass(frozen=True)
    class Unparseable(_Identifier):
        value: str

    with pytest.raises(TypeError):
        Unparseable("x")
