"""Tests for JsonSerializer."""

import pytest

from cacheaside.core.entities import Person
from cacheaside.infrastructure.serializers.json import JsonSerializer, SerializationError


class TestJsonSerializer:
    """Tests for JsonSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonSerializer:
        """Create a serializer for testing."""
        return JsonSerializer()

    def test_serialize_dataclass(self, serializer: JsonSerializer) -> None:
        """Test that entities are written as plain objects."""
        person = Person(id=1, firstname="p1", lastname="test", age=25)

        result = serializer.serialize(person)

        assert serializer.deserialize(result) == {
            "id": 1,
            "firstname": "p1",
            "lastname": "test",
            "age": 25,
        }

    def test_structural_equality_on_read_back(self, serializer: JsonSerializer) -> None:
        """Test that a decoded snapshot equals the original by value."""
        person = Person(id=3, firstname="p3", lastname="test", age=60)

        restored = Person.from_dict(serializer.deserialize(serializer.serialize(person)))

        assert restored == person
        assert restored is not person

    def test_serialize_unsupported(self, serializer: JsonSerializer) -> None:
        """Test serializing an unsupported object."""
        with pytest.raises(SerializationError):
            serializer.serialize({"value": object()})

    def test_deserialize_invalid_json(self, serializer: JsonSerializer) -> None:
        """Test deserializing invalid JSON."""
        with pytest.raises(SerializationError):
            serializer.deserialize(b"{not valid json")

    def test_deserialize_invalid_encoding(self, serializer: JsonSerializer) -> None:
        """Test deserializing bytes in the wrong encoding."""
        with pytest.raises(SerializationError):
            serializer.deserialize(b"\xff\xfe\x00")
