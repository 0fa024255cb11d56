import json

import pytest
from pydantic import ValidationError

from todo_persistence.models import Todo
from todo_persistence.schemas import TodoIn, TodoSchema, from_external, to_external


def test_to_external_uses_completed_key():
    data = to_external(Todo("Buy milk", True, 1))
    assert data == {"id": 1, "title": "Buy milk", "completed": True}
    assert "is_completed" not in data


def test_round_trip_preserves_completed():
    payload = json.dumps(to_external(Todo("Buy milk", True)))
    restored = from_external(json.loads(payload))
    assert restored.completed is True
    assert restored == Todo("Buy milk", True)


def test_from_external_defaults():
    assert from_external({}) == Todo()


def test_json_schema_exposes_completed():
    props = TodoSchema.model_json_schema(by_alias=True)["properties"]
    assert set(props) == {"id", "title", "completed"}


def test_todo_in_requires_title():
    with pytest.raises(ValidationError):
        TodoIn.model_validate({"completed": True})


def test_todo_in_to_entity():
    payload = TodoIn.model_validate({"title": "x", "completed": True})
    assert payload.to_entity() == Todo("x", True)
    assert payload.to_entity(9) == Todo("x", True, 9)


def test_from_external_ignores_internal_flag_name():
    assert from_external({"title": "x", "is_completed": True}).completed is False


def test_todo_in_ignores_internal_flag_name():
    payload = TodoIn.model_validate({"title": "x", "is_completed": True})
    assert payload.to_entity().completed is False


def test_from_entity_keeps_flag():
    assert TodoSchema.from_entity(Todo("x", True, 3)).is_completed is True
