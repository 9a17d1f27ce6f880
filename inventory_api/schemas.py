# schemas.py
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictInt, StrictStr, create_model


# --- Validation Policy ---
class FieldRule(BaseModel):
    """Declarative rule for one payload field."""
    type: Literal["string", "integer"]
    min: Optional[int] = None
    required: bool = False


ITEM_SCHEMA = {
    "name": FieldRule(type="string"),
    "quantity": FieldRule(type="integer", min=0),
}


def _whole_number(value):
    # JSON 10.0 is the integer 10; 1.5, bools and strings still fail StrictInt
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


_TYPES = {
    "string": StrictStr,
    "integer": Annotated[StrictInt, BeforeValidator(_whole_number)],
}


def compile_schema(model_name: str, schema: dict) -> type[BaseModel]:
    """
    Build a pydantic model from a declarative schema.
    Unknown keys are rejected; an absent optional field is left unset, but an
    explicit null still has to satisfy the field's type.
    """
    fields = {}
    for key, rule in schema.items():
        constraints = {}
        if rule.type == "string":
            constraints["min_length"] = 1
        if rule.min is not None:
            constraints["ge"] = rule.min
        annotation = Annotated[_TYPES[rule.type], Field(**constraints)]
        fields[key] = (annotation, ...) if rule.required else (annotation, None)
    return create_model(model_name, __config__=ConfigDict(extra="forbid"), **fields)


ItemCreate = compile_schema("ItemCreate", ITEM_SCHEMA)


def to_public(record: dict) -> dict:
    # stored documents carry the Mongo id in `_id`; other fields pass through as stored
    return {"id": str(record["_id"]), "name": record.get("name"), "quantity": record.get("quantity")}
