from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelSchema(BaseModel):
    """
    Base for every request/response body.

    Fields are snake_case in Python and camelCase on the wire; requests may
    use either spelling.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


def reject_explicit_null(value, info):
    if value is None:
        raise ValueError(f"'{info.field_name}' may not be null")
    return value
