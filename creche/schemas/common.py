from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _check_email(v: str) -> str:
    # syntax only; reserved test domains (x.test, example.com) are accepted
    return validate_email(v, check_deliverability=False, test_environment=True).normalized


Email = Annotated[str, AfterValidator(_check_email)]


class CamelModel(BaseModel):
    """JSON uses camelCase (childFirstName, parentId, ...); Python uses snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Ack(CamelModel):
    success: bool = True
