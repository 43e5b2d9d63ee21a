"""
Base model for API payloads.

The browser client speaks camelCase (`petId`, `createdAt`); Python code and
SQL rows use snake_case. Fields are declared in snake_case, serialized by
alias, and accept either spelling on input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Bounds of Postgres `integer` (serial ids) and `bigint` (LIMIT/OFFSET).
INT4_MAX = 2_147_483_647
INT8_MAX = 2**63 - 1
