"""Types shared by the request schemas."""

from typing import Annotated

from pydantic import Field

# Surrogate ids are 64-bit signed integers in every supported database
MAX_ENTITY_ID = 2**63 - 1

EntityId = Annotated[int, Field(ge=1, le=MAX_ENTITY_ID)]
