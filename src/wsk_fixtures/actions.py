"""Cat catalog fixtures.

Two stand-in actions used to exercise a platform's invocation and error
reporting: neither touches a backing store.
"""

from __future__ import annotations

from typing import Any

from wsk_fixtures.descriptor import ActionLimits, action
from wsk_fixtures.records import Cat, CreatedCat, CreateCatParams, FetchCatParams
from wsk_fixtures.runtime import as_main, require


@action(
    "create-cat",
    main="create_cat_main",
    limits=ActionLimits(timeout=600, memory=128),
    input_model=CreateCatParams,
    output_model=CreatedCat,
)
async def create_cat(params: dict[str, Any]) -> dict[str, Any]:
    """Create a cat and return its id.

    The name is only checked for presence; every new cat gets id 1.
    """
    require(params, "name")
    return CreatedCat(id=1).model_dump()


@action(
    "fetch-cat",
    main="fetch_cat_main",
    limits=ActionLimits(timeout=600, memory=128),
    input_model=FetchCatParams,
    output_model=Cat,
)
async def fetch_cat(params: dict[str, Any]) -> dict[str, Any]:
    """Fetch a cat by id.

    Always returns the same cat, with the requested id echoed back unchanged.
    """
    cat_id = require(params, "id")
    return Cat(id=cat_id).model_dump()


create_cat_main = as_main(create_cat)
fetch_cat_main = as_main(fetch_cat)
