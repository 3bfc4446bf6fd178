import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from country_lookup.errors import (
    CountryNotFound,
    InvalidRequest,
    LookupFailure,
)
from country_lookup.lookup import CountryLookup

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/api/countries", tags=["countries"])


def get_lookup(request: Request) -> CountryLookup:
    """The lookup (and its store) is built once in the app lifespan."""
    return request.app.state.lookup


def _status_for(err: LookupFailure) -> int:
    if isinstance(err, InvalidRequest):
        return 400
    if isinstance(err, CountryNotFound):
        return 404
    return 500


# The handler is a plain `def`: FastAPI runs it on a worker thread, so a slow
# upstream call only ties up that request's thread.
@router.get("/search")
def search_country(
    request: Request,
    name: Optional[str] = Query(None, description="Country name, matched exactly (case-sensitive) first"),
    lookup: CountryLookup = Depends(get_lookup),
):
    """
    Resolve a country name to {name, capital, currency, population}.

    Responses:
      200  application/json  the canonical record
      400  text/plain        missing/empty `name`
      404  text/plain        "country not found"
      500  text/plain        upstream unavailable / invalid upstream data

    If `name` is repeated, the first occurrence is used.
    """
    # FastAPI hands `name` the LAST value of a repeated param; lookups use the first
    names = request.query_params.getlist("name")
    name = names[0] if names else ""

    try:
        country = lookup.resolve(name)
    except LookupFailure as e:
        return PlainTextResponse(str(e), status_code=_status_for(e))
    except Exception as e:
        log.exception("country lookup failed: name=%s", name)
        return PlainTextResponse(str(e), status_code=500)

    return JSONResponse(country.to_json_dict())
