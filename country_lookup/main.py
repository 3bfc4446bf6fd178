from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI

from country_lookup.lookup import CountryLookup
from country_lookup.normalizers import get_default_normalizer
from country_lookup.routers.search import router as search_router
from country_lookup.settings import HOST, PORT
from country_lookup.setup_logging import setup_logging
from country_lookup.store import MemoryStore
from country_lookup.upstream import RestCountriesClient

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context runs once at startup and once at shutdown.
    The cache lives exactly as long as the process: one MemoryStore is
    created here and handed to the lookup that every request shares.
    """
    source = RestCountriesClient()
    app.state.lookup = CountryLookup(
        store=MemoryStore(),
        source=source,
        normalizer=get_default_normalizer(),
    )

    yield

    # Cache is dropped with the process; only the HTTP pool needs closing
    source.close()

# Create the FastAPI app instance
app = FastAPI(title="Country Lookup", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """Simple health probe for monitoring."""
    return {
        "ok": True,
        "service": "country-lookup",
        "version": 1,
    }

# Register API routers:
app.include_router(search_router)


def run():
    """Console entry point: serve on the fixed local port."""
    uvicorn.run(app, host=HOST, port=PORT)
