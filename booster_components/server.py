from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import os
import random
from pathlib import Path
from typing import Dict, List

#logging stuff
from booster_logs.loggers import server_logger
from booster_logs.middleware import RequestLoggingMiddleware

# import request classes
from booster_components.server_classes import DefinitionRequest, GenerateTemplateRequest, OpenPackRequest

# import the pack engine
from booster_components.card_utils.dsl import compile_definition, validate_definition
from booster_components.card_utils.pack import assemble_builtin_pack, assemble_custom_pack
from booster_components.card_utils.card import Card
from booster_components.card_utils.pack_utils import referenced_set_codes, scan_pool_dir
from booster_components.card_utils.pool import enabled_cards

app = FastAPI()


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware, logger=server_logger)

# card pools loaded from POOL_DIR at startup, keyed by set code
set_pools: Dict[str, List[Card]] = {}


def load_set_pools(pool_dir: Path) -> dict:
    results = scan_pool_dir(pool_dir)
    set_pools.update(results["pools"])
    if results["loaded"]:

        #log code
        server_logger.info(
            "startup_pools_loaded",
            files=results["loaded"],
            sets=sorted(results["pools"])
        )

    if results["errors"]:

        #log code
        server_logger.warning(
            "startup_pool_load_errors",
            errors=results["errors"]
        )
    return results


# startup functions
@app.on_event("startup")
async def startup_event():
    pool_dir = Path(os.getenv("POOL_DIR", "pools"))
    if pool_dir.is_dir():
        load_set_pools(pool_dir)


def _pool_for(set_code, supplied):
    """Cards sent with the request win over the pools loaded at startup."""
    return supplied.get(set_code) or set_pools.get(set_code, [])


def _drawn_to_json(drawn):
    return [d.model_dump(mode="json") for d in drawn]


@app.get("/")
async def read_root():
    return {"status": "ok"}


@app.post("/admin/booster_templates/validate")
async def validate_template(req: DefinitionRequest):
    report = validate_definition(req.definition)

    #log code
    server_logger.info(
        "template_validated",
        valid=report.valid,
        slot_count=report.slot_count,
        error_count=len(report.errors)
    )

    return {"valid": report.valid, "errors": report.errors, "slots": report.slot_count}


@app.post("/admin/booster_templates/test_generate")
async def test_generate(req: GenerateTemplateRequest):
    """Open one throwaway pack from a definition without storing anything."""
    slots, errors = compile_definition(req.definition)
    if errors:

        #log code
        server_logger.warning(
            "test_generate_invalid_definition",
            set_code=req.set_code,
            errors=errors
        )

        return JSONResponse(status_code=400, content={"error": "; ".join(errors)})

    pools = {}
    for set_code in sorted(referenced_set_codes(slots, req.set_code)):
        set_cards = enabled_cards(_pool_for(set_code, req.pools))
        if not set_cards:

            #log code
            server_logger.warning(
                "test_generate_missing_set",
                set_code=set_code
            )

            return JSONResponse(status_code=400, content={
                "error": f'Set "{set_code}" has no cards or doesn\'t exist.'
            })
        pools[set_code] = set_cards

    drawn = assemble_custom_pack(pools, slots, req.set_code, rng=random.Random(req.seed))

    #log code
    server_logger.info(
        "test_generate_success",
        set_code=req.set_code,
        slot_count=len(slots),
        cards_generated=len(drawn)
    )

    return {"cards": _drawn_to_json(drawn)}


@app.post("/open_pack")
async def open_pack(req: OpenPackRequest):
    """Open a pack from the supplied pool. A definition makes it a custom template pack."""

    #log code
    server_logger.info(
        "open_pack_attempt",
        set_code=req.set_code,
        pack_type=req.pack_type,
        custom=req.definition is not None
    )

    rng = random.Random(req.seed)
    cards = req.cards or set_pools.get(req.set_code, [])

    if req.definition is not None:
        slots, errors = compile_definition(req.definition)
        if errors:

            #log code
            server_logger.error(
                "open_pack_invalid_template",
                set_code=req.set_code,
                errors=errors
            )

            return JSONResponse(status_code=500, content={"error": "Invalid booster template definition."})

        pools = {code: _pool_for(code, req.extra_pools) for code in referenced_set_codes(slots, req.set_code)}
        pools[req.set_code] = cards
        drawn = assemble_custom_pack(pools, slots, req.set_code, rng=rng)
    else:
        if not enabled_cards(cards):

            #log code
            server_logger.error(
                "open_pack_empty_set",
                set_code=req.set_code
            )

            return JSONResponse(status_code=500, content={
                "error": "Set data not found. Contact admin to sync set."
            })
        drawn = assemble_builtin_pack(cards, req.pack_type, req.release_date, rng=rng)

    #log code
    server_logger.info(
        "open_pack_success",
        set_code=req.set_code,
        pack_type=req.pack_type,
        cards_received=len(drawn)
    )

    return JSONResponse(status_code=201, content={
        "message": "Opened Pack Successfully",
        "pack_type": req.pack_type,
        "cards": _drawn_to_json(drawn)
    })


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
