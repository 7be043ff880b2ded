from functools import lru_cache
import logging
import os
from pathlib import Path
import sys

from fastapi import FastAPI, File, Form, HTTPException, Query, Response, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from drink_lens.core import _select_provider  # noqa: E402
from drink_lens.exceptions import EmptyResultError, NoInputError, UnexpectedError  # noqa: E402
from drink_lens.normalization.repository import DictionaryRepository  # noqa: E402
from drink_lens.pipeline import PipelineConfig, RankingPipeline  # noqa: E402
from drink_lens.schema import DIMENSIONS, MatchResult, Preference  # noqa: E402

app = FastAPI(title="drink-lens API", version="1.0.0")
logger = logging.getLogger(__name__)

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
MAX_IMAGE_BYTES = int(os.getenv("MAX_IMAGE_BYTES", str(8 * 1024 * 1024)))
ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}
# Read once at import so a malformed weight table fails startup, not a request.
PIPELINE_CONFIG = PipelineConfig.from_env()

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DictionaryOption(BaseModel):
    dimension: str
    key: str
    group: str | None = None


class DictionaryOptionsResponse(BaseModel):
    version: str
    dimension: str | None = None
    total: int
    options: list[DictionaryOption]


@lru_cache(maxsize=1)
def get_pipeline() -> RankingPipeline:
    return RankingPipeline(_select_provider(None, None), config=PIPELINE_CONFIG)


@lru_cache(maxsize=8)
def _load_dictionary_options(version: str) -> list[DictionaryOption]:
    repo = DictionaryRepository(version=version)
    return [
        DictionaryOption(dimension=term.dimension, key=term.key, group=term.group)
        for term in repo.terms
    ]


def _validate_upload_content_type(content_type: str | None) -> None:
    if not content_type:
        raise HTTPException(status_code=400, detail="image file is required")
    normalized = content_type.split(";")[0].strip().lower()
    if normalized not in ALLOWED_MIME_TYPES:
        raise HTTPException(status_code=400, detail="unsupported image content type")


async def _read_upload(image: UploadFile) -> bytes:
    _validate_upload_content_type(image.content_type)
    try:
        payload = await image.read()
    finally:
        await image.close()
    if not payload:
        raise HTTPException(status_code=400, detail="empty file")
    if len(payload) > MAX_IMAGE_BYTES:
        raise HTTPException(status_code=413, detail="image too large")
    return payload


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.get("/dictionary/{version}/options", response_model=DictionaryOptionsResponse)
def dictionary_options(
    version: str,
    response: Response,
    dimension: str | None = Query(default=None),
) -> DictionaryOptionsResponse:
    if dimension and dimension not in DIMENSIONS:
        raise HTTPException(status_code=400, detail=f"invalid dimension: {dimension}")

    try:
        options = _load_dictionary_options(version)
    except Exception as exc:
        raise HTTPException(status_code=404, detail=f"dictionary version not found: {version}") from exc

    if dimension:
        options = [item for item in options if item.dimension == dimension]

    response.headers["Cache-Control"] = "public, max-age=86400"
    return DictionaryOptionsResponse(
        version=version,
        dimension=dimension,
        total=len(options),
        options=options,
    )


@app.post("/match-drinks", response_model=MatchResult)
async def match_drinks(
    images: list[UploadFile] = File(default=[]),
    alcohol_type: str | None = Form(default=None),
    strength: str | None = Form(default=None),
    glassware: str | None = Form(default=None),
    acidity: str | None = Form(default=None),
    sweetness: str | None = Form(default=None),
    bitterness: str | None = Form(default=None),
    spice: str | None = Form(default=None),
):
    if not images:
        raise HTTPException(status_code=400, detail="No images uploaded")
    if len(images) > PIPELINE_CONFIG.max_images:
        raise HTTPException(status_code=400, detail=f"at most {PIPELINE_CONFIG.max_images} images allowed")

    payloads = [await _read_upload(image) for image in images]
    preference = Preference(
        alcohol_type=alcohol_type,
        strength=strength,
        glassware=glassware,
        acidity=acidity,
        sweetness=sweetness,
        bitterness=bitterness,
        spice=spice,
    )

    try:
        pipeline = get_pipeline()
        return await run_in_threadpool(pipeline.run, payloads, preference)
    except NoInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except EmptyResultError as exc:
        return JSONResponse(status_code=422, content={"error": str(exc), "notes": exc.notes})
    except UnexpectedError:
        return JSONResponse(status_code=500, content={"error": "Failed to match drinks"})
    except Exception:
        logger.exception("match-drinks failed")
        return JSONResponse(status_code=500, content={"error": "Failed to match drinks"})
