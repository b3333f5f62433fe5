"""
AGRI - Multilingual crop advisory backend.
FastAPI backend: crop image health analysis, supported languages, demo image.
"""
import logging
from typing import List

import cv2
import numpy as np
from fastapi import FastAPI, Depends, HTTPException, UploadFile, File, Form
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from config import (
    APP_NAME, APP_VERSION, CORS_ORIGINS, DEFAULT_LANGUAGE, HOST, LOG_LEVEL, MAX_UPLOAD_BYTES, PORT,
)
from health_engine import CropHealthAnalyzer, ClassificationResult
from localization import get_supported_languages

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME, version=APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_analyzer = CropHealthAnalyzer()


def get_analyzer() -> CropHealthAnalyzer:
    """Analyzer dependency; override in tests for deterministic jitter."""
    return _analyzer


# --- Request/Response models ---
class LanguageInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    code: str
    name: str
    native_name: str


@app.get("/demo-image", response_class=Response)
def get_demo_image():
    """
    Returns a sample crop image so the front-end can try analysis without uploading.
    Green canopy with a brown soil patch and a yellowed strip.
    """
    h, w = 300, 400
    img = np.zeros((h, w, 3), dtype=np.uint8)
    img[:, :] = (34, 139, 34)              # green canopy (BGR)
    img[100:200, 50:350] = (60, 110, 170)  # brown soil patch
    img[0:30, 0:w] = (120, 225, 235)       # yellowed strip
    _, buf = cv2.imencode(".jpg", img)
    return Response(content=buf.tobytes(), media_type="image/jpeg")


@app.post("/analyze", response_model=ClassificationResult)
def analyze(
    file: UploadFile = File(...),
    language: str = Form(DEFAULT_LANGUAGE),
    analyzer: CropHealthAnalyzer = Depends(get_analyzer),
):
    """Analyze an uploaded crop photo: crop type, health status and score, localized issues and recommendations."""
    if not file.content_type or not file.content_type.startswith("image/"):
        logger.warning("Rejected upload %r: content type %r", file.filename, file.content_type)
        raise HTTPException(status_code=400, detail="Invalid image: file must be an image")

    try:
        # one byte past the limit is enough to detect an oversized upload
        contents = file.file.read(MAX_UPLOAD_BYTES + 1)
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Invalid image: could not read file - {str(e)}")

    if not contents:
        raise HTTPException(status_code=400, detail="Invalid image: empty file")
    if len(contents) > MAX_UPLOAD_BYTES:
        logger.warning("Rejected upload %r: over %d bytes", file.filename, MAX_UPLOAD_BYTES)
        raise HTTPException(status_code=413, detail=f"Image too large: limit is {MAX_UPLOAD_BYTES} bytes")

    try:
        result = analyzer.analyze_bytes(contents, language)
    except ValueError as e:
        logger.warning("Rejected upload %r: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))
    except cv2.error as e:
        raise HTTPException(status_code=400, detail=f"Image processing failed: {str(e)}")

    logger.info(
        "Analyzed %r (%s): crop=%s health=%s score=%d",
        file.filename, language, result.crop_type, result.health_status.value, result.health_score,
    )
    return result


@app.get("/languages", response_model=List[LanguageInfo])
def languages():
    """Supported languages; advisory text falls back to English where a language has none."""
    return [LanguageInfo(**lang) for lang in get_supported_languages()]


@app.get("/health")
def health():
    return {
        "status": "active",
        "version": APP_VERSION,
        "features": [
            "image_analysis",
            "crop_detection",
            "health_scoring",
            "localized_advisory",
            "demo_image",
        ],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
