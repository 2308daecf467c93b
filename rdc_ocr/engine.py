"""
engine.py

OCR collaborator: turns image bytes into recognized text plus a 0-100
confidence score.

PaddleOCR is loaded lazily on first use and cached for the process.
Any failure to decode the image, load the model or run recognition is
raised as RecognitionError.
"""

import logging
import threading
from io import BytesIO
from typing import Dict, List, Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from . import config
from .schemas import RecognizedText
from .utils import merge_results

logger = logging.getLogger(__name__)


class RecognitionError(Exception):
    """Raised when the OCR collaborator cannot produce text for an image."""

    pass


class OcrEngine:
    """Contract for OCR collaborators."""

    def recognize(self, image_bytes: bytes) -> RecognizedText:
        raise NotImplementedError


def _init_ocr():
    """Initialize PaddleOCR with the configured detection parameters."""
    from paddleocr import PaddleOCR

    return PaddleOCR(
        lang=config.OCR_LANGUAGE,
        det_db_thresh=config.DET_DB_THRESH,
        det_db_box_thresh=config.DET_DB_BOX_THRESH,
        use_angle_cls=config.USE_ANGLE_CLS,
    )


def load_image(image_bytes: bytes) -> Image.Image:
    """Decode image bytes to an RGB image no wider than the configured maximum."""
    if not image_bytes:
        raise RecognitionError("The image is empty")
    try:
        img = Image.open(BytesIO(image_bytes)).convert('RGB')
    except (UnidentifiedImageError, OSError) as e:
        raise RecognitionError(f"Invalid image file or format: {e}") from e

    w, h = img.size
    if w > config.MAX_IMAGE_WIDTH:
        new_h = int(h * (config.MAX_IMAGE_WIDTH / w))
        img = img.resize((config.MAX_IMAGE_WIDTH, new_h), Image.LANCZOS)
    return img


def parse_result(res) -> List[Dict]:
    """Parse a PaddleOCR predict() result into text/conf/x/y records."""
    recs: List[Dict] = []
    if not res or not isinstance(res, list):
        return recs

    # One OCRResult per input image, each with rec_texts, rec_scores, rec_polys
    page = res[0]
    if hasattr(page, 'get'):
        texts = page.get('rec_texts', []) or []
        scores = page.get('rec_scores', []) or []
        polys = page.get('rec_polys', []) or []
    else:
        texts = getattr(page, 'rec_texts', []) or []
        scores = getattr(page, 'rec_scores', []) or []
        polys = getattr(page, 'rec_polys', []) or []

    for idx, txt in enumerate(texts):
        if not txt or not str(txt).strip():
            continue
        conf = float(scores[idx]) if idx < len(scores) else 0.0
        poly = polys[idx] if idx < len(polys) else None
        x = y = 0
        if poly is not None and len(poly):
            y = int(min(p[1] for p in poly))
            x = int(min(p[0] for p in poly))
        recs.append({"text": str(txt).strip(), "conf": conf, "y": y, "x": x})

    return recs


class PaddleOcrEngine(OcrEngine):
    """
    PaddleOCR-backed recognizer.

    Status is one of "not_loaded", "loading", "ready" or "failed"; a
    failed load is reported on every call rather than retried.
    """

    def __init__(self):
        self._ocr = None
        self._lock = threading.Lock()
        self.status = "not_loaded"
        self.error: Optional[str] = None

    def _get_ocr(self):
        if self.status == "ready" and self._ocr is not None:
            return self._ocr

        with self._lock:
            if self.status == "ready" and self._ocr is not None:
                return self._ocr
            if self.status == "failed":
                raise RecognitionError(f"OCR model failed to load: {self.error}")

            self.status = "loading"
            logger.info("Loading PaddleOCR model (lang=%s)...", config.OCR_LANGUAGE)
            try:
                self._ocr = _init_ocr()
            except Exception as e:
                self.status = "failed"
                self.error = str(e)
                logger.error("Failed to load OCR model: %s", e)
                raise RecognitionError(f"OCR model failed to load: {e}") from e

            self.status = "ready"
            logger.info("OCR model loaded successfully")
            return self._ocr

    def recognize(self, image_bytes: bytes) -> RecognizedText:
        img = load_image(image_bytes)
        ocr = self._get_ocr()

        try:
            res = ocr.predict(np.array(img))
        except Exception as e:
            logger.error("OCR engine error: %s", e)
            raise RecognitionError(f"Failed to extract text from image: {e}") from e

        records = merge_results(parse_result(res), bucket_px=config.LINE_BUCKET_PX)
        text = "\n".join(r['text'] for r in records).strip()
        confidence = _compute_confidence(records)

        logger.debug("Raw OCR text: %r", text)
        return RecognizedText(text=text, confidence=confidence)

    def reset(self) -> None:
        """Release the model."""
        with self._lock:
            self._ocr = None
            self.status = "not_loaded"
            self.error = None


def _compute_confidence(records: List[Dict]) -> float:
    """Mean line score scaled to 0..100."""
    if not records:
        return 0.0
    mean = sum(r['conf'] for r in records) / len(records)
    return round(min(max(mean, 0.0), 1.0) * 100.0, 2)


# Module-level singleton engine
_engine: Optional[PaddleOcrEngine] = None
_engine_lock = threading.Lock()


def get_engine() -> PaddleOcrEngine:
    """Thread-safe singleton getter."""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = PaddleOcrEngine()
    return _engine


def reset_engine() -> None:
    """Reset the singleton engine (useful for testing)."""
    global _engine
    if _engine is not None:
        _engine.reset()
    _engine = None
