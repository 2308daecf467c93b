"""
config.py

Configuration constants for the RDC document OCR package.

Every value can be overridden through an ``RDC_OCR_*`` environment
variable, read once at import time.
"""

import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# -----------------------------
# Engine
# -----------------------------
OCR_LANGUAGE = os.environ.get("RDC_OCR_LANGUAGE", "fr")
USE_ANGLE_CLS = _env_bool("RDC_OCR_USE_ANGLE_CLS", True)
DET_DB_THRESH = float(os.environ.get("RDC_OCR_DET_DB_THRESH", "0.2"))
DET_DB_BOX_THRESH = float(os.environ.get("RDC_OCR_DET_DB_BOX_THRESH", "0.4"))

# -----------------------------
# Image handling before OCR
# -----------------------------
MAX_IMAGE_WIDTH = int(os.environ.get("RDC_OCR_MAX_IMAGE_WIDTH", "1600"))

# Detections whose top edges fall in the same bucket are one text line
LINE_BUCKET_PX = int(os.environ.get("RDC_OCR_LINE_BUCKET_PX", "5"))

# -----------------------------
# Logging
# -----------------------------
LOG_LEVEL = os.environ.get("RDC_OCR_LOG_LEVEL", "INFO")
