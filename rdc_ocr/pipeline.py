"""
pipeline.py

Extraction orchestrator: runs the OCR collaborator on an image and hands
the recognized text to the extractor for the requested document kind.
"""

import hashlib
import logging
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Type, Union

from .engine import OcrEngine, RecognitionError, get_engine
from .id_card import extract_id_card
from .passport import extract_passport
from .plate import extract_plate_and_chassis
from .schemas import (
    DocumentRecord,
    FieldSet,
    IdCardRecord,
    PassportRecord,
    RecognizedText,
    VehicleRecord,
    VoterCardRecord,
)
from .voter import extract_voter

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    VEHICLE = "vehicle"
    PASSPORT = "passport"
    ID_CARD = "id_card"
    VOTER_CARD = "voter_card"

    @classmethod
    def from_code(cls, code: Union[str, "DocumentKind"]) -> "DocumentKind":
        """Resolve a kind from its value or its one-letter code."""
        if isinstance(code, cls):
            return code
        key = (code or "").strip()
        if key.upper() in DOC_TYPE_CODES:
            return DOC_TYPE_CODES[key.upper()]
        try:
            return cls(key.lower())
        except ValueError:
            valid = ", ".join(f"{c} ({k.value})" for c, k in DOC_TYPE_CODES.items())
            raise ValueError(f"Invalid document type: {code}. Valid codes: {valid}") from None


DOC_TYPE_CODES = {
    'V': DocumentKind.VEHICLE,
    'P': DocumentKind.PASSPORT,
    'I': DocumentKind.ID_CARD,
    'E': DocumentKind.VOTER_CARD,
}

EXTRACTORS: Dict[DocumentKind, Tuple[Callable[[str], FieldSet], Type[FieldSet]]] = {
    DocumentKind.VEHICLE: (extract_plate_and_chassis, VehicleRecord),
    DocumentKind.PASSPORT: (extract_passport, PassportRecord),
    DocumentKind.ID_CARD: (extract_id_card, IdCardRecord),
    DocumentKind.VOTER_CARD: (extract_voter, VoterCardRecord),
}


def extract_from_text(recognized: RecognizedText, kind: Union[str, DocumentKind]) -> DocumentRecord:
    """Run the extractor for ``kind`` and attach raw text and confidence."""
    kind = DocumentKind.from_code(kind)
    extract, record_cls = EXTRACTORS[kind]

    fields = extract(recognized.text)
    return record_cls(
        **fields.model_dump(),
        raw_text=recognized.text,
        confidence=recognized.confidence,
    )


def process_document(
    image_bytes: bytes,
    kind: Union[str, DocumentKind],
    engine: Optional[OcrEngine] = None,
) -> DocumentRecord:
    """
    Recognize an image and extract the record for the requested document kind.

    Args:
        image_bytes: Raw image content (JPEG, PNG, WebP, ...).
        kind: Document kind or one-letter code.
        engine: OCR collaborator. Defaults to the shared PaddleOCR engine.

    Returns:
        The record for ``kind``; fields no pattern matched are None.

    Raises:
        ValueError: If ``kind`` is unknown.
        RecognitionError: If the OCR collaborator fails. No partial record
            is returned in that case.
    """
    kind = DocumentKind.from_code(kind)
    engine = engine or get_engine()

    digest = hashlib.sha256(image_bytes or b"").hexdigest()[:8]
    logger.info("Processing %s (%d bytes, hash: %s)", kind.value, len(image_bytes or b""), digest)

    try:
        recognized = engine.recognize(image_bytes)
    except RecognitionError as e:
        logger.error("%s OCR failed (hash: %s): %s", kind.value, digest, e)
        raise

    record = extract_from_text(recognized, kind)
    logger.info("%s OCR completed (hash: %s, confidence: %.2f%%)", kind.value, digest, recognized.confidence)
    return record
