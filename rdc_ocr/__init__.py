"""
RDC Identity and Vehicle Document Extractors
Turns OCR text from Congolese vehicle plates, passports, national ID cards
and voter cards into structured records.
"""

from .engine import OcrEngine, PaddleOcrEngine, RecognitionError
from .id_card import extract_id_card
from .mrz import decode_mrz
from .passport import extract_passport
from .pipeline import DocumentKind, extract_from_text, process_document
from .plate import extract_chassis_number, extract_plate_and_chassis, extract_plate_number
from .schemas import (
    IdCardRecord,
    PassportRecord,
    RecognizedText,
    VehicleRecord,
    VoterCardRecord,
)
from .voter import extract_voter

__all__ = [
    'extract_plate_and_chassis',
    'extract_plate_number',
    'extract_chassis_number',
    'decode_mrz',
    'extract_passport',
    'extract_id_card',
    'extract_voter',
    'extract_from_text',
    'process_document',
    'DocumentKind',
    'OcrEngine',
    'PaddleOcrEngine',
    'RecognitionError',
    'RecognizedText',
    'VehicleRecord',
    'PassportRecord',
    'IdCardRecord',
    'VoterCardRecord',
]
