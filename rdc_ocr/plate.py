"""
Vehicle Plate Extraction Logic
Extracts the registration plate, province and chassis (VIN) number from
vehicle photos.
"""

import logging
import re
from typing import Optional

from .provinces import province_for_code
from .schemas import PlateResult, VehicleFields
from .utils import collapse_whitespace

logger = logging.getLogger(__name__)

# Narrow formats first; the first pattern with a hit wins
PLATE_PATTERNS = [
    # BE-6401-01, BE 6401 01
    re.compile(r'\b([A-Z]{2})[-\s]?(\d{4})[-\s]?(\d{2})\b', re.I),
    # 1234AB 10
    re.compile(r'\b(\d{4})([A-Z]{2})[\s-]?(\d{2})\b', re.I),
    # 123AB 10
    re.compile(r'\b(\d{2,4})([A-Z]{2})[\s-]?(\d{2})\b', re.I),
    # 0058AA19
    re.compile(r'\b(\d{2,4})([A-Z]{2})(\d{2})\b', re.I),
]

# VIN alphabet excludes I, O and Q
VIN_PATTERN = re.compile(r'\b[A-HJ-NPR-Z0-9]{17}\b', re.I)
LABELED_CHASSIS_PATTERN = re.compile(r'(?:\bCHASSIS|\bVIN|\bN°|\bNO)[:\s]*([A-Z0-9]{10,17})\b', re.I)


def extract_plate_number(text: str) -> PlateResult:
    """Extract the plate number and its province from recognized text."""
    clean_text = collapse_whitespace(text)
    if not clean_text:
        return PlateResult()

    for pattern in PLATE_PATTERNS:
        m = pattern.search(clean_text)
        if not m:
            continue

        plate = collapse_whitespace(m.group(0).upper())
        # Province code is always the last two digits
        code = re.search(r'(\d{2})$', plate)
        province = province_for_code(code.group(1) if code else None)

        logger.debug("Pattern matched: %s -> %s", pattern.pattern, plate)
        return PlateResult(plate=plate, province=province)

    return PlateResult()


def extract_chassis_number(text: str) -> Optional[str]:
    """Extract a chassis number: a strict VIN first, then a labeled number."""
    if not text:
        return None

    vin = VIN_PATTERN.search(text)
    if vin:
        return vin.group(0).upper()

    labeled = LABELED_CHASSIS_PATTERN.search(text)
    if labeled:
        return labeled.group(1).upper()

    return None


def extract_plate_and_chassis(text: str) -> VehicleFields:
    """Extract data from a vehicle photo."""
    plate = extract_plate_number(text)
    return VehicleFields(
        plate=plate.plate,
        province=plate.province,
        chassis_number=extract_chassis_number(text),
    )
