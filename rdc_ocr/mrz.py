"""
MRZ Decoding Logic
Finds and decodes the two-line machine readable zone of a passport (TD3).

Check digits are matched structurally but never verified, so a misread
check digit does not block extraction.
"""

import logging
import re
from typing import List, Optional

from .schemas import MrzData
from .utils import expand_two_digit_year

logger = logging.getLogger(__name__)

MRZ_LINE_LENGTH = 44

MRZ_LINE_PATTERN = re.compile(r'^[A-Z0-9<]{%d}$' % MRZ_LINE_LENGTH)
MRZ_BLOCK_PATTERN = re.compile(r'(P<[A-Z0-9<]+)\s+([A-Z0-9<]{%d})' % MRZ_LINE_LENGTH)

# P< + issuing state + SURNAME<<GIVEN<NAMES
LINE1_PATTERN = re.compile(r'P<([A-Z]{3})([A-Z<]+)')

# number, check, nationality, birth date, check, sex, expiry date, check
LINE2_PATTERN = re.compile(
    r'([A-Z0-9<]{9})([0-9A-Z<])([A-Z<]{3})(\d{6})([0-9A-Z<])([MF<])(\d{6})([0-9A-Z<])'
)


def _compact(line: str) -> str:
    line = line.strip()
    # OCR often splits MRZ lines into several detections
    if '<' in line:
        line = re.sub(r'\s+', '', line)
    return line


def _is_mrz_candidate(line: str) -> bool:
    return line.startswith('P<') or bool(MRZ_LINE_PATTERN.match(line))


def find_mrz(text: str) -> Optional[str]:
    """Return the two MRZ lines joined by a newline, or None."""
    if not text:
        return None

    candidates: List[str] = [ln for ln in (_compact(raw) for raw in text.splitlines()) if _is_mrz_candidate(ln)]
    if len(candidates) >= 2:
        return '\n'.join(candidates[:2])

    m = MRZ_BLOCK_PATTERN.search(text)
    if m:
        return f"{m.group(1)}\n{m.group(2)}"

    return None


def decode_mrz_date(yymmdd: str) -> Optional[str]:
    """Decode a YYMMDD field into DD/MM/YYYY."""
    if not re.fullmatch(r'\d{6}', yymmdd or ''):
        return None
    yy, mm, dd = yymmdd[0:2], yymmdd[2:4], yymmdd[4:6]
    return f"{dd}/{mm}/{expand_two_digit_year(yy)}"


def clean_mrz_surname(segment: str) -> Optional[str]:
    """Strip filler and the trailing 'S' artifact from an MRZ surname segment."""
    surname = segment.rstrip('<').replace('<', ' ').strip()
    if surname.endswith('S'):
        surname = surname[:-1].rstrip()
    return surname or None


def decode_mrz(text: str) -> MrzData:
    """Find the MRZ in recognized text and decode whatever fields it yields."""
    mrz = find_mrz(text)
    if not mrz:
        return MrzData()

    fields = {'mrz': mrz}
    lines = mrz.split('\n')

    # Line 1
    line1 = LINE1_PATTERN.search(lines[0])
    if line1:
        fields['nationality'] = line1.group(1)
        names = line1.group(2)
        surname_segment, _, given_segment = names.partition('<<')
        fields['surname'] = clean_mrz_surname(surname_segment)
        fields['given_names'] = re.sub(r'\s+', ' ', given_segment.replace('<', ' ')).strip()

    # Line 2
    line2 = LINE2_PATTERN.search(lines[1] if len(lines) > 1 else mrz)
    if line2:
        fields['document_number'] = line2.group(1).replace('<', '')
        fields['date_of_birth'] = decode_mrz_date(line2.group(4))
        if line2.group(6) in ('M', 'F'):
            fields['sex'] = line2.group(6)
        fields['date_of_expiry'] = decode_mrz_date(line2.group(7))

    if not line1 and not line2:
        logger.debug("MRZ candidate found but not decodable: %r", mrz)

    return MrzData(**fields)
