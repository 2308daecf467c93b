"""
Passport Extraction Logic
Extracts information from Congolese passports: MRZ first, then free-text
fallbacks for every field the MRZ did not give.
"""

import logging
import re
from typing import Optional

from .mrz import decode_mrz
from .schemas import PassportFields
from .utils import (
    clean_value,
    collapse_whitespace,
    first_match,
    normalize_address,
    normalize_date,
    rule,
    upper_value,
)

logger = logging.getLogger(__name__)

DATE = r'(\d{2}[./-]\d{2}[./-]\d{4})'
SEP = r'\s*[:.]?\s*'

# Header words that look like a bare upper-case surname
SURNAME_BLOCKLIST = {
    'CONGO', 'REPUBLIC', 'REPUBLIQUE', 'DEMOCRATIQUE', 'DEMOCRATIC', 'PASSEPORT', 'PASSPORT',
}

KNOWN_CITIES = [
    'KINSHASA', 'LUBUMBASHI', 'MBUJI-MAYI', 'KISANGANI', 'KANANGA', 'BUKAVU', 'GOMA',
    'MATADI', 'KOLWEZI', 'LIKASI', 'TSHIKAPA', 'KIKWIT', 'MBANDAKA', 'UVIRA', 'BUNIA',
    'KALEMIE', 'KINDU', 'BOMA', 'ISIRO', 'GEMENA', 'BANDUNDU', 'BUTEMBO', 'BENI', 'MUANDA',
]

KNOWN_PROFESSIONS = r'LIB[EÉ]RALE|FONCTIONNAIRE|COMMER[CÇ]ANT|[EÉ]TUDIANT'

# A value word must not be another label: a known label word, or any word followed by ":"
NEXT_LABEL = (r"(?![A-Za-zÀ-ÿ'\-]+\s*:"
              r"|(?i:sexe?|nom|surname|name|pr[ée]noms?|postnoms?|given|nationalit[ée]|nationality|date|lieu|place"
              r"|profession|occupation|adresse|address|autorit[ée]|issuing|authority)\b)")
NAME_WORD = r"[A-Za-zÀ-ÿ][A-Za-zÀ-ÿ'\-]*"


def _words(word: str = NAME_WORD) -> str:
    """Capture a run of words on one line, stopping before the next label."""
    return r'(' + NEXT_LABEL + word + r'(?:[ \t]+' + NEXT_LABEL + word + r')*)'


def _surname(s: Optional[str]) -> Optional[str]:
    s = clean_value(s)
    if s in SURNAME_BLOCKLIST:
        return None
    return s


def _long_enough_upper(s: Optional[str]) -> Optional[str]:
    s = upper_value(s)
    return s if s and len(s) >= 3 else None


def _given_names(s: Optional[str]) -> Optional[str]:
    return clean_value(collapse_whitespace(s))


DOCUMENT_NUMBER_RULES = [
    rule(r'\b(OP\d{7,9})\b', re.I, transform=upper_value),
    rule(r'(?i:\bpass(?:e)?port(?:\s*(?:n°|no\.?))?|n°|\bno\b\.?)' + SEP + r'([A-Z]{0,2}\d{6,9})\b',
         transform=upper_value),
]

SURNAME_RULES = [
    rule(r'(?i:(?<!given )\b(?:nom|surname|name)\b(?:\s*/\s*(?:surname|name)\b)?)' + SEP
         + r"([A-Z][A-Z'\-]+(?:[ \t]+[A-Z][A-Z'\-]+)*)", transform=_surname),
    rule(r'\b([A-Z]{5,})\b', transform=_surname),
]

GIVEN_NAMES_RULES = [
    rule(r'(?i:\b(?:pr[ée]noms?|postnoms?|given\s+names?)\b(?:\s*/\s*(?:pr[ée]noms?|given\s+names?)\b)?)'
         + SEP + _words(), transform=_given_names),
    rule(r'\b([A-Z][a-z]+[ \t]+[A-Z][a-z]+)\b', transform=_given_names),
]

PLACE_OF_BIRTH_RULES = [
    rule(r'(?i:\blieu\s+de\s+naissance|\bplace\s+of\s+birth)(?:\s*/\s*(?i:place\s+of\s+birth))?' + SEP
         + _words(), transform=upper_value),
    rule(r'\b(%s)\b' % '|'.join(KNOWN_CITIES), re.I, transform=upper_value),
]

NATIONALITY_RULES = [
    rule(r'(?i:\bnationalit[ée]|\bnationality)(?:\s*/\s*(?i:nationality))?' + SEP + r'([A-Za-z]+)',
         transform=upper_value),
    rule(r'\b(CONGOLAISE|CONGOLAIS)\b', re.I, transform=upper_value),
]

DATE_OF_BIRTH_RULES = [
    rule(r'(?i:\bdate\s+de\s+naissance|\bdate\s+of\s+birth)(?:\s*/\s*(?i:date\s+of\s+birth))?' + SEP + DATE,
         transform=normalize_date),
]

SEX_RULES = [
    rule(r'(?i:\bsexe?\b)(?:\s*/\s*(?i:sex)\b)?' + SEP + r'([MF])\b'),
]

DATE_OF_ISSUE_RULES = [
    rule(r"(?i:\bdate\s+de\s+d[ée]livrance|\bdate\s+of\s+issue|\bd[ée]livr[ée]e?\s+le)"
         r"(?:\s*/\s*(?i:date\s+of\s+issue))?" + SEP + DATE, transform=normalize_date),
    rule(r'\b' + DATE + r'\b', transform=normalize_date),
]

DATE_OF_EXPIRY_RULES = [
    rule(r"(?i:\bdate\s+d['’]expiration|\bdate\s+of\s+expiry|\bvalable\s+jusqu['’]au)"
         r"(?:\s*/\s*(?i:date\s+of\s+expiry))?" + SEP + DATE, transform=normalize_date),
]

ISSUING_AUTHORITY_RULES = [
    rule(r'\b(MINAFFET|DGMIGRATION)\b', re.I, transform=upper_value),
    rule(r'(?i:\b(?:autorit[ée]|issuing|authority)\b(?:[ \t]+(?:authority|de[ \t]+d[ée]livrance)\b)?)' + SEP
         + _words(r"[A-Za-z][A-Za-z/\-]*"), transform=_long_enough_upper),
]

ADDRESS_RULES = [
    rule(r'(?i:\badresse|\baddress)' + SEP + r'([^\n]{10,80})', transform=normalize_address),
]

PROFESSION_RULES = [
    rule(r'(?i:\bprofession|\boccupation)' + SEP + _words(),
         transform=_long_enough_upper),
    rule(r'\b(%s)\b' % KNOWN_PROFESSIONS, re.I, transform=upper_value),
]

FALLBACK_RULES = {
    'document_number': DOCUMENT_NUMBER_RULES,
    'surname': SURNAME_RULES,
    'given_names': GIVEN_NAMES_RULES,
    'nationality': NATIONALITY_RULES,
    'date_of_birth': DATE_OF_BIRTH_RULES,
    'place_of_birth': PLACE_OF_BIRTH_RULES,
    'sex': SEX_RULES,
    'date_of_issue': DATE_OF_ISSUE_RULES,
    'date_of_expiry': DATE_OF_EXPIRY_RULES,
    'issuing_authority': ISSUING_AUTHORITY_RULES,
    'address': ADDRESS_RULES,
    'profession': PROFESSION_RULES,
}


def extract_passport(text: str) -> PassportFields:
    """Extract data from Passport."""
    mrz = decode_mrz(text)
    obj = mrz.model_dump()

    for field, rules in FALLBACK_RULES.items():
        if obj.get(field):
            continue
        obj[field] = first_match(text, rules)

    resolved = [name for name in FALLBACK_RULES if obj.get(name)]
    logger.debug("Passport fields resolved: %s (mrz=%s)", ", ".join(resolved) or "none", bool(mrz.mrz))

    return PassportFields(**obj)
