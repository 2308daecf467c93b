"""
Voter Card Extraction Logic
Extracts information from CENI voter cards (carte d'électeur).
"""

import logging
import re
from typing import Optional, Tuple

from .schemas import VoterCardFields
from .utils import clean_value, collapse_whitespace, first_match, rule

logger = logging.getLogger(__name__)

SEP = r'\s*[:.]?\s*'
DATE = r'(\d{2}/\d{2}/\d{4})'
UPPER_WORDS = r"[A-ZÀ-Ý][A-ZÀ-Ý'\-]*(?:[ \t]+[A-ZÀ-Ý][A-ZÀ-Ý'\-]*)*\b"
UPPER_RUN = r"(" + UPPER_WORDS + r")"
BIRTH_LABEL = r'(?i:\bDate\s*(?:/|et)\s*lieu\s+de\s+naissance)'
ISSUE_LABEL = r'(?i:\bLieu\s+et\s+date\s+de\s+d[ée]livrance)'


def _collapsed(s: Optional[str]) -> Optional[str]:
    return clean_value(collapse_whitespace(s))


# Unlabeled: the first long digit run is taken as the card number
CARD_NUMBER = [rule(r'\b(\d{10,})\b')]
CODE_CI = [rule(r'(?i:\bCODE\s*CI)' + SEP + r'(\d+)')]
NOM_CI = [rule(r'(?i:\bNOM\s*CI)' + SEP + r'(\d+)')]
LASTNAME = [rule(r'(?i:\bNom\b(?!\s*(?:CI\b|du\b|de\b)))' + SEP + UPPER_RUN)]
POSTNOM_PRENOM = [rule(r'(?i:\bPostnom\s*/\s*Pr[ée]nom)' + SEP
                   + r"((?:" + UPPER_WORDS + r")?[ \t]*/?[ \t]*(?:" + UPPER_WORDS + r")?)")]
DATE_OF_BIRTH = [rule(BIRTH_LABEL + SEP + DATE)]
PLACE_OF_BIRTH = [rule(BIRTH_LABEL + SEP + r'\d{2}/\d{2}/\d{4}[ \t,]*' + UPPER_RUN)]
SEX = [rule(r'(?i:\bSexe)' + SEP + r'([MF])\b')]
# Multi-line values run until the next known label
ADDRESS = [rule(
    r'(?i:\bAdresse)' + SEP + r'([\s\S]*?)(?=(?i:\bOrigine\b|\bNom\s+d[ue]\b|\bLieu\s+et\s+date\b)|\Z)',
    transform=_collapsed,
)]
ORIGIN = [rule(
    r'(?i:\bOrigine)' + SEP + r'([\s\S]*?)(?=(?i:\bNom\s+d[ue]\b|\bLieu\s+et\s+date\b|\bAdresse\b)|\Z)',
    transform=_collapsed,
)]
FATHER_NAME = [rule(r'(?i:\bNom\s+du\s+p[èe]re)' + SEP + UPPER_RUN)]
MOTHER_NAME = [rule(r'(?i:\bNom\s+de\s+la\s+m[èe]re)' + SEP + UPPER_RUN)]
PLACE_AND_DATE_OF_ISSUE = re.compile(ISSUE_LABEL + SEP + UPPER_RUN + r'[\s,]*' + DATE)
# Unlabeled: one letter followed by at least 13 digits
PHOTO_NUMBER = [rule(r'\b([A-Z]\d{13,})\b')]


def split_postnom_prenom(value: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split "POSTNOM/PRENOM" into (middlename, firstname)."""
    if not value:
        return None, None
    parts = [clean_value(p) for p in value.split('/')]
    middlename = parts[0] if parts else None
    firstname = parts[1] if len(parts) > 1 else None
    return middlename, firstname


def extract_place_and_date_of_issue(text: str) -> Tuple[Optional[str], Optional[str]]:
    m = PLACE_AND_DATE_OF_ISSUE.search(text or '')
    if not m:
        return None, None
    return clean_value(m.group(1)), m.group(2)


def extract_voter(text: str) -> VoterCardFields:
    """Extract data from Voter card."""
    middlename, firstname = split_postnom_prenom(first_match(text, POSTNOM_PRENOM))
    place_of_issue, date_of_issue = extract_place_and_date_of_issue(text)

    return VoterCardFields(
        card_number=first_match(text, CARD_NUMBER),
        code_ci=first_match(text, CODE_CI),
        nom_ci=first_match(text, NOM_CI),
        lastname=first_match(text, LASTNAME),
        middlename=middlename,
        firstname=firstname,
        date_of_birth=first_match(text, DATE_OF_BIRTH),
        place_of_birth=first_match(text, PLACE_OF_BIRTH),
        sex=first_match(text, SEX),
        address=first_match(text, ADDRESS),
        origin=first_match(text, ORIGIN),
        father_name=first_match(text, FATHER_NAME),
        mother_name=first_match(text, MOTHER_NAME),
        place_of_issue=place_of_issue,
        date_of_issue=date_of_issue,
        photo_number=first_match(text, PHOTO_NUMBER),
    )
