"""
ID Card Extraction Logic
Extracts information from national identity cards. One labeled pattern per
field, values returned as matched.
"""

from .schemas import IdCardFields
from .utils import first_match, rule

SEP = r'\s*[:.]?\s*'
DATE = r'(\d{1,2}/\d{1,2}/\d{4})'
UPPER_RUN = r"([A-ZÀ-Ý][A-ZÀ-Ý'\-]*(?:[ \t]+[A-ZÀ-Ý][A-ZÀ-Ý'\-]*)*)\b"

DOCUMENT_NUMBER = [rule(r'(?i:N°|\bNO\b|\bCARTE\b)' + SEP + r'([A-Z0-9\-]*\d[A-Z0-9\-]*)')]
SURNAME = [rule(r'(?i:\bNom\b)' + SEP + UPPER_RUN)]
GIVEN_NAMES = [rule(r'(?i:\b(?:Pr[ée]nom|Postnom)s?\b)' + SEP + r'([A-ZÀ-Ý]+(?:[ \t]+[A-ZÀ-Ý]+)?)\b')]
DATE_OF_BIRTH = [rule(r'(?i:\bN[ée]e?\s+le)' + SEP + DATE)]
# Known weakness: any standalone "a"/"à" followed by a capitalised word matches
PLACE_OF_BIRTH = [rule(r'(?i:\b[aà])\s+([A-Z][A-Z\-]+)')]
SEX = [rule(r'(?i:\bSexe)' + SEP + r'([MF])\b')]
NATIONALITY = [rule(r'(?i:\bNationalit[ée])' + SEP + r'([A-Z]+)\b')]
DATE_OF_ISSUE = [rule(r'(?i:\bD[ée]livr[ée]e?\s+le)' + SEP + DATE)]
DATE_OF_EXPIRY = [rule(r"(?i:\bValable\s+jusqu['’]\s*au)" + SEP + DATE)]
ADDRESS = [rule(r'(?i:\bAdresse)' + SEP + r'([\w /,]+)')]


def extract_id_card(text: str) -> IdCardFields:
    """Extract data from ID card."""
    return IdCardFields(
        document_number=first_match(text, DOCUMENT_NUMBER),
        surname=first_match(text, SURNAME),
        given_names=first_match(text, GIVEN_NAMES),
        date_of_birth=first_match(text, DATE_OF_BIRTH),
        place_of_birth=first_match(text, PLACE_OF_BIRTH),
        sex=first_match(text, SEX),
        nationality=first_match(text, NATIONALITY),
        date_of_issue=first_match(text, DATE_OF_ISSUE),
        date_of_expiry=first_match(text, DATE_OF_EXPIRY),
        address=first_match(text, ADDRESS),
    )
