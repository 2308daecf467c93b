"""
Properties every extractor must hold, whatever the input text.
"""

import pytest

from rdc_ocr.id_card import extract_id_card
from rdc_ocr.passport import extract_passport
from rdc_ocr.plate import extract_plate_and_chassis, extract_plate_number
from rdc_ocr.voter import extract_voter

EXTRACTORS = [extract_plate_and_chassis, extract_passport, extract_id_card, extract_voter]

TEXTS = [
    "",
    "   \n\t  ",
    "Nom: \nSexe: \nAdresse:   \nOrigine:\n",
    "Postnom/Prénom: /\nLieu et date de délivrance: \n",
    "P<<<<<<<<\nP<<<<<<<<",
    "@@@ ### 12/12 <<< ::",
    "PASSEPORT N° OP0123456\nNom: KABILA\nSexe: M\nDate de délivrance: 15.01.2020",
    "BE-6401-01 VIN 1HGCM82633A004352",
    "Nom: MULENDA\nPostnom/Prénom: OLIVIER/FWAMBA\nSexe: M",
]


@pytest.mark.parametrize("extract", EXTRACTORS, ids=lambda f: f.__name__)
class TestExtractorProperties:
    @pytest.mark.parametrize("text", TEXTS)
    def test_fields_are_absent_or_non_blank(self, extract, text):
        for name, value in extract(text).model_dump().items():
            if value is None:
                continue
            assert isinstance(value, str), name
            assert value.strip(), name
            assert value == value.strip(), name

    def test_empty_text_gives_all_absent(self, extract):
        fields = extract("")
        assert all(value is None for value in fields.model_dump().values())

    @pytest.mark.parametrize("text", TEXTS)
    def test_repeat_runs_agree(self, extract, text):
        assert extract(text) == extract(text)


@pytest.mark.parametrize("raw", ["BE-6401-01", "be 6401\n01", "1234AB 10", "0058AA19"])
def test_plate_is_stable_on_its_own_output(raw):
    first = extract_plate_number(raw)
    second = extract_plate_number(first.plate)
    assert second == first


def test_normalized_passport_date_is_unchanged():
    first = extract_passport("Date de délivrance: 15.01.2020")
    second = extract_passport(f"Date de délivrance: {first.date_of_issue}")
    assert first.date_of_issue == second.date_of_issue == "15/01/2020"


VOTER_TEXT = """CENI
1234567890123
CODE CI: 10234
NOM CI: 5678
Nom: MULENDA
Postnom/Prénom: OLIVIER/FWAMBA
Date et lieu de naissance: 17/09/1996 KINSHASA
Sexe: M
Adresse: AV. DE LA PAIX 12
Q/ MATONGE C/ KALAMU
Origine: KASAI
KANANGA
Nom du père: MULENDA KABEYA
Nom de la mère: NGALULA MARIE
Lieu et date de délivrance: KINSHASA 12/03/2018
A12345678901234
"""

ID_CARD_TEXT = """CARTE D'IDENTITE N°: CD-1234567
Nom: MUKENDI Prénoms: JEAN PAUL
Né le 5/3/1985 à KANANGA
Sexe: M Nationalité: CONGOLAISE
Adresse: 45 Avenue Lumumba, Kinshasa
Délivrée le 10/02/2015
Valable jusqu'au 09/02/2025
"""

PASSPORT_TEXT = """PASSEPORT N° OP0123456
Nom / Surname: KABILA
Prénoms / Given names: Joseph  Kabange Sexe / Sex: M
Nationalité / Nationality: Congolaise
Date de naissance / Date of birth: 04-06-1971
Lieu de naissance / Place of birth: Fizi
Date de délivrance / Date of issue: 15.01.2020
Date d'expiration / Date of expiry: 14.01.2025
Autorité: Minaffet
Profession: Fonctionnaire
Adresse: 12, Av.  Kasa-Vubu, Kinshasa/Gombe
"""


def _labeled(lines):
    return "\n".join(line for line, value in lines if value)


class TestRoundTrip:
    """Text rebuilt from extracted fields extracts to the same fields."""

    def test_voter(self):
        f = extract_voter(VOTER_TEXT)
        rebuilt = _labeled([
            (f.card_number, f.card_number),
            (f"CODE CI: {f.code_ci}", f.code_ci),
            (f"NOM CI: {f.nom_ci}", f.nom_ci),
            (f"Nom: {f.lastname}", f.lastname),
            (f"Postnom/Prénom: {f.middlename}/{f.firstname}", f.middlename),
            (f"Date et lieu de naissance: {f.date_of_birth} {f.place_of_birth}", f.date_of_birth),
            (f"Sexe: {f.sex}", f.sex),
            (f"Adresse: {f.address}", f.address),
            (f"Origine: {f.origin}", f.origin),
            (f"Nom du père: {f.father_name}", f.father_name),
            (f"Nom de la mère: {f.mother_name}", f.mother_name),
            (f"Lieu et date de délivrance: {f.place_of_issue} {f.date_of_issue}", f.place_of_issue),
            (f.photo_number, f.photo_number),
        ])
        assert extract_voter(rebuilt) == f
        assert f.firstname == "FWAMBA"
        assert f.origin == "KASAI KANANGA"

    def test_id_card(self):
        f = extract_id_card(ID_CARD_TEXT)
        rebuilt = _labeled([
            (f"N°: {f.document_number}", f.document_number),
            (f"Nom: {f.surname}", f.surname),
            (f"Prénoms: {f.given_names}", f.given_names),
            (f"Né le {f.date_of_birth}", f.date_of_birth),
            (f"à {f.place_of_birth}", f.place_of_birth),
            (f"Sexe: {f.sex}", f.sex),
            (f"Nationalité: {f.nationality}", f.nationality),
            (f"Adresse: {f.address}", f.address),
            (f"Délivrée le {f.date_of_issue}", f.date_of_issue),
            (f"Valable jusqu'au {f.date_of_expiry}", f.date_of_expiry),
        ])
        assert extract_id_card(rebuilt) == f
        assert f.surname == "MUKENDI"
        assert f.given_names == "JEAN PAUL"

    def test_passport(self):
        f = extract_passport(PASSPORT_TEXT)
        rebuilt = _labeled([
            (f"Passeport N° {f.document_number}", f.document_number),
            (f"Nom: {f.surname}", f.surname),
            (f"Prénoms: {f.given_names}", f.given_names),
            (f"Nationalité: {f.nationality}", f.nationality),
            (f"Date de naissance: {f.date_of_birth}", f.date_of_birth),
            (f"Lieu de naissance: {f.place_of_birth}", f.place_of_birth),
            (f"Sexe: {f.sex}", f.sex),
            (f"Date de délivrance: {f.date_of_issue}", f.date_of_issue),
            (f"Date d'expiration: {f.date_of_expiry}", f.date_of_expiry),
            (f"Autorité: {f.issuing_authority}", f.issuing_authority),
            (f"Adresse: {f.address}", f.address),
            (f"Profession: {f.profession}", f.profession),
        ])
        assert extract_passport(rebuilt) == f
        assert f.given_names == "Joseph Kabange"
        assert f.date_of_issue == "15/01/2020"
        assert f.address == "12, Av Kasa-Vubu, Kinshasa/Gombe"

    def test_passport_with_mrz(self):
        line1 = "P<CODMULENDAS<<OLIVIER<FWAMBA".ljust(44, "<")
        line2 = "OP12345678COD9609172M3001015".ljust(42, "<") + "06"
        f = extract_passport(f"{line1}\n{line2}\nLieu de naissance: Lubumbashi\nProfession: Etudiant")
        rebuilt = f"{f.mrz}\nLieu de naissance: {f.place_of_birth}\nProfession: {f.profession}"
        assert extract_passport(rebuilt) == f
        assert f.surname == "MULENDA"
