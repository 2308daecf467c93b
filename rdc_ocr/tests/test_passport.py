"""
Tests for the passport extractor.
"""

from rdc_ocr.passport import extract_passport

LINE1 = "P<CODMULENDAS<<OLIVIER<FWAMBA".ljust(44, "<")
LINE2 = "OP12345678COD9609172M3001015".ljust(42, "<") + "06"

PASSPORT_WITH_MRZ = f"""REPUBLIQUE DEMOCRATIQUE DU CONGO
PASSEPORT
Lieu de naissance: Lubumbashi
Date de délivrance: 12.03.2019
Autorité: DGMIGRATION
Profession: Fonctionnaire
Adresse: 12, Av. Kasa-Vubu, Kinshasa/Gombe
{LINE1}
{LINE2}
"""

PASSPORT_WITHOUT_MRZ = """REPUBLIQUE DEMOCRATIQUE DU CONGO
PASSEPORT N° OP0123456
Nom / Surname: KABILA
Prénoms / Given names: Joseph Kabange
Nationalité / Nationality: Congolaise
Date de naissance / Date of birth: 04-06-1971
Sexe / Sex: M
Lieu de naissance / Place of birth: Fizi
Date de délivrance / Date of issue: 15/01/2020
Date d'expiration / Date of expiry: 14/01/2025
MINAFFET
"""


class TestPassportWithMrz:
    def test_mrz_fields(self):
        fields = extract_passport(PASSPORT_WITH_MRZ)
        assert fields.mrz == f"{LINE1}\n{LINE2}"
        assert fields.document_number == "OP1234567"
        assert fields.surname == "MULENDA"
        assert fields.given_names == "OLIVIER FWAMBA"
        assert fields.nationality == "COD"
        assert fields.date_of_birth == "17/09/1996"
        assert fields.sex == "M"
        assert fields.date_of_expiry == "01/01/2030"

    def test_free_text_fields(self):
        fields = extract_passport(PASSPORT_WITH_MRZ)
        assert fields.place_of_birth == "LUBUMBASHI"
        assert fields.date_of_issue == "12/03/2019"
        assert fields.issuing_authority == "DGMIGRATION"
        assert fields.profession == "FONCTIONNAIRE"
        assert fields.address == "12, Av Kasa-Vubu, Kinshasa/Gombe"


class TestPassportFallbacks:
    def test_labeled_fields(self):
        fields = extract_passport(PASSPORT_WITHOUT_MRZ)
        assert fields.mrz is None
        assert fields.document_number == "OP0123456"
        assert fields.surname == "KABILA"
        assert fields.given_names == "Joseph Kabange"
        assert fields.nationality == "CONGOLAISE"
        assert fields.date_of_birth == "04/06/1971"
        assert fields.sex == "M"
        assert fields.place_of_birth == "FIZI"
        assert fields.date_of_issue == "15/01/2020"
        assert fields.date_of_expiry == "14/01/2025"
        assert fields.issuing_authority == "MINAFFET"
        assert fields.address is None
        assert fields.profession is None

    def test_labeled_document_number(self):
        fields = extract_passport("Passeport No: AB123456")
        assert fields.document_number == "AB123456"

    def test_bare_surname_skips_header_words(self):
        fields = extract_passport("REPUBLIQUE DEMOCRATIQUE DU CONGO\nPASSEPORT\nMULENDA")
        assert fields.surname == "MULENDA"

    def test_bare_surname_never_congo_or_republic(self):
        fields = extract_passport("REPUBLIC OF CONGO\nCONGO")
        assert fields.surname is None

    def test_bare_given_names(self):
        fields = extract_passport("titulaire Jean Pierre")
        assert fields.given_names == "Jean Pierre"

    def test_known_city_and_nationality_tokens(self):
        fields = extract_passport("ne a goma\nnationalite congolais")
        assert fields.place_of_birth == "GOMA"
        assert fields.nationality == "CONGOLAIS"

    def test_first_bare_date_is_issue_date(self):
        fields = extract_passport("emis le 03.04.2018 expire 02.04.2023")
        assert fields.date_of_issue == "03/04/2018"

    def test_labeled_authority(self):
        fields = extract_passport("Issuing authority: Ambassade Bruxelles")
        assert fields.issuing_authority == "AMBASSADE BRUXELLES"

    def test_known_profession_token(self):
        fields = extract_passport("ETUDIANT")
        assert fields.profession == "ETUDIANT"

    def test_short_address_is_ignored(self):
        fields = extract_passport("Adresse: Q/ 12")
        assert fields.address is None

    def test_address_strips_noise(self):
        fields = extract_passport("Address: N° 4, Av.   Lukusa; C/Gombe*")
        assert fields.address == "N° 4, Av Lukusa C/Gombe"

    def test_given_names_stop_at_next_label(self):
        fields = extract_passport("Nom: MULENDA\nPrénoms: Olivier Jean Sexe: M")
        assert fields.given_names == "Olivier Jean"
        assert fields.sex == "M"

    def test_place_of_birth_stops_at_next_label(self):
        fields = extract_passport("Lieu de naissance: Goma Date de délivrance: 12.03.2019")
        assert fields.place_of_birth == "GOMA"
        assert fields.date_of_issue == "12/03/2019"

    def test_profession_stops_at_next_label(self):
        fields = extract_passport("Profession: Commerçant Adresse: 12 Av. Lumumba, Goma")
        assert fields.profession == "COMMERÇANT"
        assert fields.address == "12 Av Lumumba, Goma"

    def test_authority_keeps_slash_and_stops_at_next_label(self):
        fields = extract_passport("Autorité: DGM/KINSHASA Profession: Etudiant")
        assert fields.issuing_authority == "DGM/KINSHASA"
        assert fields.profession == "ETUDIANT"

    def test_malformed_mrz_falls_back_to_free_text(self):
        fields = extract_passport("P<<<<<<<<\nP<<<<<<<<\nNom: MULENDA\nSexe: F")
        assert fields.mrz == "P<<<<<<<<\nP<<<<<<<<"
        assert fields.surname == "MULENDA"
        assert fields.sex == "F"


class TestPassportEmpty:
    def test_empty_text(self):
        fields = extract_passport("")
        assert all(value is None for value in fields.model_dump().values())
