"""
Response Schemas
Structured records produced by the document extractors.

Attribute names are snake_case; ``model_dump(by_alias=True)`` gives the
camelCase payload keys (documentNumber, givenNames, ...).
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FieldSet(BaseModel):
    """Base for every extracted field set: blank strings are stored as None."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator('*', mode='before')
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RecognizedText(BaseModel):
    """Output of the OCR collaborator for one image."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=100.0)


class MrzData(FieldSet):
    mrz: Optional[str] = None
    document_number: Optional[str] = None
    nationality: Optional[str] = None
    surname: Optional[str] = None
    given_names: Optional[str] = None
    date_of_birth: Optional[str] = None
    sex: Optional[Literal['M', 'F']] = None
    date_of_expiry: Optional[str] = None


# ============ Field sets returned by the extractors ============

class PlateResult(FieldSet):
    plate: Optional[str] = None
    province: Optional[str] = None


class VehicleFields(PlateResult):
    chassis_number: Optional[str] = None


class PassportFields(FieldSet):
    document_number: Optional[str] = None
    surname: Optional[str] = None
    given_names: Optional[str] = None
    nationality: Optional[str] = None
    date_of_birth: Optional[str] = None
    place_of_birth: Optional[str] = None
    sex: Optional[Literal['M', 'F']] = None
    date_of_issue: Optional[str] = None
    date_of_expiry: Optional[str] = None
    issuing_authority: Optional[str] = None
    address: Optional[str] = None
    profession: Optional[str] = None
    mrz: Optional[str] = None


class IdCardFields(FieldSet):
    document_number: Optional[str] = None
    surname: Optional[str] = None
    given_names: Optional[str] = None
    date_of_birth: Optional[str] = None
    place_of_birth: Optional[str] = None
    sex: Optional[Literal['M', 'F']] = None
    date_of_issue: Optional[str] = None
    date_of_expiry: Optional[str] = None
    address: Optional[str] = None
    nationality: Optional[str] = None


class VoterCardFields(FieldSet):
    card_number: Optional[str] = None
    code_ci: Optional[str] = Field(default=None, alias='codeCI')
    nom_ci: Optional[str] = Field(default=None, alias='nomCI')
    lastname: Optional[str] = None
    middlename: Optional[str] = None
    firstname: Optional[str] = None
    date_of_birth: Optional[str] = None
    place_of_birth: Optional[str] = None
    sex: Optional[Literal['M', 'F']] = None
    address: Optional[str] = None
    origin: Optional[str] = None
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    place_of_issue: Optional[str] = None
    date_of_issue: Optional[str] = None
    photo_number: Optional[str] = None


# ============ Full records (fields + OCR pass-through) ============

class VehicleRecord(VehicleFields):
    document_type: Literal['vehicle'] = 'vehicle'
    raw_text: Optional[str] = None
    confidence: float = 0.0


class PassportRecord(PassportFields):
    document_type: Literal['passport'] = 'passport'
    raw_text: Optional[str] = None
    confidence: float = 0.0


class IdCardRecord(IdCardFields):
    document_type: Literal['id_card'] = 'id_card'
    raw_text: Optional[str] = None
    confidence: float = 0.0


class VoterCardRecord(VoterCardFields):
    document_type: Literal['voter_card'] = 'voter_card'
    raw_text: Optional[str] = None
    confidence: float = 0.0


DocumentRecord = Annotated[
    Union[VehicleRecord, PassportRecord, IdCardRecord, VoterCardRecord],
    Field(discriminator='document_type'),
]
