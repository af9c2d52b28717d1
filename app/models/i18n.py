from typing import Dict, List

from pydantic import BaseModel


class LocaleInfo(BaseModel):
    code: str
    label: str
    name: str
    flag: str


class LocalesResponse(BaseModel):
    default: str
    locales: List[LocaleInfo]


class TranslationsResponse(BaseModel):
    surface: str
    locale: str
    messages: Dict[str, str]


class SectionResponse(BaseModel):
    surface: str
    locale: str
    section: str
    messages: Dict[str, str]


class MissingTranslationsResponse(BaseModel):
    surface: str
    locale: str
    count: int
    keys: List[str]
