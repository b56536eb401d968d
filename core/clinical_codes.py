"""Static ICD-10 lookup for the symptoms the risk form reports on."""

from types import MappingProxyType

CLINICAL_CODES = MappingProxyType({
    "High Blood Sugar": "E11",
    "Obesity": "E66",
    "Family History of Diabetes": "Z83.3",
})


def icd10_codes() -> list[str]:
    """Codes in table order."""
    return list(CLINICAL_CODES.values())
