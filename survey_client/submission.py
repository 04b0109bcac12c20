# survey_client/submission.py

import json
from dataclasses import dataclass, field
from typing import List, Optional

# Client-owned questionnaire schema. The server stores the serialized answer
# as an opaque string; only this module knows its shape.

GENDERS = ("Female", "Male", "Non-binary", "Prefer not to say")
MARITAL_STATUSES = ("Single", "Married", "Divorced", "Widowed", "Prefer not to say")
MOBILITY_ASSISTANCE = ("Yes", "No", "Sometimes")
INCOME_RANGES = ("<25k", "25k-50k", "50k-75k", "75k-100k", "100k-150k", "150k-200k", ">200k")
INSURANCE_PROVIDERS = (
    "Aetna",
    "Blue Cross Blue Shield",
    "Cigna",
    "Kaiser",
    "Medicare",
    "Medicaid",
    "UnitedHealthcare",
    "Other",
    "None",
)
COVERAGE_TYPES = (
    "HMO",
    "PPO",
    "EPO",
    "POS",
    "High Deductible (HSA)",
    "Medicare Advantage",
    "None/Unknown",
)
CONDITIONS = ("Diabetes", "Hypertension", "Heart Disease", "COPD/Asthma", "Cancer", "Arthritis")
MEDICATIONS = ("Metformin", "Insulin", "Lisinopril", "Atorvastatin", "Albuterol", "Warfarin")

DEFAULT_TITLE = "Untitled Question"


def _check_choice(name, value, choices):
    # "" means unset and is always allowed
    if value != "" and value not in choices:
        raise ValueError(f"Invalid {name}: {value!r}")


@dataclass
class SurveyMeta:
    full_name: str = ""
    age: str = ""
    title: str = ""
    description: str = ""


@dataclass
class Demographic:
    gender: str = ""
    marital_status: str = ""
    dependents: str = ""

    def __post_init__(self):
        _check_choice("gender", self.gender, GENDERS)
        _check_choice("marital status", self.marital_status, MARITAL_STATUSES)

    def to_dict(self):
        return {
            "gender": self.gender,
            "maritalStatus": self.marital_status,
            "dependents": self.dependents,
        }


@dataclass
class Health:
    conditions: List[str] = field(default_factory=list)
    conditions_other: str = ""
    medications: List[str] = field(default_factory=list)
    medications_other: str = ""
    mobility_assistance: str = ""

    def __post_init__(self):
        _check_choice("mobility assistance", self.mobility_assistance, MOBILITY_ASSISTANCE)

    def to_dict(self):
        return {
            "conditions": list(self.conditions),
            "conditionsOther": self.conditions_other,
            "medications": list(self.medications),
            "medicationsOther": self.medications_other,
            "mobilityAssistance": self.mobility_assistance,
        }


@dataclass
class Financial:
    income_range: str = ""
    insurance_provider: str = ""
    insurance_other: str = ""
    coverage_type: str = ""

    def __post_init__(self):
        _check_choice("income range", self.income_range, INCOME_RANGES)
        _check_choice("insurance provider", self.insurance_provider, INSURANCE_PROVIDERS)
        _check_choice("coverage type", self.coverage_type, COVERAGE_TYPES)

    def to_dict(self):
        return {
            "incomeRange": self.income_range,
            "insuranceProvider": self.insurance_provider,
            "insuranceOther": self.insurance_other,
            "coverageType": self.coverage_type,
        }


@dataclass
class SubmissionAnswer:
    full_name: str = ""
    age: str = ""
    demographic: Demographic = field(default_factory=Demographic)
    health: Health = field(default_factory=Health)
    financial: Financial = field(default_factory=Financial)

    def to_dict(self):
        return {
            "meta": {"fullName": self.full_name, "age": self.age},
            "demographic": self.demographic.to_dict(),
            "health": self.health.to_dict(),
            "financial": self.financial.to_dict(),
        }


@dataclass
class SurveySubmission:
    """The request body for POST /survey: envelope fields plus the opaque answer."""
    question: str
    description: str
    answer: str

    def to_payload(self):
        return {"question": self.question, "description": self.description, "answer": self.answer}


def toggle_value(values: List[str], value: str) -> List[str]:
    """Checklist toggle: remove value if present, otherwise append it."""
    if value in values:
        return [v for v in values if v != value]
    return values + [value]


def build_submission(meta: SurveyMeta, demographic: Demographic, health: Health,
                     financial: Financial) -> SurveySubmission:
    answer = SubmissionAnswer(
        full_name=meta.full_name,
        age=meta.age,
        demographic=demographic,
        health=health,
        financial=financial,
    )
    return SurveySubmission(
        question=meta.title or DEFAULT_TITLE,
        description=meta.description or "",
        answer=json.dumps(answer.to_dict()),
    )


def _text(section, key):
    value = section.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _text_list(section, key):
    value = section.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _section(data, key):
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def decode_answer(raw) -> Optional[SubmissionAnswer]:
    """Parse a stored answer blob.

    Returns None when the blob is not a JSON object, so callers can fall back
    to showing the raw string. Missing sections and fields become empty
    values. Stored values are not re-checked against the closed choice sets:
    rows written by older clients must still render.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None

    meta = _section(data, "meta")
    demographic = _section(data, "demographic")
    health = _section(data, "health")
    financial = _section(data, "financial")

    answer = SubmissionAnswer(full_name=_text(meta, "fullName"), age=_text(meta, "age"))
    # Bypass __post_init__ choice checks by assigning after construction
    answer.demographic.gender = _text(demographic, "gender")
    answer.demographic.marital_status = _text(demographic, "maritalStatus")
    answer.demographic.dependents = _text(demographic, "dependents")
    answer.health.conditions = _text_list(health, "conditions")
    answer.health.conditions_other = _text(health, "conditionsOther")
    answer.health.medications = _text_list(health, "medications")
    answer.health.medications_other = _text(health, "medicationsOther")
    answer.health.mobility_assistance = _text(health, "mobilityAssistance")
    answer.financial.income_range = _text(financial, "incomeRange")
    answer.financial.insurance_provider = _text(financial, "insuranceProvider")
    answer.financial.insurance_other = _text(financial, "insuranceOther")
    answer.financial.coverage_type = _text(financial, "coverageType")
    return answer
