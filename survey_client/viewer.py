# survey_client/viewer.py

from survey_client.submission import decode_answer

# Plain-text rendering of rows returned by GET /survey

EMPTY = "—"


def _or_empty(value):
    return value or EMPTY


def _joined(values, other):
    items = [v for v in list(values) + [other] if v]
    return ", ".join(items) or EMPTY


def render_row(row: dict) -> str:
    raw = row.get("answer", "")
    parsed = decode_answer(raw)
    if parsed is None:
        # Malformed or legacy blob: show it as-is
        return raw if isinstance(raw, str) else str(raw)

    financial = parsed.financial
    if financial.insurance_provider == "Other":
        insurance = _or_empty(financial.insurance_other)
    else:
        insurance = _or_empty(financial.insurance_provider)

    lines = [
        "Question Details",
        f"  Question Title: {row.get('question', '')}",
        f"  Question Description: {row.get('description', '')}",
        f"  Full name: {_or_empty(parsed.full_name)}",
        f"  Age: {_or_empty(parsed.age)}",
        "Demographic",
        f"  Gender: {_or_empty(parsed.demographic.gender)}",
        f"  Marital status: {_or_empty(parsed.demographic.marital_status)}",
        f"  Dependents: {_or_empty(parsed.demographic.dependents)}",
        "Health",
        f"  Conditions: {_joined(parsed.health.conditions, parsed.health.conditions_other)}",
        f"  Medications: {_joined(parsed.health.medications, parsed.health.medications_other)}",
        f"  Mobility assistance: {_or_empty(parsed.health.mobility_assistance)}",
        "Financial",
        f"  Income: {_or_empty(financial.income_range)}",
        f"  Insurance: {insurance}",
        f"  Coverage: {_or_empty(financial.coverage_type)}",
    ]
    return "\n".join(lines)


def render_rows(rows) -> str:
    return "\n\n".join(render_row(row) for row in rows)
