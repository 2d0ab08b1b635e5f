"""
Static reference lookups for the pharmacist and physician modes.

These are illustrative tables, not validated clinical knowledge. Both lookups
are total: a miss returns a "no data" template instead of raising.

IV compatibility keys are unordered drug pairs, so (a, b) and (b, a) give the
same answer. Specialty insights are keyed by (specialty, condition), which is
ordered because the two positions mean different things.
"""

import logging

logger = logging.getLogger(__name__)

COMPATIBLE = "compatible"
INCOMPATIBLE = "incompatible"

_IV_PAIRS = (
    (("vancomycin", "piperacillin-tazobactam"), INCOMPATIBLE),
    (("dopamine", "norepinephrine"), COMPATIBLE),
    (("heparin", "morphine"), COMPATIBLE),
    (("furosemide", "midazolam"), INCOMPATIBLE),
    (("pantoprazole", "midazolam"), INCOMPATIBLE),
    (("insulin", "potassium chloride"), COMPATIBLE),
    (("ceftriaxone", "calcium gluconate"), INCOMPATIBLE),
    (("propofol", "fentanyl"), COMPATIBLE),
)

_SPECIALTY_INSIGHTS = {
    ("cardiology", "atrial fibrillation"):
        "Assess rate vs rhythm control and calculate CHA2DS2-VASc to guide anticoagulation.",
    ("cardiology", "heart failure"):
        "Track daily weights and fluid balance; review GDMT titration and renal function.",
    ("nephrology", "acute kidney injury"):
        "Review nephrotoxic medications, assess volume status and monitor urine output and creatinine.",
    ("pulmonology", "copd exacerbation"):
        "Target SpO2 88-92%, consider bronchodilators and systemic steroids, assess need for NIV.",
    ("neurology", "stroke"):
        "Confirm last-known-well time and obtain urgent imaging to determine thrombolysis eligibility.",
    ("endocrinology", "diabetic ketoacidosis"):
        "Start fixed-rate insulin after fluids, monitor potassium hourly and check anion gap closure.",
}


def _normalize(token: str) -> str:
    return " ".join(token.strip().lower().split())


def _drug_key(name: str) -> str:
    # "potassium-chloride" and "potassium chloride" name the same drug
    return " ".join(_normalize(name).replace("-", " ").split())


_IV_COMPATIBILITY = {
    frozenset(_drug_key(d) for d in pair): verdict for pair, verdict in _IV_PAIRS
}


def check_iv_compatibility(drug_a: str, drug_b: str) -> str:
    """Same text for (a, b) and (b, a): the pair is rendered in sorted order."""
    (_, a), (_, b) = sorted((_drug_key(d), _normalize(d)) for d in (drug_a, drug_b))
    verdict = _IV_COMPATIBILITY.get(frozenset({_drug_key(a), _drug_key(b)}))
    logger.info(f"[Knowledge] IV compatibility '{a}' + '{b}' -> {verdict or 'unknown'}")

    if verdict == COMPATIBLE:
        return f"{a} and {b} are compatible for Y-site co-administration."
    if verdict == INCOMPATIBLE:
        return f"{a} and {b} are incompatible. Do not co-administer through the same line."
    return (
        f"No compatibility data for {a} and {b}. "
        "Consult the IV compatibility literature before co-administering."
    )


def specialty_insight(specialty: str, condition: str) -> str:
    s, c = _normalize(specialty), _normalize(condition)
    insight = _SPECIALTY_INSIGHTS.get((s, c))
    logger.info(f"[Knowledge] Specialty insight ({s}, {c}) -> {'hit' if insight else 'miss'}")

    if insight:
        return f"{s.title()} insight for {c}: {insight}"
    return (
        f"No {s} insight on file for {c}. "
        "Consult current specialty literature and guidelines."
    )
