"""Default message templates — one ``%s`` template per rule name.

The first ``%s`` is the humanized field name; the remaining ones are filled
from the rule's parameters. A field-level call has no field name, in which case
the raw template is returned untouched.
"""

from typing import Optional

from tagvalid.models import Rule

# ──────────────────────────────────────────────────────────────────────
# TEMPLATES
# ──────────────────────────────────────────────────────────────────────

DEFAULT_TEMPLATE = "The %s is invalid"

TEMPLATES: dict[str, str] = {
    # Presence
    "required": "The %s field is required",

    # Character classes
    "numeric": "The %s must be a number",
    "alpha": "The %s may only contain letters",
    "alpha_num": "The %s may only contain letters and numbers",
    "alpha_space": "The %s may only contain letters and spaces",
    "alpha_num_space": "The %s may only contain letters, numbers and spaces",

    # Formats
    "email": "The %s must be a valid email address",
    "url": "The %s must be a valid URL",
    "json": "The %s must be a valid JSON string",
    "match": "The %s format is invalid",
    "cc": "The %s must be a valid credit card number",

    # Bounds
    "lte": "The %s must be less than or equal to %s",
    "gte": "The %s must be greater than or equal to %s",
    "lt": "The %s must be less than %s",
    "gt": "The %s must be greater than %s",
    "range": "The %s must be between %s and %s",

    # Comparisons
    "contains": "The %s must contain %s",
    "same": "The %s must match %s",
    "in": "The selected %s is invalid",
    "not_in": "The selected %s is invalid",
}


def humanize(segment: str) -> str:
    """``member_code`` → ``member code``."""
    return segment.replace("_", " ").strip()


def default_message(rule: Rule, field: Optional[str] = None) -> str:
    """Format the built-in template of ``rule`` for ``field``."""
    template = TEMPLATES.get(rule.name, DEFAULT_TEMPLATE)
    if not field:
        return template

    slots = template.count("%s")
    args = [humanize(field)] + rule.params
    # Pad or trim parameters to the number of slots in the template.
    args = (args + [""] * slots)[:slots]
    return template % tuple(args)
