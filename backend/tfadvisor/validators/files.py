"""File-name normalization — maps caller-supplied names onto canonical module roles."""

from collections.abc import Iterable

TF_SUFFIX = ".tf"

MAIN_TF = "main.tf"
VARIABLES_TF = "variables.tf"
OUTPUTS_TF = "outputs.tf"
README_MD = "README.md"

# Canonical roles in the order they are reported and scaffolded
CANONICAL_ROLES = (MAIN_TF, VARIABLES_TF, OUTPUTS_TF, README_MD)

_ROLE_ALIASES = {
    "main": MAIN_TF,
    "resources": MAIN_TF,
    "variables": VARIABLES_TF,
    "vars": VARIABLES_TF,
    "outputs": OUTPUTS_TF,
    "output": OUTPUTS_TF,
    "readme": README_MD,
    "readme.md": README_MD,
}


def normalize_file_name(name: str) -> str:
    """Return the canonical role for ``name``, or ``name`` unchanged.

    Strips a ``.tf`` suffix, lower-cases, then looks the stem up in the alias
    table. Names that are not aliases come back exactly as given.
    """
    stem = name[: -len(TF_SUFFIX)] if name.endswith(TF_SUFFIX) else name
    return _ROLE_ALIASES.get(stem.lower(), name)


def is_config_source(name: str) -> bool:
    """True for files holding configuration text (``.tf`` directly or by alias)."""
    return name.endswith(TF_SUFFIX) or normalize_file_name(name).endswith(TF_SUFFIX)


def missing_roles(names: Iterable[str]) -> list[str]:
    """Canonical roles not covered by any of ``names``, in canonical order."""
    present = {normalize_file_name(n) for n in names}
    return [role for role in CANONICAL_ROLES if role not in present]
