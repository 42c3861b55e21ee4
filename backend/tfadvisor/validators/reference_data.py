"""Reference data — thresholds, registries, and provider namespaces used by the rules.

This is the encoded best-practice knowledge that makes validation deterministic.
"""

# ──────────────────────────────────────────────────────────────────────
# STRUCTURE
# ──────────────────────────────────────────────────────────────────────

# Files longer than this should be split up
MAX_FILE_LINES = 500

# Local child modules live under this directory
LOCAL_MODULES_DIR = "modules"


# ──────────────────────────────────────────────────────────────────────
# MODULE SOURCES THAT MUST BE VERSION-PINNED
# ──────────────────────────────────────────────────────────────────────

REMOTE_MODULE_MARKERS: tuple[str, ...] = (
    "github.com",              # VCS host
    "terraform-aws-modules",   # well-known registry namespace
    "registry.terraform.io",   # public registry
)


# ──────────────────────────────────────────────────────────────────────
# TAGGING
# ──────────────────────────────────────────────────────────────────────

# Resource type prefixes of providers whose resources take a tags map
TAGGABLE_PROVIDER_PREFIXES: tuple[str, ...] = ("aws_", "azurerm_", "google_")

# Resource types that cannot carry tags (matched as substrings of the type)
UNTAGGABLE_RESOURCE_TYPES: tuple[str, ...] = (
    "aws_iam_role_policy",
    "aws_iam_policy",
    "aws_route",
)


# ──────────────────────────────────────────────────────────────────────
# SECURITY
# ──────────────────────────────────────────────────────────────────────

# Attribute names that suggest a credential when assigned a string literal
CREDENTIAL_KEYWORDS: tuple[str, ...] = ("password", "secret", "key", "token", "credential")

OPEN_WORLD_CIDR = "0.0.0.0/0"
