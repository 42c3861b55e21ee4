"""Scaffold templates for canonical module files.

Every template must validate without error-level findings on its own.
"""

from tfadvisor.validators.files import MAIN_TF, OUTPUTS_TF, README_MD, VARIABLES_TF

MAIN_TF_SCAFFOLD = """\
# Main configuration for Terraform
# Contains the primary resources defined in this module

provider "aws" {
  region = var.region
}

# Example resource:
# resource "aws_s3_bucket" "example" {
#   bucket = var.bucket_name
#   tags   = var.tags
# }

# Example module usage:
# module "vpc" {
#   source  = "terraform-aws-modules/vpc/aws"
#   version = "5.1.0"
#
#   name = var.vpc_name
#   cidr = var.vpc_cidr
#
#   tags = var.tags
# }
"""

VARIABLES_TF_SCAFFOLD = """\
# Input variables for the module

variable "region" {
  description = "AWS region where resources will be created"
  type        = string
  default     = "us-west-2"
}

# Example variable with validation:
# variable "environment" {
#   description = "Environment where resources will be deployed"
#   type        = string
#   validation {
#     condition     = contains(["dev", "staging", "prod"], var.environment)
#     error_message = "Environment must be one of: dev, staging, prod."
#   }
# }

variable "tags" {
  description = "A map of tags to apply to all resources"
  type        = map(string)
  default     = {}
}
"""

OUTPUTS_TF_SCAFFOLD = """\
# Output values from the module

# Example output:
# output "bucket_id" {
#   description = "The ID of the S3 bucket"
#   value       = aws_s3_bucket.example.id
# }
"""

README_MD_SCAFFOLD = """\
# Terraform Module

This module provisions cloud resources following Terraform best practices.

## Usage

```hcl
module "example" {
  source = "./path/to/module"

  region = "us-west-2"

  tags = {
    Environment = "production"
    Project     = "example"
  }
}
```

## Requirements

| Name | Version |
|------|---------|
| terraform | >= 1.0.0 |
| aws | >= 4.0.0 |

## Inputs

| Name | Description | Type | Default | Required |
|------|-------------|------|---------|:--------:|
| region | AWS region where resources will be created | `string` | `"us-west-2"` | no |
| tags | A map of tags to apply to all resources | `map(string)` | `{}` | no |

## Outputs

No outputs.
"""

# Canonical role → scaffold body, in scaffolding order
SCAFFOLDS: dict[str, str] = {
    MAIN_TF: MAIN_TF_SCAFFOLD,
    VARIABLES_TF: VARIABLES_TF_SCAFFOLD,
    OUTPUTS_TF: OUTPUTS_TF_SCAFFOLD,
    README_MD: README_MD_SCAFFOLD,
}


def render_scaffold(role: str) -> str:
    """Return the scaffold for a canonical role, with a name header for .tf files."""
    body = SCAFFOLDS[role]
    if role.endswith(".tf"):
        return f"# {role}\n{body}"
    return body
