"""Tests for the module rule set."""

import pytest

from tfadvisor.validators.models import Category, ConfigurationBundle, Severity
from tfadvisor.validators.module_validator import ModuleValidator


def _run(files: dict[str, str]):
    return ModuleValidator().validate(ConfigurationBundle(files))


class TestVersionPinning:
    @pytest.mark.parametrize(
        "source",
        [
            "terraform-aws-modules/vpc/aws",
            "github.com/example/terraform-module",
            "registry.terraform.io/example/vpc/aws",
        ],
    )
    def test_remote_source_without_version(self, source: str) -> None:
        content = f'module "vpc" {{\n  source = "{source}"\n}}\n'
        findings = _run({"main.tf": content})
        assert [f.rule for f in findings] == ["module-version-pinning"]
        assert findings[0].severity == Severity.WARNING
        assert findings[0].category == Category.MAINTENANCE
        assert "'vpc'" in findings[0].message

    def test_pinned_remote_source(self) -> None:
        content = (
            'module "vpc" {\n'
            '  source  = "terraform-aws-modules/vpc/aws"\n'
            '  version = "5.1.0"\n'
            "}\n"
        )
        assert _run({"main.tf": content}) == []

    def test_local_source_needs_no_version(self) -> None:
        content = 'module "vpc" {\n  source = "./modules/vpc"\n}\n'
        assert _run({"main.tf": content}) == []


class TestUnusedLocalModules:
    def test_modules_directory_without_module_blocks(self) -> None:
        files = {
            "main.tf": 'resource "aws_vpc" "main_vpc" {\n}\n',
            "modules/vpc/main.tf": 'resource "aws_subnet" "this_subnet" {\n}\n',
        }
        findings = _run(files)
        assert [f.rule for f in findings] == ["unused-local-modules"]
        assert findings[0].severity == Severity.INFO
        assert findings[0].file is None

    def test_modules_in_use(self) -> None:
        files = {
            "main.tf": 'module "vpc" {\n  source = "./modules/vpc"\n}\n',
            "modules/vpc/main.tf": "",
        }
        assert _run(files) == []

    def test_no_modules_directory(self) -> None:
        assert _run({"main.tf": ""}) == []
