"""Tests for the pattern repository."""

import threading

import pytest

from tfadvisor.repository.loader import load_corpus
from tfadvisor.repository.models import (
    CloudProvider,
    ComplexityLevel,
    Pattern,
    PatternCategory,
    PatternFilter,
)
from tfadvisor.repository.patterns import PatternNotFoundError, PatternRepository


def _pattern(pattern_id: str, **overrides) -> Pattern:
    fields = {
        "id": pattern_id,
        "name": pattern_id.replace("-", " ").title(),
        "description": "",
        "category": PatternCategory.NETWORKING,
        "provider": CloudProvider.AWS,
        "complexity": ComplexityLevel.BASIC,
        "tags": [],
    }
    fields.update(overrides)
    return Pattern(**fields)


@pytest.fixture
def repository() -> PatternRepository:
    return PatternRepository(load_corpus().patterns)


class TestLookup:
    def test_get_by_id(self, repository: PatternRepository) -> None:
        pattern = repository.get("aws-vpc-basic")
        assert pattern.provider == CloudProvider.AWS
        assert "main.tf" in pattern.files

    def test_unknown_id(self, repository: PatternRepository) -> None:
        with pytest.raises(PatternNotFoundError, match="nope"):
            repository.get("nope")

    def test_not_found_is_lookup_error(self) -> None:
        assert issubclass(PatternNotFoundError, LookupError)

    def test_find_without_filter_returns_all_sorted(self, repository: PatternRepository) -> None:
        ids = [p.id for p in repository.find()]
        assert ids == sorted(ids)
        assert len(ids) == len(repository) == 5


class TestFilters:
    def test_by_provider(self, repository: PatternRepository) -> None:
        found = repository.find(PatternFilter(provider=CloudProvider.AWS))
        assert [p.id for p in found] == ["aws-ec2-web-server", "aws-vpc-basic"]

    def test_by_category_and_complexity(self, repository: PatternRepository) -> None:
        found = repository.find(
            PatternFilter(category=PatternCategory.NETWORKING, complexity=ComplexityLevel.BASIC)
        )
        assert [p.id for p in found] == ["aws-vpc-basic", "azure-vnet-basic", "gcp-vpc-basic"]

    def test_any_tag_matches_case_insensitively(self, repository: PatternRepository) -> None:
        found = repository.find(PatternFilter(tags=["VNET", "ec2"]))
        assert [p.id for p in found] == ["aws-ec2-web-server", "azure-vnet-basic"]

    def test_query_matches_name_description_or_id(self) -> None:
        repo = PatternRepository([
            _pattern("alpha", description="Holds a Bastion host"),
            _pattern("beta", name="Bastion Jump Box"),
            _pattern("bastion-gamma"),
            _pattern("delta"),
        ])
        found = repo.find(PatternFilter(query="bastion"))
        assert [p.id for p in found] == ["alpha", "bastion-gamma", "beta"]

    def test_all_criteria_must_hold(self, repository: PatternRepository) -> None:
        found = repository.find(
            PatternFilter(provider=CloudProvider.GCP, tags=["ec2"])
        )
        assert found == []


class TestReload:
    def test_load_replaces_index(self) -> None:
        repo = PatternRepository([_pattern("old")])
        repo.load([_pattern("new")])
        assert [p.id for p in repo.find()] == ["new"]
        with pytest.raises(PatternNotFoundError):
            repo.get("old")

    def test_readers_see_whole_snapshots(self) -> None:
        first = [_pattern(f"a-{i}") for i in range(50)]
        second = [_pattern(f"b-{i}") for i in range(50)]
        repo = PatternRepository(first)
        sizes = []

        def read() -> None:
            for _ in range(200):
                found = repo.find()
                prefixes = {p.id[0] for p in found}
                sizes.append((len(found), len(prefixes)))

        def write() -> None:
            for i in range(100):
                repo.load(second if i % 2 else first)

        threads = [threading.Thread(target=read) for _ in range(4)]
        threads.append(threading.Thread(target=write))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert set(sizes) == {(50, 1)}
