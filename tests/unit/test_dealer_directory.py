"""Unit tests for the in-memory dealer directory and health check"""

from dealer_checkout.domain.dealers.models import Dealer, DealerCapabilityRecord, ProductCategory
from dealer_checkout.domain.dealers.ports import ReferenceDataProvider
from dealer_checkout.infrastructure.dealers.in_memory_directory import InMemoryDealerDirectory
from dealer_checkout.observability.health import HealthStatus, check_reference_data_health


class TestInMemoryDealerDirectory:
    """Test lookups against the default dealers"""

    def test_default_dealer_capabilities(self, directory):
        """Test the seeded capability records"""
        assert directory.lookup("dealer_1") == DealerCapabilityRecord(
            dealer_id="dealer_1",
            supported_categories=frozenset({ProductCategory.WINDSURF, ProductCategory.WINGFOIL}),
            service_regions=frozenset({"CA", "OR", "WA"}),
        )
        assert directory.lookup("dealer_2").service_regions == frozenset({"CA", "NV"})
        assert directory.lookup("dealer_3").supported_categories == frozenset(ProductCategory)

    def test_unknown_dealer(self, directory):
        assert directory.lookup("dealer_404") is None
        assert directory.get_dealer("dealer_404") is None

    def test_dealer_ids(self, directory):
        assert directory.dealer_ids() == ["dealer_1", "dealer_2", "dealer_3"]

    def test_custom_dealers(self):
        """Test regions are normalized to upper case in capability records"""
        directory = InMemoryDealerDirectory(dealers=[
            Dealer(id="d", name="Delta Boards", service_regions=("ca", " nv")),
        ])

        record = directory.lookup("d")

        assert record.service_regions == frozenset({"CA", "NV"})
        assert record.supported_categories == frozenset()
        assert record.services_region("Nv")

    def test_eligible_for_single_category(self, directory):
        """Test only dealers supporting the category are eligible"""
        eligible = directory.eligible_for([ProductCategory.SUP])

        assert [dealer.id for dealer in eligible] == ["dealer_2", "dealer_3"]

    def test_full_coverage_dealers_listed_first(self, directory):
        """Test a dealer covering every category outranks partial matches"""
        eligible = directory.eligible_for([ProductCategory.WINDSURF, ProductCategory.SUP])

        assert [dealer.id for dealer in eligible] == ["dealer_3", "dealer_1", "dealer_2"]

    def test_no_categories_no_dealers(self, directory):
        assert directory.eligible_for([]) == []


class TestDealerCapabilityRecord:
    """Test capability records built directly by providers"""

    def test_regions_normalized(self):
        record = DealerCapabilityRecord("d", frozenset({ProductCategory.SUP}), frozenset({"ca", " Nv "}))

        assert record.service_regions == frozenset({"CA", "NV"})
        assert record.services_region("ca")
        assert not record.services_region("TX")


class BrokenDirectory(ReferenceDataProvider):
    def lookup(self, dealer_id):
        raise TimeoutError("directory timed out")

    def dealer_ids(self):
        raise TimeoutError("directory timed out")


class TestReferenceDataHealth:
    """Test health reporting for reference data"""

    def test_healthy(self, directory):
        health = check_reference_data_health(directory)

        assert health.status == HealthStatus.HEALTHY
        assert health.message == "3 dealers available"
        assert health.latency_ms is not None

    def test_empty_directory_is_degraded(self):
        health = check_reference_data_health(InMemoryDealerDirectory(dealers=[]))

        assert health.status == HealthStatus.DEGRADED

    def test_failing_directory_is_unhealthy(self):
        health = check_reference_data_health(BrokenDirectory())

        assert health.status == HealthStatus.UNHEALTHY
        assert "directory timed out" in health.message
