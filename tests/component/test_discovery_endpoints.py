"""Component tests for donor and donation center discovery endpoints."""

from core.services.geospatial_index import geo_indexing_service
from tests.base import BaseComponentTest
from tests.factories import DonationCenterFactory, DonorFactory, SeekerFactory

BAKU = {"latitude": 40.4093, "longitude": 49.8671}


class TestDonorDiscoveryEndpoints(BaseComponentTest):
    def setUp(self):
        super().setUp()
        self.seeker = SeekerFactory()
        self.headers = self.auth_headers(self.seeker)

    def test_directory_search_hides_contacts(self):
        DonorFactory(blood_type="O+", city="Baku", phone="+994501234567")

        response = self.client.get(
            "/api/v1/donors/search", {"blood_type": "O+"}, **self.headers
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 1)
        self.assertNotIn("phone", response.json()[0])

    def test_nearby_donors(self):
        donor = DonorFactory(blood_type="O-", **BAKU)
        DonorFactory(blood_type="B+", **BAKU)
        geo_indexing_service.sync_all_users()

        response = self.client.get(
            "/api/v1/donors/nearby",
            {**BAKU, "blood_type": "O-", "max_distance": 5000},
            **self.headers,
        )

        data = response.json()
        self.assertEqual([d["user_id"] for d in data], [str(donor.user_id)])
        self.assertEqual(data[0]["distance_meters"], 0.0)

    def test_nearby_requires_coordinates(self):
        response = self.client.get(
            "/api/v1/donors/nearby", {"latitude": 40.4}, **self.headers
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "bad_request")


class TestCenterEndpoints(BaseComponentTest):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers(DonorFactory())

    def test_list_by_city(self):
        DonationCenterFactory(city="Baku")
        DonationCenterFactory(city="Ganja")

        response = self.client.get("/api/v1/centers", {"city": "Ganja"}, **self.headers)

        self.assertEqual([c["city"] for c in response.json()], ["Ganja"])

    def test_nearby_centers(self):
        center = DonationCenterFactory(**BAKU)
        geo_indexing_service.index_all_centers()

        response = self.client.get("/api/v1/centers/nearby", BAKU, **self.headers)

        self.assertEqual(response.json()[0]["center_id"], str(center.center_id))
