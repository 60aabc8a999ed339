import pytest

BASE = "/api/v1/contributions"


@pytest.mark.integration
class TestContributionEndpoints:
    """Integration tests for /api/v1/contributions"""

    def test_add_and_list(self, client, auth_headers):
        response = client.post(BASE, json={"hours": "2.5", "activity": "Kitchen"}, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["data"]["family_name"] == "Rossi"

        listing = client.get(BASE, headers=auth_headers).json()["data"]
        assert len(listing) == 1
        assert listing[0]["activity"] == "Kitchen"

    def test_negative_hours_rejected(self, client, auth_headers):
        response = client.post(BASE, json={"hours": "-1", "activity": "Kitchen"}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_summary(self, client, auth_headers, other_headers):
        client.post(BASE, json={"hours": "2.5", "activity": "Kitchen"}, headers=auth_headers)
        client.post(BASE, json={"hours": "1", "activity": "Garden"}, headers=other_headers)
        client.post(BASE, json={"hours": "3", "activity": "Library"}, headers=auth_headers)

        summary = client.get(f"{BASE}/summary", headers=auth_headers).json()["data"]

        assert float(summary["total_hours"]) == 6.5
        assert summary["unique_contributors"] == 2
        assert [row["family_name"] for row in summary["per_family"]] == ["Rossi", "Bianchi"]
        assert float(summary["per_family"][0]["hours"]) == 5.5

    def test_only_admin_deletes(self, client, auth_headers, admin_headers):
        contribution_id = client.post(
            BASE, json={"hours": "1", "activity": "Kitchen"}, headers=auth_headers
        ).json()["data"]["id"]

        denied = client.delete(f"{BASE}/{contribution_id}", headers=auth_headers)
        assert denied.status_code == 403

        allowed = client.delete(f"{BASE}/{contribution_id}", headers=admin_headers)
        assert allowed.status_code == 200
        assert client.get(BASE, headers=admin_headers).json()["data"] == []
