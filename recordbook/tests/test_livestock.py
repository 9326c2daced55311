import unittest

from fastapi.testclient import TestClient

from recordbook.app import create_app
from recordbook.auth import issue_token
from recordbook.config import Settings
from recordbook.db import InMemoryDocumentStore
from recordbook.errors import ERR_BAD_DATE, ERR_NO_QUERY

SETTINGS = Settings(_env_file=None, use_in_memory_backends=True, jwt_secret="test-secret")


def animal_payload(project_id: str, **overrides) -> dict:
    payload = {
        "name": "Buttercup",
        "species": "Bovine",
        "birth_date": "2023-03-01T00:00:00Z",
        "purchase_date": "2023-10-01T00:00:00Z",
        "sire_breed": "Angus",
        "dam_breed": "Hereford",
        "animal_cost": 1250.5,
        "sale_price": 0,
        "yield_grade": "2",
        "quality_grade": "Choice",
        "project_id": project_id,
    }
    payload.update(overrides)
    return payload


class LivestockAndFinanceTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(
            create_app(settings=SETTINGS, store=InMemoryDocumentStore())
        )
        token = issue_token("user-a", "Pat", SETTINGS)
        self.auth = {"Authorization": f"Bearer {token}"}

    def post(self, path: str, payload: dict) -> dict:
        response = self.client.post(path, json=payload, headers=self.auth)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_animals_are_listed_by_project(self):
        cow = self.post("/animal", animal_payload("p1"))["animal"]
        self.post("/animal", animal_payload("p2", name="Daisy"))

        response = self.client.get("/animal?projectID=p1", headers=self.auth)
        self.assertEqual(response.status_code, 200)
        self.assertEqual([a["id"] for a in response.json()["animals"]], [cow["id"]])
        self.assertEqual(cow["beginning_weight"], 0)

    def test_animal_list_requires_project(self):
        for path in ("/animal", "/animal?projectID=", "/animal?project_id=p1"):
            response = self.client.get(path, headers=self.auth)
            self.assertEqual(response.status_code, 400, path)
            self.assertEqual(response.json()["message"], ERR_NO_QUERY, path)

    def test_daily_feed_list_requires_animal(self):
        for path in (
            "/daily-feed?projectID=p1",
            "/daily-feed?projectID=p1&animalID=",
            "/supply?projectID=",
        ):
            response = self.client.get(path, headers=self.auth)
            self.assertEqual(response.status_code, 400, path)
            self.assertEqual(response.json()["message"], ERR_NO_QUERY, path)

    def test_rate_of_gain_keeps_other_fields(self):
        cow = self.post("/animal", animal_payload("p1"))["animal"]
        response = self.client.put(
            f"/rate-of-gain/{cow['id']}",
            json={
                "beginning_weight": 600,
                "beginning_date": "2024-01-01T00:00:00Z",
                "end_weight": 1150.5,
                "end_date": "2024-07-01T00:00:00Z",
            },
            headers=self.auth,
        )
        self.assertEqual(response.status_code, 204)

        animal = self.client.get(f"/animal/{cow['id']}", headers=self.auth).json()[
            "animal"
        ]
        self.assertEqual(animal["end_weight"], 1150.5)
        self.assertEqual(animal["sire_breed"], "Angus")
        self.assertEqual(animal["created"], cow["created"])

    def test_rate_of_gain_for_missing_animal(self):
        response = self.client.put(
            "/rate-of-gain/nope",
            json={
                "beginning_weight": 1,
                "beginning_date": "2024-01-01T00:00:00Z",
                "end_weight": 2,
                "end_date": "2024-02-01T00:00:00Z",
            },
            headers=self.auth,
        )
        self.assertEqual(response.status_code, 404)

    def test_animal_update_and_delete(self):
        cow = self.post("/animal", animal_payload("p1"))["animal"]
        response = self.client.put(
            f"/animal/{cow['id']}",
            json=animal_payload("p1", sale_price=2100),
            headers=self.auth,
        )
        self.assertEqual(response.status_code, 204)
        self.assertEqual(
            self.client.get(f"/animal/{cow['id']}", headers=self.auth).json()["animal"][
                "sale_price"
            ],
            2100,
        )
        self.assertEqual(
            self.client.delete(f"/animal/{cow['id']}", headers=self.auth).status_code,
            204,
        )
        self.assertEqual(
            self.client.delete(f"/animal/{cow['id']}", headers=self.auth).status_code,
            404,
        )

    def test_feed_purchase_and_daily_feed_flow(self):
        cow = self.post("/animal", animal_payload("p1"))["animal"]
        feed = self.post("/feed", {"name": "Grower pellets", "project_id": "p1"})["feed"]
        purchase = self.post(
            "/feed-purchase",
            {
                "date_purchased": "2024-02-01T00:00:00Z",
                "amount_purchased": 500,
                "total_cost": 180.25,
                "feed_id": feed["id"],
                "project_id": "p1",
            },
        )["feed_purchase"]

        daily = {
            "feed_date": "2024-02-02T07:00:00Z",
            "feed_amount": 12.5,
            "animal_id": cow["id"],
            "feed_id": feed["id"],
            "feed_purchase_id": purchase["id"],
            "project_id": "p1",
        }
        first = self.post("/daily-feed", daily)["daily_feed"]
        self.post("/daily-feed", {**daily, "animal_id": "other-animal"})

        response = self.client.get(
            f"/daily-feed?projectID=p1&animalID={cow['id']}", headers=self.auth
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            [d["id"] for d in response.json()["daily_feeds"]], [first["id"]]
        )

        feeds = self.client.get("/feed?projectID=p1", headers=self.auth).json()
        self.assertEqual([f["name"] for f in feeds["feeds"]], ["Grower pellets"])
        purchases = self.client.get(
            "/feed-purchase?projectID=p1", headers=self.auth
        ).json()
        self.assertEqual(len(purchases["feed_purchases"]), 1)

    def test_feed_purchase_rejects_bad_date(self):
        response = self.client.post(
            "/feed-purchase",
            json={
                "date_purchased": "2024-02-01",
                "amount_purchased": 500,
                "total_cost": 180.25,
                "feed_id": "f1",
                "project_id": "p1",
            },
            headers=self.auth,
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], ERR_BAD_DATE)

    def test_expenses_and_supplies(self):
        expense = self.post(
            "/expense",
            {
                "date": "2024-03-01T00:00:00Z",
                "items": "Halter",
                "quantity": 1,
                "cost": 24.99,
                "project_id": "p1",
            },
        )["expense"]
        supply = self.post(
            "/supply",
            {
                "description": "Show box",
                "start_value": 150,
                "end_value": 120,
                "project_id": "p1",
            },
        )["supply"]

        expenses = self.client.get("/expense?projectID=p1", headers=self.auth).json()
        self.assertEqual([e["id"] for e in expenses["expenses"]], [expense["id"]])
        supplies = self.client.get("/supply?projectID=p2", headers=self.auth).json()
        self.assertEqual(supplies["supplies"], [])

        response = self.client.put(
            f"/supply/{supply['id']}",
            json={
                "description": "Show box",
                "start_value": 150,
                "end_value": 100,
                "project_id": "p1",
            },
            headers=self.auth,
        )
        self.assertEqual(response.status_code, 204)
        self.assertEqual(
            self.client.get(f"/supply/{supply['id']}", headers=self.auth).json()[
                "supply"
            ]["end_value"],
            100,
        )
        self.assertEqual(
            self.client.delete(f"/expense/{expense['id']}", headers=self.auth).status_code,
            204,
        )


if __name__ == "__main__":
    unittest.main()
