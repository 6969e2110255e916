import unittest
from fastapi.testclient import TestClient
from lunchpass.api.api_run import app
from lunchpass.utilities.config import DEFAULT_OPENING_HOURS

LUNCH = {"from": "12:00", "to": "14:00"}


class TestAvailabilityAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        resp = self.client.get('/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_open_restaurant(self):
        resp = self.client.post('/api/availability', json={"lunch_hours": LUNCH, "now": "2024-01-03T12:30:00"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data['is_open'])
        self.assertIsNone(data['reason'])
        self.assertEqual(data['headline'], "Open Now")
        self.assertEqual(data['day'], "wednesday")
        self.assertEqual(data['day_label'], "MITTWOCH")

    def test_missing_hours(self):
        resp = self.client.post('/api/availability', json={"now": "2024-01-03T12:30:00"})
        self.assertEqual(resp.json()['reason'], "hours_unavailable")

    def test_non_ascii_digits_in_hours(self):
        resp = self.client.post('/api/availability', json={
            "lunch_hours": {"from": "1\u00b2:00", "to": "14:00"}, "now": "2024-01-03T12:30:00"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['reason'], "hours_unavailable")
        self.assertEqual(resp.json()['message'], "Lunch hours not available")

    def test_order_check(self):
        resp = self.client.post('/api/availability/order-check',
                                json={"lunch_hours": LUNCH, "now": "2024-01-06T12:30:00"})
        self.assertEqual(resp.json(), {"allowed": False, "title": "Not Available",
                                       "message": "Orders are not available on weekends"})
        resp = self.client.post('/api/availability/order-check',
                                json={"lunch_hours": LUNCH, "now": "2024-01-03T13:00:00"})
        self.assertEqual(resp.json(), {"allowed": True})


class TestEntitlementAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_weekly(self):
        resp = self.client.post('/api/entitlement/weekly', json={
            "start_date": "2024-01-01", "end_date": "2024-12-31",
            "meals_per_week": 3, "now": "2024-01-03T10:00:00"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"weekly_meals": 3})

    def test_weekly_from_balance(self):
        resp = self.client.post('/api/entitlement/weekly-from-balance', json={
            "start_date": "2024-01-03", "end_date": "2024-01-31", "remaining_meals": 8,
            "meals_per_week": 3, "now": "2024-01-03T10:00:00"})
        self.assertEqual(resp.json(), {"weekly_meals": 2, "monthly_meals": 8})

    def test_invalid_body(self):
        resp = self.client.post('/api/entitlement/weekly', json={
            "start_date": "2024-01-01", "end_date": "2024-12-31", "meals_per_week": -1})
        self.assertEqual(resp.status_code, 422)

    def test_dashboard(self):
        resp = self.client.post('/api/entitlement/dashboard', json={
            "membership": {"start_date": "2024-01-01", "end_date": "2024-12-31",
                           "plan_type": "M", "meals_per_week": 3},
            "meal_balance": {"start_date": "2024-01-03", "end_date": "2024-01-31", "remaining_meals": 8},
            "now": "2024-01-03T10:00:00"})
        data = resp.json()
        self.assertEqual(data['weekly'], 2)
        self.assertEqual(data['monthly'], 8)
        self.assertEqual(data['monthly_max'], 12)
        self.assertEqual(data['month_name'], "January")

    def test_inactive_membership(self):
        membership = {"start_date": "2024-01-01", "end_date": "2024-12-31",
                      "plan_type": "M", "meals_per_week": 3, "status": "inactive"}
        resp = self.client.post('/api/entitlement/employee', json={
            "membership": membership, "meals_per_week": 3, "now": "2024-01-03T10:00:00"})
        self.assertEqual(resp.json()['weekly'], 0)
        resp = self.client.post('/api/entitlement/dashboard', json={
            "membership": membership,
            "meal_balance": {"start_date": "2024-01-03", "end_date": "2024-01-31", "remaining_meals": 8},
            "now": "2024-01-03T10:00:00"})
        self.assertEqual(resp.json()['weekly'], 0)
        self.assertEqual(resp.json()['monthly'], 0)

    def test_employee_allotment(self):
        resp = self.client.post('/api/entitlement/employee', json={
            "membership": {"start_date": "2024-01-01", "end_date": "2024-12-31", "plan_type": "S"},
            "meals_per_week": 2, "now": "2024-01-05T10:00:00"})
        self.assertEqual(resp.json()['weekly'], 1)


class TestRestaurantsAndMenuAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_visible_restaurants(self):
        resp = self.client.post('/api/restaurants/visible', json={
            "membership_tier": "M",
            "now": "2024-01-03T12:30:00",
            "restaurants": [
                {"id": "r1", "name": "Pasta Place", "tier": "S", "lunch_hours": LUNCH, "opening_hours": "10 am - 3 pm"},
                {"id": "r2", "name": "Sushi Bar", "tier": "m"},
                {"id": "r3", "name": "Steak House", "tier": "L"},
            ],
            "allowed": [
                {"restaurant_id": "r1", "distance_km": 2.0},
                {"restaurant_id": "r2", "distance_km": 0.8},
                {"restaurant_id": "r3", "distance_km": 0.1},
            ],
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['count'], 2)
        self.assertEqual(data['total'], 3)
        self.assertEqual([r['id'] for r in data['restaurants']], ["r2", "r1"])
        pasta = data['restaurants'][1]
        self.assertEqual(pasta['lunch_label'], "Lunch: 12:00 PM - 2:00 PM")
        self.assertTrue(pasta['is_open'])
        self.assertEqual(pasta['opening_label'], "10 am - 3 pm")
        self.assertEqual(data['restaurants'][0]['opening_label'], DEFAULT_OPENING_HOURS)
        self.assertFalse(data['restaurants'][0]['is_open'])

    def test_todays_menu(self):
        resp = self.client.post('/api/menu/today', json={
            "now": "2024-01-03T11:00:00",
            "items": [
                {"id": "1", "name": "Schnitzel", "category": "Main", "days": ["Wednesday"]},
                {"id": "2", "name": "Fish", "category": "Main", "days": ["friday"]},
                {"id": "3", "name": "Salad", "days": ["wednesday"]},
            ],
        })
        data = resp.json()
        self.assertEqual(data['day'], "wednesday")
        self.assertEqual(data['count'], 2)
        self.assertEqual(sorted(data['categories']), ["Main", "Other"])


if __name__ == '__main__':
    unittest.main()
