import unittest
from lunchpass.domain.Restaurant import Restaurant
from lunchpass.logic.restaurants.listing import (
    attach_distances,
    filter_visible_restaurants,
    is_restaurant_visible_for_tier,
    list_restaurants_for_company,
    sort_by_distance,
)


class TestTierVisibility(unittest.TestCase):

    def test_ordering(self):
        self.assertFalse(is_restaurant_visible_for_tier('L', 'S'))
        self.assertTrue(is_restaurant_visible_for_tier('S', 'L'))
        self.assertTrue(is_restaurant_visible_for_tier('M', 'M'))
        self.assertTrue(is_restaurant_visible_for_tier('S', 'M'))
        self.assertFalse(is_restaurant_visible_for_tier('L', 'M'))

    def test_small_plan_sees_only_small(self):
        visible = [t for t in ('S', 'M', 'L') if is_restaurant_visible_for_tier(t, 'S')]
        self.assertEqual(visible, ['S'])

    def test_unknown_tiers_see_nothing(self):
        for plan in ('XL', 'XS', '', None):
            for tier in ('S', 'M', 'L'):
                self.assertFalse(is_restaurant_visible_for_tier(tier, plan))
        self.assertFalse(is_restaurant_visible_for_tier(None, 'L'))
        self.assertFalse(is_restaurant_visible_for_tier('gold', 'L'))

    def test_case_insensitive(self):
        self.assertTrue(is_restaurant_visible_for_tier('s', ' m '))


class TestRestaurantOrdering(unittest.TestCase):

    def setUp(self):
        self.restaurants = [
            Restaurant("r1", "Pasta Place", "S"),
            Restaurant("r2", "Sushi Bar", "M"),
            Restaurant("r3", "Steak House", "L"),
            Restaurant("r4", "Noodle Corner", "S"),
        ]
        self.allowed = [
            {"restaurant_id": "r1", "distance_km": 3.0},
            {"restaurant_id": "r2", "distance_km": 1.5},
            {"restaurant_id": "r3", "distance_km": 0.5},
        ]

    def test_attach_distances_drops_unlinked_and_leaves_input_alone(self):
        linked = attach_distances(self.restaurants, self.allowed)
        self.assertEqual([r.id for r in linked], ["r1", "r2", "r3"])
        self.assertEqual(linked[1].distance_km, 1.5)
        self.assertIsNone(self.restaurants[1].distance_km)

    def test_missing_distance_sorts_first(self):
        rows = [Restaurant("a", distance_km=3.0), Restaurant("b"), Restaurant("c", distance_km=1.5)]
        self.assertEqual([r.id for r in sort_by_distance(rows)], ["b", "c", "a"])

    def test_sort_is_stable(self):
        rows = [Restaurant("a", distance_km=1.0), Restaurant("b", distance_km=1.0)]
        self.assertEqual([r.id for r in sort_by_distance(rows)], ["a", "b"])

    def test_filter_visible(self):
        visible = filter_visible_restaurants(self.restaurants, "M")
        self.assertEqual([r.id for r in visible], ["r1", "r2", "r4"])

    def test_company_listing(self):
        listing = list_restaurants_for_company(self.restaurants, "M", self.allowed)
        self.assertEqual([r.id for r in listing], ["r2", "r1"])
        self.assertEqual(list_restaurants_for_company(self.restaurants, "XL", self.allowed), [])


if __name__ == '__main__':
    unittest.main()
