import unittest
from mealplanner.events.Event_Bus import EventBus


class TestEventBus(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.received = []

    def _listener(self, name, payload):
        self.received.append((name, payload))

    def test_subscribe_once(self):
        self.bus.subscribe("week.reset", self._listener)
        self.bus.subscribe("week.reset", self._listener)
        self.assertEqual(self.bus.publish("week.reset", {"days": 7}), 1)
        self.assertEqual(self.received, [("week.reset", {"days": 7})])

    def test_unknown_event_has_no_listeners(self):
        self.assertEqual(self.bus.publish("week.meal_added"), 0)

    def test_failing_listener_does_not_block_others(self):
        def broken(name, payload):
            raise RuntimeError("boom")

        self.bus.subscribe("week.reset", broken)
        self.bus.subscribe("week.reset", self._listener)
        with self.assertLogs("mealplanner.events.Event_Bus", level="ERROR"):
            self.assertEqual(self.bus.publish("week.reset"), 2)
        self.assertEqual(self.received, [("week.reset", None)])
