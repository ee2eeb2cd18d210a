"""
Tests for the notification center.
"""

import logging

from debuglog.notifications import LOG_ADDED, LOG_KEY, NotificationCenter


class TestNotificationCenter:
    """Tests for subscribe/post/unsubscribe."""

    def test_delivery_in_subscription_order(self):
        """Observers are called synchronously, in order."""
        center = NotificationCenter()
        calls = []
        center.subscribe(LOG_ADDED, lambda log: calls.append(("first", log)))
        center.subscribe(LOG_ADDED, lambda log: calls.append(("second", log)))

        delivered = center.post(LOG_ADDED, **{LOG_KEY: "entry"})

        assert delivered == 2
        assert calls == [("first", "entry"), ("second", "entry")]

    def test_other_names_not_delivered(self):
        """Observers only hear their own notification."""
        center = NotificationCenter()
        calls = []
        center.subscribe("other", lambda **info: calls.append(info))

        assert center.post(LOG_ADDED, log="x") == 0
        assert calls == []

    def test_unsubscribe(self):
        """Removed observers are not called anymore."""
        center = NotificationCenter()
        calls = []
        observer = center.subscribe(LOG_ADDED, lambda log: calls.append(log))

        assert center.unsubscribe(LOG_ADDED, observer) is True
        assert center.unsubscribe(LOG_ADDED, observer) is False
        center.post(LOG_ADDED, log="x")
        assert calls == []

    def test_failing_observer_does_not_stop_delivery(self, caplog):
        """An exception in one observer is logged, the others still run."""
        center = NotificationCenter()
        calls = []

        def broken(log):
            raise RuntimeError("viewer crashed")

        center.subscribe(LOG_ADDED, broken)
        center.subscribe(LOG_ADDED, lambda log: calls.append(log))

        with caplog.at_level(logging.ERROR, logger="debuglog.notifications"):
            center.post(LOG_ADDED, log="x")

        assert calls == ["x"]
        assert "viewer crashed" in caplog.text

    def test_observer_may_unsubscribe_during_post(self):
        """Delivery works on a snapshot of the observer list."""
        center = NotificationCenter()
        calls = []

        def once(log):
            calls.append(log)
            center.unsubscribe(LOG_ADDED, once)

        center.subscribe(LOG_ADDED, once)
        center.post(LOG_ADDED, log="a")
        center.post(LOG_ADDED, log="b")

        assert calls == ["a"]
