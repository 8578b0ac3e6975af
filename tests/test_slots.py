#!/usr/bin/env python3
"""
Unit tests for slot storage.
"""

import unittest

from dip.lifecycle import (
    CAPABILITY,
    SERVICE01,
    SERVICE02,
    SERVICE_ROLES,
    UNBOUND,
    Bound,
    IncompatibleProvider,
    Role,
    Service01,
    Service02,
    ServiceSlot,
    SlotBundle,
    Unbound,
    UnboundSlotAccess,
    UnknownRole,
)


class TestRole(unittest.TestCase):
    """Test role identity."""

    def test_standard_roles(self):
        self.assertEqual(SERVICE01.name, "Service01")
        self.assertIs(SERVICE01.bound_type, Service01)
        self.assertIs(SERVICE01.factory, Service01)
        self.assertIsNone(CAPABILITY.factory)

    def test_attr_form(self):
        self.assertEqual(SERVICE01.attr, "service01")
        self.assertEqual(CAPABILITY.attr, "capability")
        self.assertEqual(Role("MailSender", object).attr, "mail_sender")

    def test_equality_ignores_factory(self):
        self.assertEqual(Role("Service01", Service01), SERVICE01)
        self.assertEqual(hash(Role("Service01", Service01)), hash(SERVICE01))

    def test_accepts(self):
        self.assertTrue(SERVICE01.accepts(Service01()))
        self.assertFalse(SERVICE01.accepts(Service02()))
        self.assertTrue(CAPABILITY.accepts(Service02()))


class TestServiceSlot(unittest.TestCase):
    """Test a single slot."""

    def test_starts_unbound(self):
        slot = ServiceSlot(SERVICE01, "A")

        self.assertFalse(slot.is_bound)
        self.assertIs(slot.state, UNBOUND)
        self.assertIsNone(slot.find())

    def test_read_before_bind_raises_every_time(self):
        slot = ServiceSlot(SERVICE02, "A")

        for _ in range(3):
            with self.assertRaises(UnboundSlotAccess) as ctx:
                slot.get()
            self.assertEqual(ctx.exception.consumer, "A")
            self.assertEqual(ctx.exception.role, "Service02")

    def test_bind_then_get(self):
        slot = ServiceSlot(SERVICE01, "A")
        provider = Service01()

        slot.bind(provider)

        self.assertTrue(slot.is_bound)
        self.assertEqual(slot.state, Bound(provider))
        self.assertIs(slot.get(), provider)
        self.assertIs(slot.find(), provider)

    def test_rebind_replaces(self):
        slot = ServiceSlot(CAPABILITY, "A")
        first, second = Service01(), Service02()

        slot.bind(first)
        slot.bind(second)

        self.assertIs(slot.get(), second)

    def test_wrong_type_rejected(self):
        slot = ServiceSlot(SERVICE01, "A")

        with self.assertRaises(IncompatibleProvider) as ctx:
            slot.bind(Service02())

        self.assertIsInstance(ctx.exception, TypeError)
        self.assertEqual(ctx.exception.role, "Service01")
        self.assertFalse(slot.is_bound)

    def test_none_rejected(self):
        slot = ServiceSlot(CAPABILITY, "A")

        with self.assertRaises(IncompatibleProvider):
            slot.bind(None)

    def test_failed_rebind_keeps_previous_value(self):
        slot = ServiceSlot(SERVICE01, "A")
        provider = Service01()
        slot.bind(provider)

        with self.assertRaises(IncompatibleProvider):
            slot.bind(Service02())

        self.assertIs(slot.get(), provider)


class TestUnbound(unittest.TestCase):
    """Test the unbound state singleton."""

    def test_singleton(self):
        self.assertIs(Unbound.instance(), UNBOUND)

    def test_direct_construction_rejected(self):
        with self.assertRaises(RuntimeError):
            Unbound()


class TestSlotBundle(unittest.TestCase):
    """Test the slot bundle embedded in consumers."""

    def test_lookup_by_role_name_and_attr(self):
        bundle = SlotBundle(SERVICE_ROLES, "A")

        self.assertIs(bundle.slot(SERVICE01), bundle.slot("Service01"))
        self.assertIs(bundle.slot(SERVICE01), bundle.slot("service01"))
        self.assertEqual(bundle.role("service02"), SERVICE02)

    def test_unknown_role(self):
        bundle = SlotBundle(SERVICE_ROLES, "A")

        with self.assertRaises(UnknownRole) as ctx:
            bundle.get("Service04")
        self.assertIsInstance(ctx.exception, KeyError)
        self.assertIn("Service04", str(ctx.exception))

        with self.assertRaises(UnknownRole):
            bundle.slot(CAPABILITY)

    def test_duplicate_roles_rejected(self):
        with self.assertRaises(ValueError):
            SlotBundle([SERVICE01, SERVICE01], "A")

    def test_completeness_tracking(self):
        bundle = SlotBundle(SERVICE_ROLES, "A")
        self.assertEqual(bundle.bound_count(), 0)
        self.assertEqual(bundle.unbound_roles(), SERVICE_ROLES)

        bundle.bind(SERVICE01, Service01())
        self.assertEqual(bundle.bound_count(), 1)
        self.assertFalse(bundle.is_complete())
        self.assertTrue(bundle.is_bound("Service01"))
        self.assertFalse(bundle.is_bound("Service02"))

    def test_iteration_and_len(self):
        bundle = SlotBundle(SERVICE_ROLES, "A")

        self.assertEqual(len(bundle), 3)
        self.assertEqual([slot.role for slot in bundle], list(SERVICE_ROLES))
        self.assertEqual(bundle.roles, SERVICE_ROLES)


if __name__ == "__main__":
    unittest.main()
