"""Unit tests for the Appointment entity.

Tests cover:
- Default status and explicit rehydration status
- Transition methods and assign_status
- Permissive transitions (no guard on the current status)
- Primitive serialization
"""

import pytest

from src.domain.enums import AppointmentState
from src.domain.errors import InvalidAppointmentStatusError
from tests.conftest import make_appointment


@pytest.mark.unit
class TestAppointmentCreation:
    """Test Appointment construction."""

    def test_new_appointment_is_pending(self):
        appointment = make_appointment()

        assert appointment.is_pending()
        assert appointment.status.value == AppointmentState.PENDING

    def test_rehydrated_appointment_keeps_status(self):
        appointment = make_appointment(status="confirmed")

        assert appointment.is_confirmed()

    def test_value_objects_are_exposed(self):
        appointment = make_appointment(country="cl")

        assert appointment.insured_id.value == "12345"
        assert appointment.schedule_id.value == 98701
        assert appointment.country.value == "CL"


@pytest.mark.unit
class TestAppointmentTransitions:
    """Test the status state machine."""

    def test_confirm(self):
        appointment = make_appointment()

        appointment.confirm()

        assert appointment.is_confirmed()

    def test_cancel(self):
        appointment = make_appointment()

        appointment.cancel()

        assert appointment.is_cancelled()

    def test_complete(self):
        appointment = make_appointment()

        appointment.complete()

        assert appointment.is_completed()

    def test_assign_status_from_text(self):
        appointment = make_appointment()

        appointment.assign_status("cancelled")

        assert appointment.is_cancelled()

    def test_assign_status_rejects_unknown_text(self):
        appointment = make_appointment()

        with pytest.raises(InvalidAppointmentStatusError):
            appointment.assign_status("archived")

        assert appointment.is_pending()

    @pytest.mark.parametrize("start", AppointmentState.values())
    @pytest.mark.parametrize("target", ["confirm", "cancel", "complete"])
    def test_transitions_are_allowed_from_every_state(self, start, target):
        """Transitions are currently unguarded.

        A completed or cancelled appointment can still move to any other
        status. Tightening this must update this test deliberately.
        """
        appointment = make_appointment(status=start)

        getattr(appointment, target)()

        expected = {
            "confirm": AppointmentState.CONFIRMED,
            "cancel": AppointmentState.CANCELLED,
            "complete": AppointmentState.COMPLETED,
        }[target]
        assert appointment.status.value == expected

    def test_completed_can_return_to_pending(self):
        appointment = make_appointment(status="completed")

        appointment.assign_status("pending")

        assert appointment.is_pending()


@pytest.mark.unit
class TestAppointmentSerialization:
    """Test to_dict()."""

    def test_to_dict_exposes_primitives_only(self):
        appointment = make_appointment()

        assert appointment.to_dict() == {
            "insuredId": "12345",
            "countryId": "PE",
            "scheduleId": 98701,
            "centerId": 101,
            "specialtyId": 105,
            "medicId": 201,
            "date": "2025-12-25T10:00:00Z",
            "estado": "pending",
        }

    def test_to_dict_reflects_status_changes(self):
        appointment = make_appointment()

        appointment.complete()

        assert appointment.to_dict()["estado"] == "completed"
