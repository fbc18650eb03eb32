"""Tests for the status workflow state machine"""
from datetime import date, datetime, timezone

import pytest

from license_tracker.domain.enums import TaskStatus, EDITED_STATUS, SYSTEM_ACTOR, DEFAULT_NOTES
from license_tracker.domain.errors import InvalidTransitionError, ValidationError
from license_tracker.domain.models import LicenseTask
from license_tracker.engine.status_workflow import StatusWorkflow
from license_tracker.utils.time import expiry_date, maturity_date


def make_task(**overrides) -> LicenseTask:
    data = {
        "task_id": "LT-0123456789ab",
        "applicant_name": "Ravi Kumar",
        "mobile": "9876543210",
        "vehicle_class": ["LMV"],
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return LicenseTask.model_validate(data)


class TestDateDerivation:

    def test_maturity_is_thirty_days_after_issue(self):
        assert maturity_date(date(2024, 1, 31)) == date(2024, 3, 1)
        assert maturity_date(date(2023, 12, 15)) == date(2024, 1, 14)

    def test_expiry_is_six_calendar_months_after_issue(self):
        assert expiry_date(date(2024, 1, 31)) == date(2024, 7, 31)
        assert expiry_date(date(2024, 9, 10)) == date(2025, 3, 10)

    def test_expiry_clamps_to_end_of_shorter_month(self):
        assert expiry_date(date(2024, 8, 31)) == date(2025, 2, 28)
        assert expiry_date(date(2023, 8, 31)) == date(2024, 2, 29)


class TestPlanTransition:

    def test_application_generated_records_number(self, workflow):
        plan = workflow.plan_transition(make_task(), "Application Generated", application_number="AP123")

        assert plan.task.status == "Application Generated"
        assert plan.task.application_number == "AP123"
        assert plan.changed_fields == {"status", "application_number"}
        assert len(plan.task.status_history) == 1
        assert plan.event.application_number == "AP123"
        assert plan.dates is None

    def test_application_number_can_be_overwritten(self, workflow):
        task = make_task(status="Application Generated", application_number="AP123")
        plan = workflow.plan_transition(task, "Application Generated", application_number="AP999")
        assert plan.task.application_number == "AP999"

    def test_number_ignored_for_other_statuses(self, workflow):
        plan = workflow.plan_transition(make_task(), "Documents Pending", application_number="AP123")
        assert plan.task.application_number is None
        assert "application_number" not in plan.changed_fields

    def test_llr_issued_requires_application_number(self, workflow):
        task = make_task()
        with pytest.raises(InvalidTransitionError) as exc_info:
            workflow.plan_transition(task, "LLR Issued")

        assert exc_info.value.message == "Application number is required before issuing LLR"
        assert exc_info.value.http_status == 400
        assert task.status_history == []

    def test_blank_application_number_does_not_satisfy_llr(self, workflow):
        with pytest.raises(InvalidTransitionError):
            workflow.plan_transition(make_task(application_number="  "), "LLR Issued", application_number=" ")

    def test_llr_issued_accepts_number_from_same_call(self, workflow):
        plan = workflow.plan_transition(make_task(), "LLR Issued", application_number="AP555")
        assert plan.task.application_number == "AP555"
        assert plan.task.llr_date == date(2024, 1, 31)

    def test_llr_issued_derives_dates(self, workflow):
        task = make_task(status="Application Generated", application_number="AP123")
        plan = workflow.plan_transition(task, "LLR Issued")

        assert plan.task.llr_date == date(2024, 1, 31)
        assert plan.task.maturity_date == date(2024, 3, 1)
        assert plan.task.expiry_date == date(2024, 7, 31)
        assert plan.dates.llr_date == date(2024, 1, 31)
        assert plan.event.maturity_date == date(2024, 3, 1)
        assert plan.storage_updates()["expiry_date"] == "2024-07-31"

    def test_reissue_keeps_original_dates(self, workflow):
        task = make_task(
            status="LLR Issued",
            application_number="AP123",
            llr_date="2023-11-02",
            maturity_date="2023-12-02",
            expiry_date="2024-05-02",
        )
        plan = workflow.plan_transition(task, "LLR Issued")
        assert plan.task.llr_date == date(2023, 11, 2)
        assert plan.dates.expiry_date == date(2024, 5, 2)

    def test_issue_date_uses_business_timezone(self, catalog_service):
        # 20:00 UTC on Jan 31 is already Feb 1 in India
        late = datetime(2024, 1, 31, 20, 0, tzinfo=timezone.utc)
        workflow = StatusWorkflow(catalog_service.is_known_status, "Asia/Kolkata", clock=lambda: late)
        plan = workflow.plan_transition(make_task(application_number="AP1"), "LLR Issued")

        assert plan.task.llr_date == date(2024, 2, 1)
        assert plan.event.date == date(2024, 2, 1)
        assert plan.event.time == "01:30:00"

    def test_issue_reads_the_clock_once_across_midnight(self, catalog_service):
        # 23:59:59 IST on Jan 31, then 00:00:01 IST on Feb 1
        ticks = iter([
            datetime(2024, 1, 31, 18, 29, 59, tzinfo=timezone.utc),
            datetime(2024, 1, 31, 18, 30, 1, tzinfo=timezone.utc),
        ])
        workflow = StatusWorkflow(catalog_service.is_known_status, "Asia/Kolkata", clock=lambda: next(ticks))
        plan = workflow.plan_transition(make_task(application_number="AP1"), "LLR Issued")

        assert plan.task.llr_date == date(2024, 1, 31)
        assert plan.event.date == plan.event.llr_date == date(2024, 1, 31)
        assert plan.event.time == "23:59:59"

    def test_event_defaults(self, workflow):
        plan = workflow.plan_transition(make_task(), "Documents Pending", notes="   ")
        assert plan.event.notes == DEFAULT_NOTES
        assert plan.event.updated_by == SYSTEM_ACTOR
        assert plan.event.date == date(2024, 1, 31)
        assert plan.event.time == "10:00:00"

    def test_updater_is_recorded(self, workflow):
        plan = workflow.plan_transition(make_task(), "Documents Pending", updated_by="clerk1")
        assert plan.event.updated_by == "clerk1"

    def test_unknown_status_rejected_when_catalog_enforced(self, workflow):
        with pytest.raises(ValidationError):
            workflow.plan_transition(make_task(), "Teleported")

    def test_unknown_status_allowed_without_catalog(self, clock):
        workflow = StatusWorkflow(is_known_status=None, clock=clock)
        plan = workflow.plan_transition(make_task(), "Teleported")
        assert plan.task.status == "Teleported"

    def test_blank_status_rejected(self, workflow):
        with pytest.raises(ValidationError):
            workflow.plan_transition(make_task(), "  ")

    def test_status_matches_last_history_entry(self, workflow):
        task = make_task()
        for status, number in (
            (TaskStatus.DOCUMENTS_PENDING.value, None),
            (TaskStatus.APPLICATION_GENERATED.value, "AP123"),
            (TaskStatus.LLR_ISSUED.value, None),
        ):
            task = workflow.plan_transition(task, status, application_number=number).task
            assert task.status == task.status_history[-1].status
        assert [e.status for e in task.status_history] == [
            "Documents Pending", "Application Generated", "LLR Issued"
        ]

    def test_plan_does_not_mutate_input(self, workflow):
        task = make_task()
        workflow.plan_transition(task, "Documents Pending")
        assert task.status == "New Application"
        assert task.status_history == []


class TestPlanEdit:

    def test_only_supplied_fields_change(self, workflow):
        task = make_task(notes="first visit")
        plan = workflow.plan_edit(task, mobile="9000000000", applicant_name="", notes=None)

        assert plan.task.mobile == "9000000000"
        assert plan.task.applicant_name == "Ravi Kumar"
        assert plan.task.notes == "first visit"
        assert plan.changed_fields == {"mobile"}

    def test_edit_appends_edited_entry_and_keeps_status(self, workflow):
        task = make_task(status="Application Generated", application_number="AP123")
        plan = workflow.plan_edit(task, notes="called applicant")

        assert plan.task.status == "Application Generated"
        assert plan.event.status == EDITED_STATUS
        assert plan.event.notes == "called applicant"
        assert plan.event.application_number == "AP123"

    def test_empty_edit_still_records_history(self, workflow):
        plan = workflow.plan_edit(make_task())
        assert plan.changed_fields == frozenset()
        assert plan.storage_updates() == {}
        assert plan.event.notes == DEFAULT_NOTES
        assert len(plan.task.status_history) == 1

    def test_vehicle_classes_deduplicated(self, workflow):
        plan = workflow.plan_edit(make_task(), vehicle_class=["MCWG", "LMV", "MCWG", ""])
        assert plan.task.vehicle_class == ["MCWG", "LMV"]

    def test_empty_vehicle_class_list_ignored(self, workflow):
        plan = workflow.plan_edit(make_task(), vehicle_class=[])
        assert plan.task.vehicle_class == ["LMV"]
