"""Tests de metas de ahorro: cálculo de avance y endpoints (HOY = 2024-06-15)."""

from datetime import date

import pytest

from budget_planner.models.savings_goal import SavingsGoal
from budget_planner.utils.savings_goal_helpers import calculate_goal_progress, summarize_goals

TODAY = date(2024, 6, 15)


def _goal(**overrides):
    values = dict(
        name="Viaje",
        target_amount=1200,
        current_amount=300,
        target_date=date(2024, 12, 15),
        monthly_contribution=150,
    )
    values.update(overrides)
    return SavingsGoal(**values)


class TestGoalProgress:

    def test_progress_and_required_monthly(self):
        progress = calculate_goal_progress(_goal(), TODAY)

        assert progress["progress"] == pytest.approx(25)
        assert progress["remaining"] == 900
        assert progress["days_remaining"] == 183
        # 183 días = 7 meses de 30 días, redondeando hacia arriba
        assert progress["months_remaining"] == 7
        assert progress["required_monthly"] == pytest.approx(900 / 7)
        assert progress["on_track"] is True

    def test_behind_schedule(self):
        progress = calculate_goal_progress(_goal(monthly_contribution=50), TODAY)
        assert progress["on_track"] is False

    def test_past_target_date_asks_for_everything(self):
        progress = calculate_goal_progress(_goal(target_date=date(2024, 6, 1)), TODAY)
        assert progress["days_remaining"] == -14
        assert progress["months_remaining"] == 0
        assert progress["required_monthly"] == 900

    def test_progress_is_clamped(self):
        over = calculate_goal_progress(_goal(current_amount=1500, is_completed=True), TODAY)
        assert over["progress"] == 100
        assert over["remaining"] == -300
        assert over["on_track"] is True

    def test_summary_totals(self):
        summary = summarize_goals([_goal(), _goal(target_amount=800, current_amount=500)], TODAY)
        assert summary.total_target == 2000
        assert summary.total_saved == 800
        assert summary.total_remaining == 1200
        assert summary.overall_progress == pytest.approx(40)

    def test_empty_summary(self):
        summary = summarize_goals([], TODAY)
        assert summary.goals == []
        assert summary.overall_progress == 0


class TestSavingsGoalsApi:

    def _create(self, client, **overrides):
        payload = {
            "name": "Viaje",
            "target_amount": 1200,
            "current_amount": 300,
            "target_date": "2024-12-15",
            "monthly_contribution": 150,
        }
        payload.update(overrides)
        response = client.post("/savings-goals", json=payload)
        assert response.status_code == 200
        return response.json()

    def test_create_and_get(self, client):
        created = self._create(client)
        assert created["is_completed"] is False
        assert created["progress"] == pytest.approx(25)

        fetched = client.get(f"/savings-goals/{created['id']}").json()
        assert fetched["name"] == "Viaje"
        assert fetched["months_remaining"] == 7

    def test_list_ordered_by_target_date_with_totals(self, client):
        self._create(client, name="Auto", target_date="2026-01-01", target_amount=800, current_amount=500)
        self._create(client, name="Viaje")

        summary = client.get("/savings-goals").json()
        assert [g["name"] for g in summary["goals"]] == ["Viaje", "Auto"]
        assert summary["total_target"] == 2000
        assert summary["total_saved"] == 800
        assert summary["overall_progress"] == pytest.approx(40)

    def test_contribution_completes_goal(self, client):
        goal = self._create(client)

        partial = client.post(f"/savings-goals/{goal['id']}/contribute", json={"amount": 400}).json()
        assert partial["current_amount"] == 700
        assert partial["is_completed"] is False

        done = client.post(f"/savings-goals/{goal['id']}/contribute", json={"amount": 500}).json()
        assert done["current_amount"] == 1200
        assert done["is_completed"] is True
        assert done["progress"] == 100

    def test_withdrawal_reopens_goal(self, client):
        goal = self._create(client, current_amount=1200)
        assert goal["is_completed"] is True

        reopened = client.post(f"/savings-goals/{goal['id']}/contribute", json={"amount": -200}).json()
        assert reopened["current_amount"] == 1000
        assert reopened["is_completed"] is False

    def test_withdrawal_cannot_exceed_saved(self, client):
        goal = self._create(client)
        response = client.post(f"/savings-goals/{goal['id']}/contribute", json={"amount": -301})
        assert response.status_code == 400
        assert client.get(f"/savings-goals/{goal['id']}").json()["current_amount"] == 300

    def test_zero_contribution_is_rejected(self, client):
        goal = self._create(client)
        assert client.post(f"/savings-goals/{goal['id']}/contribute", json={"amount": 0}).status_code == 400

    def test_partial_update(self, client):
        goal = self._create(client)
        updated = client.put(f"/savings-goals/{goal['id']}", json={"target_amount": 300}).json()
        assert updated["name"] == "Viaje"
        assert updated["target_amount"] == 300
        assert updated["is_completed"] is True

    def test_delete(self, client):
        goal = self._create(client)
        assert client.delete(f"/savings-goals/{goal['id']}").status_code == 200
        assert client.get(f"/savings-goals/{goal['id']}").status_code == 404

    def test_missing_goal(self, client):
        assert client.post("/savings-goals/99/contribute", json={"amount": 10}).status_code == 404
        assert client.put("/savings-goals/99", json={"name": "x"}).status_code == 404

    def test_invalid_target(self, client):
        payload = {"name": "Nada", "target_amount": 0, "target_date": "2024-12-01"}
        assert client.post("/savings-goals", json=payload).status_code == 422
