"""Tests de los endpoints del almacén de registros (transacciones, deudas, presupuestos, ajustes)."""

from datetime import date

import pytest

from budget_planner.models.category import Category


class TestTransactions:

    def test_create_and_filter_by_range(self, client, groceries):
        for day, amount in (("2024-06-01", 10), ("2024-06-15", 20), ("2024-06-30", 30), ("2024-07-01", 40)):
            response = client.post("/transactions", json={
                "amount": amount,
                "type": "expense",
                "category_id": groceries.id,
                "date": f"{day}T09:00:00",
            })
            assert response.status_code == 200

        listed = client.get("/transactions", params={"start_date": "2024-06-01", "end_date": "2024-06-30"}).json()
        assert sorted(tx["amount"] for tx in listed) == [10, 20, 30]

        by_category = client.get("/transactions", params={"category_id": groceries.id}).json()
        assert len(by_category) == 4

    def test_savings_withdrawal_is_allowed(self, client):
        response = client.post("/transactions", json={"amount": -250, "type": "savings"})
        assert response.status_code == 200
        assert response.json()["amount"] == -250

    def test_savings_with_category_is_rejected(self, client, groceries):
        response = client.post("/transactions", json={"amount": 100, "type": "savings", "category_id": groceries.id})
        assert response.status_code == 400

    def test_non_positive_expense_is_rejected(self, client):
        assert client.post("/transactions", json={"amount": 0, "type": "expense"}).status_code == 400

    def test_unknown_category(self, client):
        assert client.post("/transactions", json={"amount": 5, "type": "expense", "category_id": 999}).status_code == 400

    def test_delete_missing(self, client):
        assert client.delete("/transactions/123").status_code == 404


class TestDebts:

    def _create_debt(self, client, amount=1000):
        response = client.post("/debts/", json={"name": "Préstamo auto", "original_amount": amount})
        assert response.status_code == 200
        return response.json()

    def test_pay_debt_links_transaction(self, client):
        debt = self._create_debt(client)
        response = client.post(f"/debts/{debt['id']}/pay", json={"amount": 100, "date": "2024-06-10T12:00:00"})
        assert response.status_code == 200
        assert response.json()["debt_id"] == debt["id"]
        assert response.json()["type"] == "expense"

        debts = client.get("/debts/").json()
        assert debts[0]["paid_amount"] == 100
        assert debts[0]["transactions_count"] == 1
        assert debts[0]["is_paid"] is False

        linked = client.get("/transactions", params={"debt_id": debt["id"]}).json()
        assert len(linked) == 1

    def test_full_payment_marks_paid(self, client):
        debt = self._create_debt(client, amount=300)
        client.post(f"/debts/{debt['id']}/pay", json={"amount": 300})
        assert client.get("/debts/").json()[0]["is_paid"] is True

    def test_overpayment_is_rejected(self, client):
        debt = self._create_debt(client, amount=300)
        assert client.post(f"/debts/{debt['id']}/pay", json={"amount": 301}).status_code == 400

    def test_deleting_payment_reverts_paid_amount(self, client):
        debt = self._create_debt(client)
        tx = client.post(f"/debts/{debt['id']}/pay", json={"amount": 250}).json()

        assert client.delete(f"/transactions/{tx['id']}").status_code == 200
        assert client.get("/debts/").json()[0]["paid_amount"] == 0

    def test_cannot_delete_debt_with_movements(self, client):
        debt = self._create_debt(client)
        client.post(f"/debts/{debt['id']}/pay", json={"amount": 50})
        assert client.delete(f"/debts/{debt['id']}").status_code == 400

    def test_debt_payment_lowers_health_score_component(self, client):
        debt = self._create_debt(client, amount=10000)
        client.post(f"/debts/{debt['id']}/pay", json={"amount": 100, "date": "2024-06-10T12:00:00"})

        data = client.get("/health-score", params={"year": 2024, "month": 6}).json()
        assert data["components"]["debt_progress"]["score"] == pytest.approx(50)


class TestMonthlyBudgets:

    def test_upsert_keeps_single_row(self, client, groceries):
        payload = {"category_id": groceries.id, "year": 2024, "month": 6, "planned_amount": 500}
        first = client.put("/monthly-budgets", json=payload).json()
        second = client.put("/monthly-budgets", json={**payload, "planned_amount": 650}).json()

        assert first["id"] == second["id"]
        assert second["planned_amount"] == 650

        rows = client.get("/monthly-budgets", params={"year": 2024, "month": 6}).json()
        assert len(rows) == 1
        assert rows[0]["is_default"] is False

    def test_category_default_fills_missing_month(self, client, groceries):
        rows = client.get("/monthly-budgets", params={"year": 2024, "month": 7}).json()
        assert rows == [{
            "id": None,
            "category_id": groceries.id,
            "category_name": "Groceries",
            "year": 2024,
            "month": 7,
            "planned_amount": 600,
            "rollover_enabled": False,
            "rollover_amount": 0,
            "is_default": True,
        }]

    def test_invalid_category(self, client):
        payload = {"category_id": 42, "year": 2024, "month": 6, "planned_amount": 500}
        assert client.put("/monthly-budgets", json=payload).status_code == 400

    def test_rollover_carries_leftover_into_new_month(self, client, groceries, add_tx):
        april = {"category_id": groceries.id, "year": 2024, "month": 4, "planned_amount": 500, "rollover_enabled": True}
        client.put("/monthly-budgets", json=april)
        add_tx(100, "expense", date(2024, 4, 10), category_id=groceries.id)
        add_tx(900, "expense", date(2024, 4, 11))  # sin categoría, no cuenta

        client.put("/monthly-budgets", json={**april, "month": 5})

        rows = client.get("/monthly-budgets", params={"year": 2024, "month": 5}).json()
        assert len(rows) == 1
        assert rows[0]["rollover_amount"] == 400
        assert rows[0]["planned_amount"] == 500

    def test_no_rollover_when_previous_month_disabled_it(self, client, groceries, add_tx):
        payload = {"category_id": groceries.id, "year": 2024, "month": 4, "planned_amount": 500}
        client.put("/monthly-budgets", json=payload)
        add_tx(100, "expense", date(2024, 4, 10), category_id=groceries.id)

        created = client.put("/monthly-budgets", json={**payload, "month": 5, "rollover_enabled": True}).json()
        assert created["rollover_amount"] == 0

    def test_overspent_month_rolls_over_zero(self, client, groceries, add_tx):
        payload = {"category_id": groceries.id, "year": 2024, "month": 4, "planned_amount": 500, "rollover_enabled": True}
        client.put("/monthly-budgets", json=payload)
        add_tx(700, "expense", date(2024, 4, 10), category_id=groceries.id)

        created = client.put("/monthly-budgets", json={**payload, "month": 5}).json()
        assert created["rollover_amount"] == 0

    def test_updating_existing_row_keeps_rollover(self, client, groceries, add_tx):
        april = {"category_id": groceries.id, "year": 2024, "month": 4, "planned_amount": 500, "rollover_enabled": True}
        client.put("/monthly-budgets", json=april)
        add_tx(100, "expense", date(2024, 4, 10), category_id=groceries.id)
        client.put("/monthly-budgets", json={**april, "month": 5})

        updated = client.put("/monthly-budgets", json={**april, "month": 5, "planned_amount": 650}).json()
        assert updated["planned_amount"] == 650
        assert updated["rollover_amount"] == 400

    def test_copy_previous_month_with_rollover(self, client, session, groceries, add_tx):
        rent = Category(name="Rent", monthly_budget=0)
        session.add(rent)
        session.commit()
        session.refresh(rent)

        client.put("/monthly-budgets", json={
            "category_id": groceries.id, "year": 2023, "month": 12, "planned_amount": 500, "rollover_enabled": True,
        })
        client.put("/monthly-budgets", json={
            "category_id": rent.id, "year": 2023, "month": 12, "planned_amount": 1200,
        })
        add_tx(150, "expense", date(2023, 12, 20), category_id=groceries.id)

        response = client.post("/monthly-budgets/copy-previous", params={"year": 2024, "month": 1})
        assert response.status_code == 200
        created = {row["category_name"]: row for row in response.json()}
        assert set(created) == {"Groceries", "Rent"}
        assert created["Groceries"]["rollover_amount"] == 350
        assert created["Groceries"]["rollover_enabled"] is True
        assert created["Rent"]["rollover_amount"] == 0
        assert created["Rent"]["planned_amount"] == 1200

        # una segunda copia no duplica filas
        again = client.post("/monthly-budgets/copy-previous", params={"year": 2024, "month": 1}).json()
        assert again == []
        rows = client.get("/monthly-budgets", params={"year": 2024, "month": 1}).json()
        assert len(rows) == 2

    def test_copy_previous_skips_existing_rows(self, client, groceries):
        client.put("/monthly-budgets", json={
            "category_id": groceries.id, "year": 2024, "month": 4, "planned_amount": 500,
        })
        client.put("/monthly-budgets", json={
            "category_id": groceries.id, "year": 2024, "month": 5, "planned_amount": 300,
        })

        assert client.post("/monthly-budgets/copy-previous", params={"year": 2024, "month": 5}).json() == []
        rows = client.get("/monthly-budgets", params={"year": 2024, "month": 5}).json()
        assert [r["planned_amount"] for r in rows] == [300]


class TestSettingsAndCategories:

    def test_settings_defaults_and_update(self, client):
        assert client.get("/settings").json()["first_day_of_month"] == 1
        assert client.put("/settings", json={"first_day_of_month": 15}).json()["first_day_of_month"] == 15
        assert client.get("/settings").json()["first_day_of_month"] == 15

    def test_first_day_out_of_range(self, client):
        assert client.put("/settings", json={"first_day_of_month": 29}).status_code == 422

    def test_category_lifecycle(self, client):
        created = client.post("/categories", json={"name": "Pets", "monthly_budget": 80}).json()
        assert client.post("/categories", json={"name": "Pets"}).status_code == 400

        client.delete(f"/categories/{created['id']}")
        assert client.get("/categories").json() == []
        assert len(client.get("/categories", params={"status": "all"}).json()) == 1
