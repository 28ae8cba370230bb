from datetime import date

from sqlalchemy.exc import OperationalError

from Database.db import get_db
from Models.orders import Order
from main import app


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_connection_ok(client):
    response = client.get("/api/test-connection")
    assert response.status_code == 200
    assert response.json()["status"] == "success"


def test_connection_failure(client):
    class BrokenSession:
        def execute(self, *args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("banco fora do ar"))

    app.dependency_overrides[get_db] = lambda: BrokenSession()
    response = client.get("/api/test-connection")
    assert response.status_code == 500
    assert response.json()["status"] == "error"


def test_cors_headers(client):
    response = client.get("/", headers={"Origin": "http://localhost:3000"})
    assert "access-control-allow-origin" in response.headers


def test_orders_table_is_mapped(db_session):
    db_session.add(Order(
        order_id="O1",
        order_date=date(2023, 5, 1),
        customer_id="C1",
        store_id="S1",
        n_items=2,
    ))
    db_session.commit()

    order = db_session.get(Order, "O1")
    assert order.n_items == 2
    assert order.total is None
