from retail_planner.db.models import Calculation, Calendar, Chart, Planning

def test_planning_rows_for_store(client, seed):
    seed(
        Planning(store_id="ST1", sku_id="S2", week="W01", sales_units=3),
        Planning(store_id="ST1", sku_id="S1", week="W02", sales_units=7),
        Planning(store_id="ST1", sku_id="S1", week="W01", sales_units=5),
        Planning(store_id="ST2", sku_id="S1", week="W01", sales_units=99),
    )
    rows = client.get("/planning/ST1").json()

    # Ordered by week then SKU, other stores excluded
    assert rows == [
        {"storeId": "ST1", "skuId": "S1", "week": "W01", "salesUnits": 5},
        {"storeId": "ST1", "skuId": "S2", "week": "W01", "salesUnits": 3},
        {"storeId": "ST1", "skuId": "S1", "week": "W02", "salesUnits": 7},
    ]

def test_planning_for_unknown_store_is_empty(client):
    response = client.get("/planning/unknown")
    assert response.status_code == 200
    assert response.json() == []

def test_calculations_are_passed_through_as_text(client, seed):
    seed(
        Calculation(
            store_id="ST1", sku_id="S1", week="W01",
            sales_units="5", sales_dollars="49.95", cost_dollars="22.50",
            gm_dollars="27.45", gm_percent="54.95%",
        ),
    )
    rows = client.get("/calculations/ST1").json()
    assert rows == [{
        "storeId": "ST1",
        "skuId": "S1",
        "week": "W01",
        "salesUnits": "5",
        "salesDollars": "49.95",
        "costDollars": "22.50",
        "gmDollars": "27.45",
        "gmPercent": "54.95%",
    }]

def test_calendar(client, seed):
    seed(
        Calendar(id=2, week="W02", week_label="Week 2", month="M01", month_label="Feb"),
        Calendar(id=1, week="W01", week_label="Week 1", month="M01", month_label="Feb"),
    )
    weeks = client.get("/calendar").json()
    assert [week["id"] for week in weeks] == [1, 2]
    assert weeks[0] == {"id": 1, "week": "W01", "weekLabel": "Week 1", "month": "M01", "monthLabel": "Feb"}

def test_charts(client, seed):
    seed(
        Chart(week="W02", gm_dollars=80.0, sales_dollars=200.0, gm_percent=0.4),
        Chart(week="W01", gm_dollars=50.0, sales_dollars=100.0, gm_percent=0.5),
    )
    points = client.get("/charts").json()
    assert [point["week"] for point in points] == ["W01", "W02"]
    assert points[0] == {"week": "W01", "gmDollars": 50.0, "salesDollars": 100.0, "gmPercent": 0.5}
