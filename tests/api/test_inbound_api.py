# tests/api/test_inbound_api.py
from app.shared.database.models import ItemBatch, StorageCategory
from tests.factories import (
    batch_payload,
    make_lot,
    make_operator,
    make_product,
    make_section,
    make_seller,
    make_warehouse,
)


def _order(section, operator_id, batches):
    return {
        "warehouse_id": section.warehouse_id,
        "section_id": section.id,
        "warehouse_operator_id": operator_id,
        "item_batches": batches,
    }


def _setup(db, category=StorageCategory.FRESCO, volume=100):
    operator = make_operator(db)
    warehouse = make_warehouse(db, operator)
    section = make_section(db, warehouse, category, volume)
    return operator, section


def test_create_inbound_order_within_capacity(client, db):
    operator, section = _setup(db, volume=100)
    product = make_product(db)

    r = client.post(
        "/api/v1/inboundorder",
        json=_order(section, operator.id, [batch_payload(product.id, 40), batch_payload(product.id, 50)]),
    )
    assert r.status_code == 201, r.text
    batches = r.json()
    assert [b["volume"] for b in batches] == [40, 50]
    assert len({b["inbound_order_id"] for b in batches}) == 1

    order = client.get(f"/api/v1/inboundorder/{batches[0]['inbound_order_id']}").json()
    assert order["section_id"] == section.id
    assert len(order["item_batches"]) == 2


def test_create_inbound_order_over_capacity(client, db):
    operator, section = _setup(db, volume=100)
    product = make_product(db)

    r = client.post(
        "/api/v1/inboundorder",
        json=_order(section, operator.id, [batch_payload(product.id, 40), batch_payload(product.id, 70)]),
    )
    assert r.status_code == 400
    assert "capacidad" in r.json()["detail"]
    assert db.query(ItemBatch).count() == 0


def test_capacity_counts_already_stored_batches(client, db):
    operator, section = _setup(db, volume=100)
    product = make_product(db)
    make_lot(db, section, product, volume=70)

    r = client.post("/api/v1/inboundorder", json=_order(section, operator.id, [batch_payload(product.id, 40)]))
    assert r.status_code == 400

    r = client.post("/api/v1/inboundorder", json=_order(section, operator.id, [batch_payload(product.id, 30)]))
    assert r.status_code == 201


def test_category_mismatch_fails_regardless_of_other_products(client, db):
    operator, section = _setup(db, category=StorageCategory.SECO)
    seco = make_product(db, category=StorageCategory.SECO)
    fresco = make_product(db, category=StorageCategory.FRESCO)

    r = client.post(
        "/api/v1/inboundorder",
        json=_order(section, operator.id, [batch_payload(seco.id), batch_payload(fresco.id)]),
    )
    assert r.status_code == 400
    assert "categoría" in r.json()["detail"]


def test_fresco_into_seco_fails_even_with_room_and_active_seller(client, db):
    operator, section = _setup(db, category=StorageCategory.SECO, volume=1000)
    fresco = make_product(db, make_seller(db, active=True), StorageCategory.FRESCO)

    r = client.post("/api/v1/inboundorder", json=_order(section, operator.id, [batch_payload(fresco.id, 1)]))
    assert r.status_code == 400


def test_inactive_seller_of_one_product_fails_whole_order(client, db):
    operator, section = _setup(db)
    active = make_product(db, make_seller(db, active=True))
    inactive = make_product(db, make_seller(db, active=False))

    r = client.post(
        "/api/v1/inboundorder",
        json=_order(section, operator.id, [batch_payload(active.id), batch_payload(inactive.id)]),
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Vendedor inactivo."
    assert db.query(ItemBatch).count() == 0


def test_operator_not_in_warehouse(client, db):
    _, section = _setup(db)
    outsider = make_operator(db)
    product = make_product(db)

    r = client.post("/api/v1/inboundorder", json=_order(section, outsider.id, [batch_payload(product.id)]))
    assert r.status_code == 400
    assert "operador" in r.json()["detail"]


def test_section_not_in_warehouse(client, db):
    operator, section = _setup(db)
    other_section = make_section(db)
    product = make_product(db)

    payload = _order(section, operator.id, [batch_payload(product.id)])
    payload["section_id"] = other_section.id
    r = client.post("/api/v1/inboundorder", json=payload)
    assert r.status_code == 400
    assert "sección" in r.json()["detail"]


def test_unknown_references_are_not_found(client, db):
    operator, section = _setup(db)
    product = make_product(db)

    for field in ("warehouse_id", "section_id", "warehouse_operator_id"):
        payload = _order(section, operator.id, [batch_payload(product.id)])
        payload[field] = 999
        assert client.post("/api/v1/inboundorder", json=payload).status_code == 404, field

    r = client.post("/api/v1/inboundorder", json=_order(section, operator.id, [batch_payload(999)]))
    assert r.status_code == 404


def test_request_validation(client, db):
    operator, section = _setup(db)
    assert client.post("/api/v1/inboundorder", json=_order(section, operator.id, [])).status_code == 400

    product = make_product(db)
    bad = batch_payload(product.id)
    bad["volume"] = -1
    r = client.post("/api/v1/inboundorder", json=_order(section, operator.id, [bad]))
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "item_batches.0.volume"


def test_update_replaces_batch_list(client, db):
    operator, section = _setup(db, volume=100)
    product = make_product(db)

    created = client.post(
        "/api/v1/inboundorder",
        json=_order(section, operator.id, [batch_payload(product.id, 30), batch_payload(product.id, 30)]),
    ).json()
    order_id = created[0]["inbound_order_id"]
    old_ids = {b["id"] for b in created}

    # 80 cabe porque los 60 actuales de la orden se reemplazan
    r = client.put(f"/api/v1/inboundorder/{order_id}/item-batch", json=[batch_payload(product.id, 80)])
    assert r.status_code == 201, r.text
    updated = r.json()
    assert [b["volume"] for b in updated] == [80]

    order = client.get(f"/api/v1/inboundorder/{order_id}").json()
    assert [b["id"] for b in order["item_batches"]] == [updated[0]["id"]]
    db.expire_all()
    assert db.query(ItemBatch).filter(ItemBatch.id.in_(old_ids)).count() == 0


def test_update_revalidates_category_and_capacity(client, db):
    operator, section = _setup(db, category=StorageCategory.FRESCO, volume=100)
    product = make_product(db)
    seco = make_product(db, category=StorageCategory.SECO)
    created = client.post(
        "/api/v1/inboundorder", json=_order(section, operator.id, [batch_payload(product.id, 10)])
    ).json()
    order_id = created[0]["inbound_order_id"]

    r = client.put(f"/api/v1/inboundorder/{order_id}/item-batch", json=[batch_payload(seco.id, 10)])
    assert r.status_code == 400

    r = client.put(f"/api/v1/inboundorder/{order_id}/item-batch", json=[batch_payload(product.id, 101)])
    assert r.status_code == 400

    order = client.get(f"/api/v1/inboundorder/{order_id}").json()
    assert [b["id"] for b in order["item_batches"]] == [created[0]["id"]]


def test_update_unknown_order(client, db):
    product = make_product(db)
    r = client.put("/api/v1/inboundorder/999/item-batch", json=[batch_payload(product.id)])
    assert r.status_code == 404


def test_due_date_must_follow_manufacturing_date(client, db):
    operator, section = _setup(db)
    product = make_product(db)
    bad = batch_payload(product.id, due_in_days=30)
    bad["manufacturing_date"] = bad["due_date"]

    r = client.post("/api/v1/inboundorder", json=_order(section, operator.id, [bad]))
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "item_batches.0.due_date"
    assert db.query(ItemBatch).count() == 0


def test_update_with_unknown_product_keeps_batches(client, db):
    operator, section = _setup(db)
    product = make_product(db)
    created = client.post(
        "/api/v1/inboundorder", json=_order(section, operator.id, [batch_payload(product.id, 10)])
    ).json()
    order_id = created[0]["inbound_order_id"]

    r = client.put(
        f"/api/v1/inboundorder/{order_id}/item-batch",
        json=[batch_payload(product.id, 10), batch_payload(999, 10)],
    )
    assert r.status_code == 404

    order = client.get(f"/api/v1/inboundorder/{order_id}").json()
    assert [b["id"] for b in order["item_batches"]] == [created[0]["id"]]
