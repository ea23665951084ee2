# tests/api/test_api.py
BOOK_PAYLOAD = {"title": "Title", "author": "Author", "genre": "Genre", "price": 15.0}

def test_book_crud_over_http(client):
    response = client.post("/books/", json=BOOK_PAYLOAD)
    assert response.status_code == 201
    book = response.json()
    assert book["id"] is not None
    assert book["price"] == 15.0

    assert client.get("/books/").json() == [book]
    assert client.get(f"/books/{book['id']}").json() == book

    response = client.put(f"/books/{book['id']}", json={**BOOK_PAYLOAD, "title": "New Title"})
    assert response.status_code == 200
    assert client.get(f"/books/{book['id']}").json()["title"] == "New Title"

    assert client.delete(f"/books/{book['id']}").status_code == 200
    response = client.get(f"/books/{book['id']}")
    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}

def test_order_books_over_http(client):
    book = client.post("/books/", json=BOOK_PAYLOAD).json()
    order = client.post("/orders/", json={"customer": "Customer", "status": "Status"}).json()
    assert order["books"] == []

    response = client.post(f"/orders/{order['id']}/books/{book['id']}")
    assert response.status_code == 201

    found = client.get(f"/orders/{order['id']}").json()
    assert [b["id"] for b in found["books"]] == [book["id"]]
    assert [o["id"] for o in client.get(f"/books/{book['id']}/orders").json()] == [order["id"]]

    # Still associated: the database refuses the delete
    response = client.delete(f"/orders/{order['id']}")
    assert response.status_code == 500
    assert "message" in response.json()

    assert client.delete(f"/orders/{order['id']}/books/{book['id']}").status_code == 200
    assert client.get(f"/orders/{order['id']}").json()["books"] == []
    assert client.delete(f"/orders/{order['id']}").status_code == 200
    assert client.get(f"/orders/{order['id']}").status_code == 404

def test_reviews_over_http(client):
    book = client.post("/books/", json=BOOK_PAYLOAD).json()

    response = client.post("/reviews/", json={"book_id": book["id"], "reviewer": "Reviewer", "rating": 5, "text": "Great"})
    assert response.status_code == 201
    review = response.json()

    found = client.get(f"/reviews/{review['id']}").json()
    assert found["book"] == book
    assert "reviews" not in found["book"]
    assert client.get(f"/books/{book['id']}/reviews").json() == [found]

    assert client.get("/reviews/99999").status_code == 404

def test_invalid_body_is_rejected(client):
    response = client.post("/books/", json={"title": "Only a title"})
    assert response.status_code == 422

def test_order_date_offset_over_http(client):
    """Test the date echoed by POST is the one a later GET returns."""
    created = client.post("/orders/", json={"customer": "C", "status": "S", "date": "2024-01-01T10:00:00+02:00"}).json()

    assert created["date"] == "2024-01-01T08:00:00"
    assert client.get(f"/orders/{created['id']}").json()["date"] == created["date"]

def test_order_update_without_date_is_bad_request(client):
    created = client.post("/orders/", json={"customer": "C", "status": "S", "date": "2020-01-01T00:00:00"}).json()

    response = client.put(f"/orders/{created['id']}", json={"customer": "C", "status": "S2"})

    assert response.status_code == 400
    assert response.json() == {"message": "Cannot update an order without a date"}
    assert client.get(f"/orders/{created['id']}").json()["date"] == "2020-01-01T00:00:00"

def test_review_update_without_book_is_server_error(client):
    """Test a review PUT with no book_id is rejected by the database and reported as 500."""
    book = client.post("/books/", json=BOOK_PAYLOAD).json()
    review = client.post("/reviews/", json={"book_id": book["id"], "reviewer": "R", "rating": 5, "text": "T"}).json()

    response = client.put(f"/reviews/{review['id']}", json={"reviewer": "R", "rating": 1, "text": "T"})

    assert response.status_code == 500
    assert "message" in response.json()
    assert client.get(f"/reviews/{review['id']}").json()["rating"] == 5
