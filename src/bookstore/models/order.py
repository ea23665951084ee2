# src/bookstore/models/order.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table
from bookstore.db.session import Base

# Junction table: only the (order_id, book_id) pair, no payload.
# No ON DELETE CASCADE: deleting an order or book that still has associations
# is rejected by the database.
order_books = Table(
    "order_books",
    Base.metadata,
    Column("order_id", Integer, ForeignKey("orders.id"), primary_key=True),
    Column("book_id", Integer, ForeignKey("books.id"), primary_key=True),
)


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    customer = Column(String(255), nullable=False)
    date = Column(DateTime, nullable=False)
    status = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<OrderModel(id={self.id}, customer='{self.customer}', status='{self.status}')>"
